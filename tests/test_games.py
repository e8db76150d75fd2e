import random

import pytest

from mathapp.games import (
    Hint,
    Move,
    Outcome,
    hint,
    judge,
    random_move,
    roll_dice,
    secret_number,
)


class FixedRng:
    """Hands out preset values in order."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randint(self, low, high):
        value = self.values.pop(0)
        self.calls.append(("randint", low, high))
        return value

    def randrange(self, stop):
        value = self.values.pop(0)
        self.calls.append(("randrange", stop))
        return value


def test_roll_dice_stays_in_range_and_covers_all_faces():
    rng = random.Random(1234)
    seen = set()
    for _ in range(300):
        first, second = roll_dice(rng)
        assert 1 <= first <= 6
        assert 1 <= second <= 6
        seen.update((first, second))
    assert seen == set(range(1, 7))


def test_roll_dice_asks_for_six_sided_values():
    rng = FixedRng(4, 2)
    assert roll_dice(rng) == (4, 2)
    assert rng.calls == [("randint", 1, 6), ("randint", 1, 6)]


def test_roll_dice_consumes_generator_in_order():
    rng = FixedRng(6, 6, 1, 1)
    assert roll_dice(rng) == (6, 6)
    assert roll_dice(rng) == (1, 1)
    assert rng.values == []


def test_secret_number_range():
    rng = random.Random(99)
    values = [secret_number(rng) for _ in range(2000)]
    assert min(values) >= 0
    assert max(values) <= 99


def test_secret_number_uses_hundred_values():
    rng = FixedRng(42)
    assert secret_number(rng) == 42
    assert rng.calls == [("randrange", 100)]


@pytest.mark.parametrize(
    "guess, target, expected",
    [
        (10, 50, Hint.LESS),
        (90, 50, Hint.BIGGER),
        (50, 50, Hint.CORRECT),
        (-1, 0, Hint.LESS),
    ],
)
def test_hint(guess, target, expected):
    assert hint(guess, target) is expected


def test_hint_messages_come_from_game():
    assert hint(10, 50).value == "Your guess is less than number"
    assert hint(90, 50).value == "Your guess is bigger than number"


@pytest.mark.parametrize("drawn, move", [(1, Move.ROCK), (2, Move.PAPER), (3, Move.SCISSORS)])
def test_random_move_maps_numbers(drawn, move):
    rng = FixedRng(drawn)
    assert random_move(rng) is move
    assert rng.calls == [("randint", 1, 3)]


def test_random_move_with_real_generator_is_a_move():
    rng = random.Random(5)
    moves = {random_move(rng) for _ in range(100)}
    assert moves == set(Move)


@pytest.mark.parametrize(
    "player, computer, outcome",
    [
        (Move.ROCK, Move.SCISSORS, Outcome.WON),
        (Move.ROCK, Move.PAPER, Outcome.LOST),
        (Move.ROCK, Move.ROCK, Outcome.DRAW),
        (Move.PAPER, Move.ROCK, Outcome.WON),
        (Move.PAPER, Move.PAPER, Outcome.DRAW),
        (Move.PAPER, Move.SCISSORS, Outcome.LOST),
        (Move.SCISSORS, Move.ROCK, Outcome.LOST),
        (Move.SCISSORS, Move.PAPER, Outcome.WON),
        (Move.SCISSORS, Move.SCISSORS, Outcome.DRAW),
    ],
)
def test_judge_table(player, computer, outcome):
    assert judge(player, computer) is outcome


def test_judge_is_antisymmetric():
    for player in Move:
        for computer in Move:
            forward = judge(player, computer)
            backward = judge(computer, player)
            if forward is Outcome.DRAW:
                assert backward is Outcome.DRAW
            else:
                assert {forward, backward} == {Outcome.WON, Outcome.LOST}


def test_labels():
    drawn = [random_move(FixedRng(n)).label for n in (1, 2, 3)]
    assert drawn == ["Rock", "Paper", "Scissors"]
    assert judge(Move.ROCK, Move.SCISSORS).label == "You won: "
    assert judge(Move.ROCK, Move.PAPER).label == "You Lost: "
    assert judge(Move.ROCK, Move.ROCK).label == "Draw: "