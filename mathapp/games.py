"""Games of chance: dice, a number guessing game and rock-paper-scissors."""

from __future__ import annotations

import random
from enum import Enum


class Move(Enum):
    """A rock-paper-scissors move, numbered as on the game's prompt."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def label(self) -> str:
        """Return the move's display name."""
        return self.name.capitalize()


class Outcome(Enum):
    """The result of a rock-paper-scissors round from the player's side."""

    WON = "You won: "
    LOST = "You Lost: "
    DRAW = "Draw: "

    @property
    def label(self) -> str:
        """Return the heading printed for this outcome."""
        return self.value


class Hint(Enum):
    """How a guess compares with the secret number."""

    LESS = "Your guess is less than number"
    BIGGER = "Your guess is bigger than number"
    CORRECT = "You guessed correctly!"


_BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.PAPER: Move.ROCK,
    Move.SCISSORS: Move.PAPER,
}


def _source(rng):
    return random if rng is None else rng


def roll_dice(rng=None) -> tuple[int, int]:
    """Roll two six-sided dice."""
    rng = _source(rng)
    return rng.randint(1, 6), rng.randint(1, 6)


def secret_number(rng=None) -> int:
    """Pick the secret number for the guessing game, from 0 to 99."""
    return _source(rng).randrange(100)


def hint(guess: int, target: int) -> Hint:
    """Tell whether ``guess`` is below, above or equal to ``target``."""
    if guess < target:
        return Hint.LESS
    if guess > target:
        return Hint.BIGGER
    return Hint.CORRECT


def random_move(rng=None) -> Move:
    """Pick the computer's move."""
    return Move(_source(rng).randint(1, 3))


def judge(player: Move, computer: Move) -> Outcome:
    """Decide a round of rock-paper-scissors for the player."""
    if player is computer:
        return Outcome.DRAW
    if _BEATS[player] is computer:
        return Outcome.WON
    return Outcome.LOST