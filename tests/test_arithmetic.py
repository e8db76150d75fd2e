import math

import pytest

from mathapp.arithmetic import (
    calculate,
    factorial,
    larger_and_smaller,
    power,
    square_root,
)


@pytest.mark.parametrize("a,b", [(1, 2), (2.5, -7), (0, 0), (100, 3)])
def test_addition_is_commutative(a, b):
    assert calculate(a, "+", b) == calculate(b, "+", a)


@pytest.mark.parametrize("a,b", [(1, 2), (2.5, -7), (100, 3)])
def test_subtraction_is_antisymmetric(a, b):
    assert calculate(a, "-", b) == -calculate(b, "-", a)


@pytest.mark.parametrize("a,b", [(3, 4), (2.5, -2), (-6, -1.5)])
def test_multiply_then_divide_round_trips(a, b):
    product = calculate(a, "*", b)
    assert calculate(product, "/", b) == pytest.approx(a)


def test_division_keeps_fraction():
    assert calculate(7, "/", 2) == 3.5


def test_division_by_zero_gives_signed_infinity():
    assert calculate(5, "/", 0) == math.inf
    assert calculate(-5, "/", 0) == -math.inf


def test_zero_divided_by_zero_is_nan():
    result = calculate(0, "/", 0)
    assert str(result) == "nan"


@pytest.mark.parametrize("op", ["%", "x", "^", ""])
def test_invalid_operation_raises(op):
    with pytest.raises(ValueError, match="Invalid operation"):
        calculate(1, op, 2)


def test_calculate_returns_float():
    assert calculate(2, "+", 3) == 5.0


@pytest.mark.parametrize("a,b", [(3, 5), (5, 3), (-1, -2), (2.5, 2.5)])
def test_larger_and_smaller_orders_pair(a, b):
    larger, smaller = larger_and_smaller(a, b)
    assert larger >= smaller
    assert sorted((larger, smaller)) == sorted((a, b))


def test_larger_and_smaller_keeps_values():
    assert larger_and_smaller(3, 5) == (5, 3)


@pytest.mark.parametrize("base", [-3, 0, 1, 2, 7])
def test_power_of_zero_exponent_is_one(base):
    assert power(base, 0) == 1


@pytest.mark.parametrize("base,exp", [(2, 5), (3, 4), (-2, 3), (10, 2)])
def test_power_recurrence(base, exp):
    assert power(base, exp + 1) == power(base, exp) * base


def test_negative_exponent_truncates_toward_zero():
    assert power(2, -3) == 0
    assert power(1, -4) == 1
    assert power(-1, -1) == -1


@pytest.mark.parametrize("n", [0, 1, 2, 9, 50, 1000])
def test_square_root_squares_back(n):
    assert square_root(n) ** 2 == pytest.approx(n)


def test_square_root_of_negative_is_nan():
    result = square_root(-4)
    assert str(result) == "nan"


def test_factorial_of_zero_is_one():
    assert factorial(0) == 1


def test_factorial_small_value():
    assert factorial(5) == 120


@pytest.mark.parametrize("n", [1, 2, 6, 12, 20])
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_of_negative_raises():
    with pytest.raises(ValueError, match="Negative numbers"):
        factorial(-1)