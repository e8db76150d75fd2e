"""Basic arithmetic: a four-function calculator, powers, roots and factorials."""

from __future__ import annotations

import math
import operator
from typing import Callable

Number = int | float


def _divide(first: float, second: float) -> float:
    """Divide like IEEE floating point: zero divisors give infinities or NaN."""
    if second == 0:
        if first == 0 or math.isnan(first):
            return math.nan
        return math.copysign(math.inf, first) * math.copysign(1.0, second)
    return first / second


_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def calculate(first: Number, operation: str, second: Number) -> float:
    """Apply one of ``+ - * /`` to two numbers.

    Raises ValueError for any other operation.
    """
    try:
        func = _OPERATIONS[operation]
    except KeyError:
        raise ValueError("Invalid operation") from None
    return func(float(first), float(second))


def larger_and_smaller(first: Number, second: Number) -> tuple[Number, Number]:
    """Return the two numbers ordered as (larger, smaller)."""
    if first > second:
        return first, second
    return second, first


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to ``exponent``, truncating fractional results toward zero."""
    if exponent >= 0:
        return base**exponent
    return int(base**exponent)


def square_root(number: Number) -> float:
    """Return the square root of ``number``; negative input gives NaN."""
    if number < 0:
        return math.nan
    return math.sqrt(number)


def factorial(number: int) -> int:
    """Return ``number!``; negative numbers raise ValueError."""
    if number < 0:
        raise ValueError("Negative numbers does not have factorial")
    return math.prod(range(1, number + 1))