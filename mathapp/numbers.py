"""Integer utilities: digits, divisors, gcd/lcm, palindromes, primes, Roman numerals."""

from __future__ import annotations

_ROMAN_TABLE = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

ROMAN_MAX = 4000


def digit_count(number: int) -> int:
    """Return the number of decimal digits in ``number`` (zero has one)."""
    return len(str(abs(number)))


def divisors(number: int) -> list[int]:
    """Return the positive divisors of ``number`` in ascending order.

    Zero raises ValueError; negative numbers have none listed.
    """
    if number == 0:
        raise ValueError("0 can not be divided by any number")
    return [i for i in range(1, number + 1) if number % i == 0]


def even_numbers(limit: int) -> list[int]:
    """Return the even numbers from 0 up to and including ``limit``."""
    return list(range(0, limit + 1, 2))


def odd_numbers(limit: int) -> list[int]:
    """Return the odd numbers from 1 up to and including ``limit``."""
    return list(range(1, limit + 1, 2))


def gcd(first: int, second: int) -> int:
    """Return the greatest common divisor found by searching down from the larger value.

    Equal inputs return themselves; when no divisor above 1 is found, 1 is returned.
    """
    if first == second:
        return second
    start = max(first, second)
    return next(
        (i for i in range(start, 1, -1) if first % i == 0 and second % i == 0),
        1,
    )


def lcm(first: int, second: int) -> int:
    """Return the least common multiple found by searching up from the larger value.

    Consecutive integers return their product; if the search finds nothing, 1 is returned.
    """
    bigger, smaller = max(first, second), min(first, second)
    if bigger == smaller + 1:
        return first * second
    end = bigger * smaller + 1
    candidates = range(bigger, end, bigger) if bigger > 0 else range(bigger, end)
    return next(
        (i for i in candidates if i % bigger == 0 and i % smaller == 0),
        1,
    )


def _reverse_digits(number: int) -> int:
    sign = -1 if number < 0 else 1
    return sign * int(str(abs(number))[::-1])


def is_palindrome(number: int) -> bool:
    """Return True if ``number`` reads the same with its digits reversed."""
    return _reverse_digits(number) == number


def reverse_number(number: int) -> int:
    """Return ``number`` with its digits reversed; negative input raises ValueError."""
    if number < 0:
        raise ValueError("Currently we can not check reverse of negative numbers.")
    return _reverse_digits(number)


def is_perfect(number: int) -> bool:
    """Return True if ``number`` equals the sum of its proper divisors.

    Zero and negative numbers raise ValueError.
    """
    if number == 0:
        raise ValueError("0 can not be divided by any number")
    if number < 0:
        raise ValueError("Negative number cannot be perfect number")
    return sum(i for i in range(1, number) if number % i == 0) == number


def smallest_divisor(number: int) -> int | None:
    """Return the smallest divisor of ``number`` between 2 and ``number - 1``, if any."""
    return next((i for i in range(2, number) if number % i == 0), None)


def is_prime(number: int) -> bool:
    """Return True if no value between 2 and ``number - 1`` divides ``number``.

    Numbers below 4 therefore always count as prime.
    """
    return smallest_divisor(number) is None


def to_roman(number: int) -> str:
    """Convert ``number`` (0 to 4000) to a Roman numeral; zero gives an empty string."""
    if number > ROMAN_MAX or number < 0:
        raise ValueError("Invalid input: the number should be between 1 and 4000")
    parts = []
    for value, symbol in _ROMAN_TABLE:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def char_code(char: str) -> int:
    """Return the character code of a single character."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    return ord(char)