"""Interactive menu that runs the math tools and games."""

from __future__ import annotations

import random
import re
import sys
from typing import Callable

from mathapp import arithmetic, geometry, numbers
from mathapp.games import Move, hint, judge, random_move, roll_dice, secret_number, Hint

MENU = "\n".join(
    [
        "-----------------------------------------------",
        "|  1  for Calculator                          |",
        "|  2  for Circle Area                         |",
        "|  3  for Triangle Area                       |",
        "|  4  for Square Area                         |",
        "|  5  for Rectangle Area                      |",
        "|  6  for Number Comparison                   |",
        "|  7  for Number Guessing Game                |",
        "|  8  for Square Root                         |",
        "|  9  for Exponentiation                      |",
        "|  10 for Factorial Calculation               |",
        "|  11 for Dice Roller                         |",
        "|  12 for Printing Odd Numbers                |",
        "|  13 for Printing Even Numbers               |",
        "|  14 for Prime Number Check                  |",
        "|  15 for GCD (Greatest Common Divisor)       |",
        "|  16 for LCM (Least Common Multiple)         |",
        "|  17 for Rock-Paper-Scissors Game            |",
        "|  18 for Palindrome Check                    |",
        "|  19 for Reversing a Number                  |",
        "|  20 for Digit Count                         |",
        "|  21 for Printing Binary Representation      |",
        "|  22 for Printing ASCII Value of a Character |",
        "|  23 for Showing the Divisors of a Number    |",
        "|  24 for Perfect Number Check                |",
        "|  25 for Roman Numeral Conversion            |",
        "|  26 for Quit                                |",
        "-----------------------------------------------",
    ]
) + "\n"
PROMPT = "Enter your choice: "
QUIT_CHOICE = 26
INVALID_CHOICE = "Invalid choice. Please select a valid option.\n"

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class _BadInput(Exception):
    """Raised when the next token cannot be read as the requested value."""


class _Session:
    """One run of the menu: token input, output and number formatting."""

    def __init__(self, read_line: Callable[[], str], write: Callable[[str], object], rng):
        self._read_line = read_line
        self.write = write
        self.rng = rng
        self._buffer = ""
        self.fixed = False

    # -- input -------------------------------------------------------

    def _fill(self) -> None:
        self._buffer = self._buffer.lstrip()
        while not self._buffer:
            line = self._read_line()
            if line is None:
                raise EOFError
            self._buffer = line.lstrip()

    def _take(self, pattern: re.Pattern) -> str:
        self._fill()
        match = pattern.match(self._buffer)
        if not match:
            raise _BadInput(self._buffer)
        self._buffer = self._buffer[match.end():]
        return match.group()

    def read_int(self) -> int:
        return int(self._take(_INT))

    def read_float(self) -> float:
        return float(self._take(_FLOAT))

    def read_char(self) -> str:
        self._fill()
        char, self._buffer = self._buffer[0], self._buffer[1:]
        return char

    # -- output ------------------------------------------------------

    def fmt(self, value: float) -> str:
        return f"{value:.1f}" if self.fixed else f"{value:.6g}"

    # -- tools -------------------------------------------------------

    def calculator(self) -> bool:
        self.write("Please enter the first number:\n")
        first = self.read_float()
        self.write("Please enter the operation:\n")
        operation = self.read_char()
        self.write("Please enter the second number:\n")
        second = self.read_float()
        try:
            result = arithmetic.calculate(first, operation, second)
        except ValueError:
            self.write("Invalid operation\n")
            return True
        if operation == "/":
            self.fixed = True
        self.write(f"The result is: {self.fmt(result)}\n")
        return True

    def circle(self) -> bool:
        self.write("Enter the radius of the circle: \n")
        radius = self.read_float()
        self.write(f"The area of the circle is: {self.fmt(geometry.circle_area(radius))}\n")
        return True

    def triangle(self) -> bool:
        self.write("Enter the base of the triangle\n")
        base = self.read_float()
        self.write("Enter the height of the triangle\n")
        height = self.read_float()
        area = geometry.triangle_area(base, height)
        self.write(f"The area of the triangle is: {self.fmt(area)}\n")
        return True

    def square(self) -> bool:
        self.write("Enter the edge of the square: ")
        edge = self.read_float()
        self.write(f"The area of the square is: {self.fmt(geometry.square_area(edge))}\n")
        return True

    def rectangle(self) -> bool:
        self.write("Enter the base of the rectangle\n")
        base = self.read_float()
        self.write("Enter the length of the rectangle\n")
        height = self.read_float()
        area = geometry.rectangle_area(base, height)
        self.write(f"The area of the rectangle is: {self.fmt(area)}\n")
        return True

    def number_comparing(self) -> bool:
        self.write("Enter the first number: ")
        first = self.read_float()
        self.write("Enter the second number: ")
        second = self.read_float()
        larger, smaller = arithmetic.larger_and_smaller(first, second)
        self.write(f"{self.fmt(larger)} is greater than {self.fmt(smaller)}\n")
        return True

    def number_guess(self) -> bool:
        target = secret_number(self.rng)
        self.write("Guess the number(1-100):\n")
        guess = self.read_int()
        if guess == target:
            # A first guess that is right ends the session without a message.
            return False
        while True:
            if hint(guess, target) is Hint.LESS:
                self.write(f"{Hint.LESS.value}\n")
                guess = self.read_int()
            if hint(guess, target) is Hint.BIGGER:
                self.write(f"{Hint.BIGGER.value}\n")
                guess = self.read_int()
            if hint(guess, target) is Hint.CORRECT:
                self.write("Congurulations!!!\n")
                self.write(f"{Hint.CORRECT.value}\n")
                return True

    def square_root(self) -> bool:
        self.write("Enter the number for the square root: ")
        number = self.read_int()
        result = arithmetic.square_root(number)
        self.write(f"The square root of {number} is: {self.fmt(result)}\n")
        return True

    def exponentiation(self) -> bool:
        self.write("Enter the base number: \n")
        base = self.read_int()
        self.write("Enter the above number: \n")
        above = self.read_int()
        result = arithmetic.power(base, above)
        self.write(f"The {above} power of {base} is: {result}\n")
        return True

    def factorial(self) -> bool:
        self.write("Enter the number: ")
        number = self.read_int()
        try:
            result = arithmetic.factorial(number)
        except ValueError as exc:
            self.write(f"{exc}\n")
            return True
        self.write(f"Factorial of {number} is: {result}\n")
        return True

    def dice_roller(self) -> bool:
        first, second = roll_dice(self.rng)
        self.write("------------\n")
        self.write("Dice rolling\n")
        self.write(f"{first} , {second}\n")
        return True

    def odd_numbers(self) -> bool:
        self.write(
            "Enter a number and we will show you the all odd numbers until that number:\n"
        )
        limit = self.read_int()
        self.write("".join(f"{n} , " for n in numbers.odd_numbers(limit)))
        return True

    def even_numbers(self) -> bool:
        self.write(
            "Enter a number and we will show you the all even numbers until that number:"
        )
        limit = self.read_int()
        self.write("".join(f"{n} , " for n in numbers.even_numbers(limit)))
        return True

    def prime_number(self) -> bool:
        self.write("Enter the number for checking prime:\n")
        number = self.read_int()
        divisor = numbers.smallest_divisor(number)
        if divisor is not None:
            self.write(f"This is not prime number:{number}\n")
            self.write(f"It can be divided by {divisor}\n")
        else:
            self.write(f"This is prime number:{number}\n")
        return True

    def gcd_number(self) -> bool:
        self.write("Enter the first number: ")
        first = self.read_int()
        self.write("Enter the second number: ")
        second = self.read_int()
        result = numbers.gcd(first, second)
        self.write(f"The GCD of the number {first} and {second} is: {result}\n")
        return True

    def lcm_number(self) -> bool:
        self.write("Enter first number: ")
        first = self.read_int()
        self.write("Enter second number: ")
        second = self.read_int()
        bigger, smaller = max(first, second), min(first, second)
        result = numbers.lcm(first, second)
        found_by_search = bigger != smaller + 1 and (result != 1 or bigger == smaller == 1)
        prefix = "LCM" if found_by_search else "The LCM"
        self.write(f"{prefix} of the number {first} and {second} is: {result}\n")
        return True

    def rock_paper_scissors(self) -> bool:
        computer = random_move(self.rng)
        self.write("1 for Rock\n2 for Paper\n3 for Scissors\n--------------\n")
        choice = self.read_int()
        try:
            player = Move(choice)
        except ValueError:
            self.write("Invalid choice\n")
            return False
        outcome = judge(player, computer)
        self.write(f"{outcome.label}\n")
        self.write(f"Your choice: {player.label}\n")
        self.write(f"Computer choice: {computer.label}\n")
        return True

    def palindrome(self) -> bool:
        self.write("Enter a number for palindrome control: \n")
        number = self.read_int()
        if number == 0 or numbers.is_palindrome(number):
            self.write(f"{number} is Palindrome.\n")
        else:
            self.write(f"{number} is not Palindrome.\n")
        return True

    def reverse_number(self) -> bool:
        self.write("Enter a number: ")
        number = self.read_int()
        try:
            result = numbers.reverse_number(number)
        except ValueError as exc:
            self.write(f"{exc}\n")
            return True
        self.write(f"Reverse: {result}\n")
        return True

    def digit_control(self) -> bool:
        self.write("Enter a number: ")
        number = self.read_int()
        if number == 0:
            self.write("The number is: 1 digit\n")
            return True
        self.write(f"The number is: {number}\n")
        self.write(f"Digit: {numbers.digit_count(number)}\n")
        return True

    def char_number(self) -> bool:
        self.write("Enter a letter we will convert it to number: ")
        char = self.read_char()
        self.write(f"{numbers.char_code(char)}\n")
        return True

    def divider_shower(self) -> bool:
        self.write("Enter a number: \n")
        number = self.read_int()
        try:
            found = numbers.divisors(number)
        except ValueError as exc:
            self.write(str(exc))
            return True
        self.write(f"Divisors of {number} are: \n")
        self.write("".join(f"{d}\n" for d in found))
        return True

    def perfect_number(self) -> bool:
        self.write("Enter a number: ")
        number = self.read_int()
        try:
            perfect = numbers.is_perfect(number)
        except ValueError as exc:
            self.write(f"{exc}\n")
            return True
        verdict = "is a perfect number" if perfect else "is not a perfect number"
        self.write(f"The number {number} {verdict}\n")
        return True

    def roman_numeral(self) -> bool:
        self.write("Enter a number: ")
        number = self.read_int()
        try:
            roman = numbers.to_roman(number)
        except ValueError:
            self.write("Invalid input\n")
            self.write("The number should be between 1 and 4000\n")
            return False
        self.write(f"Roman number is: {roman}\n")
        return True


_HANDLERS: dict[int, Callable[[_Session], bool]] = {
    1: _Session.calculator,
    2: _Session.circle,
    3: _Session.triangle,
    4: _Session.square,
    5: _Session.rectangle,
    6: _Session.number_comparing,
    7: _Session.number_guess,
    8: _Session.square_root,
    9: _Session.exponentiation,
    10: _Session.factorial,
    11: _Session.dice_roller,
    12: _Session.odd_numbers,
    13: _Session.even_numbers,
    14: _Session.prime_number,
    15: _Session.gcd_number,
    16: _Session.lcm_number,
    17: _Session.rock_paper_scissors,
    18: _Session.palindrome,
    19: _Session.reverse_number,
    20: _Session.digit_control,
    22: _Session.char_number,
    23: _Session.divider_shower,
    24: _Session.perfect_number,
    25: _Session.roman_numeral,
}


def run(read_line: Callable[[], str], write: Callable[[str], object], rng=None) -> None:
    """Show the menu and run the chosen tools until the session ends.

    ``read_line`` returns the next line of input and raises EOFError (or returns
    None) when there is no more; ``write`` receives the output text.
    """
    session = _Session(read_line, write, random.Random() if rng is None else rng)
    while True:
        write(MENU)
        write(PROMPT)
        try:
            choice = session.read_int()
        except EOFError:
            return
        except _BadInput:
            write(INVALID_CHOICE)
            return
        if choice == QUIT_CHOICE:
            write("Quiting...")
            return
        handler = _HANDLERS.get(choice)
        if handler is None:
            write(INVALID_CHOICE)
            return
        try:
            if not handler(session):
                return
        except (EOFError, _BadInput):
            return


def _stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv=None) -> int:
    """Run the interactive menu on standard input and output."""
    run(_stdin_line, _stdout_write, random.Random())
    return 0


if __name__ == "__main__":
    sys.exit(main())