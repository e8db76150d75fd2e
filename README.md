# mathapp

mathapp is a small console toolbox for practising everyday math. It shows a
numbered menu. You pick a tool and answer its prompts. When the tool is done,
the menu comes back.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
mathapp
```

You can also start it with `python -m mathapp.menu`.

The menu offers these tools:

| Choice | Tool |
|-------:|------|
| 1 | Calculator (`+`, `-`, `*`, `/`) |
| 2–5 | Area of a circle, triangle, square or rectangle |
| 6 | Compare two numbers |
| 7 | Number guessing game (secret number from 0 to 99) |
| 8 | Square root |
| 9 | Exponentiation |
| 10 | Factorial |
| 11 | Dice roller |
| 12, 13 | Odd or even numbers up to a limit |
| 14 | Prime check |
| 15, 16 | GCD and LCM |
| 17 | Rock-paper-scissors |
| 18 | Palindrome check |
| 19 | Reverse a number |
| 20 | Digit count |
| 22 | Character code of a letter |
| 23 | Divisors of a number |
| 24 | Perfect number check |
| 25 | Roman numeral conversion (0 to 4000) |
| 26 | Quit |

In some cases the session ends instead of returning to the menu:

- an unknown menu choice, or input that is not a number;
- a rock-paper-scissors choice other than 1, 2 or 3;
- a Roman numeral request outside 0 to 4000;
- a correct first guess in the guessing game;
- the end of input.

## What it does not do

The menu lists choice 21, "Printing Binary Representation", but the package has
no binary conversion. Choice 21 is treated like any unknown choice. It prints
the invalid-choice message and ends the session.

## Library use

You can also call the tools directly from Python:

```python
from mathapp.geometry import circle_area, triangle_area
from mathapp.arithmetic import calculate, factorial, power
from mathapp.numbers import gcd, lcm, is_prime, to_roman, divisors

circle_area(2)           # area using pi = 3.1415
calculate(7, "/", 2)     # 3.5
factorial(5)             # 120
gcd(12, 18)              # 6
lcm(4, 6)                # 12
is_prime(13)             # True
to_roman(1994)           # "MCMXCIV"
divisors(12)             # [1, 2, 3, 4, 6, 12]
```

The modules provide the following:

- `mathapp.geometry`: `circle_area`, `triangle_area`, `square_area`,
  `rectangle_area`.
- `mathapp.arithmetic`: `calculate` raises `ValueError` for an unknown operator. It also has `larger_and_smaller`, `power` and `square_root`; `square_root` gives NaN for negative input. `factorial` raises `ValueError` for negative numbers.
- `mathapp.numbers`:
  - `digit_count`, `divisors`, `even_numbers`, `odd_numbers`;
  - `gcd`, `lcm`;
  - `is_palindrome`, `reverse_number`, `is_perfect`;
  - `smallest_divisor` and `is_prime`: every number below 4 counts as prime;
  - `to_roman` and `char_code`.
- `mathapp.games`: the enums `Move`, `Outcome` and `Hint`, and the functions below.
  - `roll_dice`, `secret_number` and `random_move` take an optional
    `random.Random` instance, so their results can be repeated.
  - `judge` decides a rock-paper-scissors round for the player.
  - `hint` tells whether a guess is below, above or equal to the target.

To drive the menu with your own input and output, call
`mathapp.menu.run(read_line, write, rng)`:

- `read_line` returns the next line of input. It raises `EOFError` or returns `None` when the input runs out.
- `write` receives the output text.
- `rng` is optional.

## Running the tests

```
pip install ".[test]"
pytest
```