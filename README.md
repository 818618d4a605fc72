# dsabasics

A small collection of beginner algorithm exercises written as plain Python
functions. Every function returns its result (a number, a list or the rows of
a figure) instead of printing it. There are no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsabasics.maths`

- `count_digits(n)` – number of decimal digits of a positive integer.
- `reverse_number(n)` – digits reversed, sign kept, trailing zeros dropped;
  returns 0 if the result would leave the signed 32-bit range.
- `is_palindrome(n)` – whether `n` reads the same backwards (negatives never do).
- `gcd_brute(a, b)` and `gcd(a, b)` – greatest common divisor, by trying
  candidates downward and by Euclid's remainders.
- `divisors_brute(n)` and `divisors(n)` – all positive divisors in ascending
  order, testing up to `n` and up to its square root.
- `is_armstrong(n)` – whether `n` equals the sum of its digits each raised to
  the number of digits.
- `is_prime(n)` – whether `n` has exactly two positive divisors.

`count_digits` and `is_armstrong` raise `ValueError` for inputs below 1.

### `dsabasics.recursion`

Sequences and totals of the kind usually built by recursion, computed
iteratively so large inputs do not hit the interpreter's recursion limit:

- `count_up(n)` – `[0, 1, ..., n - 1]`.
- `repeat_name(n, name)` – `name` repeated `n` times.
- `numbers_ascending(n)`, `numbers_ascending_backtracking(n)` – `1..n`.
- `numbers_descending(n)`, `numbers_descending_backtracking(n)` – `n..1`.
- `sum_natural(n)`, `sum_natural_accumulated(n)` – `1 + 2 + ... + n`.
- `factorial(n)` – `n!` for positive `n`.

`count_up` and `sum_natural` raise `ValueError` for negative `n`;
`factorial` raises it for `n` below 1.

### `dsabasics.star_patterns`

`half_forest`, `hollow_rectangle`, `forest`, `reverse_star_triangle`,
`rotated_triangle`, `seeding`, `star_diamond`, `star_triangle`,
`symmetric_void` and `symmetry`.

### `dsabasics.text_patterns`

`alpha_hill`, `alpha_ramp`, `alpha_triangle`, `binary_triangle`,
`increasing_triangle`, `letter_triangle`, `number_triangle`, `number_crown`,
`number_pattern`, `reverse_letter_triangle`, `reverse_number_triangle` and
`row_triangle`.

Every pattern function takes the size `n`, returns a list of strings, one per
line, with the exact spacing of the printed figure (trailing blanks included),
and raises `ValueError` for a negative size.

## Using the library

```python
from dsabasics.maths import count_digits, reverse_number, gcd, divisors, is_prime
from dsabasics.recursion import factorial, sum_natural
from dsabasics.text_patterns import number_triangle

count_digits(123)      # 3
reverse_number(10400)  # 401
gcd(6, 4)              # 2
divisors(36)           # [1, 2, 3, 4, 6, 9, 12, 18, 36]
is_prime(2)            # True
factorial(5)           # 120
sum_natural(5)         # 15
number_triangle(3)     # ['1 ', '1 2 ', '1 2 3 ']

print("\n".join(number_triangle(3)))
```

## Command line

Installing the package provides the `dsabasics` command:

```
dsabasics --help
dsabasics count-digits 123
dsabasics gcd 6 4
dsabasics pattern triangle 3
```

Subcommands: `count-digits`, `reverse`, `palindrome`, `divisors`,
`armstrong`, `prime`, `factorial`, `sum` (each taking one number), `gcd`
(taking two) and `pattern NAME N`, where `NAME` is one of the pattern names
in hyphenated form (for example `star-diamond`, `number-crown`; `triangle`
runs `row_triangle`). Invalid input is reported on standard error with exit
status 1.

## What it does not do

The command line takes its numbers as arguments; it does not prompt for
input. The brute-force variants (`gcd_brute`, `divisors_brute`) and the
routines in `dsabasics.recursion` other than `factorial` and `sum_natural`
are available only from Python, not as subcommands.