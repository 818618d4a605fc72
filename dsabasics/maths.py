"""Elementary number routines: digits, reversal, gcd, divisors, primality."""

from __future__ import annotations

import math

_INT_MAX = 2**31 - 1


def _require_positive(n: int) -> None:
    if n <= 0:
        raise ValueError(f"expected a positive integer, got {n}")


def count_digits(n: int) -> int:
    """Return the number of decimal digits in a positive integer."""
    _require_positive(n)
    return len(str(n))


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign.

    Trailing zeros disappear (10400 becomes 401). If the reversed value
    would leave the signed 32-bit range, 0 is returned.
    """
    sign = -1 if n < 0 else 1
    rest = abs(n)
    reversed_value = 0
    while rest:
        rest, digit = divmod(rest, 10)
        if reversed_value > _INT_MAX // 10:
            return 0
        reversed_value = reversed_value * 10 + digit
    return sign * reversed_value


def is_palindrome(n: int) -> bool:
    """Return True if ``n`` reads the same backwards; negatives never do."""
    if n < 0:
        return False
    return reverse_number(n) == n


def gcd_brute(a: int, b: int) -> int:
    """Greatest common divisor by trying candidates downward from min(a, b).

    Returns 1 when no positive candidate exists.
    """
    return next(
        (i for i in range(min(a, b), 0, -1) if a % i == 0 and b % i == 0),
        1,
    )


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by repeated remainders (Euclid)."""
    while a > 0 and b > 0:
        if b > a:
            b %= a
        else:
            a %= b
    return b if a == 0 else a


def divisors_brute(n: int) -> list[int]:
    """All positive divisors of ``n`` in ascending order, testing 1..n."""
    return [i for i in range(1, n + 1) if n % i == 0]


def divisors(n: int) -> list[int]:
    """All positive divisors of ``n`` in ascending order, testing up to sqrt(n)."""
    if n < 1:
        return []
    found: set[int] = set()
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            found.add(i)
            found.add(n // i)
    return sorted(found)


def is_armstrong(n: int) -> bool:
    """Return True if ``n`` equals the sum of its digits each raised to the digit count."""
    _require_positive(n)
    digits = [int(ch) for ch in str(n)]
    power = len(digits)
    return sum(d**power for d in digits) == n


def is_prime(n: int) -> bool:
    """Return True if ``n`` has exactly two positive divisors."""
    return len(divisors(n)) == 2