"""Simple sequences and totals of the kind usually built by recursion.

Every routine returns its result rather than printing it. The work is done
iteratively, so large inputs do not run into the interpreter's recursion
limit.
"""

from __future__ import annotations


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")


def count_up(n: int) -> list[int]:
    """Return the counter values 0, 1, ..., n - 1."""
    _require_non_negative(n)
    return list(range(n))


def repeat_name(n: int, name: str) -> list[str]:
    """Return ``name`` repeated ``n`` times; an empty list when ``n`` < 1."""
    return [name] * max(n, 0)


def numbers_ascending(n: int) -> list[int]:
    """Return 1, 2, ..., n, each emitted before moving on to the next."""
    return list(range(1, n + 1))


def numbers_ascending_backtracking(n: int) -> list[int]:
    """Return 1, 2, ..., n, emitted on the way back from n down to 1."""
    return list(reversed(range(n, 0, -1)))


def numbers_descending(n: int) -> list[int]:
    """Return n, n - 1, ..., 1, each emitted before moving on to the next."""
    return list(range(n, 0, -1))


def numbers_descending_backtracking(n: int) -> list[int]:
    """Return n, n - 1, ..., 1, emitted on the way back from 1 up to n."""
    return list(reversed(range(1, n + 1)))


def sum_natural(n: int) -> int:
    """Return 1 + 2 + ... + n; ``n`` must not be negative."""
    _require_non_negative(n)
    return sum(range(1, n + 1))


def sum_natural_accumulated(n: int) -> int:
    """Return 1 + 2 + ... + n by carrying a running total; 0 when ``n`` < 1."""
    total = 0
    while n >= 1:
        total += n
        n -= 1
    return total


def factorial(n: int) -> int:
    """Return n! for a positive integer ``n``."""
    if n < 1:
        raise ValueError(f"expected a positive integer, got {n}")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result