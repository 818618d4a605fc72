"""Letter and number patterns: triangles, ramps, hills, crowns and squares.

Each function returns the rows of its pattern as a list of strings, one
string per output line. The spacing is exactly that of the printed form,
trailing blanks included.
"""

from __future__ import annotations

from itertools import count


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"pattern size must not be negative, got {n}")


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def _spaced(items) -> str:
    """Join items, each one followed by a single blank."""
    return "".join(f"{item} " for item in items)


def alpha_hill(n: int) -> list[str]:
    """A centred hill of letters rising to the row number and falling back.

    Row i reads A, B, ... up to the i-th letter and back down to A, with no
    blanks between letters, indented by n - i blanks and followed by
    n - i - 1 blanks.
    """
    _require_non_negative(n)
    rows = []
    for i in range(1, n + 1):
        offsets = [*range(i), *range(i - 2, -1, -1)]
        letters = "".join(_letter(k) for k in offsets)
        rows.append(" " * (n - i) + letters + " " * (n - i - 1))
    return rows


def alpha_ramp(n: int) -> list[str]:
    """Row i repeats the i-th letter i times: A, B B, C C C, ..."""
    _require_non_negative(n)
    return [f"{_letter(i - 1)} " * i for i in range(1, n + 1)]


def alpha_triangle(n: int) -> list[str]:
    """Rows end at the n-th letter and start one letter earlier each time."""
    _require_non_negative(n)
    last = n - 1
    return [
        _spaced(_letter(k) for k in range(last - i, last + 1)) for i in range(n)
    ]


def binary_triangle(n: int) -> list[str]:
    """Rows of alternating 1s and 0s; odd rows start with 1, even rows with 0."""
    _require_non_negative(n)
    return [
        _spaced((i + j + 1) % 2 for j in range(1, i + 1)) for i in range(1, n + 1)
    ]


def increasing_triangle(n: int) -> list[str]:
    """Row i holds the next i numbers of the sequence 1, 2, 3, ..."""
    _require_non_negative(n)
    numbers = count(1)
    return [_spaced(next(numbers) for _ in range(i)) for i in range(1, n + 1)]


def letter_triangle(n: int) -> list[str]:
    """Row i holds the first i letters: A, A B, A B C, ..."""
    _require_non_negative(n)
    return [_spaced(_letter(k) for k in range(i + 1)) for i in range(n)]


def number_triangle(n: int) -> list[str]:
    """Row i holds the numbers 1 to i."""
    _require_non_negative(n)
    return [_spaced(range(1, i + 1)) for i in range(1, n + 1)]


def number_crown(n: int) -> list[str]:
    """Row i counts up to i, leaves a gap, then counts back down to 1.

    The gap is 2(n + 1) double blanks on the first row and shrinks by two
    double blanks on each following row.
    """
    _require_non_negative(n)
    rows = []
    gap = 2 * (n + 1)
    for i in range(1, n + 1):
        rows.append(_spaced(range(1, i + 1)) + "  " * gap + _spaced(range(i, 0, -1)))
        gap -= 2
    return rows


def number_pattern(n: int) -> list[str]:
    """A (2n - 1) square of nested rings: n on the border down to 1 in the centre."""
    _require_non_negative(n)
    size = 2 * n - 1
    edge = 2 * (n - 1)
    return [
        _spaced(n - min(i, j, edge - i, edge - j) for j in range(size))
        for i in range(size)
    ]


def reverse_letter_triangle(n: int) -> list[str]:
    """Row k holds the first n - k letters, down to a single A."""
    _require_non_negative(n)
    return [_spaced(_letter(k) for k in range(i)) for i in range(n, 0, -1)]


def reverse_number_triangle(n: int) -> list[str]:
    """Row k holds the numbers 1 to n - k, down to a single 1."""
    _require_non_negative(n)
    return [_spaced(range(1, i + 1)) for i in range(n, 0, -1)]


def row_triangle(n: int) -> list[str]:
    """Row i repeats the number i, i times: 1, 2 2, 3 3 3, ..."""
    _require_non_negative(n)
    return [f"{i} " * i for i in range(1, n + 1)]