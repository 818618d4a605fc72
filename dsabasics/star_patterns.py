"""Star-drawn patterns: forests, triangles, diamonds and symmetric shapes.

Each function returns the rows of its pattern as a list of strings, one
string per output line, with the exact spacing of the printed form,
trailing blanks included.
"""

from __future__ import annotations


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"pattern size must not be negative, got {n}")


def _centred(stars: int, pad: int) -> str:
    return " " * pad + "*" * max(stars, 0) + " " * pad


def half_forest(n: int) -> list[str]:
    """Lower triangle of a forest: row k holds k stars, each followed by a blank."""
    _require_non_negative(n)
    return ["* " * width for width in range(1, n + 1)]


def hollow_rectangle(n: int) -> list[str]:
    """An n by n square with a star border and a blank interior."""
    _require_non_negative(n)
    edge = "*" * n
    inner = "*" + " " * (n - 2) + "*" if n > 1 else edge
    return [edge if row in (0, n - 1) else inner for row in range(n)]


def forest(n: int) -> list[str]:
    """An n by n block of stars, each followed by a blank."""
    _require_non_negative(n)
    return ["* " * n for _ in range(n)]


def reverse_star_triangle(n: int) -> list[str]:
    """A centred triangle of stars with its point at the bottom."""
    _require_non_negative(n)
    return [_centred(2 * i - 1, n - i) for i in range(n, 0, -1)]


def rotated_triangle(n: int) -> list[str]:
    """A triangle lying on its side: 0, 1, ..., n, ..., 1 stars per row.

    The first row is empty, as it is in the printed form.
    """
    _require_non_negative(n)
    return ["*" * (i if i <= n else 2 * n - i) for i in range(2 * n)]


def seeding(n: int) -> list[str]:
    """Upper-left triangle of a forest: n, n - 1, ..., 1 stars per row."""
    _require_non_negative(n)
    return ["* " * width for width in range(n, 0, -1)]


def star_diamond(n: int) -> list[str]:
    """A centred triangle of stars followed by its mirror image.

    The upper half starts with a row of 2n blanks, as in the printed form.
    """
    _require_non_negative(n)
    upper = [_centred(2 * i - 1, n - i) for i in range(n + 1)]
    return upper + reverse_star_triangle(n)


def star_triangle(n: int) -> list[str]:
    """A centred triangle of stars with its point at the top."""
    _require_non_negative(n)
    return [_centred(2 * i + 1, n - i - 1) for i in range(n)]


def symmetric_void(n: int) -> list[str]:
    """Two mirrored star wedges around a diamond-shaped gap, 2n rows high."""
    _require_non_negative(n)
    rows = []
    for i in range(2 * n):
        if i >= n:
            stars, gap = i - n + 1, 2 * (2 * n - i - 1)
        else:
            stars, gap = n - i, 2 * i
        side = "* " * stars
        rows.append(side + "  " * gap + side)
    return rows


def symmetry(n: int) -> list[str]:
    """Two mirrored star wedges that meet in the middle, 2n rows high."""
    _require_non_negative(n)
    rows = []
    for i in range(2 * n):
        if i >= n:
            stars, gap = 2 * n - i, 2 * (i - n)
        else:
            stars, gap = i + 1, 2 * (n - i - 1)
        side = "* " * stars
        rows.append(side + "  " * gap + side)
    return rows