import pytest

from dsabasics.star_patterns import (
    forest,
    half_forest,
    hollow_rectangle,
    reverse_star_triangle,
    rotated_triangle,
    seeding,
    star_diamond,
    star_triangle,
    symmetric_void,
    symmetry,
)


def _stripped(rows):
    return [row.rstrip() for row in rows]


def test_half_forest_example():
    assert _stripped(half_forest(3)) == ["*", "* *", "* * *"]


def test_half_forest_star_counts():
    rows = half_forest(6)
    assert [row.count("*") for row in rows] == list(range(1, 7))


def test_hollow_rectangle_example():
    assert hollow_rectangle(4) == ["****", "*  *", "*  *", "****"]


@pytest.mark.parametrize("n", [1, 2, 5, 8])
def test_hollow_rectangle_is_square(n):
    rows = hollow_rectangle(n)
    assert len(rows) == n
    assert all(len(row) == n for row in rows)
    assert all(row[0] == "*" and row[-1] == "*" for row in rows)


def test_forest_example():
    assert _stripped(forest(3)) == ["* * *"] * 3


def test_reverse_star_triangle_example():
    assert _stripped(reverse_star_triangle(3)) == ["*****", " ***", "  *"]


def test_reverse_star_triangle_mirrors_star_triangle():
    assert reverse_star_triangle(5) == list(reversed(star_triangle(5)))


def test_rotated_triangle_example():
    rows = rotated_triangle(3)
    assert rows[0] == ""
    assert rows[1:] == ["*", "**", "***", "**", "*"]


def test_seeding_example():
    assert _stripped(seeding(3)) == ["* * *", "* *", "*"]


def test_seeding_reverses_half_forest():
    assert seeding(7) == list(reversed(half_forest(7)))


def test_star_diamond_example():
    rows = star_diamond(3)
    visible = [row.rstrip() for row in rows if row.strip()]
    assert visible == ["  *", " ***", "*****", "*****", " ***", "  *"]
    assert rows[0] == " " * 6


def test_star_triangle_example():
    assert _stripped(star_triangle(3)) == ["  *", " ***", "*****"]


@pytest.mark.parametrize("n", [1, 4, 9])
def test_star_triangle_rows_have_equal_width(n):
    rows = star_triangle(n)
    assert {len(row) for row in rows} == {2 * n - 1}


def test_symmetric_void_example():
    assert _stripped(symmetric_void(3)) == [
        "* * * * * *",
        "* *     * *",
        "*         *",
        "*         *",
        "* *     * *",
        "* * * * * *",
    ]


@pytest.mark.parametrize("n", [1, 3, 6])
def test_symmetry_is_mirrored_top_to_bottom(n):
    rows = symmetry(n)
    assert len(rows) == 2 * n
    assert rows == list(reversed(rows))
    assert {len(row) for row in rows} == {4 * n}
    assert rows[n - 1] == "* " * (2 * n)


def test_symmetry_example_rows():
    rows = _stripped(symmetry(3))
    assert rows[0] == "*         *"
    assert rows[1] == "* *     * *"
    assert rows[2] == "* * * * * *"


def test_size_zero_has_no_stars():
    outputs = [
        half_forest(0),
        hollow_rectangle(0),
        forest(0),
        reverse_star_triangle(0),
        rotated_triangle(0),
        seeding(0),
        star_diamond(0),
        star_triangle(0),
        symmetric_void(0),
        symmetry(0),
    ]
    for rows in outputs:
        assert "".join(rows).count("*") == 0


def test_negative_size_is_rejected():
    with pytest.raises(ValueError):
        half_forest(-1)
    with pytest.raises(ValueError):
        hollow_rectangle(-1)
    with pytest.raises(ValueError):
        forest(-1)
    with pytest.raises(ValueError):
        reverse_star_triangle(-1)
    with pytest.raises(ValueError):
        rotated_triangle(-1)
    with pytest.raises(ValueError):
        seeding(-1)
    with pytest.raises(ValueError):
        star_diamond(-1)
    with pytest.raises(ValueError):
        star_triangle(-1)
    with pytest.raises(ValueError):
        symmetric_void(-1)
    with pytest.raises(ValueError):
        symmetry(-1)