import pytest

from adventbox.y2016_day03 import is_triangle, part1, part2

COLUMNS = (
    "101 301 501\n"
    "102 302 502\n"
    "103 303 503\n"
    "201 401 601\n"
    "202 402 602\n"
    "203 403 603\n"
)


def test_not_a_triangle():
    assert is_triangle(5, 10, 25) is False


def test_not_a_triangle_any_order():
    assert is_triangle(25, 5, 10) is False


def test_right_triangle():
    assert is_triangle(3, 4, 5) is True


def test_degenerate_is_not_a_triangle():
    assert is_triangle(1, 2, 3) is False


def test_part1_counts_rows():
    assert part1("  5 10 25\n  3  4  5\n") == 1


def test_part2_counts_columns():
    assert part2(COLUMNS) == 6


def test_part2_rejects_incomplete_group():
    with pytest.raises(ValueError):
        part2("1 2 3\n4 5 6\n")