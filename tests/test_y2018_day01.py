import pytest

from adventbox.y2018_day01 import part1, part2


def test_part1_sums_changes():
    assert part1("+1\n-2\n+3\n+1\n") == 3


def test_part1_single_value():
    assert part1("7\n") == 7


def test_part2_returns_to_zero():
    assert part2("+1\n-1\n") == 0


def test_part2_needs_several_passes():
    assert part2("+3\n+3\n+4\n-2\n-4\n") == 10


def test_part2_empty_input():
    with pytest.raises(ValueError):
        part2("")


def test_part2_never_repeats():
    with pytest.raises(ValueError):
        part2("+1\n")