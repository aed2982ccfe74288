import pytest

from adventbox.y2016_day14 import find_key_index, part1


def test_sample_salt():
    assert find_key_index("abc", 0) == 22728


def test_part1_reads_first_line():
    assert part1("abc\nother") == 22728


def test_negative_stretch_rejected():
    with pytest.raises(ValueError):
        find_key_index("abc", -1)