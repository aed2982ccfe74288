import pytest

from adventbox.y2017_day24 import (
    longest_strongest,
    parse_components,
    part1,
    part2,
    strongest,
)

SAMPLE = "0/2\n2/2\n2/3\n3/4\n3/5\n0/1\n10/1\n9/10\n"


def test_part1_sample():
    assert part1(SAMPLE) == 31


def test_part2_sample():
    assert part2(SAMPLE) == 19


def test_parse_components_reads_pairs():
    assert parse_components("0/2\n\n10/1\n") == [(0, 2), (10, 1)]


def test_parse_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_components("0-2\n")


def test_no_zero_port_gives_no_bridge():
    assert strongest([(1, 2), (2, 3)]) == 0
    assert longest_strongest([(1, 2), (2, 3)]) == 0


def test_longest_beats_strongest_single():
    components = [(0, 10), (0, 1), (1, 1)]
    assert strongest(components) == 10
    assert longest_strongest(components) == 3


def test_longest_never_exceeds_strongest():
    components = parse_components(SAMPLE)
    assert longest_strongest(components) <= strongest(components)