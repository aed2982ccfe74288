import pytest

from adventbox.y2017_day11 import part1, part2, walk


def test_sample_part1():
    assert part1("ne,ne,ne\n") == 3


def test_zigzag_path():
    assert part1("se,sw,se,sw,sw") == 3


def test_diagonal_path():
    assert part1("ne,ne,s,s") == 2


def test_return_to_start():
    assert part1("ne,ne,sw,sw") == 0


def test_furthest_point():
    assert part2("ne,ne,sw,sw") == 2


def test_walk_yields_one_distance_per_step():
    steps = ["n", "nw", "s", "se"]
    assert len(list(walk(steps))) == len(steps)


def test_opposite_steps_match_empty_path():
    assert part1("n,s,ne,sw,nw,se") == part1("")


def test_furthest_never_below_final():
    text = "n,n,ne,s,sw,sw,nw"
    assert part2(text) >= part1(text)


def test_unknown_direction_raises():
    with pytest.raises(ValueError):
        part1("n,up")