from adventbox.y2015_day17 import (
    count_combinations,
    count_minimal_combinations,
    parse_containers,
    part1,
    part2,
)

SAMPLE = "20\n15\n10\n5\n5\n"


def test_part1_sample():
    assert part1(SAMPLE, 25) == 4


def test_part2_sample():
    assert part2(SAMPLE, 25) == 3


def test_parse_containers():
    assert parse_containers(SAMPLE) == [20, 15, 10, 5, 5]


def test_no_combination_found():
    assert count_combinations([20, 15], 7) == 0
    assert count_minimal_combinations([20, 15], 7) == 0


def test_minimal_never_exceeds_total():
    containers = [3, 1, 2, 4, 5, 2, 1]
    for liters in range(0, 19):
        minimal = count_minimal_combinations(containers, liters)
        total = count_combinations(containers, liters)
        assert minimal <= total


def test_identical_containers_are_distinct():
    assert count_combinations([5, 5], 5) == 2