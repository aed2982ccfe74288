import pytest

from adventbox.y2016_day24 import distance_matrix, part1, part2, shortest_tour

SAMPLE = """###########
#0.1.....2#
#.#######.#
#4.......3#
###########
"""


def test_sample_part1():
    assert part1(SAMPLE) == 14


def test_sample_part2():
    assert part2(SAMPLE) == 20


def test_matrix_is_symmetric_with_zero_diagonal():
    matrix = distance_matrix(SAMPLE.splitlines())
    size = len(matrix)
    assert size == 5
    for i in range(size):
        assert matrix[i][i] == 0
        for j in range(size):
            assert matrix[i][j] == matrix[j][i]


def test_matrix_distance_between_neighbours():
    matrix = distance_matrix(SAMPLE.splitlines())
    assert matrix[0][4] == 2


def test_return_never_shorter_than_one_way():
    matrix = distance_matrix(SAMPLE.splitlines())
    assert shortest_tour(matrix, True) >= shortest_tour(matrix, False)


def test_single_location_needs_no_steps():
    assert part1("###\n#0#\n###\n") == part2("###\n#0#\n###\n") == 0


def test_disconnected_locations_raise():
    with pytest.raises(ValueError):
        part1("#####\n#0#1#\n#####\n")


def test_unknown_character_raises():
    with pytest.raises(ValueError):
        distance_matrix(["#0A#"])


def test_empty_matrix_raises():
    with pytest.raises(ValueError):
        shortest_tour([], False)