from itertools import islice

import pytest

from adventbox.y2017_day15 import (
    DIVISOR,
    FACTOR_A,
    FACTOR_B,
    generator,
    judge,
    parse_seeds,
)

SAMPLE = "Generator A starts with 65\nGenerator B starts with 8921\n"


def test_parse_seeds():
    assert parse_seeds(SAMPLE) == (65, 8921)


def test_first_value_of_generator_a():
    assert next(generator(65, FACTOR_A)) == 1092455


def test_generator_values_stay_below_divisor():
    values = list(islice(generator(8921, FACTOR_B), 50))
    assert all(0 < value < DIVISOR for value in values)


@pytest.mark.parametrize("multiple", [4, 8])
def test_picky_generator_yields_multiples(multiple):
    values = list(islice(generator(65, FACTOR_A, multiple), 20))
    assert all(value % multiple == 0 for value in values)


def test_picky_values_are_subsequence_of_plain():
    plain = list(islice(generator(65, FACTOR_A), 200))
    picky = [value for value in plain if value % 4 == 0]
    assert list(islice(generator(65, FACTOR_A, 4), len(picky))) == picky


def test_first_five_pairs():
    assert judge(65, 8921, 5, False) == 1


def test_first_picky_match():
    assert judge(65, 8921, 1056, True) == 1
    assert judge(65, 8921, 1055, True) == judge(65, 8921, 1056, True) - 1


def test_missing_line_raises():
    with pytest.raises(ValueError):
        parse_seeds("Generator A starts with 65\n")