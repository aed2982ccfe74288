import pytest

from adventbox.y2018_day12 import parse_garden, solve

SAMPLE = """initial state: #..#.#..##......###...###

...## => #
..#.. => #
.#... => #
.#.#. => #
.#.## => #
.##.. => #
.#### => #
#.#.# => #
#.### => #
##.#. => #
##.## => #
###.. => #
###.# => #
####. => #
"""


def test_sample_twenty_generations():
    assert solve(SAMPLE, 20) == 325


def test_parse_garden():
    initial, rules = parse_garden(SAMPLE)
    assert initial == "#..#.#..##......###...###"
    assert rules["...##"] == "#"
    assert len(rules) == 14


def test_stable_plant_stays_put():
    text = "initial state: #\n\n..#.. => #\n"
    assert solve(text, 1000) == 0


def test_drifting_plant_is_extrapolated():
    text = "initial state: #\n\n#.... => #\n"
    assert solve(text, 50_000_000_000) == 100_000_000_000


def test_no_plants():
    assert solve("initial state: ...\n\n..#.. => #\n", 5) == 0


def test_sprouting_empty_pots_rejected():
    with pytest.raises(ValueError):
        solve("initial state: #\n\n..... => #\n", 1)


def test_missing_initial_state():
    with pytest.raises(ValueError):
        parse_garden("...## => #\n")