import pytest

from adventbox.y2017_day04 import is_valid, is_valid_anagram, part1, part2


@pytest.mark.parametrize(
    "phrase, expected",
    [
        ("aa bb cc dd ee", True),
        ("aa bb cc dd aa", False),
        ("aa bb cc dd aaa", True),
    ],
)
def test_is_valid(phrase, expected):
    assert is_valid(phrase) is expected


@pytest.mark.parametrize(
    "phrase, expected",
    [
        ("abcde fghij", True),
        ("abcde xyz ecdab", False),
        ("a ab abc abd abf abj", True),
        ("iiii oiii ooii oooi oooo", True),
        ("oiii ioii iioi iiio", False),
    ],
)
def test_is_valid_anagram(phrase, expected):
    assert is_valid_anagram(phrase) is expected


def test_anagram_rule_is_stricter():
    text = "aa bb cc dd ee\naa bb cc dd aa\nabcde xyz ecdab\n"
    assert part1(text) == 2
    assert part2(text) < part1(text)


def test_counts_match_per_line_checks():
    lines = ["ab ba", "cd dc cd", "x y z"]
    text = "\n".join(lines)
    assert part1(text) == sum(is_valid(line) for line in lines)
    assert part2(text) == sum(is_valid_anagram(line) for line in lines)