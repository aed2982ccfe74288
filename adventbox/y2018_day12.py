"""Grow plants in a row of pots and sum the numbers of pots holding plants."""

from __future__ import annotations

_PREFIX = "initial state:"
_EMPTY = "....."


def parse_garden(text: str) -> tuple[str, dict[str, str]]:
    """Return the initial pots and the rules mapping a five-pot window to the next centre pot."""
    lines = text.splitlines()
    if not lines or not lines[0].startswith(_PREFIX):
        raise ValueError("missing initial state line")
    initial = lines[0][len(_PREFIX):].strip()
    rules: dict[str, str] = {}
    for line in lines[1:]:
        words = line.split()
        if not words:
            continue
        if len(words) != 3 or words[1] != "=>" or len(words[0]) != 5:
            raise ValueError(f"malformed rule: {line!r}")
        rules[words[0]] = words[2]
    return initial, rules


def _total(pattern: str, offset: int) -> int:
    return sum(offset + index for index, pot in enumerate(pattern) if pot == "#")


def solve(text: str, generations: int) -> int:
    """Sum of the pot numbers holding plants after `generations` generations.

    Once the plants keep their shape and only drift, the rest is extrapolated.
    """
    if generations < 0:
        raise ValueError("generations cannot be negative")
    initial, rules = parse_garden(text)
    if rules.get(_EMPTY) == "#":
        raise ValueError("empty pots would sprout without end")
    first = initial.find("#")
    if first == -1:
        return 0
    pattern = initial[first: initial.rfind("#") + 1]
    offset = first
    for generation in range(1, generations + 1):
        padded = f"....{pattern}...."
        grown = "".join(rules.get(padded[i:i + 5], ".") for i in range(len(padded) - 4))
        start = grown.find("#")
        if start == -1:
            return 0
        new_pattern = grown[start: grown.rfind("#") + 1]
        new_offset = offset - 2 + start
        if new_pattern == pattern:
            drift = new_offset - offset
            remaining = generations - generation
            return _total(new_pattern, new_offset) + remaining * drift * new_pattern.count("#")
        pattern, offset = new_pattern, new_offset
    return _total(pattern, offset)