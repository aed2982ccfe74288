"""Sum frequency changes and find the first frequency reached twice."""

from __future__ import annotations

from itertools import accumulate, cycle


def _changes(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def part1(text: str) -> int:
    """Resulting frequency after every change has been applied once."""
    return sum(_changes(text))


def part2(text: str) -> int:
    """First frequency reached twice when the changes repeat forever."""
    changes = _changes(text)
    if not changes:
        raise ValueError("no frequency changes given")
    prefixes = list(accumulate(changes))
    total = prefixes[-1]
    if total != 0 and len({value % total for value in prefixes}) == len(prefixes):
        raise ValueError("no frequency is ever reached twice")
    seen = {0}
    for frequency in accumulate(cycle(changes)):
        if frequency in seen:
            return frequency
        seen.add(frequency)
    raise AssertionError("unreachable")