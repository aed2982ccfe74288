"""Checksum box ids and find the two ids that differ in one position."""

from __future__ import annotations

from collections import Counter
from itertools import combinations


def part1(text: str) -> int:
    """Ids with a letter exactly twice times ids with a letter exactly three times."""
    twos = threes = 0
    for line in text.splitlines():
        counts = set(Counter(line).values())
        twos += 2 in counts
        threes += 3 in counts
    return twos * threes


def part2(text: str) -> str:
    """Letters shared by the first pair of ids that differ in at most one position."""
    boxes = [line for line in text.splitlines() if line]
    if not boxes:
        raise ValueError("no box ids given")
    wanted = len(boxes[0]) - 1
    for first, second in combinations(boxes, 2):
        common = [a for a, b in zip(first, second) if a == b]
        if len(common) >= wanted:
            return "".join(common[:wanted])
    raise ValueError("no two ids differ by a single character")