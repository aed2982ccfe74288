"""Count the jumps needed to escape a list of self-modifying offsets."""

from __future__ import annotations

from collections.abc import Iterable


def steps_to_exit(offsets: Iterable[int], strange: bool) -> int:
    """Steps until the pointer leaves the list.

    Each offset used grows by one; with `strange`, offsets of three or more shrink by one instead.
    """
    jumps = list(offsets)
    position = 0
    steps = 0
    while 0 <= position < len(jumps):
        offset = jumps[position]
        jumps[position] += -1 if strange and offset >= 3 else 1
        position += offset
        steps += 1
    return steps


def _offsets(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def part1(text: str) -> int:
    """Steps to exit when every used offset grows."""
    return steps_to_exit(_offsets(text), False)


def part2(text: str) -> int:
    """Steps to exit with the strange rule for large offsets."""
    return steps_to_exit(_offsets(text), True)