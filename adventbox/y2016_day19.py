"""Find which elf ends up with all the presents in two stealing games."""

from __future__ import annotations

from collections import deque


def _check(n: int) -> None:
    if n < 1:
        raise ValueError("there must be at least one elf")


def winner_left(n: int) -> int:
    """Winner when each elf steals from the elf to its left."""
    _check(n)
    highest = 1 << (n.bit_length() - 1)
    return 2 * (n - highest) + 1


def winner_across(n: int) -> int:
    """Winner when each elf steals from the elf directly across the circle."""
    _check(n)
    first = deque(range(n // 2))
    second = deque(range(n // 2, n))
    for _ in range(n - 1):
        if len(first) > len(second):
            first.pop()
        else:
            second.popleft()
        second.append(first.popleft())
        first.append(second.popleft())
    return (second[0] if second else first[0]) + 1


def _elves(text: str) -> int:
    tokens = text.split()
    if not tokens:
        raise ValueError("no number of elves given")
    return int(tokens[0])


def part1(text: str) -> int:
    """Winner of the steal-left game."""
    return winner_left(_elves(text))


def part2(text: str) -> int:
    """Winner of the steal-across game."""
    return winner_across(_elves(text))