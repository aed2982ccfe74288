"""Find the first house to receive at least a given number of presents."""

from __future__ import annotations

_NOT_FOUND = -99
_LAZY_VISITS = 50


def _first_above(houses: list[int], goal: int) -> int:
    return next(
        (house for house, presents in enumerate(houses) if house and presents > goal),
        _NOT_FOUND,
    )


def first_house(goal: int) -> int:
    """Lowest house number receiving more than `goal` presents; elves deliver ten each."""
    width = goal // 10 + 1
    houses = [0] * max(width, 0)
    for elf in range(1, width):
        for house in range(elf, width, elf):
            houses[house] += elf * 10
    return _first_above(houses, goal)


def first_house_lazy(goal: int) -> int:
    """As first_house, but each elf delivers eleven presents to only fifty houses."""
    width = goal // 11 + 1
    houses = [0] * max(width, 0)
    for elf in range(1, width):
        for house in range(elf, min(width, elf * _LAZY_VISITS + 1), elf):
            houses[house] += elf * 11
    return _first_above(houses, goal)


def _goal(text: str) -> int:
    tokens = text.split()
    if not tokens:
        raise ValueError("no present count given")
    return int(tokens[0])


def part1(text: str) -> int:
    """First house with enough presents from tireless elves."""
    return first_house(_goal(text))


def part2(text: str) -> int:
    """First house with enough presents from lazy elves."""
    return first_house_lazy(_goal(text))