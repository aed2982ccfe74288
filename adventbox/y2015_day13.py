"""Seat guests around a circular table for the greatest total happiness."""

from __future__ import annotations

from itertools import permutations

_NO_SEATING = -999999


def parse_happiness(text: str) -> tuple[list[str], dict[tuple[str, str], int]]:
    """Return the guests in order of appearance and the happiness each feels beside another."""
    people: list[str] = []
    table: dict[tuple[str, str], int] = {}
    for line in text.splitlines():
        words = line.split()
        if not words:
            continue
        guest, neighbour = words[0], words[-1][:-1]
        for name in (guest, neighbour):
            if name not in people:
                people.append(name)
        sign = -1 if words[2] == "lose" else 1
        table[guest, neighbour] = sign * int(words[3])
    return people, table


def best_arrangement(people: list[str], table: dict[tuple[str, str], int]) -> int:
    """Greatest total happiness over every circular seating of the guests."""
    if len(people) < 2:
        return _NO_SEATING
    first, *rest = people
    best = _NO_SEATING
    for order in permutations(rest):
        seating = (first, *order)
        total = sum(
            table.get((a, b), 0) + table.get((b, a), 0)
            for a, b in zip(seating, seating[1:] + seating[:1])
        )
        best = max(best, total)
    return best


def part1(text: str) -> int:
    """Best happiness for the listed guests."""
    return best_arrangement(*parse_happiness(text))


def part2(text: str) -> int:
    """Best happiness once an indifferent extra guest joins the table."""
    people, table = parse_happiness(text)
    if "Me" not in people:
        people.append("Me")
    return best_arrangement(people, table)