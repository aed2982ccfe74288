"""Count infections caused by a virus carrier walking an infinite grid."""

from __future__ import annotations

import enum
from collections.abc import Mapping

BURSTS = 10_000
EVOLVED_BURSTS = 10_000_000

# Up, left, down, right: adding one turns left, three turns right, two reverses.
_DIRECTIONS = ((-1, 0), (0, -1), (1, 0), (0, 1))
_LEFT, _STRAIGHT, _REVERSE, _RIGHT = 1, 0, 2, 3


class Node(enum.Enum):
    """State of a grid node."""

    CLEAN = "."
    WEAKENED = "W"
    INFECTED = "#"
    FLAGGED = "F"


_SIMPLE = {
    Node.CLEAN: (Node.INFECTED, _LEFT),
    Node.INFECTED: (Node.CLEAN, _RIGHT),
}

_EVOLVED = {
    Node.CLEAN: (Node.WEAKENED, _LEFT),
    Node.WEAKENED: (Node.INFECTED, _STRAIGHT),
    Node.INFECTED: (Node.FLAGGED, _RIGHT),
    Node.FLAGGED: (Node.CLEAN, _REVERSE),
}


def _parse(text: str) -> tuple[dict[tuple[int, int], Node], tuple[int, int]]:
    lines = text.splitlines()
    while lines and not lines[-1]:
        lines.pop()
    if not lines:
        raise ValueError("the grid is empty")
    grid: dict[tuple[int, int], Node] = {}
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char == "#":
                grid[row, col] = Node.INFECTED
            elif char != ".":
                raise ValueError(f"unexpected character {char!r} in the grid")
    return grid, (len(lines) // 2, len(lines[0]) // 2)


def _infections(text: str, bursts: int, rules: Mapping[Node, tuple[Node, int]]) -> int:
    if bursts < 0:
        raise ValueError("bursts cannot be negative")
    grid, (row, col) = _parse(text)
    direction = 0
    infections = 0
    for _ in range(bursts):
        node = grid.get((row, col), Node.CLEAN)
        after, turn = rules[node]
        direction = (direction + turn) % 4
        if after is Node.CLEAN:
            grid.pop((row, col), None)
        else:
            grid[row, col] = after
        if after is Node.INFECTED:
            infections += 1
        d_row, d_col = _DIRECTIONS[direction]
        row, col = row + d_row, col + d_col
    return infections


def part1(text: str, bursts: int = BURSTS) -> int:
    """Bursts that infect a node when nodes are only clean or infected."""
    return _infections(text, bursts, _SIMPLE)


def part2(text: str, bursts: int = EVOLVED_BURSTS) -> int:
    """Bursts that infect a node when nodes also weaken and get flagged."""
    return _infections(text, bursts, _EVOLVED)