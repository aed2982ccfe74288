"""Follow light-grid instructions and count lit lights or total brightness."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

SIZE = 1000
_IGNORED = {"off", "turn", "through"}


class Action(enum.Enum):
    """What an instruction does to the lights in its rectangle."""

    TOGGLE = "toggle"
    ON = "on"
    OFF = "off"


@dataclass(frozen=True)
class Instruction:
    """An action applied to the inclusive rectangle from start to end."""

    action: Action
    start: tuple[int, int]
    end: tuple[int, int]

    @classmethod
    def parse(cls, line: str) -> Instruction:
        """Parse a line such as "turn on 0,0 through 999,999"."""
        toggle = False
        turn_on = False
        corners: list[tuple[int, int]] = []
        for token in line.split():
            if token == "toggle":
                toggle = True
            elif token == "on":
                turn_on = True
            elif token in _IGNORED:
                continue
            else:
                x, _, y = token.partition(",")
                try:
                    corner = (int(x), int(y))
                except ValueError:
                    raise ValueError(f"bad coordinate {token!r} in {line!r}") from None
                if not all(0 <= value < SIZE for value in corner):
                    raise ValueError(f"coordinate {token!r} outside the grid")
                corners.append(corner)
        if len(corners) != 2:
            raise ValueError(f"expected two corners in {line!r}")
        if toggle:
            action = Action.TOGGLE
        elif turn_on:
            action = Action.ON
        else:
            action = Action.OFF
        return cls(action, corners[0], corners[1])


def parse_instructions(text: str) -> Iterator[Instruction]:
    """Yield the instruction on each non-blank line."""
    for line in text.splitlines():
        if line.strip():
            yield Instruction.parse(line)


def part1(text: str) -> int:
    """Number of lights lit after all instructions."""
    rows = [0] * SIZE
    for instruction in parse_instructions(text):
        (x0, y0), (x1, y1) = instruction.start, instruction.end
        if y1 < y0:
            continue
        mask = ((1 << (y1 - y0 + 1)) - 1) << y0
        for x in range(x0, x1 + 1):
            if instruction.action is Action.TOGGLE:
                rows[x] ^= mask
            elif instruction.action is Action.ON:
                rows[x] |= mask
            else:
                rows[x] &= ~mask
    return sum(row.bit_count() for row in rows)


def part2(text: str) -> int:
    """Total brightness after all instructions."""
    grid = [[0] * SIZE for _ in range(SIZE)]
    for instruction in parse_instructions(text):
        (x0, y0), (x1, y1) = instruction.start, instruction.end
        for row in grid[x0 : x1 + 1]:
            span = row[y0 : y1 + 1]
            if instruction.action is Action.TOGGLE:
                row[y0 : y1 + 1] = [value + 2 for value in span]
            elif instruction.action is Action.ON:
                row[y0 : y1 + 1] = [value + 1 for value in span]
            else:
                row[y0 : y1 + 1] = [max(0, value - 1) for value in span]
    return sum(map(sum, grid))