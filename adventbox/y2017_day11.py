"""Distance on a hex grid after following a path of steps."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_MOVES = {
    "n": (0, -1, 1),
    "ne": (1, -1, 0),
    "se": (1, 0, -1),
    "s": (0, 1, -1),
    "sw": (-1, 1, 0),
    "nw": (-1, 0, 1),
}


def walk(steps: Iterable[str]) -> Iterator[int]:
    """Yield the distance from the start after each step."""
    q = r = s = 0
    for step in steps:
        try:
            dq, dr, ds = _MOVES[step]
        except KeyError:
            raise ValueError(f"unknown direction {step!r}") from None
        q, r, s = q + dq, r + dr, s + ds
        yield (abs(q) + abs(r) + abs(s)) // 2


def _steps(text: str) -> list[str]:
    return [token.strip() for token in text.split(",") if token.strip()]


def part1(text: str) -> int:
    """Distance at the end of the path."""
    distance = 0
    for distance in walk(_steps(text)):
        pass
    return distance


def part2(text: str) -> int:
    """Furthest distance reached along the path."""
    return max(walk(_steps(text)), default=0)