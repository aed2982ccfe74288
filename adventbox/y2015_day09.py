"""Shortest and longest routes that visit every location exactly once."""

from __future__ import annotations

from collections.abc import Iterator

_NO_ROUTE = 999999


def parse_routes(text: str) -> dict[str, dict[str, int]]:
    """Map each location to its neighbours and the distance to each."""
    routes: dict[str, dict[str, int]] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        left, _, rest = line.partition(" to ")
        right, _, cost = rest.partition(" = ")
        distance = int(cost)
        routes.setdefault(left, {})[right] = distance
        routes.setdefault(right, {})[left] = distance
    return routes


def route_lengths(text: str) -> Iterator[int]:
    """Yield the length of every route that visits all locations."""
    routes = parse_routes(text)

    def extend(city: str, visited: frozenset[str], cost: int) -> Iterator[int]:
        for dest, distance in routes[city].items():
            if dest in visited:
                continue
            seen = visited | {dest}
            if len(seen) == len(routes):
                yield cost + distance
            else:
                yield from extend(dest, seen, cost + distance)

    for start in routes:
        yield from extend(start, frozenset({start}), 0)


def part1(text: str) -> int:
    """Length of the shortest complete route."""
    return min(route_lengths(text), default=_NO_ROUTE)


def part2(text: str) -> int:
    """Length of the longest complete route."""
    return max(route_lengths(text), default=0)