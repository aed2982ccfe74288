"""Count the ways to fill containers with an exact amount of eggnog."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

LITERS = 150


def parse_containers(text: str) -> list[int]:
    """Read one container capacity per whitespace-separated token."""
    return [int(token) for token in text.split()]


def _exact_fills(containers: Sequence[int], liters: int) -> Counter[int]:
    """Number of container subsets holding exactly `liters`, keyed by subset size."""
    ways: Counter[tuple[int, int]] = Counter({(0, 0): 1})
    for capacity in containers:
        grown = Counter(ways)
        for (used, total), count in ways.items():
            if total + capacity <= liters:
                grown[used + 1, total + capacity] += count
        ways = grown
    return Counter({used: count for (used, total), count in ways.items() if total == liters})


def count_combinations(containers: Sequence[int], liters: int) -> int:
    """Number of container combinations holding exactly `liters`."""
    return sum(_exact_fills(containers, liters).values())


def count_minimal_combinations(containers: Sequence[int], liters: int) -> int:
    """Number of exact combinations that use the fewest containers."""
    fills = _exact_fills(containers, liters)
    return fills[min(fills)] if fills else 0


def part1(text: str, liters: int = LITERS) -> int:
    """All exact combinations."""
    return count_combinations(parse_containers(text), liters)


def part2(text: str, liters: int = LITERS) -> int:
    """Exact combinations using the minimum number of containers."""
    return count_minimal_combinations(parse_containers(text), liters)