"""Find addresses not covered by a blacklist of inclusive IP ranges."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

ADDRESSES = 4294967296


def parse_ranges(text: str) -> list[tuple[int, int]]:
    """Read "low-high" ranges, one per non-blank line."""
    ranges: list[tuple[int, int]] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        low, sep, high = line.partition("-")
        if not sep:
            raise ValueError(f"malformed range: {line!r}")
        ranges.append((int(low), int(high)))
    return ranges


def lowest_allowed(ranges: Iterable[tuple[int, int]]) -> int:
    """Lowest address not covered by any range."""
    lowest = 0
    for start, end in sorted(ranges):
        if lowest < start:
            break
        lowest = max(lowest, end + 1)
    return lowest


def count_allowed(ranges: Iterable[tuple[int, int]]) -> int:
    """Number of addresses below 2**32 not covered by any range."""
    pending = deque(sorted(ranges))
    current = 0
    allowed = 0
    while pending:
        while pending and current >= pending[0][0]:
            current = max(current, pending.popleft()[1] + 1)
        if pending:
            start, end = pending.popleft()
            allowed += start - current
            current = max(current, end + 1)
        else:
            allowed += ADDRESSES - current
    return allowed


def part1(text: str) -> int:
    """Lowest allowed address."""
    return lowest_allowed(parse_ranges(text))


def part2(text: str) -> int:
    """Number of allowed addresses."""
    return count_allowed(parse_ranges(text))