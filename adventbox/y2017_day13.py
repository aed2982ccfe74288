"""Severity of crossing a packet-scanner firewall, and the delay that avoids capture."""

from __future__ import annotations

from collections.abc import Mapping
from itertools import count


def parse_firewall(text: str) -> dict[int, int]:
    """Map each layer depth to its scanner range."""
    firewall: dict[int, int] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        depth, sep, scan_range = line.partition(":")
        if not sep:
            raise ValueError(f"malformed layer: {line!r}")
        size = int(scan_range)
        if size == 0:
            continue
        if size < 2:
            raise ValueError(f"scanner range must be at least 2: {line!r}")
        firewall[int(depth)] = size
    return firewall


def _caught_layers(firewall: Mapping[int, int], delay: int) -> list[tuple[int, int]]:
    return [
        (depth, size)
        for depth, size in firewall.items()
        if (depth + delay) % (2 * (size - 1)) == 0
    ]


def severity(firewall: Mapping[int, int], delay: int) -> int:
    """Sum of depth times range over the layers whose scanner catches the packet."""
    return sum(depth * size for depth, size in _caught_layers(firewall, delay))


def is_caught(firewall: Mapping[int, int], delay: int) -> bool:
    """True when any scanner catches a packet leaving after `delay` picoseconds."""
    return bool(_caught_layers(firewall, delay))


def part1(text: str, delay: int = 0) -> int:
    """Severity of the trip after the given delay."""
    return severity(parse_firewall(text), delay)


def part2(text: str) -> int:
    """Smallest delay that crosses the firewall uncaught."""
    firewall = parse_firewall(text)
    return next(delay for delay in count() if not is_caught(firewall, delay))