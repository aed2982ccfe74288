"""Check which IPv7 addresses support TLS (ABBA) and SSL (ABA/BAB)."""

from __future__ import annotations

from collections.abc import Iterator


def _segments(address: str) -> Iterator[tuple[str, bool]]:
    """Yield each run of characters between brackets, flagged when it lies inside brackets."""
    inside = False
    current: list[str] = []
    for char in address:
        if char in "[]":
            yield "".join(current), inside
            current = []
            inside = char == "["
        else:
            current.append(char)
    yield "".join(current), inside


def _has_abba(segment: str) -> bool:
    return any(
        a == d and b == c and a != b
        for a, b, c, d in zip(segment, segment[1:], segment[2:], segment[3:])
    )


def _abas(segment: str) -> set[str]:
    return {
        a + b + c
        for a, b, c in zip(segment, segment[1:], segment[2:])
        if a == c and a != b
    }


def supports_tls(address: str) -> bool:
    """True when an ABBA appears outside brackets and none appears inside them."""
    found = False
    for segment, inside in _segments(address):
        if _has_abba(segment):
            if inside:
                return False
            found = True
    return found


def supports_ssl(address: str) -> bool:
    """True when an ABA outside brackets has its matching BAB inside brackets."""
    outside: set[str] = set()
    inside: set[str] = set()
    for segment, in_brackets in _segments(address):
        (inside if in_brackets else outside).update(_abas(segment))
    return any(aba[1] + aba[0] + aba[1] in inside for aba in outside)


def part1(text: str) -> int:
    """Number of addresses supporting TLS."""
    return sum(supports_tls(line) for line in text.splitlines())


def part2(text: str) -> int:
    """Number of addresses supporting SSL."""
    return sum(supports_ssl(line) for line in text.splitlines())