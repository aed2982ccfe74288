"""Build the strongest, and the longest then strongest, bridge from magnetic components."""

from __future__ import annotations

from collections.abc import Sequence

Component = tuple[int, int]


def parse_components(text: str) -> list[Component]:
    """Read "a/b" components, one per non-blank line."""
    components: list[Component] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        left, sep, right = line.partition("/")
        if not sep:
            raise ValueError(f"malformed component: {line!r}")
        components.append((int(left), int(right)))
    return components


def _extensions(components: Sequence[Component], used: set[int], port: int):
    """Yield (index, far port) for every unused component that fits `port`, both ways round."""
    for index, (a, b) in enumerate(components):
        if index in used:
            continue
        if a == port:
            yield index, b
        if b == port:
            yield index, a


def strongest(components: Sequence[Component]) -> int:
    """Strength of the strongest bridge starting from a zero port."""
    used: set[int] = set()

    def extend(port: int) -> int:
        best = 0
        for index, far in _extensions(components, used, port):
            used.add(index)
            best = max(best, sum(components[index]) + extend(far))
            used.discard(index)
        return best

    return extend(0)


def longest_strongest(components: Sequence[Component]) -> int:
    """Strength of the strongest among the longest bridges starting from a zero port."""
    used: set[int] = set()

    def extend(port: int) -> tuple[int, int]:
        best = (0, 0)
        for index, far in _extensions(components, used, port):
            used.add(index)
            length, strength = extend(far)
            best = max(best, (length + 1, strength + sum(components[index])))
            used.discard(index)
        return best

    return extend(0)[1]


def part1(text: str) -> int:
    """Strength of the strongest bridge."""
    return strongest(parse_components(text))


def part2(text: str) -> int:
    """Strength of the longest bridge, the strongest if several are longest."""
    return longest_strongest(parse_components(text))