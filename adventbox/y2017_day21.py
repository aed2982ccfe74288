"""Grow a pixel art pattern with enhancement rules that match under rotation and flipping."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

Pattern = tuple[str, ...]
START: Pattern = (".#.", "..#", "###")


def _pattern(text: str) -> Pattern:
    return tuple(text.split("/"))


def parse_rules(text: str) -> dict[Pattern, Pattern]:
    """Map each input square to its replacement, from lines "a/b => c/d/e"."""
    rules: dict[Pattern, Pattern] = {}
    for line in text.splitlines():
        words = line.split()
        if not words:
            continue
        if len(words) != 3 or words[1] != "=>":
            raise ValueError(f"malformed rule: {line!r}")
        rules[_pattern(words[0])] = _pattern(words[2])
    return rules


def rotate(pattern: Pattern) -> Pattern:
    """Rotate the square a quarter turn clockwise."""
    return tuple("".join(column) for column in zip(*reversed(pattern)))


def flip(pattern: Pattern) -> Pattern:
    """Mirror the square left to right."""
    return tuple(row[::-1] for row in pattern)


def _variants(pattern: Pattern) -> Iterator[Pattern]:
    flipped = flip(pattern)
    yield pattern
    yield flipped
    for _ in range(3):
        pattern, flipped = rotate(pattern), rotate(flipped)
        yield pattern
        yield flipped


def enhance(pattern: Pattern, rules: Mapping[Pattern, Pattern]) -> Pattern:
    """Replacement for the square, trying every rotation and flip."""
    for variant in _variants(pattern):
        if variant in rules:
            return rules[variant]
    raise ValueError(f"no rule matches {'/'.join(pattern)}")


def _iterate(grid: Pattern, rules: Mapping[Pattern, Pattern]) -> Pattern:
    size = len(grid)
    if size % 2 == 0:
        step = 2
    elif size % 3 == 0:
        step = 3
    else:
        raise ValueError(f"cannot split a grid of size {size}")
    rows: list[str] = []
    for top in range(0, size, step):
        band = grid[top : top + step]
        blocks = [
            enhance(tuple(row[left : left + step] for row in band), rules)
            for left in range(0, size, step)
        ]
        rows.extend("".join(parts) for parts in zip(*blocks))
    return tuple(rows)


def solve(text: str, iterations: int) -> int:
    """Number of lit pixels after enhancing the start pattern `iterations` times."""
    if iterations < 0:
        raise ValueError("iterations cannot be negative")
    rules = parse_rules(text)
    grid = START
    for _ in range(iterations):
        grid = _iterate(grid, rules)
    return sum(row.count("#") for row in grid)