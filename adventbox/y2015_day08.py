"""Compare string literal lengths with their in-memory and re-encoded lengths."""

from __future__ import annotations


def memory_length(literal: str) -> int:
    """Number of characters the quoted literal stands for in memory."""
    body = iter(literal[1:-1])
    length = 0
    for char in body:
        if char == "\\":
            escaped = next(body, "")
            if escaped == "x":
                next(body, None)
                next(body, None)
        length += 1
    return length


def encoded_overhead(literal: str) -> int:
    """Extra characters needed to encode the literal as a new quoted string."""
    return 2 + literal.count('"') + literal.count("\\")


def part1(text: str) -> int:
    """Code characters minus in-memory characters over all lines."""
    return sum(len(line) - memory_length(line) for line in text.splitlines())


def part2(text: str) -> int:
    """Extra characters needed to encode every line."""
    return sum(encoded_overhead(line) for line in text.splitlines())