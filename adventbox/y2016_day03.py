"""Count valid triangles listed by rows or by columns."""

from __future__ import annotations


def is_triangle(a: int, b: int, c: int) -> bool:
    """True when the two shorter sides together exceed the longest."""
    short, middle, longest = sorted((a, b, c))
    return short + middle > longest


def _numbers(line: str) -> list[int]:
    return [int(token) for token in line.split()]


def part1(text: str) -> int:
    """Triangles read one per line."""
    count = 0
    for line in text.splitlines():
        if not line.strip():
            continue
        sides = _numbers(line)
        if len(sides) < 3:
            raise ValueError(f"expected three sides in {line!r}")
        count += is_triangle(*sides[:3])
    return count


def part2(text: str) -> int:
    """Triangles read down each column, three lines at a time."""
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) % 3:
        raise ValueError("the number of lines must be a multiple of three")
    count = 0
    for first in range(0, len(lines), 3):
        numbers = [n for line in lines[first : first + 3] for n in _numbers(line)]
        if len(numbers) != 9:
            raise ValueError("each line must hold three sides")
        count += sum(is_triangle(*numbers[column::3]) for column in range(3))
    return count