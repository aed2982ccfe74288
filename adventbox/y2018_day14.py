"""Chocolate chart recipe scores produced by two elves."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import islice

_SCORES_AFTER = 10


def recipes() -> Iterator[int]:
    """Yield the recipe scores in order, forever."""
    scores = [3, 7]
    yield from scores
    first, second = 0, 1
    while True:
        total = scores[first] + scores[second]
        digits = divmod(total, 10) if total >= 10 else (total,)
        for digit in digits:
            scores.append(digit)
            yield digit
        first = (first + scores[first] + 1) % len(scores)
        second = (second + scores[second] + 1) % len(scores)


def part1(count: int) -> str:
    """The ten scores that follow the first `count` recipes."""
    if count < 0:
        raise ValueError("count cannot be negative")
    return "".join(str(score) for score in islice(recipes(), count, count + _SCORES_AFTER))


def part2(value: int) -> int:
    """Number of recipes before the digits of `value` first appear."""
    if value < 0:
        raise ValueError("value cannot be negative")
    target = deque(int(digit) for digit in str(value))
    window: deque[int] = deque(maxlen=len(target))
    for index, score in enumerate(recipes()):
        window.append(score)
        if window == target:
            return index - len(target) + 1
    raise AssertionError("unreachable")