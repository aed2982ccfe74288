"""Balance sleigh packages and minimise the quantum entanglement of the first group."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import combinations

_NO_GROUP = 1


def parse_weights(text: str) -> list[int]:
    """Read one package weight per whitespace-separated token."""
    return [int(token) for token in text.split()]


def best_entanglement(weights: Sequence[int], groups: int) -> int:
    """Smallest product among the fewest packages weighing a `groups`-th of the total.

    A group whose product is 1 is not counted; when no group qualifies, 1 is returned.
    """
    if groups < 1:
        raise ValueError("the number of groups must be positive")
    target = sum(weights) // groups
    for size in range(1, len(weights) + 1):
        products = [
            math.prod(chosen)
            for chosen in combinations(weights, size)
            if sum(chosen) == target
        ]
        products = [product for product in products if product != _NO_GROUP]
        if products:
            return min(products)
    return _NO_GROUP


def part1(text: str) -> int:
    """Best entanglement with three groups."""
    return best_entanglement(parse_weights(text), 3)


def part2(text: str) -> int:
    """Best entanglement with four groups."""
    return best_entanglement(parse_weights(text), 4)