"""Find the best-scoring cookie recipe from a fixed number of teaspoons."""

from __future__ import annotations

import math
import re
from collections.abc import Iterator, Sequence

TEASPOONS = 100
TARGET_CALORIES = 500
_PROPERTIES = 5
_NUMBER = re.compile(r"-?\d+")

Ingredient = tuple[int, int, int, int, int]


def parse_ingredients(text: str) -> list[Ingredient]:
    """Read capacity, durability, flavor, texture and calories of each ingredient."""
    ingredients: list[Ingredient] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        values = [int(n) for n in _NUMBER.findall(line)]
        if len(values) < _PROPERTIES:
            raise ValueError(f"malformed ingredient line: {line!r}")
        ingredients.append(tuple(values[:_PROPERTIES]))  # type: ignore[arg-type]
    return ingredients


def score(ingredients: Sequence[Ingredient], amounts: Sequence[int], calories: int | None) -> int:
    """Score of a recipe; zero if any property is not positive or calories miss the target."""
    totals = [
        sum(prop * amount for prop, amount in zip(column, amounts))
        for column in zip(*ingredients)
    ]
    *qualities, energy = totals
    if calories is not None and energy != calories:
        return 0
    if any(quality <= 0 for quality in qualities):
        return 0
    return math.prod(qualities)


def _splits(total: int, parts: int) -> Iterator[tuple[int, ...]]:
    if parts == 1:
        yield (total,)
        return
    for first in range(total + 1):
        for rest in _splits(total - first, parts - 1):
            yield (first, *rest)


def best_score(ingredients: Sequence[Ingredient], teaspoons: int, calories: int | None) -> int:
    """Highest score over every way to share the teaspoons between the ingredients."""
    if not ingredients:
        raise ValueError("at least one ingredient is needed")
    return max(
        (score(ingredients, amounts, calories) for amounts in _splits(teaspoons, len(ingredients))),
        default=0,
    )


def part1(text: str) -> int:
    """Best score with no calorie constraint."""
    return best_score(parse_ingredients(text), TEASPOONS, None)


def part2(text: str) -> int:
    """Best score among recipes with exactly 500 calories."""
    return best_score(parse_ingredients(text), TEASPOONS, TARGET_CALORIES)