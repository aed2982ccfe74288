"""Judge how often two pseudo-random generators agree on their lowest 16 bits."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice

DIVISOR = 2147483647
FACTOR_A = 16807
FACTOR_B = 48271
PAIRS = 40_000_000
PICKY_PAIRS = 5_000_000
_LOW_BITS = 0xFFFF


def parse_seeds(text: str) -> tuple[int, int]:
    """Starting values of generators A and B from lines like "Generator A starts with 65"."""
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("two generator lines are needed")
    seeds = []
    for line in lines[:2]:
        tokens = line.split()
        if len(tokens) < 5:
            raise ValueError(f"malformed generator line: {line!r}")
        seeds.append(int(tokens[4]))
    return seeds[0], seeds[1]


def generator(value: int, factor: int, multiple: int = 1) -> Iterator[int]:
    """Yield successive values, keeping only multiples of `multiple`."""
    while True:
        value = value * factor % DIVISOR
        if value % multiple == 0:
            yield value


def judge(a: int, b: int, pairs: int, picky: bool) -> int:
    """Number of the first `pairs` pairs whose lowest 16 bits match."""
    gen_a = generator(a, FACTOR_A, 4 if picky else 1)
    gen_b = generator(b, FACTOR_B, 8 if picky else 1)
    return sum(((x ^ y) & _LOW_BITS) == 0 for x, y in islice(zip(gen_a, gen_b), pairs))


def part1(text: str) -> int:
    """Matches over forty million pairs."""
    return judge(*parse_seeds(text), PAIRS, False)


def part2(text: str) -> int:
    """Matches over five million pairs from picky generators."""
    return judge(*parse_seeds(text), PICKY_PAIRS, True)