"""Find the index that produces the 64th one-time-pad key from salted MD5 hashes."""

from __future__ import annotations

import hashlib
from collections import defaultdict, deque
from itertools import count, groupby

KEYS = 64
WINDOW = 1000
STRETCH = 2016


def _digest(salt: str, index: int, stretch: int) -> str:
    digest = hashlib.md5(f"{salt}{index}".encode()).hexdigest()
    for _ in range(stretch):
        digest = hashlib.md5(digest.encode()).hexdigest()
    return digest


def find_key_index(salt: str, stretch: int = 0) -> int:
    """Index of the 64th key, hashing each digest `stretch` extra times."""
    if stretch < 0:
        raise ValueError("stretch cannot be negative")
    candidates: defaultdict[str, deque[int]] = defaultdict(deque)
    keys: list[int] = []
    for index in count():
        if len(keys) >= KEYS:
            break
        tripled = False
        for char, group in groupby(_digest(salt, index, stretch)):
            run = sum(1 for _ in group)
            if run >= 5:
                pending = candidates[char]
                while pending:
                    candidate = pending.popleft()
                    if index - candidate <= WINDOW:
                        keys.append(candidate)
            if run >= 3 and not tripled:
                candidates[char].append(index)
                tripled = True
    return sorted(keys)[KEYS - 1]


def _salt(text: str) -> str:
    lines = text.splitlines()
    return lines[0] if lines else ""


def part1(text: str) -> int:
    """Index of the 64th key with plain hashes."""
    return find_key_index(_salt(text), 0)


def part2(text: str) -> int:
    """Index of the 64th key with stretched hashes."""
    return find_key_index(_salt(text), STRETCH)