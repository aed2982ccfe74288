"""Find the lowest number that, appended to a secret, gives an MD5 hash with leading zeros."""

from __future__ import annotations

import hashlib
from itertools import count


def mine(secret: str, zeros: int) -> int:
    """Return the lowest non-negative n whose hash of secret + n starts with `zeros` zeros."""
    if zeros < 0:
        raise ValueError("the number of leading zeros cannot be negative")
    prefix = "0" * zeros
    for number in count():
        digest = hashlib.md5(f"{secret}{number}".encode()).hexdigest()
        if digest.startswith(prefix):
            return number
    raise AssertionError("unreachable")


def _secret(text: str) -> str:
    lines = text.splitlines()
    return lines[0] if lines else ""


def part1(text: str) -> int:
    """Lowest number giving five leading zeros."""
    return mine(_secret(text), 5)


def part2(text: str) -> int:
    """Lowest number giving six leading zeros."""
    return mine(_secret(text), 6)