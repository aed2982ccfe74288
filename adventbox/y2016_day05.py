"""Derive a door password from MD5 hashes of the door id and an increasing index."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Iterator
from itertools import count, islice

LENGTH = 8


def interesting_hashes(door_id: str) -> Iterator[str]:
    """Yield, in index order, the hex digests that start with five zeros."""
    for index in count():
        digest = hashlib.md5(f"{door_id}{index}".encode()).hexdigest()
        if digest.startswith("00000"):
            yield digest


def _first_password(digests: Iterable[str]) -> str:
    return "".join(digest[5] for digest in islice(digests, LENGTH))


def _positional_password(digests: Iterable[str]) -> str:
    slots: list[str | None] = [None] * LENGTH
    for digest in digests:
        position = digest[5]
        if "0" <= position < str(LENGTH) and slots[int(position)] is None:
            slots[int(position)] = digest[6]
            if all(slot is not None for slot in slots):
                return "".join(slots)  # type: ignore[arg-type]
    raise ValueError("ran out of hashes before the password was complete")


def _door_id(text: str) -> str:
    tokens = text.split()
    return tokens[0] if tokens else ""


def part1(text: str) -> str:
    """Password from the sixth character of the first eight interesting hashes."""
    return _first_password(interesting_hashes(_door_id(text)))


def part2(text: str) -> str:
    """Password whose sixth character gives a position and seventh its value."""
    return _positional_password(interesting_hashes(_door_id(text)))