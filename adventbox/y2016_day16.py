"""Fill a disk with dragon-curve data and compute its checksum."""

from __future__ import annotations

_FLIP = str.maketrans("01", "10")
_DROP_BITS = str.maketrans("", "", "01")


def _check_binary(data: str) -> None:
    if data.translate(_DROP_BITS):
        raise ValueError("data may only contain the characters 0 and 1")


def dragon_fill(seed: str, size: int) -> str:
    """Grow the seed with the dragon curve until it fills `size` characters."""
    _check_binary(seed)
    data = seed
    while len(data) < size:
        data = data + "0" + data[::-1].translate(_FLIP)
    return data[:size]


def checksum(data: str) -> str:
    """Pairwise reduce the data (equal pair gives 1) until its length is odd."""
    if not data:
        raise ValueError("cannot take the checksum of empty data")
    _check_binary(data)
    length = len(data)
    if length % 2:
        return data
    # Each output character folds a block of the largest power of two dividing the length.
    chunk = length & -length
    return "".join(
        "1" if data.count("1", start, start + chunk) % 2 == 0 else "0"
        for start in range(0, length, chunk)
    )


def solve(text: str, disk_size: int) -> str:
    """Checksum of the disk filled from the seed on the first line."""
    lines = text.splitlines()
    seed = lines[0] if lines else ""
    return checksum(dragon_fill(seed, disk_size))