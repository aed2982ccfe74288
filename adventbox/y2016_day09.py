"""Compute lengths of data decompressed with repetition markers."""

from __future__ import annotations

import re

_MARKER = re.compile(r"\((\d+)x(\d+)\)")


def decompressed_length_v1(data: str) -> int:
    """Length after one pass; markers inside repeated data are not expanded. Spaces are skipped."""
    total = 0
    pos = 0
    while pos < len(data):
        if data[pos] == " ":
            pos += 1
            continue
        marker = _MARKER.match(data, pos)
        if marker:
            length, times = int(marker[1]), int(marker[2])
            total += length * times
            pos = marker.end() + length
            continue
        total += 1
        pos += 1
    return total


def _expanded(data: str, start: int, end: int) -> int:
    total = 0
    pos = start
    while pos < end:
        marker = _MARKER.match(data, pos, end)
        if marker:
            length, times = int(marker[1]), int(marker[2])
            inner = marker.end()
            total += times * _expanded(data, inner, min(inner + length, end))
            pos = inner + length
        else:
            total += 1
            pos += 1
    return total


def decompressed_length_v2(data: str) -> int:
    """Length when markers inside repeated data are expanded too. Whitespace is ignored."""
    compact = "".join(data.split())
    return _expanded(compact, 0, len(compact))


def _first_line(text: str) -> str:
    lines = text.splitlines()
    return lines[0] if lines else ""


def part1(text: str) -> int:
    """Decompressed length of the first line, version one."""
    return decompressed_length_v1(_first_line(text))


def part2(text: str) -> int:
    """Decompressed length of the first line, version two."""
    return decompressed_length_v2(_first_line(text))