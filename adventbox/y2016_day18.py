"""Count safe tiles in a room whose trap rows follow from the row above."""

from __future__ import annotations


def next_row(row: str) -> str:
    """Row below: a tile is a trap exactly when its left and right neighbours differ."""
    padded = f".{row}."
    return "".join(
        "^" if left != right else "."
        for left, right in zip(padded, padded[2:])
    )


def count_safe(text: str, rows: int) -> int:
    """Number of safe tiles in the first `rows` rows, starting from the first line."""
    lines = text.splitlines()
    row = lines[0] if lines else ""
    total = row.count(".")
    for _ in range(rows - 1):
        row = next_row(row)
        total += row.count(".")
    return total