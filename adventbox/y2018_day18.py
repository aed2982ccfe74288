"""Simulate a lumber collection area and compute its resource value."""

from __future__ import annotations

from collections import Counter

Board = tuple[str, ...]

_OPEN = "."
_TREES = "|"
_LUMBERYARD = "#"


def _neighbours(board: Board, row: int, col: int) -> Counter[str]:
    return Counter(
        board[r][c]
        for r in range(max(0, row - 1), min(len(board), row + 2))
        for c in range(max(0, col - 1), min(len(board[r]), col + 2))
        if (r, c) != (row, col)
    )


def _grow(acre: str, around: Counter[str]) -> str:
    if acre == _OPEN:
        return _TREES if around[_TREES] >= 3 else _OPEN
    if acre == _TREES:
        return _LUMBERYARD if around[_LUMBERYARD] >= 3 else _TREES
    if acre == _LUMBERYARD:
        return _LUMBERYARD if around[_LUMBERYARD] and around[_TREES] else _OPEN
    return acre


def step(board: Board) -> Board:
    """The area one minute later."""
    return tuple(
        "".join(_grow(acre, _neighbours(board, row, col)) for col, acre in enumerate(line))
        for row, line in enumerate(board)
    )


def solve(text: str, minutes: int) -> int:
    """Wooded acres times lumberyards after `minutes` minutes, skipping repeated cycles."""
    if minutes < 0:
        raise ValueError("minutes cannot be negative")
    board: Board = tuple(line for line in text.splitlines() if line)
    if not board:
        raise ValueError("the area is empty")
    seen = {board: 0}
    cycled = False
    minute = 0
    while minute < minutes:
        minute += 1
        board = step(board)
        if not cycled and board in seen:
            cycle = minute - seen[board]
            minute += (minutes - minute) // cycle * cycle
            cycled = True
        else:
            seen[board] = minute
    trees = sum(line.count(_TREES) for line in board)
    lumberyards = sum(line.count(_LUMBERYARD) for line in board)
    return trees * lumberyards