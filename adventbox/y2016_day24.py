"""Shortest route through a duct maze that visits every numbered location."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from itertools import permutations

_OPEN = "."
_WALL = "#"


def _locations(board: Sequence[str]) -> dict[int, tuple[int, int]]:
    locations: dict[int, tuple[int, int]] = {}
    for row, line in enumerate(board):
        for col, char in enumerate(line):
            if char in (_OPEN, _WALL):
                continue
            if not char.isdigit():
                raise ValueError(f"unexpected character {char!r} in the maze")
            number = int(char)
            if number in locations:
                raise ValueError(f"location {number} appears more than once")
            locations[number] = (row, col)
    if sorted(locations) != list(range(len(locations))):
        raise ValueError("locations must be numbered from 0 without gaps")
    return locations


def _reachable(board: Sequence[str], start: tuple[int, int]) -> dict[tuple[int, int], int]:
    distances = {start: 0}
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        for cell in ((row, col + 1), (row, col - 1), (row + 1, col), (row - 1, col)):
            r, c = cell
            if cell in distances or not 0 <= r < len(board) or not 0 <= c < len(board[r]):
                continue
            if board[r][c] == _WALL:
                continue
            distances[cell] = distances[row, col] + 1
            queue.append(cell)
    return distances


def distance_matrix(board: Sequence[str]) -> list[list[int]]:
    """Steps between every pair of numbered locations; 0 where no path exists."""
    locations = _locations(board)
    size = len(locations)
    matrix = [[0] * size for _ in range(size)]
    positions = {cell: number for number, cell in locations.items()}
    for number, start in locations.items():
        for cell, steps in _reachable(board, start).items():
            other = positions.get(cell)
            if other is not None and other != number:
                matrix[number][other] = matrix[other][number] = steps
    return matrix


def shortest_tour(distances: Sequence[Sequence[int]], return_home: bool) -> int:
    """Fewest steps visiting every location from location 0, optionally returning to it."""
    size = len(distances)
    if size == 0:
        raise ValueError("there are no locations to visit")
    best: int | None = None
    for order in permutations(range(1, size)):
        path = (0, *order)
        legs = [distances[a][b] for a, b in zip(path, path[1:])]
        if not all(legs):
            continue
        total = sum(legs)
        if return_home:
            total += distances[path[-1]][0]
        best = total if best is None else min(best, total)
    if best is None:
        raise ValueError("no route visits every location")
    return best


def _board(text: str) -> list[str]:
    return [line for line in text.splitlines() if line]


def part1(text: str) -> int:
    """Fewest steps to visit every location."""
    return shortest_tour(distance_matrix(_board(text)), False)


def part2(text: str) -> int:
    """Fewest steps to visit every location and come back to 0."""
    return shortest_tour(distance_matrix(_board(text)), True)