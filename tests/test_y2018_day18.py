import pytest

from adventbox.y2018_day18 import solve, step

SAMPLE = """.#.#...|#.
.....#|##|
.|..|...#.
..|#.....#
#.#|||#|#|
...#.||...
.|....|...
||...#|.#|
|.||||..|.
...#.|..|.
"""


def test_sample_ten_minutes():
    assert solve(SAMPLE, 10) == 1147


def test_step_keeps_shape():
    board = tuple(SAMPLE.split())
    after = step(board)
    assert [len(line) for line in after] == [len(line) for line in board]


def test_open_ground_stays_open():
    board = ("...", "...", "...")
    assert step(board) == board


def test_cycle_skipping_matches_brute_force():
    board = tuple(SAMPLE.split())
    for _ in range(300):
        board = step(board)
    expected = sum(line.count("|") for line in board) * sum(line.count("#") for line in board)
    assert solve(SAMPLE, 300) == expected


def test_empty_area():
    with pytest.raises(ValueError):
        solve("", 1)