import pytest

from adventbox.y2016_day16 import checksum, dragon_fill, solve


def test_sample():
    assert solve("10000\n", 20) == "01100"


def test_dragon_fill_example():
    assert dragon_fill("111100001010", 25) == "1111000010100101011110000"


def test_checksum_example():
    assert checksum("110010110100") == "100"


@pytest.mark.parametrize("size", [1, 5, 20, 100, 272])
def test_fill_has_requested_size_and_keeps_seed(size):
    seed = "10000"
    data = dragon_fill(seed, size)
    assert len(data) == size
    assert data[: min(size, len(seed))] == seed[:size]


def test_fill_puts_separator_after_seed():
    seed = "1101"
    assert dragon_fill(seed, 20)[len(seed)] == "0"


def test_fill_short_size_truncates():
    assert dragon_fill("10000", 3) == "100"


def test_checksum_of_odd_length_is_unchanged():
    assert checksum("10101") == "10101"


@pytest.mark.parametrize("size", [20, 272, 1024])
def test_checksum_length_is_odd(size):
    assert len(checksum(dragon_fill("10000", size))) % 2 == 1


def test_rejects_non_binary():
    with pytest.raises(ValueError):
        dragon_fill("012", 10)
    with pytest.raises(ValueError):
        checksum("ab")


def test_rejects_empty_checksum():
    with pytest.raises(ValueError):
        checksum("")