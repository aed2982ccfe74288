"""Count passphrases with no repeated words, or no repeated anagrams."""

from __future__ import annotations


def _all_distinct(words: list[str]) -> bool:
    return len(set(words)) == len(words)


def is_valid(passphrase: str) -> bool:
    """True when no word appears twice."""
    return _all_distinct(passphrase.split())


def is_valid_anagram(passphrase: str) -> bool:
    """True when no two words are anagrams of each other."""
    return _all_distinct(["".join(sorted(word)) for word in passphrase.split()])


def part1(text: str) -> int:
    """Number of passphrases without repeated words."""
    return sum(is_valid(line) for line in text.splitlines())


def part2(text: str) -> int:
    """Number of passphrases without repeated anagrams."""
    return sum(is_valid_anagram(line) for line in text.splitlines())