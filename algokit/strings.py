"""Small string puzzles: uniqueness checks and duplicate removal."""

from bisect import insort
from itertools import pairwise

__all__ = ["all_unique", "insertion_sorted", "all_unique_sorted", "remove_duplicates"]


def all_unique(text: str) -> bool:
    """True when no character occurs twice, checked with a set."""
    seen: set[str] = set()
    for ch in text:
        if ch in seen:
            return False
        seen.add(ch)
    return True


def insertion_sorted(text: str) -> str:
    """Characters of ``text`` ordered by a stable insertion sort."""
    chars: list[str] = []
    for ch in text:
        insort(chars, ch)
    return "".join(chars)


def all_unique_sorted(text: str) -> bool:
    """True when no character occurs twice, checked by sorting first."""
    if len(text) <= 1:
        return True
    return all(a != b for a, b in pairwise(insertion_sorted(text)))


def remove_duplicates(text: str) -> str:
    """Keep only the first occurrence of each character, in order."""
    return "".join(dict.fromkeys(text))