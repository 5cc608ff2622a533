"""Suffix array by prefix doubling."""

from collections.abc import Sequence
from itertools import pairwise

__all__ = ["suffix_array", "rank_array", "sorted_suffixes"]


def suffix_array(text: Sequence) -> list[int]:
    """Start positions of the suffixes of ``text`` in lexicographic order."""
    n = len(text)
    if n == 0:
        return []
    alphabet = {value: rank for rank, value in enumerate(sorted(set(text)))}
    rank = [alphabet[value] for value in text]
    order = list(range(n))
    step = 1
    while True:
        def key(i: int) -> tuple[int, int]:
            return rank[i], rank[i + step] if i + step < n else -1

        order.sort(key=key)
        new_rank = [0] * n
        current = 0
        for prev, idx in pairwise(order):
            if key(prev) != key(idx):
                current += 1
            new_rank[idx] = current
        rank = new_rank
        if current == n - 1:
            return order
        step *= 2


def rank_array(text: Sequence) -> list[int]:
    """Position of each suffix in the suffix array, indexed by start."""
    ranks = [0] * len(text)
    for position, start in enumerate(suffix_array(text)):
        ranks[start] = position
    return ranks


def sorted_suffixes(text: Sequence) -> list:
    """The suffixes of ``text`` themselves, in lexicographic order."""
    return [text[start:] for start in suffix_array(text)]