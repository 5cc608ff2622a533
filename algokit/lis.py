"""Longest strictly increasing subsequence with reconstruction."""

from bisect import bisect_left
from collections.abc import Sequence

__all__ = ["lis_indices", "lis_length", "lis_sequence"]


def _follow(start: int, parent: list[int]) -> list[int]:
    chain = []
    idx = start
    while idx != -1:
        chain.append(idx)
        idx = parent[idx]
    chain.reverse()
    return chain


def lis_indices(values: Sequence) -> list[int]:
    """Indices of one longest strictly increasing subsequence, in order."""
    tails: list = []
    tail_indices: list[int] = []
    parent = [-1] * len(values)
    for i, value in enumerate(values):
        pos = bisect_left(tails, value)
        parent[i] = tail_indices[pos - 1] if pos else -1
        if pos == len(tails):
            tails.append(value)
            tail_indices.append(i)
        else:
            tails[pos] = value
            tail_indices[pos] = i
    if not tail_indices:
        return []
    return _follow(tail_indices[-1], parent)


def lis_length(values: Sequence) -> int:
    """Length of the longest strictly increasing subsequence."""
    return len(lis_indices(values))


def lis_sequence(values: Sequence) -> list:
    """Values of one longest strictly increasing subsequence.

    When a value equal to one already kept appears again, the earlier
    occurrence is kept.
    """
    tails: list = []
    tail_indices: list[int] = []
    parent = [-1] * len(values)
    for i, value in enumerate(values):
        pos = bisect_left(tails, value)
        if pos < len(tails) and tails[pos] == value:
            continue
        parent[i] = tail_indices[pos - 1] if pos else -1
        if pos == len(tails):
            tails.append(value)
            tail_indices.append(i)
        else:
            tails[pos] = value
            tail_indices[pos] = i
    if not tail_indices:
        return []
    return [values[idx] for idx in _follow(tail_indices[-1], parent)]