"""Prefix function (longest proper prefix that is also a suffix) and KMP search."""

from collections.abc import Sequence

__all__ = ["lps_naive", "lps", "count_matches"]


def lps_naive(pattern: Sequence) -> list[int]:
    """Prefix function by direct comparison of every prefix with every suffix.

    Entry ``i`` is the length of the longest proper prefix of
    ``pattern[:i + 1]`` that is also a suffix of it.
    """
    return [
        max(
            (j for j in range(1, i + 1) if pattern[:j] == pattern[i - j + 1 : i + 1]),
            default=0,
        )
        for i in range(len(pattern))
    ]


def lps(pattern: Sequence) -> list[int]:
    """Prefix function computed in linear time."""
    table = [0] * len(pattern)
    length = 0
    for i, item in enumerate(pattern):
        if i == 0:
            continue
        while length > 0 and item != pattern[length]:
            length = table[length - 1]
        if item == pattern[length]:
            length += 1
        table[i] = length
    return table


def count_matches(pattern: Sequence, text: Sequence) -> int:
    """Count occurrences of ``pattern`` in ``text``, overlapping ones included."""
    if len(pattern) == 0:
        raise ValueError("pattern must not be empty")
    table = lps(pattern)
    matched = 0
    count = 0
    for item in text:
        while matched > 0 and item != pattern[matched]:
            matched = table[matched - 1]
        if item == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            count += 1
            matched = table[matched - 1]
    return count