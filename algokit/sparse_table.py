"""Sparse table answering range-maximum queries by index."""

from collections.abc import Iterable

__all__ = ["SparseTable"]


class SparseTable:
    """Static range-maximum structure; queries return the index of a maximum."""

    def __init__(self, values: Iterable) -> None:
        self._values = list(values)
        n = len(self._values)
        self._levels: list[list[int]] = [list(range(n))]
        width = 1
        while 2 * width <= n:
            previous = self._levels[-1]
            self._levels.append(
                [
                    self._better(previous[i], previous[i + width])
                    for i in range(n - 2 * width + 1)
                ]
            )
            width *= 2

    def _better(self, a: int, b: int) -> int:
        return a if self._values[a] > self._values[b] else b

    def query(self, left: int, right: int) -> int:
        """Index of the maximum in ``values[left:right + 1]``."""
        if not 0 <= left <= right < len(self._values):
            raise IndexError(f"invalid range [{left}, {right}]")
        level = (right - left + 1).bit_length() - 1
        row = self._levels[level]
        return self._better(row[left], row[right - (1 << level) + 1])