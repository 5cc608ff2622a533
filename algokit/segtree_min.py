"""Segment tree answering range-minimum queries with point assignment."""

from collections.abc import Iterable
from typing import Any

__all__ = ["MinSegmentTree"]


class MinSegmentTree:
    """Range minimum over a sequence whose values can be reassigned."""

    def __init__(self, values: Iterable) -> None:
        items = list(values)
        if not items:
            raise ValueError("values must not be empty")
        self._n = len(items)
        self._tree: list[Any] = [None] * (4 * self._n)
        self._build(0, 0, self._n - 1, items)

    def _build(self, x: int, lo: int, hi: int, items: list) -> None:
        if lo == hi:
            self._tree[x] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * x + 1, lo, mid, items)
        self._build(2 * x + 2, mid + 1, hi, items)
        self._tree[x] = min(self._tree[2 * x + 1], self._tree[2 * x + 2])

    def _query(self, x: int, lo: int, hi: int, left: int, right: int) -> Any:
        if left <= lo and hi <= right:
            return self._tree[x]
        mid = (lo + hi) // 2
        if right <= mid:
            return self._query(2 * x + 1, lo, mid, left, right)
        if left > mid:
            return self._query(2 * x + 2, mid + 1, hi, left, right)
        return min(
            self._query(2 * x + 1, lo, mid, left, right),
            self._query(2 * x + 2, mid + 1, hi, left, right),
        )

    def query(self, left: int, right: int) -> Any:
        """Minimum of the values at indices ``left .. right`` inclusive."""
        if not 0 <= left <= right < self._n:
            raise IndexError(f"invalid range [{left}, {right}]")
        return self._query(0, 0, self._n - 1, left, right)

    def _update(self, x: int, lo: int, hi: int, index: int, value: Any) -> None:
        if lo == hi:
            self._tree[x] = value
            return
        mid = (lo + hi) // 2
        if index <= mid:
            self._update(2 * x + 1, lo, mid, index, value)
        else:
            self._update(2 * x + 2, mid + 1, hi, index, value)
        self._tree[x] = min(self._tree[2 * x + 1], self._tree[2 * x + 2])

    def update(self, index: int, value: Any) -> None:
        """Set the value at ``index``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        self._update(0, 0, self._n - 1, index, value)

    def __len__(self) -> int:
        return self._n