"""Segment tree with range addition and range-maximum queries."""

from collections.abc import Iterable

__all__ = ["LazyMaxTree"]


class LazyMaxTree:
    """Range maximum over a sequence, with point assignment and range addition."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("values must not be empty")
        self._n = len(items)
        self._max = [0] * (4 * self._n)
        self._pending = [0] * (4 * self._n)
        self._build(0, 0, self._n - 1, items)

    def _build(self, x: int, lo: int, hi: int, items: list[int]) -> None:
        if lo == hi:
            self._max[x] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * x + 1, lo, mid, items)
        self._build(2 * x + 2, mid + 1, hi, items)
        self._max[x] = max(self._max[2 * x + 1], self._max[2 * x + 2])

    def _add(self, x: int, lo: int, hi: int, delta: int) -> None:
        self._max[x] += delta
        if lo != hi:
            self._pending[x] += delta

    def _push(self, x: int, lo: int, hi: int) -> None:
        delta = self._pending[x]
        if delta:
            mid = (lo + hi) // 2
            self._add(2 * x + 1, lo, mid, delta)
            self._add(2 * x + 2, mid + 1, hi, delta)
            self._pending[x] = 0

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._n:
            raise IndexError(f"invalid range [{left}, {right}]")

    def _query(self, x: int, lo: int, hi: int, left: int, right: int) -> int:
        if left <= lo and hi <= right:
            return self._max[x]
        self._push(x, lo, hi)
        mid = (lo + hi) // 2
        if right <= mid:
            return self._query(2 * x + 1, lo, mid, left, right)
        if left > mid:
            return self._query(2 * x + 2, mid + 1, hi, left, right)
        return max(
            self._query(2 * x + 1, lo, mid, left, right),
            self._query(2 * x + 2, mid + 1, hi, left, right),
        )

    def query(self, left: int, right: int) -> int:
        """Maximum of the values at indices ``left .. right`` inclusive."""
        self._check(left, right)
        return self._query(0, 0, self._n - 1, left, right)

    def _update(self, x: int, lo: int, hi: int, index: int, value: int) -> None:
        if lo == hi:
            self._max[x] = value
            return
        self._push(x, lo, hi)
        mid = (lo + hi) // 2
        if index <= mid:
            self._update(2 * x + 1, lo, mid, index, value)
        else:
            self._update(2 * x + 2, mid + 1, hi, index, value)
        self._max[x] = max(self._max[2 * x + 1], self._max[2 * x + 2])

    def update(self, index: int, value: int) -> None:
        """Set the value at ``index``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        self._update(0, 0, self._n - 1, index, value)

    def _add_range(
        self, x: int, lo: int, hi: int, left: int, right: int, delta: int
    ) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._add(x, lo, hi, delta)
            return
        self._push(x, lo, hi)
        mid = (lo + hi) // 2
        self._add_range(2 * x + 1, lo, mid, left, right, delta)
        self._add_range(2 * x + 2, mid + 1, hi, left, right, delta)
        self._max[x] = max(self._max[2 * x + 1], self._max[2 * x + 2])

    def add_range(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every value at indices ``left .. right`` inclusive."""
        self._check(left, right)
        self._add_range(0, 0, self._n - 1, left, right, delta)

    def __len__(self) -> int:
        return self._n