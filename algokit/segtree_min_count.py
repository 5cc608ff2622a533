"""Segment tree with range addition, sums, minima and minimum counts."""

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["RangeSummary", "RangeAddMinCountTree"]


@dataclass(frozen=True)
class RangeSummary:
    """Sum, minimum and number of positions holding the minimum over a range."""

    total: int
    minimum: int
    min_count: int

    def merge(self, other: "RangeSummary") -> "RangeSummary":
        """Summary of this range followed by ``other``."""
        if self.minimum < other.minimum:
            minimum, count = self.minimum, self.min_count
        elif other.minimum < self.minimum:
            minimum, count = other.minimum, other.min_count
        else:
            minimum, count = self.minimum, self.min_count + other.min_count
        return RangeSummary(self.total + other.total, minimum, count)


class RangeAddMinCountTree:
    """Supports adding to ranges and summarising ranges."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("values must not be empty")
        self._n = len(items)
        size = 4 * self._n
        self._total = [0] * size
        self._min = [0] * size
        self._count = [0] * size
        self._pending = [0] * size
        self._build(0, 0, self._n - 1, items)

    def _pull(self, x: int) -> None:
        a, b = 2 * x + 1, 2 * x + 2
        self._total[x] = self._total[a] + self._total[b]
        if self._min[a] < self._min[b]:
            self._min[x], self._count[x] = self._min[a], self._count[a]
        elif self._min[b] < self._min[a]:
            self._min[x], self._count[x] = self._min[b], self._count[b]
        else:
            self._min[x], self._count[x] = self._min[a], self._count[a] + self._count[b]

    def _build(self, x: int, lo: int, hi: int, items: list[int]) -> None:
        if lo == hi:
            self._total[x] = self._min[x] = items[lo]
            self._count[x] = 1
            return
        mid = (lo + hi) // 2
        self._build(2 * x + 1, lo, mid, items)
        self._build(2 * x + 2, mid + 1, hi, items)
        self._pull(x)

    def _add(self, x: int, lo: int, hi: int, delta: int) -> None:
        self._total[x] += (hi - lo + 1) * delta
        self._min[x] += delta
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

    def _query(
        self, x: int, lo: int, hi: int, left: int, right: int
    ) -> RangeSummary | None:
        if right < lo or hi < left:
            return None
        if left <= lo and hi <= right:
            return RangeSummary(self._total[x], self._min[x], self._count[x])
        self._push(x, lo, hi)
        mid = (lo + hi) // 2
        first = self._query(2 * x + 1, lo, mid, left, right)
        second = self._query(2 * x + 2, mid + 1, hi, left, right)
        if first is None:
            return second
        if second is None:
            return first
        return first.merge(second)

    def query(self, left: int, right: int) -> RangeSummary:
        """Summary of indices ``left .. right`` inclusive."""
        self._check(left, right)
        result = self._query(0, 0, self._n - 1, left, right)
        assert result is not None
        return result

    def update(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at ``index``."""
        self.update_range(index, index, delta)

    def _update_range(
        self, x: int, lo: int, hi: int, left: int, right: int, delta: int
    ) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._add(x, lo, hi, delta)
            return
        self._push(x, lo, hi)
        mid = (lo + hi) // 2
        self._update_range(2 * x + 1, lo, mid, left, right, delta)
        self._update_range(2 * x + 2, mid + 1, hi, left, right, delta)
        self._pull(x)

    def update_range(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every value at indices ``left .. right`` inclusive."""
        self._check(left, right)
        self._update_range(0, 0, self._n - 1, left, right, delta)

    def values(self) -> list[int]:
        """Current value at every index."""
        return [self.query(i, i).total for i in range(self._n)]

    def __len__(self) -> int:
        return self._n