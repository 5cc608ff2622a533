"""Segment tree with range assignment and range sums."""

from collections.abc import Iterable

__all__ = ["RangeAssignSumTree"]


class RangeAssignSumTree:
    """Sums over index ranges, with point and range assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("values must not be empty")
        self._n = len(items)
        self._sum = [0] * (4 * self._n)
        self._pending: list[int | None] = [None] * (4 * self._n)
        self._build(0, 0, self._n - 1, items)

    def _build(self, x: int, lo: int, hi: int, items: list[int]) -> None:
        if lo == hi:
            self._sum[x] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * x + 1, lo, mid, items)
        self._build(2 * x + 2, mid + 1, hi, items)
        self._sum[x] = self._sum[2 * x + 1] + self._sum[2 * x + 2]

    def _assign(self, x: int, lo: int, hi: int, value: int) -> None:
        self._sum[x] = (hi - lo + 1) * value
        self._pending[x] = value if lo != hi else None

    def _push(self, x: int, lo: int, hi: int) -> None:
        value = self._pending[x]
        if value is None:
            return
        mid = (lo + hi) // 2
        self._assign(2 * x + 1, lo, mid, value)
        self._assign(2 * x + 2, mid + 1, hi, value)
        self._pending[x] = None

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._n:
            raise IndexError(f"invalid range [{left}, {right}]")

    def _query(self, x: int, lo: int, hi: int, left: int, right: int) -> int:
        if right < lo or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._sum[x]
        self._push(x, lo, hi)
        mid = (lo + hi) // 2
        return self._query(2 * x + 1, lo, mid, left, right) + self._query(
            2 * x + 2, mid + 1, hi, left, right
        )

    def query(self, left: int, right: int) -> int:
        """Sum of the values at indices ``left .. right`` inclusive."""
        self._check(left, right)
        return self._query(0, 0, self._n - 1, left, right)

    def update(self, index: int, value: int) -> None:
        """Set the value at ``index``."""
        self.update_range(index, index, value)

    def _update_range(
        self, x: int, lo: int, hi: int, left: int, right: int, value: int
    ) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._assign(x, lo, hi, value)
            return
        self._push(x, lo, hi)
        mid = (lo + hi) // 2
        self._update_range(2 * x + 1, lo, mid, left, right, value)
        self._update_range(2 * x + 2, mid + 1, hi, left, right, value)
        self._sum[x] = self._sum[2 * x + 1] + self._sum[2 * x + 2]

    def update_range(self, left: int, right: int, value: int) -> None:
        """Set every value at indices ``left .. right`` inclusive to ``value``."""
        self._check(left, right)
        self._update_range(0, 0, self._n - 1, left, right, value)

    def values(self) -> list[int]:
        """Current value at every index."""
        return [self.query(i, i) for i in range(self._n)]

    def __len__(self) -> int:
        return self._n