"""Two-dimensional segment tree for sub-matrix sums with point assignment."""

from collections.abc import Sequence

__all__ = ["SegmentTree2D"]


class SegmentTree2D:
    """Sums over rectangles of a matrix, with point assignment.

    ``x`` indexes columns and ``y`` indexes rows: the cell at ``(x, y)`` is
    ``matrix[y][x]``.
    """

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        rows = [list(row) for row in matrix]
        if not rows or not rows[0]:
            raise ValueError("matrix must not be empty")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("matrix rows differ in length")
        self._rows = len(rows)
        self._cols = len(rows[0])
        self._inner_size = 4 * self._cols
        self._tree: list[list[int]] = [[] for _ in range(4 * self._rows)]
        self._build(0, 0, self._rows - 1, rows)

    def _build_inner(self, inner: list[int], x: int, lo: int, hi: int, row: list[int]) -> None:
        if lo == hi:
            inner[x] = row[lo]
            return
        mid = (lo + hi) // 2
        self._build_inner(inner, 2 * x + 1, lo, mid, row)
        self._build_inner(inner, 2 * x + 2, mid + 1, hi, row)
        inner[x] = inner[2 * x + 1] + inner[2 * x + 2]

    def _build(self, node: int, lo: int, hi: int, rows: list[list[int]]) -> None:
        if lo == hi:
            inner = [0] * self._inner_size
            self._build_inner(inner, 0, 0, self._cols - 1, rows[lo])
            self._tree[node] = inner
            return
        mid = (lo + hi) // 2
        self._build(2 * node + 1, lo, mid, rows)
        self._build(2 * node + 2, mid + 1, hi, rows)
        self._tree[node] = [
            a + b for a, b in zip(self._tree[2 * node + 1], self._tree[2 * node + 2])
        ]

    def _query_inner(self, inner: list[int], x: int, lo: int, hi: int, x1: int, x2: int) -> int:
        if x2 < lo or hi < x1:
            return 0
        if x1 <= lo and hi <= x2:
            return inner[x]
        mid = (lo + hi) // 2
        return self._query_inner(inner, 2 * x + 1, lo, mid, x1, x2) + self._query_inner(
            inner, 2 * x + 2, mid + 1, hi, x1, x2
        )

    def _query(self, node: int, lo: int, hi: int, x1: int, y1: int, x2: int, y2: int) -> int:
        if y2 < lo or hi < y1:
            return 0
        if y1 <= lo and hi <= y2:
            return self._query_inner(self._tree[node], 0, 0, self._cols - 1, x1, x2)
        mid = (lo + hi) // 2
        return self._query(2 * node + 1, lo, mid, x1, y1, x2, y2) + self._query(
            2 * node + 2, mid + 1, hi, x1, y1, x2, y2
        )

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum of cells with columns ``x1 .. x2`` and rows ``y1 .. y2`` inclusive."""
        if not (0 <= x1 <= x2 < self._cols and 0 <= y1 <= y2 < self._rows):
            raise IndexError(f"invalid rectangle ({x1}, {y1}) .. ({x2}, {y2})")
        return self._query(0, 0, self._rows - 1, x1, y1, x2, y2)

    def _column_path(self, x: int) -> list[int]:
        path = []
        node, lo, hi = 0, 0, self._cols - 1
        while True:
            path.append(node)
            if lo == hi:
                return path
            mid = (lo + hi) // 2
            if x <= mid:
                node, hi = 2 * node + 1, mid
            else:
                node, lo = 2 * node + 2, mid + 1

    def _update(self, node: int, lo: int, hi: int, y: int, path: list[int], value: int) -> None:
        inner = self._tree[node]
        if lo == hi:
            inner[path[-1]] = value
            for k in reversed(path[:-1]):
                inner[k] = inner[2 * k + 1] + inner[2 * k + 2]
            return
        mid = (lo + hi) // 2
        if y <= mid:
            self._update(2 * node + 1, lo, mid, y, path, value)
        else:
            self._update(2 * node + 2, mid + 1, hi, y, path, value)
        left, right = self._tree[2 * node + 1], self._tree[2 * node + 2]
        for k in path:
            inner[k] = left[k] + right[k]

    def update(self, x: int, y: int, value: int) -> None:
        """Set the cell at column ``x``, row ``y`` to ``value``."""
        if not (0 <= x < self._cols and 0 <= y < self._rows):
            raise IndexError(f"cell ({x}, {y}) out of range")
        self._update(0, 0, self._rows - 1, y, self._column_path(x), value)