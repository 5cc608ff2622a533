"""Disjoint-set forest and random spanning-tree generation."""

import random

__all__ = ["UnionFind", "random_tree_edges"]


class UnionFind:
    """Disjoint sets over the items ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, item: int) -> int:
        """Representative of the set holding ``item``."""
        parent = self._parent
        while item != parent[item]:
            parent[item] = parent[parent[item]]
            item = parent[item]
        return item

    def connected(self, a: int, b: int) -> bool:
        """True when ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; False if they were already one."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._size[ra] < self._size[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        self._size[ra] += self._size[rb]
        return True

    def component_size(self, item: int) -> int:
        """Number of items in the set holding ``item``."""
        return self._size[self.find(item)]


def random_tree_edges(n: int, rng: random.Random | None = None) -> list[tuple[int, int]]:
    """Edges of a random spanning tree on vertices ``1 .. n``.

    Random vertex pairs are drawn and kept whenever they join two
    components, until everything is connected.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    rng = rng if rng is not None else random.Random()
    sets = UnionFind(n)
    edges: list[tuple[int, int]] = []
    while sets.component_size(0) != n:
        u, v = rng.randint(1, n), rng.randint(1, n)
        if sets.union(u - 1, v - 1):
            edges.append((u, v))
    return edges