"""Sorted set with order statistics."""

from collections.abc import Iterable, Iterator
from typing import Any

from sortedcontainers import SortedSet

__all__ = ["OrderedSet"]


class OrderedSet:
    """Set of distinct values kept sorted, indexable by rank."""

    def __init__(self, items: Iterable | None = None) -> None:
        self._items = SortedSet(items if items is not None else ())

    def add(self, value: Any) -> None:
        """Insert ``value`` if it is not already present."""
        self._items.add(value)

    def discard(self, value: Any) -> None:
        """Remove ``value`` if present."""
        self._items.discard(value)

    def find_by_order(self, index: int) -> Any:
        """The value with ``index`` smaller values in the set."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"order {index} out of range")
        return self._items[index]

    def order_of_key(self, value: Any) -> int:
        """Number of values in the set strictly less than ``value``."""
        return self._items.bisect_left(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items