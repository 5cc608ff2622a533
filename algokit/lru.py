"""Fixed-capacity cache that evicts the least recently used key."""

from collections import OrderedDict
from collections.abc import Hashable
from typing import Any

__all__ = ["LRUCache"]


class LRUCache:
    """Key-value store holding at most ``capacity`` entries."""

    def __init__(self, capacity: int = 3) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def set(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the least recent key if full."""
        if key not in self._entries and len(self._entries) >= self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value
        self._entries.move_to_end(key)

    def get(self, key: Hashable) -> Any:
        """Return the value under ``key`` and mark it as most recently used."""
        value = self._entries[key]
        self._entries.move_to_end(key)
        return value

    def recency(self) -> list:
        """Keys from the most recently used to the least."""
        return list(reversed(self._entries))

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)