"""Singly linked list."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["LinkedList"]


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list that appends at the tail."""

    def __init__(self, items: Iterable | None = None) -> None:
        self._head: _Node | None = None
        self._size = 0
        if items is not None:
            for item in items:
                self.push_back(item)

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._size += 1

    def remove(self, value: Any) -> bool:
        """Unlink the first node holding ``value``; return whether one was found."""
        previous: _Node | None = None
        node = self._head
        while node is not None:
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return True
            previous, node = node, node.next
        return False

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self) + "]"