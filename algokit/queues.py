"""Queue with constant-time minimum, and priority-queue draining helpers."""

from collections.abc import Callable, Iterable
from typing import Any

__all__ = [
    "MinQueue",
    "sliding_window_minimum",
    "drain_max",
    "drain_min",
    "drain_by_key",
]


class MinQueue:
    """FIFO queue built from two stacks that tracks its minimum."""

    def __init__(self) -> None:
        self._inbox: list[tuple[Any, Any]] = []
        self._outbox: list[tuple[Any, Any]] = []

    @staticmethod
    def _push_onto(stack: list[tuple[Any, Any]], value: Any) -> None:
        low = value if not stack else min(value, stack[-1][1])
        stack.append((value, low))

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._push_onto(self._inbox, value)

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._outbox:
            while self._inbox:
                value, _ = self._inbox.pop()
                self._push_onto(self._outbox, value)
        if not self._outbox:
            raise IndexError("pop from an empty queue")
        return self._outbox.pop()[0]

    def min(self) -> Any:
        """Smallest value currently queued."""
        lows = [stack[-1][1] for stack in (self._inbox, self._outbox) if stack]
        if not lows:
            raise IndexError("min of an empty queue")
        return min(lows)

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


def sliding_window_minimum(values: Iterable, window: int) -> list:
    """Minimum of the last ``window`` values seen, after each value.

    The first results cover the shorter windows at the start.
    """
    if window < 1:
        raise ValueError("window must be at least 1")
    queue = MinQueue()
    result = []
    for value in values:
        queue.push(value)
        if len(queue) > window:
            queue.pop()
        result.append(queue.min())
    return result


def drain_max(values: Iterable) -> list:
    """Values in the order a max-priority queue would release them."""
    return sorted(values, reverse=True)


def drain_min(values: Iterable) -> list:
    """Values in the order a min-priority queue would release them."""
    return sorted(values)


def drain_by_key(values: Iterable, key: Callable[[Any], Any]) -> list:
    """Values released largest ``key`` first; equal keys keep their input order."""
    return sorted(values, key=key, reverse=True)