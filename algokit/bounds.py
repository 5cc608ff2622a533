"""Binary searches over sorted sequences."""

from collections.abc import Sequence
from typing import Any

__all__ = ["lower_bound", "upper_bound"]


def lower_bound(seq: Sequence, value: Any) -> int:
    """Index of the first element not less than ``value`` (``len(seq)`` if none)."""
    low, high = 0, len(seq)
    while low < high:
        mid = (low + high) // 2
        if value <= seq[mid]:
            high = mid
        else:
            low = mid + 1
    return low


def upper_bound(seq: Sequence, value: Any) -> int:
    """Index of the first element greater than ``value`` (``len(seq)`` if none)."""
    low, high = 0, len(seq)
    while low < high:
        mid = (low + high) // 2
        if value < seq[mid]:
            high = mid
        else:
            low = mid + 1
    return low