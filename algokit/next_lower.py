"""Nearest following element that is not greater, via a monotonic stack."""

from collections.abc import Sequence

__all__ = ["next_lower_indices"]


def next_lower_indices(values: Sequence) -> list[int]:
    """For each position, the index of the nearest later value not greater than it.

    Positions with no such value get ``len(values)``.
    """
    n = len(values)
    answer = [n] * n
    stack: list[int] = []
    for i in reversed(range(n)):
        while stack and values[stack[-1]] > values[i]:
            stack.pop()
        if stack:
            answer[i] = stack[-1]
        stack.append(i)
    return answer