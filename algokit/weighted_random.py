"""Random choice with probability proportional to weights."""

import random
from bisect import bisect_left
from collections.abc import Sequence
from itertools import accumulate
from typing import Any

__all__ = ["WeightedPicker", "InverseWeightedPicker"]


class WeightedPicker:
    """Pick values with probability proportional to their weights.

    Without weights, the values themselves are the weights. A number is
    drawn uniformly from ``0 .. total`` inclusive and the first value whose
    running total reaches it is returned.
    """

    def __init__(
        self,
        values: Sequence,
        weights: Sequence[int] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.values = list(values)
        if not self.values:
            raise ValueError("values must not be empty")
        raw = list(self.values if weights is None else weights)
        if len(raw) != len(self.values):
            raise ValueError("values and weights differ in length")
        effective = self._effective_weights(raw)
        if any(w < 0 for w in effective):
            raise ValueError("weights must not be negative")
        self._prefix = list(accumulate(effective))
        self._total = self._prefix[-1]
        self._rng = rng if rng is not None else random.Random()

    @staticmethod
    def _effective_weights(weights: list[int]) -> list[int]:
        return weights

    def pick(self) -> Any:
        """Draw one value."""
        k = self._rng.randint(0, self._total)
        return self.values[bisect_left(self._prefix, k)]


class InverseWeightedPicker(WeightedPicker):
    """Pick values with probability falling as their weight rises.

    Each weight ``w`` becomes ``max(1, largest - w)``.
    """

    def __init__(
        self,
        values: Sequence,
        weights: Sequence[int] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(values, weights, rng)

    @staticmethod
    def _effective_weights(weights: list[int]) -> list[int]:
        largest = max(weights)
        return [max(1, largest - w) for w in weights]

    def pick(self) -> Any:
        """Draw one value, favouring those with small weights."""
        return super().pick()