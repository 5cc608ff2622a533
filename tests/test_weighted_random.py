import random

import pytest

from algokit.weighted_random import InverseWeightedPicker, WeightedPicker

VALUES = [10, 50, 100, 9, 0, 1]


class FixedRng:
    def __init__(self, result):
        self.result = result
        self.bounds = None

    def randint(self, a, b):
        self.bounds = (a, b)
        return self.result


def test_draw_range_is_total_weight():
    rng = FixedRng(0)
    picker = WeightedPicker(VALUES, rng=rng)
    assert picker.pick() == 10
    assert rng.bounds == (0, sum(VALUES))


def test_boundaries_select_expected_values():
    assert WeightedPicker(VALUES, rng=FixedRng(10)).pick() == 10
    assert WeightedPicker(VALUES, rng=FixedRng(11)).pick() == 50
    assert WeightedPicker(VALUES, rng=FixedRng(sum(VALUES))).pick() == 1


def test_zero_weight_after_first_is_never_picked():
    picker = WeightedPicker(["a", "b", "c"], weights=[1, 0, 1], rng=random.Random(5))
    picks = {picker.pick() for _ in range(2000)}
    assert "b" not in picks
    assert picks <= {"a", "c"}


def test_seeded_picks_come_from_values():
    picker = InverseWeightedPicker(VALUES, rng=random.Random(11))
    assert {picker.pick() for _ in range(500)} <= set(VALUES)


def test_inverse_equal_weights_each_count_one():
    rng = FixedRng(0)
    values = ["x", "y", "z"]
    picker = InverseWeightedPicker(values, weights=[5, 5, 5], rng=rng)
    picker.pick()
    assert rng.bounds == (0, len(values))


def test_inverse_prefers_small_values():
    picker = InverseWeightedPicker([0, 1000], rng=random.Random(2))
    picks = [picker.pick() for _ in range(2000)]
    assert picks.count(0) > picks.count(1000)


def test_invalid_inputs():
    with pytest.raises(ValueError):
        WeightedPicker([])
    with pytest.raises(ValueError):
        WeightedPicker([1, 2], weights=[1])
    with pytest.raises(ValueError):
        WeightedPicker([1, 2], weights=[1, -1])