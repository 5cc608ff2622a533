import random

import pytest

from algokit.segtree_min_count import RangeAddMinCountTree, RangeSummary


def _expected(reference, i, j):
    part = reference[i : j + 1]
    low = min(part)
    return RangeSummary(sum(part), low, part.count(low))


def _check_all(tree, reference):
    n = len(reference)
    for i in range(n):
        for j in range(i, n):
            assert tree.query(i, j) == _expected(reference, i, j)


def test_zeros_have_full_min_count():
    tree = RangeAddMinCountTree([0] * 8)
    assert tree.query(0, 7) == RangeSummary(0, 0, 8)


def test_values_round_trip():
    values = [3, -1, 4, -1, 5]
    tree = RangeAddMinCountTree(values)
    assert tree.values() == values
    _check_all(tree, values)


def test_range_add_changes_minimum():
    tree = RangeAddMinCountTree([0] * 8)
    tree.update_range(2, 4, -1)
    assert tree.query(0, 7) == RangeSummary(-3, -1, 3)
    assert tree.values() == [0, 0, -1, -1, -1, 0, 0, 0]


def test_point_add():
    tree = RangeAddMinCountTree([2, 2, 2])
    tree.update(1, 5)
    assert tree.values() == [2, 7, 2]
    _check_all(tree, [2, 7, 2])


def test_merge_combines_equal_minima():
    left = RangeSummary(4, 1, 2)
    right = RangeSummary(6, 1, 1)
    assert left.merge(right) == RangeSummary(10, 1, 3)
    assert left.merge(RangeSummary(6, 0, 1)).minimum == 0


@pytest.mark.parametrize("seed", range(5))
def test_random_operations_match_list(seed):
    rng = random.Random(seed)
    reference = [0] * 8
    tree = RangeAddMinCountTree(reference)
    for step in range(15):
        left, right = sorted((rng.randrange(8), rng.randrange(8)))
        delta = 1 if step % 2 else -1
        tree.update_range(left, right, delta)
        for k in range(left, right + 1):
            reference[k] += delta
        _check_all(tree, reference)
    assert tree.values() == reference


@pytest.mark.parametrize("seed", range(3))
def test_mixed_updates_match_list(seed):
    rng = random.Random(100 + seed)
    reference = [rng.randint(-5, 5) for _ in range(11)]
    tree = RangeAddMinCountTree(reference)
    for _ in range(50):
        left = rng.randrange(11)
        right = rng.randrange(left, 11)
        delta = rng.randint(-3, 3)
        if rng.random() < 0.3:
            tree.update(left, delta)
            reference[left] += delta
        else:
            tree.update_range(left, right, delta)
            for k in range(left, right + 1):
                reference[k] += delta
        assert tree.query(left, right) == _expected(reference, left, right)
    _check_all(tree, reference)


def test_empty_values_rejected():
    with pytest.raises(ValueError):
        RangeAddMinCountTree([])


def test_invalid_range():
    tree = RangeAddMinCountTree([1, 2])
    with pytest.raises(IndexError):
        tree.query(1, 0)
    with pytest.raises(IndexError):
        tree.update_range(0, 2, 1)