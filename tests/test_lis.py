import random
from itertools import combinations, pairwise

import pytest

from algokit.lis import lis_indices, lis_length, lis_sequence


def _brute_length(values):
    for r in range(len(values), 0, -1):
        if any(all(a < b for a, b in pairwise(c)) for c in combinations(values, r)):
            return r
    return 0


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


def test_documented_sequence():
    assert lis_sequence([7, 15, 6, 4, 4, 10, 13]) == [4, 10, 13]


@pytest.mark.parametrize("values, expected", [([], []), ([1], [1]), ([1, 1], [1])])
def test_small_sequences(values, expected):
    assert lis_sequence(values) == expected


def test_empty_indices():
    assert lis_indices([]) == []
    assert lis_length([]) == 0


def test_length_against_brute_force():
    rng = random.Random(3)
    for _ in range(150):
        values = [rng.randint(0, 6) for _ in range(rng.randint(0, 8))]
        assert lis_length(values) == _brute_length(values)


@pytest.mark.parametrize(
    "values",
    [
        [10, 7, 3, 9, 20, 12, 6, 8, 15],
        [3, 4, 6, 7, 17, 5, 10, 10],
        [5, 4, 3, 2, 1],
        [2, 2, 2],
    ],
)
def test_indices_form_increasing_subsequence(values):
    idx = lis_indices(values)
    assert all(a < b for a, b in pairwise(idx))
    assert all(values[a] < values[b] for a, b in pairwise(idx))
    assert len(idx) == _brute_length(values)


@pytest.mark.parametrize(
    "values",
    [
        [10, 7, 3, 9, 20, 12, 6, 8, 15],
        [3, 4, 6, 7, 17, 5, 10, 10],
        [1, 3, 2, 4, 3, 5],
    ],
)
def test_sequence_is_valid(values):
    seq = lis_sequence(values)
    assert all(a < b for a, b in pairwise(seq))
    assert _is_subsequence(seq, values)
    assert len(seq) == lis_length(values)