import pytest

from algokit.ordered_set import OrderedSet


def source_set():
    values = OrderedSet()
    for value in (1, 2, 4, 8, 16):
        values.add(value)
    return values


@pytest.mark.parametrize("index,expected", [(1, 2), (2, 4), (4, 16)])
def test_find_by_order(index, expected):
    assert source_set().find_by_order(index) == expected


def test_find_by_order_out_of_range():
    with pytest.raises(IndexError):
        source_set().find_by_order(6)
    with pytest.raises(IndexError):
        source_set().find_by_order(-1)


@pytest.mark.parametrize(
    "value,expected", [(-5, 0), (1, 0), (3, 2), (4, 2), (400, 5)]
)
def test_order_of_key(value, expected):
    assert source_set().order_of_key(value) == expected


def test_duplicates_and_discard():
    values = OrderedSet([3, 1, 3, 2])
    assert len(values) == 3
    assert list(values) == [1, 2, 3]
    values.discard(2)
    values.discard(42)
    assert list(values) == [1, 3]
    assert 2 not in values
    assert 3 in values


def test_rank_round_trip():
    values = source_set()
    for index, value in enumerate(values):
        assert values.find_by_order(index) == value
        assert values.order_of_key(value) == index