from algokit.linked_list import LinkedList


def test_push_back_keeps_order():
    items = LinkedList()
    for value in (10, 15, 45):
        items.push_back(value)
    assert list(items) == [10, 15, 45]
    assert len(items) == 3
    assert str(items) == "[10, 15, 45]"


def test_source_deletion_sequence():
    items = LinkedList([10, 15, 45])
    assert items.remove(10) is True
    assert items.remove(45) is True
    assert items.remove(15) is True
    assert items.remove(15) is False
    assert str(items) == "[]"
    assert len(items) == 0


def test_remove_from_middle():
    items = LinkedList([1, 2, 3])
    assert items.remove(2) is True
    assert list(items) == [1, 3]
    assert len(items) == 2


def test_remove_only_first_occurrence():
    items = LinkedList([5, 7, 5])
    assert items.remove(5) is True
    assert list(items) == [7, 5]


def test_remove_from_empty_list():
    items = LinkedList()
    assert items.remove(1) is False
    assert list(items) == []


def test_push_after_emptying():
    items = LinkedList([1])
    items.remove(1)
    items.push_back(2)
    assert list(items) == [2]
    assert str(items) == "[2]"