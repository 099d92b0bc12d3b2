import pytest

from drillbox.doubly import DoublyLinkedList


def _assert_consistent(linked, expected):
    assert list(linked) == expected
    assert list(reversed(linked)) == expected[::-1]
    assert len(linked) == len(expected)


def test_construction_and_both_directions():
    _assert_consistent(DoublyLinkedList([1, 2, 3]), [1, 2, 3])


def test_empty():
    _assert_consistent(DoublyLinkedList(), [])


def test_append_and_prepend():
    linked = DoublyLinkedList()
    linked.append(2)
    linked.prepend(1)
    linked.append(3)
    _assert_consistent(linked, [1, 2, 3])


def test_prepend_on_empty_sets_tail():
    linked = DoublyLinkedList()
    linked.prepend(5)
    linked.append(6)
    _assert_consistent(linked, [5, 6])


@pytest.mark.parametrize("position", [1, 2, 3, 4, 5])
def test_insert_at_each_position(position):
    values = [10, 20, 30, 40]
    linked = DoublyLinkedList(values)
    linked.insert(position, 99)
    expected = list(values)
    expected.insert(position - 1, 99)
    _assert_consistent(linked, expected)


@pytest.mark.parametrize("position", [0, -3, 3])
def test_insert_out_of_range(position):
    linked = DoublyLinkedList([1])
    with pytest.raises(IndexError):
        linked.insert(position, 2)
    _assert_consistent(linked, [1])


def test_insert_into_empty_at_one():
    linked = DoublyLinkedList()
    linked.insert(1, 4)
    _assert_consistent(linked, [4])


@pytest.mark.parametrize("value", [1, 3, 5])
def test_remove_keeps_links(value):
    values = [1, 2, 3, 4, 5]
    linked = DoublyLinkedList(values)
    linked.remove(value)
    _assert_consistent(linked, [v for v in values if v != value])


def test_remove_until_empty():
    linked = DoublyLinkedList([1, 2])
    linked.remove(1)
    linked.remove(2)
    _assert_consistent(linked, [])
    linked.append(3)
    _assert_consistent(linked, [3])


def test_remove_missing_raises():
    linked = DoublyLinkedList([1, 2])
    with pytest.raises(ValueError):
        linked.remove(7)
    _assert_consistent(linked, [1, 2])