import pytest

from estructuras.linked_list import SinglyLinkedList


def test_append_keeps_order():
    lst = SinglyLinkedList([3, 1, 2])
    assert list(lst) == [3, 1, 2]
    assert len(lst) == 3


def test_prepend_puts_item_first():
    lst = SinglyLinkedList([5])
    lst.prepend(9)
    lst.prepend(4)
    assert list(lst) == [4, 9, 5]


def test_pop_last_returns_items_in_reverse():
    items = [10, 20, 30, 40]
    lst = SinglyLinkedList(items)
    popped = [lst.pop_last() for _ in items]
    assert popped == items[::-1]
    assert len(lst) == 0


def test_pop_last_empty_raises():
    with pytest.raises(IndexError):
        SinglyLinkedList().pop_last()


def test_pop_last_single_element():
    lst = SinglyLinkedList(["only"])
    assert lst.pop_last() == "only"
    assert list(lst) == []


def test_count_less_than_bounds():
    items = [7, 2, 9, 4, 4]
    lst = SinglyLinkedList(items)
    assert lst.count_less_than(min(items)) == 0
    assert lst.count_less_than(max(items) + 1) == len(items)


def test_count_less_than_pinned():
    lst = SinglyLinkedList([5, 1, 3, 7])
    assert lst.count_less_than(4) == 2


def test_count_less_than_empty():
    assert SinglyLinkedList().count_less_than(100) == 0


def test_clear_empties():
    lst = SinglyLinkedList([1, 2, 3])
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []
    lst.append(8)
    assert list(lst) == [8]