import pytest

from aegis.domain.errors import EmptyContainerError, IndexOutOfRangeError, InvalidArgumentError
from aegis.graph.linked_list import LinkedList


def test_new_list_is_empty():
    items = LinkedList()

    assert items.is_empty()
    assert items.size() == 0
    assert len(items) == 0
    assert items.to_list() == []


def test_append_and_prepend_keep_order():
    items = LinkedList()
    items.append("B")
    items.append("C")
    items.prepend("A")

    assert items.to_list() == ["A", "B", "C"]
    assert items.size() == 3


def test_add_none_is_rejected():
    items = LinkedList()

    with pytest.raises(InvalidArgumentError):
        items.append(None)
    with pytest.raises(InvalidArgumentError):
        items.prepend(None)
    assert items.is_empty()


def test_pop_front_returns_elements_in_order():
    items = LinkedList([1, 2, 3])

    assert items.pop_front() == 1
    assert items.pop_front() == 2
    assert items.pop_front() == 3
    assert items.is_empty()


def test_pop_front_on_empty_list_fails():
    with pytest.raises(EmptyContainerError):
        LinkedList().pop_front()


def test_list_is_reusable_after_being_emptied():
    items = LinkedList([1])
    items.pop_front()
    items.append(2)
    items.prepend(1)

    assert items.to_list() == [1, 2]


def test_get_walks_from_both_ends():
    items = LinkedList(range(7))

    assert [items.get(i) for i in range(7)] == list(range(7))


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_get_out_of_range_fails(index):
    items = LinkedList(["a", "b", "c"])

    with pytest.raises(IndexOutOfRangeError) as exc_info:
        items.get(index)

    assert exc_info.value.index == index
    assert exc_info.value.size == 3
    assert isinstance(exc_info.value, IndexError)


def test_remove_at_front_middle_and_back():
    items = LinkedList(["a", "b", "c", "d", "e"])

    assert items.remove_at(0) == "a"
    assert items.remove_at(3) == "e"
    assert items.remove_at(1) == "c"
    assert items.to_list() == ["b", "d"]
    assert items.size() == 2


def test_remove_at_last_element_updates_tail():
    items = LinkedList([1, 2])
    items.remove_at(1)
    items.append(3)

    assert items.to_list() == [1, 3]


def test_remove_at_out_of_range_fails():
    with pytest.raises(IndexOutOfRangeError):
        LinkedList().remove_at(0)


def test_equality_compares_elements():
    assert LinkedList([1, 2]) == LinkedList([1, 2])
    assert LinkedList([1, 2]) != LinkedList([2, 1])
    assert LinkedList([1]) != LinkedList([1, 2])
