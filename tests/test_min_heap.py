import pytest

from aegis.domain.errors import EmptyQueueError, InvalidArgumentError
from aegis.graph.min_heap import DEFAULT_CAPACITY, MinHeap


def test_interleaved_inserts_and_extractions():
    heap = MinHeap()
    heap.insert(5)
    heap.insert(3)
    heap.insert(8)
    first = heap.extract_min()
    heap.insert(1)
    second = heap.extract_min()
    third = heap.extract_min()

    assert (first, second, third) == (3, 1, 5)
    assert heap.size() == 1
    assert heap.peek_min() == 8


def test_extracts_in_sorted_order():
    values = [9, 4, 7, 1, 8, 2, 2, 6, 3, 5, 0]
    heap = MinHeap()
    for value in values:
        heap.insert(value)

    assert [heap.extract_min() for _ in values] == sorted(values)
    assert heap.is_empty()


def test_peek_min_does_not_remove():
    heap = MinHeap()
    heap.insert(4)
    heap.insert(2)

    assert heap.peek_min() == 2
    assert len(heap) == 2


def test_empty_heap_fails():
    heap = MinHeap()

    with pytest.raises(EmptyQueueError):
        heap.extract_min()
    with pytest.raises(EmptyQueueError):
        heap.peek_min()


def test_insert_none_is_rejected():
    with pytest.raises(InvalidArgumentError):
        MinHeap().insert(None)


def test_custom_key_orders_elements():
    heap = MinHeap(key=lambda item: item["risk"])
    heap.insert({"id": "A", "risk": 30})
    heap.insert({"id": "B", "risk": 10})
    heap.insert({"id": "C", "risk": 20})

    assert [heap.extract_min()["id"] for _ in range(3)] == ["B", "C", "A"]


def test_capacity_doubles_and_never_shrinks():
    heap = MinHeap()
    assert heap.capacity == DEFAULT_CAPACITY

    for value in range(DEFAULT_CAPACITY + 1):
        heap.insert(value)
    assert heap.capacity == DEFAULT_CAPACITY * 2

    while not heap.is_empty():
        heap.extract_min()
    assert heap.capacity == DEFAULT_CAPACITY * 2


def test_equal_keys_prefer_left_child():
    heap = MinHeap(key=lambda item: item[0])
    heap.insert((0, "root"))
    heap.insert((1, "left"))
    heap.insert((1, "right"))
    heap.insert((5, "last"))
    heap.extract_min()

    assert heap.peek_min() == (1, "left")
