"""Doubly-linked ordered container.

Backs vertex adjacency lists and the sequences returned by graph
queries. Insertion at either end and removal at the front are O(1);
positional access walks from whichever end is closer.
"""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from ..domain.errors import EmptyContainerError, IndexOutOfRangeError, InvalidArgumentError

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: T) -> None:
        self.data = data
        self.next: Optional[_Node[T]] = None
        self.prev: Optional[_Node[T]] = None


class LinkedList(Generic[T]):
    """Doubly-linked list rejecting ``None`` elements.

    Example:
        path = LinkedList[str]()
        path.append("B")
        path.prepend("A")
        assert path.to_list() == ["A", "B"]
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.append(item)

    def append(self, data: T) -> None:
        """Add an element to the end of the list. O(1).

        Raises:
            InvalidArgumentError: If ``data`` is None.
        """
        node = self._new_node(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node
        self._size += 1

    def prepend(self, data: T) -> None:
        """Add an element to the beginning of the list. O(1).

        Raises:
            InvalidArgumentError: If ``data`` is None.
        """
        node = self._new_node(data)
        if self._head is None:
            self._head = self._tail = node
        else:
            self._head.prev = node
            node.next = self._head
            self._head = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first element. O(1).

        Raises:
            EmptyContainerError: If the list is empty.
        """
        if self._head is None:
            raise EmptyContainerError("Cannot remove from an empty list")

        node = self._head
        if node is self._tail:
            self._head = self._tail = None
        else:
            self._head = node.next
            assert self._head is not None
            self._head.prev = None

        self._size -= 1
        return node.data

    def get(self, index: int) -> T:
        """Return the element at ``index``.

        Walks from the head for the first half and from the tail for the
        second half, so the cost is O(min(index, size - index)).

        Raises:
            IndexOutOfRangeError: If ``index`` is not in ``[0, size)``.
        """
        return self._node_at(index).data

    def remove_at(self, index: int) -> T:
        """Remove and return the element at ``index``.

        Front and back removals are O(1); removal in the middle is O(n).

        Raises:
            IndexOutOfRangeError: If ``index`` is not in ``[0, size)``.
        """
        self._check_index(index)

        if index == 0:
            return self.pop_front()

        if index == self._size - 1:
            node = self._tail
            assert node is not None and node.prev is not None
            self._tail = node.prev
            self._tail.next = None
            self._size -= 1
            return node.data

        node = self._node_at(index)
        assert node.prev is not None and node.next is not None
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.data

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def to_list(self) -> List[T]:
        """Return the elements as a Python list, front to back."""
        return list(self)

    def _new_node(self, data: T) -> _Node[T]:
        if data is None:
            raise InvalidArgumentError(
                "Cannot add None to the list",
                argument="data",
            )
        return _Node(data)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise IndexOutOfRangeError(
                f"Index: {index}, Size: {self._size}",
                index=index,
                size=self._size,
            )

    def _node_at(self, index: int) -> _Node[T]:
        self._check_index(index)

        if index < self._size // 2:
            current = self._head
            for _ in range(index):
                assert current is not None
                current = current.next
        else:
            current = self._tail
            for _ in range(self._size - 1 - index):
                assert current is not None
                current = current.prev

        assert current is not None
        return current

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._size == other._size and all(
            a == b for a, b in zip(self, other)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"
