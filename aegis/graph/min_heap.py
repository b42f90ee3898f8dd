"""Binary min-heap priority queue over a dynamic array.

The heap has no decrease-key operation. The route search uses it as a
priority queue with lazy deletion: an element is inserted again every
time its priority improves, and the consumer discards extracted entries
whose stored priority is worse than the current best one it tracks.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, TypeVar

from ..domain.errors import EmptyQueueError, InvalidArgumentError

T = TypeVar("T")

DEFAULT_CAPACITY = 10


def _identity(element: Any) -> Any:
    return element


class MinHeap(Generic[T]):
    """Min-heap ordered by ``key(element)``.

    The backing array starts at ``DEFAULT_CAPACITY`` slots, doubles when
    full and never shrinks.

    Args:
        key: Function returning the priority of an element. Elements are
            compared by their own ordering when omitted.

    Example:
        heap = MinHeap[int]()
        for value in (5, 3, 8):
            heap.insert(value)
        assert heap.extract_min() == 3
    """

    def __init__(self, key: Optional[Callable[[T], Any]] = None) -> None:
        self._key: Callable[[T], Any] = key or _identity
        self._heap: List[Optional[T]] = [None] * DEFAULT_CAPACITY
        self._size = 0

    def insert(self, element: T) -> None:
        """Add an element. O(log n).

        Raises:
            InvalidArgumentError: If ``element`` is None.
        """
        if element is None:
            raise InvalidArgumentError(
                "Cannot insert None into the heap",
                argument="element",
            )
        self._ensure_capacity()
        self._heap[self._size] = element
        self._size += 1
        self._sift_up(self._size - 1)

    def extract_min(self) -> T:
        """Remove and return the element with the smallest key. O(log n).

        Raises:
            EmptyQueueError: If the heap is empty.
        """
        if self._size == 0:
            raise EmptyQueueError("Heap is empty")

        minimum = self._at(0)
        last = self._size - 1
        self._heap[0] = self._heap[last]
        self._heap[last] = None
        self._size -= 1

        self._sift_down(0)
        return minimum

    def peek_min(self) -> T:
        """Return the element with the smallest key without removing it.

        Raises:
            EmptyQueueError: If the heap is empty.
        """
        if self._size == 0:
            raise EmptyQueueError("Heap is empty")
        return self._at(0)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def capacity(self) -> int:
        """Number of slots in the backing array."""
        return len(self._heap)

    def __len__(self) -> int:
        return self._size

    def _at(self, index: int) -> T:
        element = self._heap[index]
        assert element is not None
        return element

    def _less(self, i: int, j: int) -> bool:
        return self._key(self._at(i)) < self._key(self._at(j))

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._less(index, parent):
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        while 2 * index + 1 < self._size:
            left = 2 * index + 1
            right = left + 1
            smallest = left

            # Left wins ties
            if right < self._size and self._less(right, left):
                smallest = right

            if self._less(smallest, index):
                self._swap(index, smallest)
                index = smallest
            else:
                break

    def _ensure_capacity(self) -> None:
        if self._size == len(self._heap):
            self._heap.extend([None] * len(self._heap))

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]
