"""LIFO stack built on the linked list.

Used as the explicit work-stack of the articulation-point traversal.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from ..domain.errors import EmptyContainerError
from .linked_list import LinkedList

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in, first-out stack. All operations are O(1)."""

    def __init__(self) -> None:
        self._items: LinkedList[T] = LinkedList()

    def push(self, data: T) -> None:
        """Push an item onto the top of the stack.

        Raises:
            InvalidArgumentError: If ``data`` is None.
        """
        self._items.prepend(data)

    def pop(self) -> T:
        """Remove and return the item on top of the stack.

        Raises:
            EmptyContainerError: If the stack is empty.
        """
        if self._items.is_empty():
            raise EmptyContainerError("Cannot pop from an empty stack")
        return self._items.pop_front()

    def peek(self) -> T:
        """Return the item on top of the stack without removing it.

        Raises:
            EmptyContainerError: If the stack is empty.
        """
        if self._items.is_empty():
            raise EmptyContainerError("Cannot peek at an empty stack")
        return self._items.get(0)

    def is_empty(self) -> bool:
        return self._items.is_empty()

    def size(self) -> int:
        return self._items.size()

    def __len__(self) -> int:
        return self._items.size()
