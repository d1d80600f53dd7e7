"""A doubly linked list of integers with an in-place bubble sort."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    number: int
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """Integers linked in both directions, growing at the front."""

    def __init__(self) -> None:
        self._head: _Node | None = None

    def push_front(self, number: int) -> None:
        """Insert ``number`` at the start of the list."""
        node = _Node(number, None, self._head)
        if self._head is not None:
            self._head.prev = node
        self._head = node

    def bubble_sort(self) -> None:
        """Sort the list ascending by swapping neighbouring values."""
        if self._head is None:
            return
        tail: _Node | None = None
        swapped = True
        while swapped:
            swapped = False
            node = self._head
            while node.next is not tail:
                following = node.next
                if node.number > following.number:
                    node.number, following.number = following.number, node.number
                    swapped = True
                node = following
            tail = node

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.number
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)