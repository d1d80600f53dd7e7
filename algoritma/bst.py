"""An unbalanced binary search tree of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


def _max_value(node: _Node) -> int:
    while node.right is not None:
        node = node.right
    return node.value


def _remove(node: _Node | None, value: int) -> _Node | None:
    if node is None:
        raise KeyError(value)
    if value < node.value:
        node.left = _remove(node.left, value)
        return node
    if value > node.value:
        node.right = _remove(node.right, value)
        return node
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    # Two children: take the largest value of the left subtree.
    replacement = _max_value(node.left)
    node.value = replacement
    node.left = _remove(node.left, replacement)
    return node


class BinarySearchTree:
    """Integers kept in a binary search tree; equal values go to the right."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` to the tree."""
        new = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def remove(self, value: int) -> None:
        """Remove one occurrence of ``value``; raise KeyError if it is absent."""
        self._root = _remove(self._root, value)
        self._size -= 1

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return iter(self.inorder())

    def breadth_first(self) -> list[int]:
        """Return the values level by level, left to right."""
        result: list[int] = []
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def preorder(self) -> list[int]:
        """Return the values in node, left, right order."""
        result: list[int] = []

        def visit(node: _Node | None) -> None:
            if node is not None:
                result.append(node.value)
                visit(node.left)
                visit(node.right)

        visit(self._root)
        return result

    def inorder(self) -> list[int]:
        """Return the values in left, node, right order, that is ascending."""
        result: list[int] = []

        def visit(node: _Node | None) -> None:
            if node is not None:
                visit(node.left)
                result.append(node.value)
                visit(node.right)

        visit(self._root)
        return result

    def postorder(self) -> list[int]:
        """Return the values in left, right, node order."""
        result: list[int] = []

        def visit(node: _Node | None) -> None:
            if node is not None:
                visit(node.left)
                visit(node.right)
                result.append(node.value)

        visit(self._root)
        return result