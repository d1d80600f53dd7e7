"""Huffman coding: build the code tree and read the codes off it."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import count


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; internal nodes carry no symbol."""

    frequency: int
    symbol: str | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_huffman_tree(symbols: Sequence[str], frequencies: Sequence[int]) -> HuffmanNode:
    """Build a Huffman tree by repeatedly merging the two rarest nodes.

    The rarer of the two merged nodes becomes the left child. Raises
    ValueError for empty input or sequences of different lengths.
    """
    if len(symbols) != len(frequencies):
        raise ValueError("symbols and frequencies must have the same length")
    if not symbols:
        raise ValueError("at least one symbol is required")
    order = count()
    heap = [
        (frequency, next(order), HuffmanNode(frequency, symbol))
        for symbol, frequency in zip(symbols, frequencies)
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(order), HuffmanNode(total, None, left, right)))
    return heap[0][2]


def huffman_codes(root: HuffmanNode) -> dict[str, str]:
    """Map each symbol to its code, listed in preorder; left is 0, right is 1."""
    codes: dict[str, str] = {}
    stack: list[tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.symbol is not None:
            codes[node.symbol] = prefix
        if node.right is not None:
            stack.append((node.right, prefix + "1"))
        if node.left is not None:
            stack.append((node.left, prefix + "0"))
    return codes