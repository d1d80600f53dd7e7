"""Minimax over a complete binary game tree stored as its leaf scores."""

from __future__ import annotations

from collections.abc import Sequence


def minimax(
    depth: int, node_index: int, is_max: bool, scores: Sequence[int], height: int
) -> int:
    """Return the minimax value of the subtree at ``node_index`` on level ``depth``."""
    if depth == height:
        return scores[node_index]
    left = minimax(depth + 1, node_index * 2, not is_max, scores, height)
    right = minimax(depth + 1, node_index * 2 + 1, not is_max, scores, height)
    return max(left, right) if is_max else min(left, right)


def optimal_value(scores: Sequence[int]) -> int:
    """Return the value the maximising player can secure from the root.

    Raises ValueError unless the number of scores is a power of two.
    """
    count = len(scores)
    if count == 0 or count & (count - 1):
        raise ValueError("number of scores must be a power of two")
    return minimax(0, 0, True, scores, count.bit_length() - 1)