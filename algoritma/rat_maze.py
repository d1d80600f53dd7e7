"""Rat in a maze: find a path moving only right or down."""

from __future__ import annotations

from collections.abc import Sequence


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Return a 0/1 matrix marking a path from the top-left to the bottom-right.

    Open cells hold 1. The search tries moving right before moving down.
    Returns None if no path exists; raises ValueError for a maze that is
    empty or not square.
    """
    size = len(maze)
    if size == 0 or any(len(row) != size for row in maze):
        raise ValueError("maze must be a non-empty square matrix")
    path = [[0] * size for _ in range(size)]
    last = size - 1

    def walk(row: int, col: int) -> bool:
        path[row][col] = 1
        if row == last and col == last:
            return True
        if col < last and maze[row][col + 1] == 1 and walk(row, col + 1):
            return True
        if row < last and maze[row + 1][col] == 1 and walk(row + 1, col):
            return True
        path[row][col] = 0
        return False

    return path if walk(0, 0) else None