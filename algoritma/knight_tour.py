"""Knight's tour on a square board by backtracking."""

from __future__ import annotations

from collections.abc import Sequence

_MOVES = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))


def knight_tour(size: int = 8) -> list[list[int]] | None:
    """Find a knight's tour starting in the top-left corner.

    Returns a board whose cells hold the move number at which the knight
    lands there, or None if no tour exists. Raises ValueError for a size
    below one.
    """
    if size < 1:
        raise ValueError("board size must be at least 1")
    board = [[-1] * size for _ in range(size)]
    board[0][0] = 0
    total = size * size

    def solve(x: int, y: int, move: int) -> bool:
        if move == total:
            return True
        for dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size and board[nx][ny] == -1:
                board[nx][ny] = move
                if solve(nx, ny, move + 1):
                    return True
                board[nx][ny] = -1
        return False

    return board if solve(0, 0, 1) else None


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board with each cell followed by two spaces, one row per line."""
    return "".join(
        "".join(f"{cell}  " for cell in row) + "\n" for row in board
    )