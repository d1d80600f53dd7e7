"""N-queens placements by backtracking, column by column."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def is_safe(board: Sequence[Sequence[int]], row: int, col: int) -> bool:
    """Return True if a queen at (row, col) is not attacked from the left."""
    n = len(board)
    if any(board[row][c] for c in range(col)):
        return False
    if any(board[r][c] for r, c in zip(range(row, -1, -1), range(col, -1, -1))):
        return False
    if any(board[r][c] for r, c in zip(range(row, n), range(col, -1, -1))):
        return False
    return True


def solve_n_queens(n: int) -> Iterator[list[list[int]]]:
    """Yield every placement of ``n`` non-attacking queens as a 0/1 board."""
    if n < 0:
        raise ValueError("board size must be non-negative")
    board = [[0] * n for _ in range(n)]

    def place(col: int) -> Iterator[list[list[int]]]:
        if col >= n:
            yield [row[:] for row in board]
            return
        for row in range(n):
            if is_safe(board, row, col):
                board[row][col] = 1
                yield from place(col + 1)
                board[row][col] = 0

    yield from place(0)


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board as rows of digits, one row per line."""
    return "".join("".join(str(cell) for cell in row) + "\n" for row in board)