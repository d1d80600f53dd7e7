"""Sudoku solving by backtracking, with a terminal rendering of the grid."""

from __future__ import annotations

from collections.abc import Sequence

_SIZE = 9
_HIGHLIGHT = "\033[93m"
_RESET = "\033[0m"


def is_possible(grid: Sequence[Sequence[int]], row: int, col: int, number: int) -> bool:
    """Return True if ``number`` is absent from the row, column and box of a cell."""
    for index in range(_SIZE):
        if grid[index][col] == number or grid[row][index] == number:
            return False
    box_row = row // 3 * 3
    box_col = col // 3 * 3
    return all(
        grid[r][c] != number
        for r in range(box_row, box_row + 3)
        for c in range(box_col, box_col + 3)
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Return a solved copy of a 9x9 grid with 0 for empty cells, or None.

    Raises ValueError if the grid is not 9x9.
    """
    if len(grid) != _SIZE or any(len(row) != _SIZE for row in grid):
        raise ValueError("grid must be 9x9")
    work = [list(row) for row in grid]
    empties = [(r, c) for r in range(_SIZE) for c in range(_SIZE) if work[r][c] == 0]

    def fill(position: int) -> bool:
        if position == len(empties):
            return True
        row, col = empties[position]
        for number in range(1, _SIZE + 1):
            if is_possible(work, row, col, number):
                work[row][col] = number
                if fill(position + 1):
                    return True
        work[row][col] = 0
        return False

    return work if fill(0) else None


def format_grid(
    grid: Sequence[Sequence[int]], starting_grid: Sequence[Sequence[int]]
) -> str:
    """Render a grid, highlighting cells that differ from ``starting_grid``."""
    lines = []
    for i, (row, start_row) in enumerate(zip(grid, starting_grid), 1):
        parts = []
        for j, (value, start) in enumerate(zip(row, start_row), 1):
            if value != start:
                parts.append(f"{_HIGHLIGHT}{value}{_RESET} ")
            else:
                parts.append(f"{value} ")
            if j % 3 == 0:
                parts.append("\t")
        line = "".join(parts)
        if i % 3 == 0:
            line += "\n"
        lines.append(line + "\n")
    return "".join(lines)