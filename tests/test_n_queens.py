import itertools

import pytest

from algoritma.n_queens import format_board, is_safe, solve_n_queens


def _queens(board):
    return [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell]


def test_four_queens_has_two_solutions():
    assert len(list(solve_n_queens(4))) == 2


def test_eight_queens_solution_count():
    assert len(list(solve_n_queens(8))) == 92


def test_three_queens_has_none():
    assert list(solve_n_queens(3)) == []


@pytest.mark.parametrize("n", [1, 4, 5, 6])
def test_solutions_are_non_attacking(n):
    for board in solve_n_queens(n):
        queens = _queens(board)
        assert len(queens) == n
        for (r1, c1), (r2, c2) in itertools.combinations(queens, 2):
            assert r1 != r2
            assert c1 != c2
            assert abs(r1 - r2) != abs(c1 - c2)


def test_solutions_are_distinct():
    boards = [format_board(b) for b in solve_n_queens(6)]
    assert len(set(boards)) == len(boards)


def test_is_safe_detects_row_and_diagonals():
    board = [[0] * 4 for _ in range(4)]
    board[1][0] = 1
    assert not is_safe(board, 1, 2)
    assert not is_safe(board, 0, 1)
    assert not is_safe(board, 2, 1)
    assert is_safe(board, 3, 1)


def test_format_board_round_trip():
    board = next(solve_n_queens(4))
    text = format_board(board)
    parsed = [[int(ch) for ch in line] for line in text.splitlines()]
    assert parsed == board


def test_negative_size_raises():
    with pytest.raises(ValueError):
        list(solve_n_queens(-1))