import numpy as np
import pytest

from c4rollout.board import COLUMNS, LEVELS, Board, Circle, get_winner, line_through, opponent
from boards import R, Y, _, board_from_rows


def test_get_out_of_range_is_invalid():
    board = Board()
    for col, level in [(-1, 0), (7, 0), (0, -1), (0, 6), (100, -100), (-1, 6)]:
        assert board.get(col, level) == Circle.INVALID


def test_set_out_of_range_is_noop():
    board = Board.from_moves([3, 3, 2])
    before = board.copy()
    for col, level in [(-1, 0), (7, 0), (0, -1), (0, 6)]:
        board.set(col, level, Circle.YELLOW)
    assert board == before


def test_set_and_get():
    board = Board()
    board.set(2, 4, Circle.RED)
    assert board.get(2, 4) == Circle.RED
    assert board.cells[4, 2] == Circle.RED
    assert board.get(4, 2) == Circle.EMPTY


def test_clean_then_winner_is_in_progress(draw_board):
    draw_board.clean()
    assert draw_board.pieces() == 0
    assert get_winner(draw_board) == Circle.EMPTY
    assert get_winner(Board()) == Circle.EMPTY


def test_drop_stacks_from_the_bottom():
    board = Board()
    assert board.drop(3, Circle.RED)
    assert board.drop(3, Circle.YELLOW)
    assert board.get(3, 0) == Circle.RED
    assert board.get(3, 1) == Circle.YELLOW
    assert board.get(3, 2) == Circle.EMPTY
    assert board.level_of(3) == 2
    assert board.pieces() == 2


def test_drop_changes_exactly_one_cell_and_keeps_gravity():
    board = Board.from_moves([0, 1, 1, 2, 2, 3, 2])
    for col in range(COLUMNS):
        before = board.cells.copy()
        height = board.level_of(col)
        assert board.drop(col, Circle.YELLOW)
        assert int(np.count_nonzero(board.cells != before)) == 1
        assert board.level_of(col) == height + 1
        column = board.cells[:, col]
        filled = np.nonzero(column)[0]
        assert filled.tolist() == list(range(len(filled)))


def test_seventh_drop_into_a_column_fails():
    board = Board()
    for _ in range(LEVELS):
        assert board.drop(3, Circle.RED)
    assert board.column_is_full(3)
    before = board.copy()
    assert not board.drop(3, Circle.RED)
    assert board == before


def test_column_is_full_out_of_range_reads_full():
    board = Board()
    assert board.column_is_full(-1)
    assert board.column_is_full(COLUMNS)
    assert not board.column_is_full(0)


def test_copy_is_independent():
    board = Board.from_moves([3, 4])
    dup = board.copy()
    assert dup == board

    dup.drop(0, Circle.YELLOW)
    assert board.get(0, 0) == Circle.EMPTY
    board.drop(6, Circle.RED)
    assert dup.get(6, 0) == Circle.EMPTY
    assert dup != board


def test_copy_from_overwrites():
    src = Board.from_moves([1, 2, 3])
    dst = Board.from_moves([6, 6, 6, 6])
    dst.copy_from(src)
    assert dst == src
    src.clean()
    assert dst.pieces() == 3


def test_legal_columns_skip_full():
    board = Board.from_moves([0] * LEVELS + [6] * LEVELS)
    assert board.legal_columns() == [1, 2, 3, 4, 5]


def test_from_moves_alternates_colors():
    board = Board.from_moves([3, 3, 4])
    assert board.get(3, 0) == Circle.RED
    assert board.get(3, 1) == Circle.YELLOW
    assert board.get(4, 0) == Circle.RED

    board = Board.from_moves([0], first=Circle.YELLOW)
    assert board.get(0, 0) == Circle.YELLOW


def test_from_moves_rejects_bad_columns():
    with pytest.raises(ValueError):
        Board.from_moves([7])
    with pytest.raises(ValueError):
        Board.from_moves([2] * (LEVELS + 1))


def test_board_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Board(np.zeros((7, 6), dtype=np.int8))


def test_board_rejects_values_that_are_not_cells():
    for bad in (3, 5, -1):
        cells = np.zeros((LEVELS, COLUMNS), dtype=np.int8)
        cells[0, 0] = bad
        with pytest.raises(ValueError):
            Board(cells)


def test_set_rejects_outcome_codes():
    board = Board()
    for bad in (Circle.DRAW, Circle.INVALID, 5):
        with pytest.raises(ValueError):
            board.set(0, 0, bad)
    assert board.pieces() == 0


def test_level_of_off_board_reads_full():
    board = Board.from_moves([6, 6, 0])
    assert board.level_of(6) == 2
    assert board.level_of(-1) == LEVELS
    assert board.level_of(COLUMNS) == LEVELS


def test_opponent():
    assert opponent(Circle.YELLOW) == Circle.RED
    assert opponent(Circle.RED) == Circle.YELLOW
    with pytest.raises(ValueError):
        opponent(Circle.EMPTY)


@pytest.mark.parametrize(
    "cells",
    [
        [(1, 0), (2, 0), (3, 0), (4, 0)],  # horizontal
        [(3, 0), (3, 1), (3, 2), (3, 3)],  # vertical
        [(0, 0), (1, 1), (2, 2), (3, 3)],  # diagonal up-right
        [(6, 0), (5, 1), (4, 2), (3, 3)],  # diagonal up-left
        [(3, 2), (4, 3), (5, 4), (6, 5)],  # diagonal touching the top-right corner
        [(3, 5), (4, 5), (5, 5), (6, 5)],  # horizontal along the top edge
    ],
)
def test_four_in_a_row_wins(cells):
    board = Board()
    for col, level in cells:
        board.set(col, level, Circle.YELLOW)
    assert get_winner(board) == Circle.YELLOW

    col, level = cells[0]
    assert board.wins_through(col, level)

    board.set(col, level, Circle.RED)
    assert get_winner(board) == Circle.EMPTY


def test_three_in_a_row_is_not_a_win():
    board = board_from_rows(
        [
            [_, _, _, _, _, _, _],
            [_, _, _, _, _, _, _],
            [_, _, _, _, _, _, _],
            [R, _, _, _, _, _, _],
            [R, _, _, _, _, Y, _],
            [R, _, _, _, Y, Y, Y],
        ]
    )
    assert get_winner(board) == Circle.EMPTY
    assert not board.wins_through(6, 0)


def test_run_longer_than_four_wins():
    board = board_from_rows(
        [
            [_, _, _, _, _, _, _],
            [_, _, _, _, _, _, _],
            [_, _, _, _, _, _, _],
            [_, _, _, _, _, _, _],
            [Y, Y, Y, R, Y, Y, Y],
            [R, R, R, R, R, Y, Y],
        ]
    )
    assert get_winner(board) == Circle.RED


def test_red_diagonal_win():
    board = board_from_rows(
        [
            [_, _, _, _, _, _, _],
            [_, _, _, _, _, _, _],
            [_, _, _, R, _, _, _],
            [_, _, R, Y, _, _, _],
            [_, R, Y, Y, _, _, _],
            [R, Y, Y, Y, R, _, _],
        ]
    )
    assert get_winner(board) == Circle.RED
    assert board.wins_through(3, 3)


def test_full_board_without_line_is_draw(draw_board):
    assert draw_board.pieces() == COLUMNS * LEVELS
    assert draw_board.legal_columns() == []
    assert get_winner(draw_board) == Circle.DRAW


def test_full_board_with_line_reports_winner(draw_board):
    # Bottom row Y Y R R Y Y R becomes Y Y Y Y Y Y R.
    draw_board.set(2, 0, Circle.YELLOW)
    draw_board.set(3, 0, Circle.YELLOW)
    assert get_winner(draw_board) == Circle.YELLOW


def test_line_through_on_nested_lists_matches_board():
    board = board_from_rows(
        [
            [_, _, _, _, _, _, _],
            [_, _, _, _, _, _, _],
            [_, _, _, R, _, _, _],
            [_, _, R, Y, _, _, _],
            [_, R, Y, Y, _, _, _],
            [R, Y, Y, Y, R, _, _],
        ]
    )
    grid = board.cells.tolist()
    for col in range(COLUMNS):
        for level in range(LEVELS):
            color = grid[level][col]
            if color:
                assert line_through(grid, col, level, color) == board.wins_through(col, level)
    assert line_through(grid, 0, 0, R)
    assert not line_through(grid, 1, 0, Y)
