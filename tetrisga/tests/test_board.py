"""
Tests for the pure grid helpers: collision checks, dropping and line clears.
"""

from tetrisga.game.board import (
    clear_full_rows,
    create_board,
    drop_row,
    is_valid_position,
)

from conftest import TEST_BOARD_CONFIGS


class TestIsValidPosition:
    """Test placement legality"""

    def test_inside_empty_board(self):
        board = create_board(4, 4)
        assert is_valid_position(board, [[1, 1], [1, 1]], 0, 0)
        assert is_valid_position(board, [[1, 1], [1, 1]], 2, 2)

    def test_outside_horizontal_bounds(self):
        board = create_board(4, 4)
        assert not is_valid_position(board, [[1, 1]], -1, 0)
        assert not is_valid_position(board, [[1, 1]], 3, 0)

    def test_below_floor(self):
        board = create_board(4, 4)
        assert not is_valid_position(board, [[1], [1]], 0, 3)

    def test_above_top_is_allowed(self):
        board = create_board(4, 4)
        assert is_valid_position(board, [[1], [1]], 0, -1)
        assert is_valid_position(board, [[1]], 0, -5)

    def test_overlap_with_occupied_cell(self):
        board = [row.copy() for row in TEST_BOARD_CONFIGS["overhang_3x3"]]
        assert not is_valid_position(board, [[1]], 1, 2)
        assert not is_valid_position(board, [[1, 1]], 0, 0)
        assert is_valid_position(board, [[1]], 1, 1)

    def test_empty_cells_of_shape_may_overlap(self):
        board = [row.copy() for row in TEST_BOARD_CONFIGS["overhang_3x3"]]
        # the hole of the shape sits on the occupied cell
        assert is_valid_position(board, [[1, 0, 1]], 0, 0)

    def test_overlap_ignored_above_board(self):
        board = [[1, 1], [1, 1]]
        assert is_valid_position(board, [[1, 1]], 0, -1)


class TestDropRow:
    """Test straight drops"""

    def test_drop_to_floor(self):
        board = create_board(4, 4)
        assert drop_row(board, [[1, 1], [1, 1]], 0, 0) == 2

    def test_drop_onto_blocks(self):
        board = [row.copy() for row in TEST_BOARD_CONFIGS["right_pair_4x4"]]
        assert drop_row(board, [[1, 1], [1, 1]], 2, 0) == 1
        assert drop_row(board, [[1, 1], [1, 1]], 1, 0) == 1
        assert drop_row(board, [[1, 1], [1, 1]], 0, 0) == 2


class TestClearFullRows:
    """Test line clearing"""

    def test_no_full_rows(self):
        board = create_board(3, 3)
        assert clear_full_rows(board) == 0
        assert board == create_board(3, 3)

    def test_single_full_row(self):
        board = [row.copy() for row in TEST_BOARD_CONFIGS["bottom_row_full_4x4"]]
        board[2][0] = 5

        assert clear_full_rows(board) == 1
        assert board == [[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [5, 0, 0, 0]]

    def test_multiple_rows_keep_relative_order(self):
        board = [row.copy() for row in TEST_BOARD_CONFIGS["two_gaps_4x2"]]

        assert clear_full_rows(board) == 2
        assert board == [[0, 0], [0, 0], [1, 0], [3, 0]]

    def test_adjacent_full_rows(self):
        board = [[0, 6], [1, 1], [2, 2], [0, 3]]

        assert clear_full_rows(board) == 2
        assert board == [[0, 0], [0, 0], [0, 6], [0, 3]]

    def test_dimensions_preserved(self):
        board = [[1, 1, 1]] * 1 + [[2, 2, 2]]
        board = [row.copy() for row in board]

        assert clear_full_rows(board) == 2
        assert len(board) == 2
        assert all(len(row) == 3 for row in board)
