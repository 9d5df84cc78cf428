"""
Board analysis utility functions for placement bots.

Pure functions scoring hypothetical placements without touching any Game
instance. A candidate is merged into a copy of the board; the original is
never modified.
"""

import numpy as np

from tetrisga.game.board import drop_row, is_valid_position
from tetrisga.game.pieces import rotate


def merge_shape(
    board: list[list[int]], shape: list[list[int]], offset_x: int, offset_y: int
) -> list[list[int]]:
    """
    Return a copy of the board with the shape's filled cells set.

    Cells falling outside the board are skipped.
    """
    num_rows, num_cols = len(board), len(board[0])
    merged = [row[:] for row in board]

    for y, row in enumerate(shape):
        for x, cell in enumerate(row):
            if not cell:
                continue
            r, c = offset_y + y, offset_x + x
            if 0 <= r < num_rows and 0 <= c < num_cols:
                merged[r][c] = 1

    return merged


def column_heights(board: list[list[int]]) -> list[int]:
    """Height of each column measured from the floor to its topmost block."""
    num_rows, num_cols = len(board), len(board[0])
    heights = []

    for col in range(num_cols):
        height = 0
        for row in range(num_rows):
            if board[row][col] != 0:
                height = num_rows - row
                break
        heights.append(height)

    return heights


def count_holes(board: list[list[int]]) -> int:
    """Count empty cells that have at least one block above them."""
    num_rows, num_cols = len(board), len(board[0])
    holes = 0

    for col in range(num_cols):
        block_found = False
        for row in range(num_rows):
            if board[row][col] != 0:
                block_found = True
            elif block_found:
                holes += 1

    return holes


def bumpiness(heights: list[int]) -> int:
    return sum(abs(heights[i] - heights[i + 1]) for i in range(len(heights) - 1))


def count_full_rows(board: list[list[int]]) -> int:
    return sum(1 for row in board if all(cell != 0 for cell in row))


def extract_features(
    board: list[list[int]], shape: list[list[int]], offset_x: int, offset_y: int
) -> np.ndarray:
    """
    Feature vector of a resting placement.

    Returns ``[aggregate_height, lines, holes, bumpiness]`` computed on the
    board with the piece merged in. Full rows are counted but not removed.
    """
    merged = merge_shape(board, shape, offset_x, offset_y)
    heights = column_heights(merged)

    return np.array(
        [
            sum(heights),
            count_full_rows(merged),
            count_holes(merged),
            bumpiness(heights),
        ],
        dtype=np.float64,
    )


def evaluate_placement(
    board: list[list[int]],
    shape: list[list[int]],
    offset_x: int,
    offset_y: int,
    weights,
) -> float:
    """Weighted score of a resting placement; higher is preferred."""
    features = extract_features(board, shape, offset_x, offset_y)
    return float(np.dot(features, np.asarray(weights, dtype=np.float64)))


def enumerate_placements(
    board: list[list[int]], shape: list[list[int]], start_y: int
):
    """
    Yield every resting placement ``(shape, x, y)`` reachable by a straight drop.

    Covers four rotation states, each obtained by rotating the previous one,
    and horizontal offsets from -2 to ``num_cols - 1``. A column is skipped if
    the shape does not fit at ``start_y``. Order: rotation, then offset.
    """
    num_cols = len(board[0])

    for _ in range(4):
        for x in range(-2, num_cols):
            if is_valid_position(board, shape, x, start_y):
                yield shape, x, drop_row(board, shape, x, start_y)
        shape = rotate(shape)
