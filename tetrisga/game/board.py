"""
Pure grid helpers shared by the game model and the placement bots.

Boards are ``num_rows`` lists of ``num_cols`` ints, row 0 at the top.
"""


def create_board(num_rows: int, num_cols: int) -> list[list[int]]:
    return [[0] * num_cols for _ in range(num_rows)]


def copy_board(board: list[list[int]]) -> list[list[int]]:
    return [row[:] for row in board]


def is_valid_position(
    board: list[list[int]], shape: list[list[int]], offset_x: int, offset_y: int
) -> bool:
    """
    Check whether a shape fits on the board at the given top-left offset.

    Filled cells must stay inside ``[0, num_cols)`` horizontally and above the
    floor. Cells above the top edge (negative row) are allowed, so pieces may
    spawn or rotate partially off-screen; only cells on the board are checked
    for overlap.
    """
    num_rows, num_cols = len(board), len(board[0])

    for y, row in enumerate(shape):
        for x, cell in enumerate(row):
            if not cell:
                continue
            new_x = offset_x + x
            new_y = offset_y + y
            if new_x < 0 or new_x >= num_cols or new_y >= num_rows:
                return False
            if new_y >= 0 and board[new_y][new_x]:
                return False
    return True


def drop_row(
    board: list[list[int]], shape: list[list[int]], offset_x: int, offset_y: int
) -> int:
    """Return the lowest row the shape reaches by falling straight down."""
    y = offset_y
    while is_valid_position(board, shape, offset_x, y + 1):
        y += 1
    return y


def clear_full_rows(board: list[list[int]]) -> int:
    """
    Remove all full rows in place, inserting empty rows at the top.

    Returns the number of rows removed. Rows above a removed row shift down by
    one, so the same index is checked again after each removal.
    """
    num_rows, num_cols = len(board), len(board[0])
    cleared = 0

    row = num_rows - 1
    while row >= 0:
        if all(cell != 0 for cell in board[row]):
            del board[row]
            board.insert(0, [0] * num_cols)
            cleared += 1
        else:
            row -= 1

    return cleared
