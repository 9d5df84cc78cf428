"""Tetromino shapes and the falling piece record.

Shapes are rectangular 0/1 matrices indexed ``shape[row][col]``. The piece
type id doubles as the value written into the board when a piece locks.
"""

import random
from dataclasses import dataclass

SHAPES: dict[int, list[list[int]]] = {
    1: [[1, 1, 1, 1]],  # I
    2: [[1, 1, 1], [0, 1, 0]],  # T
    3: [[1, 1, 1], [1, 0, 0]],  # L
    4: [[1, 1, 1], [0, 0, 1]],  # J
    5: [[1, 1, 0], [0, 1, 1]],  # Z
    6: [[0, 1, 1], [1, 1, 0]],  # S
    7: [[1, 1], [1, 1]],  # O
}

PIECE_NAMES = {1: "I", 2: "T", 3: "L", 4: "J", 5: "Z", 6: "S", 7: "O"}
PIECE_IDS = {name: piece_id for piece_id, name in PIECE_NAMES.items()}


@dataclass
class Piece:
    piece_id: int
    shape: list[list[int]]
    x: int
    y: int

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self) -> list[tuple[int, int]]:
        """Absolute (row, col) board coordinates of the filled cells."""
        return [
            (self.y + r, self.x + c)
            for r, row in enumerate(self.shape)
            for c, cell in enumerate(row)
            if cell
        ]


def rotate(shape: list[list[int]]) -> list[list[int]]:
    """Rotate a shape 90 degrees clockwise without touching the input.

    An N x M input becomes M x N with ``out[x][N - 1 - y] = in[y][x]``.
    """
    num_rows = len(shape)
    num_cols = len(shape[0])
    rotated = [[0] * num_rows for _ in range(num_cols)]
    for y in range(num_rows):
        for x in range(num_cols):
            rotated[x][num_rows - 1 - y] = shape[y][x]
    return rotated


def create_piece(piece_id: int, num_cols: int) -> Piece:
    """Create a piece of the given type centered horizontally at the top."""
    if piece_id not in SHAPES:
        raise ValueError(f"Invalid piece id {piece_id}, must be in range 1 to 7")
    shape = [row.copy() for row in SHAPES[piece_id]]
    return Piece(
        piece_id=piece_id,
        shape=shape,
        x=num_cols // 2 - len(shape[0]) // 2,
        y=0,
    )


def spawn_piece(num_cols: int, rng: random.Random | None = None) -> Piece:
    """Spawn a uniformly random piece type."""
    randint_func = rng.randint if rng is not None else random.randint
    return create_piece(randint_func(1, len(SHAPES)), num_cols)
