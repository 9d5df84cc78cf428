import random
from dataclasses import dataclass
from enum import Enum

from tetrisga.game.board import (
    clear_full_rows,
    copy_board,
    create_board,
    drop_row,
    is_valid_position,
)
from tetrisga.game.game_config import GameConfig, GameFactory
from tetrisga.game.pieces import SHAPES, Piece, rotate, spawn_piece

# Points per number of rows cleared at once, multiplied by the level
LINE_SCORES = {1: 40, 2: 100, 3: 300, 4: 1200}


class GameEvent(Enum):
    """Side effects a front-end (audio, effects) may react to."""

    MOVE = "move"
    ROTATE = "rotate"
    DROP = "drop"
    LINE_CLEAR = "line_clear"
    DEATH = "death"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a game for renderers and dashboards"""

    board: list[list[int]]
    piece_id: int
    piece_shape: list[list[int]]
    piece_x: int
    piece_y: int
    ghost_y: int
    next_piece_id: int
    score: int
    lines: int
    level: int
    dead: bool


class Game:
    """A single falling-block game.

    Owns the board, the current and next piece, scoring state and, in
    self-play, a private copy of the genome driving it. Once dead the game is
    frozen: every mutating operation turns into a no-op.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        genome=None,
        seed: int | None = None,
        record_events: bool = True,
    ):
        if config is None:
            config = GameFactory.default()

        self.config = config
        self.rng = random.Random(seed)
        self.record_events = record_events
        self.events: list[GameEvent] = []

        self.board = create_board(config.num_rows, config.num_cols)
        self.score = 0
        self.lines = 0
        self.level = 1
        self.dead = False
        self.current_piece = self.spawn_piece()
        self.next_piece = self.spawn_piece()

        # self-play state
        self.genome = genome.clone() if genome is not None else None
        self.fitness = 0
        self.moves_taken = 0

    def spawn_piece(self) -> Piece:
        return spawn_piece(self.config.num_cols, self.rng)

    def is_valid(self, shape: list[list[int]], offset_x: int, offset_y: int) -> bool:
        return is_valid_position(self.board, shape, offset_x, offset_y)

    def get_board(self) -> list[list[int]]:
        """Return a copy of the board to prevent external modifications"""
        return copy_board(self.board)

    def set_board(self, board: list[list[int]]):
        if len(board) != self.config.num_rows:
            raise ValueError(
                f"Board row count {len(board)} does not match expected {self.config.num_rows}"
            )
        if any(len(row) != self.config.num_cols for row in board):
            raise ValueError("All board rows must match expected number of columns.")
        for row in board:
            for val in row:
                if not (0 <= val <= len(SHAPES)):
                    raise ValueError(
                        f"Invalid cell value {val}, must be in range 0 to {len(SHAPES)}"
                    )

        self.board = copy_board(board)

    def _emit(self, event: GameEvent):
        if self.record_events:
            self.events.append(event)

    def drain_events(self) -> list[GameEvent]:
        events = self.events
        self.events = []
        return events

    # --- placement rules ---

    def place_piece(self):
        """Lock the current piece into the board at its current offset.

        A piece locking with any cell above the top edge tops the game out;
        the board is left untouched in that case.
        """
        if self.dead:
            return

        cells = self.current_piece.cells()
        if any(row < 0 for row, _ in cells):
            self.die()
            return

        for row, col in cells:
            self.board[row][col] = self.current_piece.piece_id

        self.clear_lines()
        self.current_piece = self.next_piece
        self.next_piece = self.spawn_piece()

        piece = self.current_piece
        if not self.is_valid(piece.shape, piece.x, piece.y):
            self.die()

    def clear_lines(self) -> int:
        cleared = clear_full_rows(self.board)

        if cleared > 0:
            self.score += LINE_SCORES.get(cleared, 0) * self.level
            self.lines += cleared
            self.level = self.lines // 10 + 1
            self._emit(GameEvent.LINE_CLEAR)

        return cleared

    def die(self):
        if self.dead:
            return
        self.dead = True
        # moves_taken rewards survival and breaks ties between equal scores
        self.fitness = self.score + self.lines * 1000 + self.moves_taken
        self._emit(GameEvent.DEATH)

    def commit_placement(self, shape: list[list[int]], x: int, y: int):
        """Move the current piece to a chosen resting position and lock it."""
        if self.dead:
            return
        self.current_piece.shape = shape
        self.current_piece.x = x
        self.current_piece.y = y
        self.place_piece()
        self.moves_taken += 1

    # --- piece control ---

    def move(self, dx: int) -> bool:
        if self.dead:
            return False
        piece = self.current_piece
        if not self.is_valid(piece.shape, piece.x + dx, piece.y):
            return False
        piece.x += dx
        self._emit(GameEvent.MOVE)
        return True

    def move_left(self) -> bool:
        return self.move(-1)

    def move_right(self) -> bool:
        return self.move(1)

    def soft_drop(self) -> bool:
        if self.dead:
            return False
        piece = self.current_piece
        if not self.is_valid(piece.shape, piece.x, piece.y + 1):
            return False
        piece.y += 1
        return True

    def rotate_piece(self) -> bool:
        """Rotate clockwise, kicking one column left or right if blocked."""
        if self.dead:
            return False
        piece = self.current_piece
        rotated = rotate(piece.shape)

        for kick in (0, -1, 1):
            if self.is_valid(rotated, piece.x + kick, piece.y):
                piece.shape = rotated
                piece.x += kick
                self._emit(GameEvent.ROTATE)
                return True
        return False

    def step_down(self):
        """Apply one gravity step: fall a row, or lock the piece if blocked."""
        if self.dead:
            return
        if not self.soft_drop():
            self.place_piece()
            self._emit(GameEvent.DROP)

    def hard_drop(self):
        if self.dead:
            return
        self.current_piece.y = self.ghost_y()
        self.place_piece()
        self._emit(GameEvent.DROP)

    def ghost_y(self) -> int:
        piece = self.current_piece
        return drop_row(self.board, piece.shape, piece.x, piece.y)

    def snapshot(self) -> GameSnapshot:
        piece = self.current_piece
        return GameSnapshot(
            board=self.get_board(),
            piece_id=piece.piece_id,
            piece_shape=[row.copy() for row in piece.shape],
            piece_x=piece.x,
            piece_y=piece.y,
            ghost_y=self.ghost_y(),
            next_piece_id=self.next_piece.piece_id,
            score=self.score,
            lines=self.lines,
            level=self.level,
            dead=self.dead,
        )
