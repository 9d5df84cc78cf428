"""
Shared test utilities for tetrisga tests.

Contains only what is actually used:
- Static board configurations (TEST_BOARD_CONFIGS)
- A factory fixture building games with a chosen board and current piece
- A recording session listener
"""

import pytest

from tetrisga.game.game import Game
from tetrisga.game.game_config import GameFactory
from tetrisga.game.pieces import PIECE_IDS, create_piece
from tetrisga.training.session import SessionListener

TEST_BOARD_CONFIGS = {
    "empty_4x4": [[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
    "bottom_row_full_4x4": [[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [1, 1, 1, 1]],
    "right_pair_4x4": [[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 7, 7]],
    "overhang_3x3": [[0, 2, 0], [0, 0, 0], [0, 3, 0]],
    "full_2x2": [[1, 1], [1, 1]],
    "two_gaps_4x2": [[1, 0], [2, 2], [3, 0], [4, 4]],
}


@pytest.fixture
def make_game():
    """Build a game with the given board and (optionally) current piece."""

    def _make_game(board, piece: str | None = None, seed: int = 0, genome=None):
        config = GameFactory.custom(num_rows=len(board), num_cols=len(board[0]))
        game = Game(config, genome=genome, seed=seed)
        game.set_board(board)
        if piece is not None:
            game.current_piece = create_piece(PIECE_IDS[piece], config.num_cols)
        return game

    return _make_game


class RecordingListener(SessionListener):

    def __init__(self):
        self.events = []
        self.game_overs = []

    def on_event(self, event):
        self.events.append(event)

    def on_game_over(self, score, lines):
        self.game_overs.append((score, lines))


@pytest.fixture
def listener():
    return RecordingListener()
