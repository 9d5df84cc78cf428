"""
RandomBot implementation for benchmarking.

Selects a random resting placement, providing a baseline for evaluating
evolved genomes.
"""

import random

from tetrisga.agents.bot_base import Placement, PlacementBotBase
from tetrisga.agents.bot_utils import enumerate_placements
from tetrisga.game.pieces import Piece


class RandomBot(PlacementBotBase):
    """
    Bot that picks uniformly among all legal resting placements.

    Supports seeded random generation for reproducible testing.
    """

    name = "RandomBot"  # Class attribute - accessible without instantiation

    def __init__(self, seed: int = 42):
        self.rng = random.Random(seed)

    def select_placement(
        self, board: list[list[int]], piece: Piece
    ) -> Placement | None:
        candidates = list(enumerate_placements(board, piece.shape, piece.y))

        if not candidates:
            return None

        shape, x, y = self.rng.choice(candidates)
        return Placement(shape=shape, x=x, y=y)
