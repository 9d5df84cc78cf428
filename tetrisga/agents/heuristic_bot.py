"""
HeuristicBot implementation: greedy one-piece placement search.

Tries every rotation and horizontal offset of the current piece, drops it to
its resting row and keeps the placement with the highest weighted score.
"""

import numpy as np

from tetrisga.agents.bot_base import Placement, PlacementBotBase
from tetrisga.agents.bot_utils import enumerate_placements, evaluate_placement
from tetrisga.game.pieces import Piece


class HeuristicBot(PlacementBotBase):
    """
    Bot that greedily maximizes a linear heuristic over resting placements.

    The weights follow the genome feature order
    ``[aggregate_height, lines, holes, bumpiness]``.
    """

    name = "HeuristicBot"

    def __init__(self, weights):
        self.weights = np.asarray(weights, dtype=np.float64)

    def select_placement(
        self, board: list[list[int]], piece: Piece
    ) -> Placement | None:
        """
        Select the highest scoring resting placement.

        Ties keep the first placement found in search order (rotation
        ascending, then offset ascending).

        Args:
            board: Current game board state
            piece: Falling piece, searched from its current row

        Returns:
            Best placement, or None if the piece fits nowhere
        """
        best = None

        for shape, x, y in enumerate_placements(board, piece.shape, piece.y):
            score = evaluate_placement(board, shape, x, y, self.weights)
            if best is None or score > best.score:
                best = Placement(shape=shape, x=x, y=y, score=score)

        return best


def ai_move(game) -> bool:
    """
    Let a genome-driven game place its current piece.

    Returns True if a piece was committed. Dead games and games without a
    genome are left alone; a game with no legal placement dies.
    """
    if game.dead or game.genome is None:
        return False

    bot = HeuristicBot(game.genome.genes)
    placement = bot.select_placement(game.board, game.current_piece)

    if placement is None:
        game.die()
        return False

    game.commit_placement(placement.shape, placement.x, placement.y)
    return True
