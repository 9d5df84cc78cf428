"""
Base interface for placement bots.

Provides a focused interface for bots that choose where the current piece
should come to rest, without any learning or persistence concerns.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from tetrisga.game.pieces import Piece


@dataclass
class Placement:
    """A resting position for a piece: rotated shape plus top-left offset"""

    shape: list[list[int]]
    x: int
    y: int
    score: float = 0.0


class PlacementBotBase(ABC):
    """
    Abstract base class for bots that place falling pieces.

    Implementations inspect the board and the current piece and return the
    placement to commit.
    """

    @abstractmethod
    def select_placement(
        self, board: list[list[int]], piece: Piece
    ) -> Placement | None:
        """
        Select where the piece should come to rest.

        Args:
            board: 2D list representing the game board, where 0 = empty,
                   positive integers = locked blocks
            piece: The falling piece; its shape is the unrotated starting
                   orientation and its y is the search starting row

        Returns:
            Placement to commit, or None if no legal placement exists
        """
        pass
