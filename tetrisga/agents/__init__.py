"""
Agent implementations for tetrisga.

This module provides the evolvable genome, the heuristic placement search it
drives, and a random baseline bot for comparison purposes.
"""

from .genome import Genome

# Placement bots
from .bot_base import Placement, PlacementBotBase
from .heuristic_bot import HeuristicBot, ai_move
from .random_bot import RandomBot

__all__ = [
    'Genome',
    'Placement',
    'PlacementBotBase',
    'HeuristicBot',
    'RandomBot',
    'ai_move',
]
