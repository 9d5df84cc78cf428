"""
Benchmark runner for consistent bot evaluation.

Plays placement bots on seeded games so that every bot faces the identical
piece sequence, and collects performance metrics for comparison.
"""

import random
from dataclasses import dataclass
from typing import Any

from tqdm import tqdm

from tetrisga.agents.bot_base import PlacementBotBase
from tetrisga.game.game import Game
from tetrisga.game.game_config import GameConfig, GameFactory


@dataclass
class BotPerformance:
    """Performance metrics for a single bot on a single game"""

    bot_name: str
    game_id: int
    score: int
    lines: int
    moves_made: int
    topped_out: bool


class BenchmarkRunner:
    """Runs placement bots against a reproducible set of games"""

    def __init__(
        self,
        num_games: int = 20,
        config: GameConfig | None = None,
        base_seed: int = 42,
        max_moves: int = 500,
    ):
        if config is None:
            config = GameFactory.default()

        self.config = config
        self.max_moves = max_moves  # Safety limit for bots that never top out

        rng = random.Random(base_seed)
        self.game_seeds = [rng.randint(0, 2**31 - 1) for _ in range(num_games)]
        self.results: dict[str, list[BotPerformance]] = {}

    def run_bot_on_game(
        self, bot: PlacementBotBase, game_id: int, seed: int
    ) -> BotPerformance:
        """Play one seeded game to the end (or the move limit)"""
        game = Game(self.config, seed=seed, record_events=False)
        moves_made = 0

        while not game.dead and moves_made < self.max_moves:
            placement = bot.select_placement(game.board, game.current_piece)

            if placement is None:
                game.die()
                break

            game.commit_placement(placement.shape, placement.x, placement.y)
            moves_made += 1

        return BotPerformance(
            bot_name=getattr(bot, "name", bot.__class__.__name__),
            game_id=game_id,
            score=game.score,
            lines=game.lines,
            moves_made=moves_made,
            topped_out=game.dead,
        )

    def evaluate_bot(self, bot_name: str, bot: PlacementBotBase) -> list[BotPerformance]:
        """Evaluate a bot against every seeded game"""
        results = []

        print(f"Evaluating {bot_name} against {len(self.game_seeds)} games...")
        for game_id, seed in enumerate(tqdm(self.game_seeds, desc=f"Running {bot_name}")):
            results.append(self.run_bot_on_game(bot, game_id, seed))

        self.results[bot_name] = results
        return results

    def get_bot_summary(self, bot_name: str) -> dict[str, Any]:
        """Get summary statistics for a bot's performance"""
        results = self.results.get(bot_name)
        if not results:
            return {}

        total_games = len(results)
        return {
            "total_games": total_games,
            "avg_score": sum(r.score for r in results) / total_games,
            "avg_lines": sum(r.lines for r in results) / total_games,
            "avg_moves_made": sum(r.moves_made for r in results) / total_games,
            "top_out_rate": sum(1 for r in results if r.topped_out) / total_games,
        }

    def compare_bots(
        self, bot_names: list[str] | None = None
    ) -> dict[str, dict[str, Any]]:
        """Compare multiple bots' performance"""
        if bot_names is None:
            bot_names = list(self.results.keys())

        return {
            bot_name: self.get_bot_summary(bot_name)
            for bot_name in bot_names
            if bot_name in self.results
        }
