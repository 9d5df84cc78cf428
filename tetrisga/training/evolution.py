"""Generational genetic algorithm over populations of self-playing games.

Every game in a population owns its own genome. A generation ends when all
games are dead; the next population is built from elite clones of the
fittest genome plus mutated offspring of tournament winners, and replaces the
old population in a single swap.
"""

import random
from dataclasses import dataclass

from tetrisga.agents.genome import Genome
from tetrisga.agents.heuristic_bot import ai_move
from tetrisga.game.game import Game
from tetrisga.game.game_config import GameConfig, GameFactory
from tetrisga.training.evolution_config import EvolutionConfig


@dataclass
class PopulationStats:
    """Dashboard view of the running population"""

    generation: int
    alive: int
    population_size: int
    best_fitness: float
    best_weights: list[float] | None
    max_lines: int


@dataclass
class GenerationSummary:
    """Fitness figures of a finished generation, recorded before it is replaced"""

    generation: int
    max_fitness: float
    mean_fitness: float
    max_lines: int
    best_weights: list[float] | None


class EvolutionController:
    """Runs and evolves a population of genome-driven games.

    Games are processed in population order within a step, so a fixed seed
    reproduces a run exactly.
    """

    def __init__(
        self,
        game_config: GameConfig | None = None,
        evolution_config: EvolutionConfig | None = None,
        seed: int | None = None,
    ):
        if game_config is None:
            game_config = GameFactory.default()
        if evolution_config is None:
            evolution_config = EvolutionConfig()

        self.game_config = game_config
        self.config = evolution_config.clamped()
        self.rng = random.Random(seed)

        self.population: list[Game] = []
        self.generation = 0
        self.best_fitness = 0
        self.history: list[GenerationSummary] = []

    def _new_game(self, genome: Genome) -> Game:
        return Game(
            self.game_config,
            genome=genome,
            seed=self.rng.getrandbits(32),
            record_events=False,
        )

    def create_population(self):
        self.population = [
            self._new_game(Genome(rng=self.rng))
            for _ in range(self.config.population_size)
        ]
        self.generation = 1

    def reset(self, evolution_config: EvolutionConfig | None = None):
        """Forget all progress, optionally switching to a new configuration."""
        if evolution_config is not None:
            self.config = evolution_config.clamped()
        self.population = []
        self.generation = 0
        self.best_fitness = 0
        self.history = []

    def all_dead(self) -> bool:
        return all(game.dead for game in self.population)

    def alive_count(self) -> int:
        return sum(1 for game in self.population if not game.dead)

    def run_step(self) -> bool:
        """
        Advance every living game by exactly one placement.

        If no game was alive when the step started, the generation is over:
        the population is evolved instead and True is returned.
        """
        any_alive = False

        for game in self.population:
            if game.dead:
                continue
            any_alive = True
            ai_move(game)
            if (
                self.config.max_moves is not None
                and game.moves_taken >= self.config.max_moves
            ):
                game.die()

        if not any_alive:
            self.evolve()
            return True
        return False

    def run_generation(self, max_steps: int | None = None) -> GenerationSummary | None:
        """Step until the current generation has been evolved."""
        steps = 0
        while max_steps is None or steps < max_steps:
            if self.run_step():
                return self.history[-1]
            steps += 1
        return None

    def evolve(self):
        max_fitness = float("-inf")
        best_game = None

        for game in self.population:
            if game.fitness > max_fitness:
                max_fitness = game.fitness
                best_game = game
        if max_fitness > self.best_fitness:
            self.best_fitness = max_fitness

        self._record_summary(best_game)

        new_population = []
        for _ in range(self.config.elitism_count):
            if best_game is not None:
                new_population.append(self._new_game(best_game.genome))

        while len(new_population) < self.config.population_size:
            parent = self.pick_one()
            if parent is not None and parent.genome is not None:
                child = parent.genome.clone()
                child.mutate(self.config.mutation_rate, self.rng)
                new_population.append(self._new_game(child))
            else:
                new_population.append(self._new_game(Genome(rng=self.rng)))

        self.population = new_population
        self.generation += 1

    def pick_one(self) -> Game | None:
        """Binary tournament: the fitter of two uniform picks from the population."""
        if not self.population:
            return None
        a = self.rng.choice(self.population)
        b = self.rng.choice(self.population)
        return a if a.fitness > b.fitness else b

    def _record_summary(self, best_game: Game | None):
        if not self.population:
            return
        fitnesses = [game.fitness for game in self.population]
        self.history.append(
            GenerationSummary(
                generation=self.generation,
                max_fitness=max(fitnesses),
                mean_fitness=sum(fitnesses) / len(fitnesses),
                max_lines=max(game.lines for game in self.population),
                best_weights=(
                    best_game.genome.genes.tolist()
                    if best_game is not None and best_game.genome is not None
                    else None
                ),
            )
        )

    def display_game(self) -> Game | None:
        """First living game, falling back to the first game of the population."""
        for game in self.population:
            if not game.dead:
                return game
        return self.population[0] if self.population else None

    def stats(self) -> PopulationStats:
        best_current = self.population[0] if self.population else None
        for game in self.population:
            if game.score > best_current.score:
                best_current = game

        best_weights = None
        if best_current is not None and best_current.genome is not None:
            best_weights = best_current.genome.genes.tolist()

        return PopulationStats(
            generation=self.generation,
            alive=self.alive_count(),
            population_size=self.config.population_size,
            best_fitness=self.best_fitness,
            best_weights=best_weights,
            max_lines=max((game.lines for game in self.population), default=0),
        )
