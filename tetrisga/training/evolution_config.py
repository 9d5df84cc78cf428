"""Evolution configuration with documented bounds.

Out-of-range values coming from a user are clamped rather than rejected, so
the evolution loop always has a well-formed population to run.
"""

from dataclasses import dataclass, replace

MIN_POPULATION_SIZE = 10
MAX_POPULATION_SIZE = 500
MIN_MUTATION_RATE = 0.01
MAX_MUTATION_RATE = 0.5
MIN_SPEED_MULTIPLIER = 0.1
MAX_SPEED_MULTIPLIER = 100.0


def clamp(value, low, high):
    return max(low, min(high, value))


@dataclass
class EvolutionConfig:
    """Genetic algorithm parameters applied when a population is (re)created.

    max_moves caps the placements per game; None lets games run until they
    top out, which a well-evolved genome may take a very long time to do.
    """

    population_size: int = 50
    mutation_rate: float = 0.1
    elitism_count: int = 2
    speed_multiplier: float = 1.0
    max_moves: int | None = None

    def clamped(self) -> "EvolutionConfig":
        population_size = int(
            clamp(self.population_size, MIN_POPULATION_SIZE, MAX_POPULATION_SIZE)
        )
        max_moves = self.max_moves
        if max_moves is not None:
            max_moves = max(1, int(max_moves))

        return replace(
            self,
            population_size=population_size,
            mutation_rate=float(
                clamp(self.mutation_rate, MIN_MUTATION_RATE, MAX_MUTATION_RATE)
            ),
            elitism_count=int(clamp(self.elitism_count, 0, population_size)),
            speed_multiplier=clamp_speed(self.speed_multiplier),
            max_moves=max_moves,
        )


def clamp_speed(speed_multiplier: float) -> float:
    return float(clamp(speed_multiplier, MIN_SPEED_MULTIPLIER, MAX_SPEED_MULTIPLIER))
