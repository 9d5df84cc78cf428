from tqdm import tqdm

from tetrisga.game.game_config import GameConfig, GameFactory
from tetrisga.training.evolution import EvolutionController, GenerationSummary
from tetrisga.training.evolution_config import EvolutionConfig


def train(
    generations: int = 20,
    game_config: GameConfig | None = None,
    evolution_config: EvolutionConfig | None = None,
    seed: int | None = None,
    max_steps_per_generation: int | None = None,
    verbose: bool = False,
) -> tuple[EvolutionController, list[GenerationSummary]]:
    """Evolve genomes headlessly for a number of generations.

    Without ``evolution_config.max_moves`` a strong genome can keep a game
    alive for a very long time; set it (or max_steps_per_generation) for
    bounded runs.
    """
    if game_config is None:
        game_config = GameFactory.default()
    if evolution_config is None:
        evolution_config = EvolutionConfig(max_moves=500)

    controller = EvolutionController(game_config, evolution_config, seed=seed)
    controller.create_population()

    for _ in tqdm(range(generations), desc="Evolving"):
        summary = controller.run_generation(max_steps=max_steps_per_generation)

        if summary is None:
            # step budget exhausted: end the generation where it stands
            for game in controller.population:
                game.die()
            controller.run_step()
            summary = controller.history[-1]

        if verbose:
            print(
                f"Gen {summary.generation} | Max fitness: {summary.max_fitness:.0f} "
                f"| Mean: {summary.mean_fitness:.1f} | Lines: {summary.max_lines} "
                f"| Best-ever: {controller.best_fitness:.0f}"
            )

    return controller, controller.history


if __name__ == "__main__":
    controller, history = train(
        generations=10,
        evolution_config=EvolutionConfig(population_size=20, max_moves=300),
        seed=42,
        verbose=True,
    )
    print(f"Best weights: {history[-1].best_weights}")
