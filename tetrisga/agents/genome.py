"""Linear heuristic genome evolved by the genetic algorithm."""

import random

import numpy as np

# Feature order shared with bot_utils.extract_features
FEATURE_NAMES = ("aggregate_height", "lines", "holes", "bumpiness")
NUM_GENES = len(FEATURE_NAMES)

INITIAL_GENE_RANGE = 0.5
MUTATION_STEP = 0.2


class Genome:
    """Four weights scoring a candidate placement.

    The weights are bound, in order, to aggregate height, completed lines,
    holes and bumpiness. Their signs are not fixed: selection pressure is what
    drives e.g. the holes weight negative.
    """

    def __init__(self, genes=None, rng: random.Random | None = None):
        if genes is None:
            uniform = rng.uniform if rng is not None else random.uniform
            genes = [
                uniform(-INITIAL_GENE_RANGE, INITIAL_GENE_RANGE)
                for _ in range(NUM_GENES)
            ]

        self.genes = np.array(genes, dtype=np.float64)
        if self.genes.shape != (NUM_GENES,):
            raise ValueError(
                f"Genome needs exactly {NUM_GENES} genes, got shape {self.genes.shape}"
            )

    def clone(self) -> "Genome":
        return Genome(self.genes.copy())

    def mutate(self, rate: float, rng: random.Random | None = None):
        """Perturb each gene in place with probability ``rate``."""
        rng = rng if rng is not None else random
        for i in range(NUM_GENES):
            if rng.random() < rate:
                self.genes[i] += rng.uniform(-MUTATION_STEP, MUTATION_STEP)

    def as_dict(self) -> dict[str, float]:
        return {name: float(w) for name, w in zip(FEATURE_NAMES, self.genes)}

    def __repr__(self) -> str:
        weights = ", ".join(f"{w:.3f}" for w in self.genes)
        return f"Genome([{weights}])"
