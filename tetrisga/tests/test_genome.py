import random

import numpy as np
import pytest

from tetrisga.agents.genome import INITIAL_GENE_RANGE, MUTATION_STEP, NUM_GENES, Genome


class TestGenome:
    """Test genome creation, cloning and mutation"""

    def test_random_genes_in_range(self):
        rng = random.Random(0)
        for _ in range(50):
            genome = Genome(rng=rng)
            assert genome.genes.shape == (NUM_GENES,)
            assert np.all(np.abs(genome.genes) <= INITIAL_GENE_RANGE)

    def test_seeded_genomes_match(self):
        a = Genome(rng=random.Random(11))
        b = Genome(rng=random.Random(11))
        np.testing.assert_array_equal(a.genes, b.genes)

    def test_wrong_gene_count(self):
        with pytest.raises(ValueError):
            Genome([0.1, 0.2, 0.3])

    def test_clone_is_independent(self):
        genome = Genome([0.1, -0.2, 0.3, -0.4])
        clone = genome.clone()

        clone.genes[0] = 5.0
        clone.mutate(1.0, random.Random(0))

        np.testing.assert_array_equal(genome.genes, [0.1, -0.2, 0.3, -0.4])

    def test_mutate_rate_zero_changes_nothing(self):
        genome = Genome([0.1, -0.2, 0.3, -0.4])
        genome.mutate(0.0, random.Random(0))
        np.testing.assert_array_equal(genome.genes, [0.1, -0.2, 0.3, -0.4])

    def test_mutate_rate_one_changes_every_gene(self):
        original = np.array([0.1, -0.2, 0.3, -0.4])
        genome = Genome(original)
        genome.mutate(1.0, random.Random(3))

        delta = np.abs(genome.genes - original)
        assert np.all(delta > 0)
        assert np.all(delta <= MUTATION_STEP)

    def test_as_dict(self):
        genome = Genome([1.0, 2.0, 3.0, 4.0])
        assert genome.as_dict() == {
            "aggregate_height": 1.0,
            "lines": 2.0,
            "holes": 3.0,
            "bumpiness": 4.0,
        }
