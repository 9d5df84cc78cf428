import random

import pytest

from tetrisga.game.pieces import SHAPES, create_piece, rotate, spawn_piece


class TestRotate:
    """Test clockwise shape rotation"""

    @pytest.mark.parametrize("piece_id", sorted(SHAPES))
    def test_four_rotations_return_to_origin(self, piece_id):
        shape = SHAPES[piece_id]
        assert rotate(rotate(rotate(rotate(shape)))) == shape

    def test_rectangular_shape_round_trip(self):
        shape = [[1, 0, 1], [1, 1, 0]]
        assert rotate(rotate(rotate(rotate(shape)))) == shape

    def test_rotate_swaps_dimensions(self):
        rotated = rotate([[1, 1, 1, 1]])
        assert rotated == [[1], [1], [1], [1]]

    def test_rotate_t_piece_clockwise(self):
        assert rotate([[1, 1, 1], [0, 1, 0]]) == [[0, 1], [1, 1], [0, 1]]

    def test_rotate_does_not_mutate_input(self):
        shape = [[1, 1, 0], [0, 1, 1]]
        original = [row.copy() for row in shape]
        rotate(shape)
        assert shape == original


class TestSpawning:
    """Test piece creation and spawn offsets"""

    def test_spawn_is_centered_at_top(self):
        piece = create_piece(1, 10)
        assert piece.x == 3  # 10 // 2 - 4 // 2
        assert piece.y == 0

        piece = create_piece(2, 10)
        assert piece.x == 4  # 10 // 2 - 3 // 2

    def test_created_shape_is_a_copy(self):
        piece = create_piece(7, 10)
        piece.shape[0][0] = 0
        assert SHAPES[7][0][0] == 1

    def test_invalid_piece_id(self):
        with pytest.raises(ValueError):
            create_piece(8, 10)

    def test_seeded_spawn_is_reproducible(self):
        rng_a, rng_b = random.Random(3), random.Random(3)
        first = [spawn_piece(10, rng_a).piece_id for _ in range(20)]
        second = [spawn_piece(10, rng_b).piece_id for _ in range(20)]
        assert first == second

    def test_spawned_ids_in_range(self):
        rng = random.Random(0)
        ids = {spawn_piece(10, rng).piece_id for _ in range(200)}
        assert ids == set(range(1, 8))

    def test_piece_cells(self):
        piece = create_piece(2, 10)
        piece.x, piece.y = 1, 5
        assert piece.cells() == [(5, 1), (5, 2), (5, 3), (6, 2)]
