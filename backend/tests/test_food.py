"""
Tests for domain/food.py - food placement by rejection sampling.
"""

import os
import random
import sys
from unittest.mock import Mock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.food import Food, GridFullError
from domain.snake import Snake


class TestFoodPlacement:
    """Tests for Food.relocate()."""

    def test_initial_position_avoids_snake(self):
        snake = Snake()
        for seed in range(20):
            food = Food(snake.body, rng=random.Random(seed))
            assert food.pos not in snake.body

    def test_initial_position_inside_grid(self):
        food = Food(cell_count=25, rng=random.Random(7))
        x, y = food.pos
        assert 0 <= x < 25
        assert 0 <= y < 25

    def test_relocate_never_lands_on_occupied(self):
        food = Food(rng=random.Random(42))
        occupied = {(x, y) for x in range(25) for y in range(20)}

        for _ in range(50):
            cell = food.relocate(occupied)
            assert cell not in occupied
            assert food.pos == cell

    def test_rejection_sampling_redraws_until_free(self):
        """Draws that hit the snake are thrown away."""
        food = Food(cell_count=5, rng=random.Random(0))
        food.rng = Mock()
        food.rng.randint.side_effect = [0, 0, 0, 0, 1, 2]

        cell = food.relocate({(0, 0)})

        assert cell == (1, 2)
        assert food.rng.randint.call_count == 6

    def test_single_free_cell_is_found(self):
        """With one free cell left the result is that cell, always."""
        occupied = {(x, y) for x in range(3) for y in range(3)} - {(2, 1)}
        for seed in range(10):
            food = Food(cell_count=3, rng=random.Random(seed))
            assert food.relocate(occupied) == (2, 1)

    def test_falls_back_to_scan_after_max_attempts(self):
        food = Food(cell_count=2, max_attempts=5, rng=random.Random(0))
        food.rng = Mock()
        food.rng.randint.return_value = 0
        food.rng.choice.side_effect = lambda cells: cells[-1]

        cell = food.relocate({(0, 0)})

        assert cell == (1, 1)
        assert food.rng.randint.call_count == 10
        food.rng.choice.assert_called_once_with([(1, 0), (0, 1), (1, 1)])

    def test_full_grid_raises(self):
        food = Food(cell_count=2, rng=random.Random(0))
        occupied = [(0, 0), (1, 0), (0, 1), (1, 1)]

        with pytest.raises(GridFullError):
            food.relocate(occupied)

    def test_free_cells_lists_unoccupied(self):
        food = Food(cell_count=2, rng=random.Random(0))
        assert food.free_cells([(0, 0), (1, 1)]) == [(1, 0), (0, 1)]
