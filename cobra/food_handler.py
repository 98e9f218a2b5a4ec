"""Placement, consumption and recycling of food on the board."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable

import pygame

from cobra.entities import Food
from cobra.grid import Grid
from cobra.snake import Snake


class FoodHandler:
    """Keeps the board stocked with food scaled to the cell size."""

    def __init__(
        self, snake: Snake, grid: Grid, rng: random.Random | None = None
    ) -> None:
        self.snake = snake
        self.grid = grid
        self._rng = rng if rng is not None else random.Random()
        self.foods: list[Food] = []
        self.max_food_count = 0
        self.adapt_count_to_grid()
        self.adapt_foods_to_count()

    def random_free_position(self, exclude: Iterable[tuple[int, int]] = ()) -> tuple[int, int]:
        """Pick a random cell not covered by the snake or by ``exclude``."""
        occupied = set(self.snake.positions)
        occupied.update(exclude)
        free = [
            (x, y)
            for x in range(self.grid.columns)
            for y in range(self.grid.rows)
            if (x, y) not in occupied
        ]
        if not free:
            raise ValueError("no free cell left on the board")
        return self._rng.choice(free)

    def handle_collision(self) -> None:
        """After a move, feed the snake any food under its head."""
        if not self.snake.moved:
            return
        head = self.snake.head
        for food in self.foods:
            if food.position == head:
                food.is_eaten = True
                self.snake.grow()
                self.snake.score += food.score_value
                self.reuse_eaten(food)

    def reuse_eaten(self, food: Food) -> None:
        """Move ``food`` to a cell free of the snake and of other food."""
        others = [
            other.position
            for other in self.foods
            if other is not food and not other.is_eaten
        ]
        food.grid_x, food.grid_y = self.random_free_position(others)
        food.is_eaten = False
        food.sync_rect(self.grid.grid_size)

    def adapt_count_to_grid(self) -> None:
        """Set the food count to a third of the cell size, rounded."""
        self.max_food_count = math.floor(self.grid.grid_size / 3.0 + 0.5)

    def adapt_foods_to_count(self) -> None:
        """Drop surplus food or add new food until the count matches."""
        del self.foods[self.max_food_count:]
        while len(self.foods) < self.max_food_count:
            x, y = self.random_free_position()
            self.foods.append(Food(x, y, self.grid.grid_size))

    def update(self) -> None:
        """Resync after a cell size change, handle eating and restock."""
        if self.grid.size_changed:
            for food in self.foods:
                food.sync_rect(self.grid.grid_size)
            self.grid.size_changed = False
        self.handle_collision()
        self.adapt_count_to_grid()
        self.adapt_foods_to_count()

    def render(self, surface: pygame.Surface) -> None:
        """Draw every piece of food."""
        for food in self.foods:
            food.render(surface)