"""Top-level game controller and the window loop that drives it."""

from __future__ import annotations

import argparse
import random
from collections import deque
from collections.abc import Sequence

import pygame

from cobra.controls import Key, key_from_pygame
from cobra.food_handler import FoodHandler
from cobra.grid import Grid
from cobra.snake import Snake

BLACK = (0, 0, 0)
TITLE = "Cobra"
FRAME_RATE = 60


class Game:
    """Owns the grid, the snake and the food, and steps them together."""

    def __init__(
        self,
        screen_width: int = 800,
        screen_height: int = 600,
        rng: random.Random | None = None,
    ) -> None:
        self.grid = Grid(screen_width, screen_height)
        self.snake = Snake(self.grid)
        self.food_handler = FoodHandler(self.snake, self.grid, rng)

    def handle_input(self, key: Key | None) -> None:
        """Pass a key to the snake, then to the grid while the snake is whole."""
        self.snake.handle_input(key)
        if not self.snake.is_intact():
            return
        self.grid.handle_input(key)

    def update(self, delta_time: float) -> None:
        """Advance the game by ``delta_time`` seconds."""
        self.grid.update()
        self.snake.update(delta_time)
        self.food_handler.update()

    def render(self, surface: pygame.Surface) -> None:
        """Draw the whole scene onto ``surface``."""
        surface.fill(BLACK)
        self.grid.render(surface)
        self.snake.render(surface)
        self.food_handler.render(surface)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="cobra", description="Play snake.")
    parser.add_argument("--width", type=int, default=800, help="window width in pixels")
    parser.add_argument("--height", type=int, default=600, help="window height in pixels")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption(TITLE)
        game = Game(args.width, args.height)
        clock = pygame.time.Clock()
        pending: deque[Key | None] = deque()
        delta_time = 0.0
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return 0
                    pending.append(key_from_pygame(event.key))
            game.handle_input(pending.popleft() if pending else None)
            game.update(delta_time)
            game.render(surface)
            pygame.display.flip()
            delta_time = clock.tick(FRAME_RATE) / 1000.0
    finally:
        pygame.quit()