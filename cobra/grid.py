"""The playing board: cell size selection and grid-line drawing."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from cobra.controls import Key
from cobra.utils import get_common_factors

DARKGRAY = (80, 80, 80)
MIN_GRID_SIZE = 10
MAX_GRID_SIZE = 50
DEFAULT_GRID_SIZE = 25.0


def clamp_factors(factors: Iterable[int], minimum: int, maximum: int) -> list[int]:
    """Keep only the factors lying within ``minimum`` and ``maximum`` inclusive."""
    return [factor for factor in factors if minimum <= factor <= maximum]


class Grid:
    """A square-celled board covering the screen.

    The cell size can be cycled through the common divisors of the screen
    dimensions that lie between 10 and 50 pixels.
    """

    def __init__(
        self,
        screen_width: int = 800,
        screen_height: int = 600,
        grid_size: float = DEFAULT_GRID_SIZE,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.grid_size = float(grid_size)
        self.size_changed = False
        self._refresh_grid_sizes()

    def _refresh_grid_sizes(self) -> None:
        self.grid_sizes = clamp_factors(
            self.common_screen_factors(), MIN_GRID_SIZE, MAX_GRID_SIZE
        )
        self.grid_sizes_index = len(self.grid_sizes) // 2
        self._sizes_screen = (self.screen_width, self.screen_height)

    @property
    def columns(self) -> int:
        """Number of whole cells across the screen."""
        return int(self.screen_width / self.grid_size)

    @property
    def rows(self) -> int:
        """Number of whole cells down the screen."""
        return int(self.screen_height / self.grid_size)

    def common_screen_factors(self) -> list[int]:
        """Divisors shared by the screen width and height."""
        return get_common_factors(self.screen_width, self.screen_height)

    def handle_input(self, key: Key | None) -> None:
        """Step to the next (KP_1) or previous (KP_2) available cell size."""
        self.size_changed = False
        if not self.grid_sizes:
            return
        if key is Key.KP_1:
            self.grid_sizes_index += 1
        elif key is Key.KP_2:
            self.grid_sizes_index -= 1
        else:
            return
        self.grid_size = float(self.grid_sizes[self.grid_sizes_index % len(self.grid_sizes)])
        self.size_changed = True

    def update(self) -> None:
        """Recompute the available cell sizes if the screen dimensions changed."""
        if (self.screen_width, self.screen_height) != self._sizes_screen:
            self._refresh_grid_sizes()

    def render(self, surface: pygame.Surface) -> None:
        """Draw the vertical and horizontal grid lines."""
        step = max(1, int(self.grid_size))
        for x in range(0, self.screen_width, step):
            pygame.draw.line(surface, DARKGRAY, (x, 0), (x, self.screen_height))
        for y in range(0, self.screen_height, step):
            pygame.draw.line(surface, DARKGRAY, (0, y), (self.screen_width, y))