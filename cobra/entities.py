"""Board items occupying a single cell: food and snake segments."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field

import pygame

RED = (230, 41, 55)
GREEN = (0, 228, 48)
BLUE = (0, 121, 241)


def _cell_rect(grid_x: int, grid_y: int, grid_size: float) -> pygame.Rect:
    return pygame.Rect(
        int(grid_x * grid_size), int(grid_y * grid_size), int(grid_size), int(grid_size)
    )


@dataclass
class Food:
    """A piece of food worth ``score_value`` points."""

    grid_x: int = 0
    grid_y: int = 0
    grid_size: InitVar[float] = 0.0
    color: tuple[int, int, int] = RED
    score_value: int = 1
    is_eaten: bool = False
    rect: pygame.Rect = field(init=False, repr=False)

    def __post_init__(self, grid_size: float) -> None:
        self.sync_rect(grid_size)

    @property
    def position(self) -> tuple[int, int]:
        """The cell the food sits in."""
        return (self.grid_x, self.grid_y)

    def sync_rect(self, grid_size: float) -> None:
        """Recompute the pixel rectangle for the given cell size."""
        self.rect = _cell_rect(self.grid_x, self.grid_y, grid_size)

    def render(self, surface: pygame.Surface) -> None:
        """Fill the food's cell."""
        pygame.draw.rect(surface, self.color, self.rect)


@dataclass
class SnakeSegment:
    """One cell of a snake's body."""

    grid_x: int = 0
    grid_y: int = 0
    grid_size: InitVar[float] = 0.0
    color: tuple[int, int, int] = GREEN
    rect: pygame.Rect = field(init=False, repr=False)

    def __post_init__(self, grid_size: float) -> None:
        self.sync_rect(grid_size)

    @property
    def position(self) -> tuple[int, int]:
        """The cell the segment sits in."""
        return (self.grid_x, self.grid_y)

    def sync_rect(self, grid_size: float) -> None:
        """Recompute the pixel rectangle for the given cell size."""
        self.rect = _cell_rect(self.grid_x, self.grid_y, grid_size)

    def render(self, surface: pygame.Surface) -> None:
        """Fill the segment's cell and outline it in blue."""
        pygame.draw.rect(surface, self.color, self.rect)
        thickness = max(1, self.rect.height // 6)
        pygame.draw.rect(surface, BLUE, self.rect, thickness)