"""The player's snake: movement, steering, growth and wrapping."""

from __future__ import annotations

import enum

import pygame

from cobra.controls import Key
from cobra.entities import GREEN, SnakeSegment
from cobra.grid import Grid

START_CELL = (10, 10)
MOVE_INTERVAL = 0.17


class Direction(enum.Enum):
    """Heading of the snake's head, as a cell offset."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """The direction pointing the other way."""
        dx, dy = self.value
        return Direction((-dx, -dy))


_KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.W: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.S: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.A: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
    Key.D: Direction.RIGHT,
}


class Snake:
    """A snake moving one cell every ``move_interval`` seconds."""

    move_interval = MOVE_INTERVAL

    def __init__(
        self,
        grid: Grid,
        name: str = "Player1",
        length: int = 7,
        color: tuple[int, int, int] = GREEN,
    ) -> None:
        self.grid = grid
        self.player_name = name
        self.length = length
        self.score = 0
        self.high_score = 0
        self.moved = False
        self.direction = Direction.UP
        self._move_accumulator = 0.0
        start_x, start_y = START_CELL
        self.segments = [
            SnakeSegment(start_x, start_y + offset, grid.grid_size, color)
            for offset in range(length)
        ]

    @property
    def head(self) -> tuple[int, int]:
        """The cell occupied by the head."""
        return self.segments[0].position

    @property
    def positions(self) -> list[tuple[int, int]]:
        """Cells of every segment, head first."""
        return [segment.position for segment in self.segments]

    def _sync_all(self) -> None:
        for segment in self.segments:
            segment.sync_rect(self.grid.grid_size)

    def update(self, delta_time: float) -> None:
        """Advance the snake by ``delta_time`` seconds."""
        self.moved = False
        if self.grid.size_changed:
            self._sync_all()
            self.grid.size_changed = False
            return
        self._move_accumulator += delta_time
        if self._move_accumulator >= self.move_interval:
            self.move()
            self.moved = True
            self.wrap_position()
            self._move_accumulator -= self.move_interval

    def render(self, surface: pygame.Surface) -> None:
        """Draw every segment."""
        for segment in self.segments:
            segment.render(surface)

    def handle_input(self, key: Key | None) -> None:
        """Steer the snake, refusing to turn straight back on itself."""
        direction = _KEY_DIRECTIONS.get(key) if key is not None else None
        if direction is not None and direction is not self.direction.opposite:
            self.direction = direction

    def move(self) -> None:
        """Step the head one cell forward and pull the body after it."""
        if not self.segments:
            return
        previous = self.positions
        dx, dy = self.direction.value
        head = self.segments[0]
        head.grid_x += dx
        head.grid_y += dy
        for segment, (x, y) in zip(self.segments[1:], previous):
            segment.grid_x = x
            segment.grid_y = y
        self._sync_all()

    def wrap_position(self) -> None:
        """Bring a head that left the board back in on the opposite side."""
        columns, rows = self.grid.columns, self.grid.rows
        head = self.segments[0]
        if head.grid_x < 0:
            head.grid_x = columns - 1
        elif head.grid_x >= columns:
            head.grid_x = 0
        if head.grid_y < 0:
            head.grid_y = rows - 1
        elif head.grid_y >= rows:
            head.grid_y = 0
        head.sync_rect(self.grid.grid_size)

    def grow(self) -> None:
        """Add a segment on top of the current tail."""
        tail = self.segments[-1]
        self.segments.append(
            SnakeSegment(tail.grid_x, tail.grid_y, self.grid.grid_size, tail.color)
        )
        self.length += 1

    def is_intact(self) -> bool:
        """True when consecutive segments touch edge to edge on the board."""
        columns, rows = self.grid.columns, self.grid.rows

        def on_board(segment: SnakeSegment) -> bool:
            return 0 <= segment.grid_x < columns and 0 <= segment.grid_y < rows

        for previous, current in zip(self.segments, self.segments[1:]):
            dx = current.grid_x - previous.grid_x
            dy = current.grid_y - previous.grid_y
            if abs(dx) + abs(dy) != 1:
                return False
            if not (on_board(current) and on_board(previous)):
                return False
        return True