import random

import pygame
import pytest

from cobra.controls import Key
from cobra.entities import GREEN
from cobra.game import Game
from cobra.snake import Direction


@pytest.fixture
def game():
    return Game(rng=random.Random(5))


def test_components_share_grid(game):
    assert game.snake.grid is game.grid
    assert game.food_handler.grid is game.grid
    assert game.food_handler.snake is game.snake


def test_steering_reaches_snake(game):
    game.handle_input(Key.LEFT)
    assert game.snake.direction is Direction.LEFT


def test_grid_size_key_cycles_size(game):
    grid = game.grid
    index = grid.grid_sizes_index
    game.handle_input(Key.KP_1)
    assert grid.size_changed
    assert grid.grid_size == float(grid.grid_sizes[(index + 1) % len(grid.grid_sizes)])


def test_grid_size_change_resyncs_snake(game):
    game.handle_input(Key.KP_2)
    size = game.grid.grid_size
    game.update(0.0)
    assert not game.grid.size_changed
    assert game.snake.segments[0].rect.width == int(size)


def test_grid_input_ignored_while_snake_broken(game):
    game.snake.segments[1].grid_x += 3
    before = game.grid.grid_size
    game.handle_input(Key.KP_1)
    assert game.grid.grid_size == before
    assert not game.grid.size_changed


def test_update_moves_snake(game):
    hx, hy = game.snake.head
    game.update(game.snake.move_interval)
    assert game.snake.head == (hx, hy - 1)


def test_update_eats_food_ahead(game):
    hx, hy = game.snake.head
    target = (hx, hy - 1)
    food = game.food_handler.foods[0]
    food.grid_x, food.grid_y = target
    expected = sum(f.score_value for f in game.food_handler.foods if f.position == target)
    eaten = sum(1 for f in game.food_handler.foods if f.position == target)
    game.update(game.snake.move_interval)
    assert game.snake.score == expected
    assert len(game.snake.segments) == 7 + eaten
    assert all(f.position != target for f in game.food_handler.foods)


def test_render_draws_snake(game):
    surface = pygame.Surface((800, 600))
    game.render(surface)
    assert tuple(surface.get_at(game.snake.segments[0].rect.center))[:3] == GREEN