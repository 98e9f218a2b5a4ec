import pygame

from cobra.entities import BLUE, GREEN, RED, Food, SnakeSegment


def test_food_defaults():
    food = Food()
    assert food.color == RED
    assert food.score_value == 1
    assert food.is_eaten is False
    assert food.position == (0, 0)


def test_food_rect_follows_cell():
    food = Food(3, 4, 25.0)
    assert food.rect == pygame.Rect(3 * 25, 4 * 25, 25, 25)
    assert food.position == (3, 4)


def test_food_sync_rect_after_move():
    food = Food(1, 1, 20.0)
    food.grid_x, food.grid_y = 5, 2
    food.sync_rect(40.0)
    assert food.rect == pygame.Rect(5 * 40, 2 * 40, 40, 40)


def test_food_render_fills_cell():
    surface = pygame.Surface((100, 100))
    food = Food(1, 2, 20.0)
    food.render(surface)
    assert tuple(surface.get_at((30, 50)))[:3] == RED
    assert tuple(surface.get_at((10, 10)))[:3] == (0, 0, 0)


def test_segment_defaults_and_rect():
    segment = SnakeSegment(2, 3, 10.0)
    assert segment.color == GREEN
    assert segment.position == (2, 3)
    assert segment.rect == pygame.Rect(20, 30, 10, 10)


def test_segment_sync_rect():
    segment = SnakeSegment(2, 3, 10.0)
    segment.sync_rect(30.0)
    assert segment.rect == pygame.Rect(60, 90, 30, 30)


def test_segment_render_has_blue_border_and_green_centre():
    surface = pygame.Surface((100, 100))
    segment = SnakeSegment(1, 1, 30.0)
    segment.render(surface)
    assert tuple(surface.get_at((30, 45)))[:3] == BLUE
    assert tuple(surface.get_at((45, 45)))[:3] == GREEN
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)