"""Keys the game reacts to and their mapping from pygame key codes."""

from __future__ import annotations

import enum

import pygame


class Key(enum.Enum):
    """A key the game responds to."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    W = enum.auto()
    A = enum.auto()
    S = enum.auto()
    D = enum.auto()
    KP_1 = enum.auto()
    KP_2 = enum.auto()


_PYGAME_KEYS: dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_KP1: Key.KP_1,
    pygame.K_KP2: Key.KP_2,
}


def key_from_pygame(code: int) -> Key | None:
    """Translate a pygame key code, returning None for keys the game ignores."""
    return _PYGAME_KEYS.get(code)