import pygame
import pytest

from cobra.controls import Key, key_from_pygame


@pytest.mark.parametrize(
    "code,key",
    [
        (pygame.K_UP, Key.UP),
        (pygame.K_DOWN, Key.DOWN),
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_RIGHT, Key.RIGHT),
        (pygame.K_w, Key.W),
        (pygame.K_a, Key.A),
        (pygame.K_s, Key.S),
        (pygame.K_d, Key.D),
        (pygame.K_KP1, Key.KP_1),
        (pygame.K_KP2, Key.KP_2),
    ],
)
def test_known_keys_map(code, key):
    assert key_from_pygame(code) is key


@pytest.mark.parametrize("code", [pygame.K_SPACE, pygame.K_q, pygame.K_ESCAPE, pygame.K_KP3])
def test_unknown_keys_map_to_none(code):
    assert key_from_pygame(code) is None


def test_every_key_is_reachable():
    reachable = {
        key_from_pygame(code)
        for code in (
            pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT,
            pygame.K_w, pygame.K_a, pygame.K_s, pygame.K_d,
            pygame.K_KP1, pygame.K_KP2,
        )
    }
    assert reachable == set(Key)