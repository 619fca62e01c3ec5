import os

os.environ["SDL_VIDEODRIVER"] = "dummy"

import pygame
import pytest

from blew.game_layer import GameLayer


def keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_name():
    assert GameLayer().name == "GameLayer"


def test_initial_entities():
    layer = GameLayer()
    assert [entity.name for entity in layer.entities] == ["Player", "Enemy"]
    assert tuple(layer.get_entity_by_name("Player").rect) == (100, 100, 50, 50)
    assert tuple(layer.get_entity_by_name("Enemy").rect) == (200, 100, 50, 50)


@pytest.mark.parametrize(
    "key, delta",
    [
        (pygame.K_w, (0, -5)),
        (pygame.K_s, (0, 5)),
        (pygame.K_a, (-5, 0)),
        (pygame.K_d, (5, 0)),
    ],
)
def test_wasd_moves_player(key, delta):
    layer = GameLayer()
    player = layer.get_entity_by_name("Player")
    before = player.rect.topleft
    layer.on_event(keydown(key))
    assert player.rect.topleft == (before[0] + delta[0], before[1] + delta[1])


def test_wasd_leaves_enemy_alone():
    layer = GameLayer()
    enemy = layer.get_entity_by_name("Enemy")
    before = tuple(enemy.rect)
    layer.on_event(keydown(pygame.K_d))
    assert tuple(enemy.rect) == before


def test_other_key_does_not_move():
    layer = GameLayer()
    player = layer.get_entity_by_name("Player")
    before = tuple(player.rect)
    layer.on_event(keydown(pygame.K_q))
    assert tuple(player.rect) == before


def test_keyup_is_ignored():
    layer = GameLayer()
    player = layer.get_entity_by_name("Player")
    before = tuple(player.rect)
    layer.on_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_w))
    assert tuple(player.rect) == before


def test_keydown_without_player_changes_nothing():
    layer = GameLayer()
    layer.entities.clear()
    layer.on_event(keydown(pygame.K_w))
    assert layer.entities == []


def test_missing_entity_is_none():
    assert GameLayer().get_entity_by_name("Nobody") is None


def test_add_entity_appends():
    layer = GameLayer()
    layer.add_entity("Tree", 1, 2, 3, 4, (0, 255, 0))
    tree = layer.entities[-1]
    assert tree.name == "Tree"
    assert tuple(tree.rect) == (1, 2, 3, 4)
    assert layer.get_entity_by_name("Tree") is tree


def test_set_renderer_stores_surface():
    layer = GameLayer()
    surface = pygame.Surface((10, 10))
    layer.set_renderer(surface)
    assert layer.surface is surface


def test_on_update_draws_entities():
    layer = GameLayer()
    surface = pygame.Surface((800, 600))
    surface.fill((0, 0, 0))
    layer.set_renderer(surface)
    layer.on_update()
    assert tuple(surface.get_at((110, 110)))[:3] == (0, 0, 255)
    assert tuple(surface.get_at((210, 110)))[:3] == (255, 0, 0)


def test_on_render_draws_camera_frame():
    layer = GameLayer()
    surface = pygame.Surface((800, 600))
    surface.fill((0, 0, 0))
    layer.set_renderer(surface)
    layer.on_render()
    assert tuple(surface.get_at((0, 0)))[:3] == (100, 100, 100)
    assert tuple(surface.get_at((250, 250)))[:3] == (0, 0, 0)


def test_update_without_surface_keeps_entities():
    layer = GameLayer()
    layer.on_update()
    layer.on_render()
    assert len(layer.entities) == 2