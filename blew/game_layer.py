"""The layer that owns, moves and draws the game's entities."""

import pygame

from blew.camera import Camera
from blew.entity import Entity
from blew.layer import Layer

PLAYER_NAME = "Player"
STEP = 5

_KEY_MOVES = {
    pygame.K_w: (0, -STEP),
    pygame.K_s: (0, STEP),
    pygame.K_a: (-STEP, 0),
    pygame.K_d: (STEP, 0),
}


class GameLayer(Layer):
    """Holds the entities and the camera, and steers the player with WASD."""

    def __init__(self) -> None:
        super().__init__("GameLayer")
        self.surface: pygame.Surface | None = None
        self.entities: list[Entity] = []
        self.camera = Camera(0, 0, 500, 500)
        self.add_entity(PLAYER_NAME, 100, 100, 50, 50, (0, 0, 255))
        self.add_entity("Enemy", 200, 100, 50, 50, (255, 0, 0))

    def set_renderer(self, surface: pygame.Surface) -> None:
        """Set the surface the layer draws on."""
        self.surface = surface

    def on_update(self) -> None:
        if self.surface is None:
            return
        for entity in self.entities:
            entity.draw(self.surface, self.camera)

    def on_render(self) -> None:
        if self.surface is None:
            return
        self.camera.draw_frame(self.surface)

    def on_event(self, event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        player = self.get_entity_by_name(PLAYER_NAME)
        if player is None:
            return
        move = _KEY_MOVES.get(event.key)
        if move is not None:
            player.move(*move)

    def get_entity_by_name(self, name: str) -> Entity | None:
        """The first entity called ``name``, or ``None``."""
        return next((entity for entity in self.entities if entity.name == name), None)

    def add_entity(self, name: str, x: int, y: int, w: int, h: int, color) -> None:
        self.entities.append(Entity(name, x, y, w, h, color))