"""The layer that turns mouse clicks into new entities."""

import pygame

from blew.game_layer import GameLayer
from blew.layer import Layer
from blew.log import TRACE, get_logger

RIGHT_BUTTON = 3
SPAWN_SIZE = 40
SPAWN_COLOR = (0, 255, 0)
SPAWN_NAME = "Player"


class InputLayer(Layer):
    """Spawns an entity in the game layer wherever the right button is clicked."""

    def __init__(self, game_layer: GameLayer) -> None:
        super().__init__("InputLayer")
        self.game_layer = game_layer

    def on_event(self, event) -> None:
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != RIGHT_BUTTON:
            return
        x, y = event.pos
        self.game_layer.add_entity(SPAWN_NAME, x, y, SPAWN_SIZE, SPAWN_SIZE, SPAWN_COLOR)
        get_logger().log(TRACE, "Spawned entity at (%d, %d)", x, y)

    def on_update(self) -> None:
        """Nothing to do per frame."""