"""The application: window, layers and the frame loop."""

import pygame

from blew import keyboard
from blew.game_layer import GameLayer
from blew.input_layer import InputLayer
from blew.layer import Layer
from blew.layer_stack import LayerStack
from blew.log import get_logger
from blew.window import Window

CLEAR_COLOR = (0, 0, 0, 255)


class Application:
    """Owns the window and the layer stack and drives them frame by frame."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.layers = LayerStack()
        self._init_display()
        self.window = Window("Game", 800, 600)

        game_layer = GameLayer()
        input_layer = InputLayer(game_layer)
        self.push_layer(input_layer)
        self.push_layer(game_layer)

    def __repr__(self) -> str:
        return f"Application({self.name!r})"

    @staticmethod
    def _init_display() -> None:
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"error initialising the display: {exc}") from exc
        get_logger().info("Initialized SDL for application")

    def start(self) -> None:
        """Show the window and run frames until the window is closed."""
        self.window.show()
        surface = self.window.surface
        running = True
        try:
            while running:
                keyboard.update()

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    for layer in self.layers:
                        layer.on_event(event)
                        if isinstance(layer, GameLayer):
                            layer.set_renderer(surface)

                surface.fill(CLEAR_COLOR)
                for layer in self.layers:
                    layer.on_update()
                    layer.on_render()
                pygame.display.flip()
        finally:
            pygame.quit()

    def push_layer(self, layer: Layer) -> None:
        self.layers.push_layer(layer)