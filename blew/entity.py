"""Coloured rectangles that live in the game world."""

import pygame

from blew.camera import Camera


class Entity:
    """A named, coloured rectangle in world coordinates."""

    def __init__(self, name: str, x: int, y: int, w: int, h: int, color) -> None:
        self.name = name
        self.rect = pygame.Rect(x, y, w, h)
        self.color = pygame.Color(color)

    def __repr__(self) -> str:
        return f"Entity({self.name!r}, {tuple(self.rect)}, {tuple(self.color)})"

    def draw(self, surface: pygame.Surface, camera: Camera | None = None) -> None:
        """Fill the entity's rectangle on ``surface``.

        The camera is accepted for interface compatibility; the fill uses the
        entity's world rectangle.
        """
        surface.fill(self.color, self.rect)

    def move(self, dx: int, dy: int) -> None:
        self.rect.move_ip(dx, dy)