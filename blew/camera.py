"""A rectangular viewport over the game world."""

from dataclasses import dataclass
from typing import ClassVar

import pygame


@dataclass
class Camera:
    """Viewport positioned in world coordinates."""

    x: int
    y: int
    width: int
    height: int

    FRAME_COLOR: ClassVar[tuple[int, int, int, int]] = (100, 100, 100, 255)

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def move(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def view_rect(self) -> pygame.Rect:
        """The area of the world the camera sees."""
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def world_to_screen(self, world_rect) -> pygame.Rect:
        """Translate a world rectangle into screen coordinates."""
        return pygame.Rect(world_rect).move(-self.x, -self.y)

    def draw_frame(self, surface: pygame.Surface) -> None:
        """Outline the viewport, which always sits at the screen origin."""
        frame = pygame.Rect(0, 0, self.width, self.height)
        pygame.draw.rect(surface, self.FRAME_COLOR, frame, width=1)