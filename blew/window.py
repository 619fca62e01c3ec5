"""The application's display window."""

import os

import pygame

WINDOW_POSITION = (100, 100)


class Window:
    """A titled window that appears when :meth:`show` is called."""

    def __init__(self, title: str, width: int, height: int) -> None:
        self.title = title
        self.width = width
        self.height = height
        self._surface: pygame.Surface | None = None

    def __repr__(self) -> str:
        return f"Window({self.title!r}, {self.width}, {self.height})"

    def show(self) -> None:
        """Open the window on screen.

        Raises :class:`RuntimeError` and shuts the display down if the window
        cannot be created.
        """
        x, y = WINDOW_POSITION
        # SDL reads the initial window position from the environment.
        os.environ["SDL_VIDEO_WINDOW_POS"] = f"{x},{y}"
        try:
            surface = pygame.display.set_mode((self.width, self.height), pygame.SHOWN)
        except pygame.error as exc:
            pygame.display.quit()
            raise RuntimeError(f"error creating window: {exc}") from exc
        pygame.display.set_caption(self.title)
        self._surface = surface

    @property
    def surface(self) -> pygame.Surface:
        """The drawing surface of the shown window."""
        if self._surface is None:
            raise RuntimeError("window has not been shown; call show() first")
        return self._surface