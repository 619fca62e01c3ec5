"""Polled keyboard state."""

import pygame

_key_state = None


def update() -> None:
    """Pump pending events and take a fresh snapshot of the keyboard."""
    global _key_state
    pygame.event.pump()
    _key_state = pygame.key.get_pressed()


def is_key_pressed(key: int) -> bool:
    """Whether ``key`` was held down at the last :func:`update`."""
    if _key_state is None:
        raise RuntimeError("keyboard state has not been read; call update() first")
    return bool(_key_state[key])