"""A small layered 2D game engine built on pygame, with a demo game."""

__version__ = "1.0.0"