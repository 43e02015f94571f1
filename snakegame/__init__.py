"""A snake arcade game with the game rules kept separate from pygame drawing."""

__version__ = "0.1.0"
__all__ = ["game", "renderer", "main"]