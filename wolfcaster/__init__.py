"""A raycasting first-person shooter: map loading, raycasting, player, enemies and a pygame game loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]