"""Grid-based first-person raycasting engine that plays .cub maps."""

__version__ = "0.1.0"
__all__ = ["__version__"]