"""Textured grid raycaster that walks through .cub scene files."""

__version__ = "0.1.0"
__all__ = ["__version__"]