"""Scene parsing, grid raycasting and game-state logic for .cub raycaster maps."""

__version__ = "0.1.0"