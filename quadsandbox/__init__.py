"""Small simulation models for games and experiments: networks, grids, units and game state."""

__version__ = "0.1.0"