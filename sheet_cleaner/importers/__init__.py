"""
Importers for loading raw grids from files.
"""
from .grid_source import grid_from_frame, read_grid

__all__ = [
    "grid_from_frame",
    "read_grid",
]
