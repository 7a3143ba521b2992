"""
Export module for writing cleaned grids to files.
"""
from .grid_sink import grid_to_frame, write_grid

__all__ = [
    "grid_to_frame",
    "write_grid",
]
