"""
Core building blocks: the cell model and application settings.
"""
from .cells import (
    Cell,
    CellKind,
    Grid,
    Row,
    grid_from_values,
    grid_to_values,
    grid_width,
    is_empty_row,
    row_canonical,
)

__all__ = [
    "Cell",
    "CellKind",
    "Grid",
    "Row",
    "grid_from_values",
    "grid_to_values",
    "grid_width",
    "is_empty_row",
    "row_canonical",
]
