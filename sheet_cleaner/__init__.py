"""
Sheet Cleaner - turns messy spreadsheet grids into clean, deduplicated ones.
"""
from .cleaners import (
    CleaningConfig,
    CleaningReport,
    CleaningResult,
    DataCleaner,
    InputError,
    clean,
)
from .core.cells import Cell, CellKind

__all__ = [
    "Cell",
    "CellKind",
    "CleaningConfig",
    "CleaningReport",
    "CleaningResult",
    "DataCleaner",
    "InputError",
    "clean",
]
