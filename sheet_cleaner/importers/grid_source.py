"""
Grid source - materializes a raw grid from a CSV or Excel file.

Files are read without a header row (header detection happens on the
cleaned grid), so every line of the file becomes one grid row. Nulls from
Polars become Empty cells.
"""
import logging
from pathlib import Path
from typing import Optional, Union

import polars as pl

from ..core.cells import Grid, grid_from_values

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".xlsx", ".xls")


def grid_from_frame(df: pl.DataFrame) -> Grid:
    """Convert a headerless Polars DataFrame into a grid, one row per frame row."""
    return grid_from_values(df.rows())


def read_grid(file_path: Union[str, Path], sheet_name: Optional[str] = None) -> Grid:
    """
    Load a file into a fully materialized grid.

    Args:
        file_path: Path to a .csv, .xlsx or .xls file
        sheet_name: Sheet name for Excel files (first sheet if None)

    Returns:
        Grid of cells

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file format is not supported
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    suffix = file_path.suffix.lower()
    logger.info(f"Loading file: {file_path}")

    if suffix in (".xlsx", ".xls"):
        if sheet_name is not None:
            df = pl.read_excel(file_path, sheet_name=sheet_name, has_header=False)
        else:
            df = pl.read_excel(file_path, has_header=False)
    elif suffix == ".csv":
        if file_path.stat().st_size == 0:
            logger.warning("Empty CSV file: %s", file_path)
            return ()
        df = pl.read_csv(file_path, has_header=False, infer_schema_length=0)
    else:
        raise ValueError(f"Unsupported file format: {file_path.suffix}")

    logger.info(f"Loaded {df.height} rows × {df.width} columns")

    return grid_from_frame(df)
