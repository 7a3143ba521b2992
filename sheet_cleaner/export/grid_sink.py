"""
Grid sink - writes a cleaned grid back to a CSV or Excel file.

Polars-based implementation:
- Every cell is rendered as text (booleans as TRUE/FALSE)
- Ragged rows are padded with "" up to the widest row, since a file
  needs rectangular columns; this is the only place padding happens
- No header line is added: the grid's own header row is written in place
- Excel output auto-sizes columns
"""
import logging
from pathlib import Path
from typing import List, Sequence, Union

import polars as pl
import xlsxwriter

from ..core.cells import Cell, grid_width

logger = logging.getLogger(__name__)


def grid_to_frame(grid: Sequence[Sequence[Cell]]) -> pl.DataFrame:
    """Render a grid as an all-Utf8 DataFrame with generic column names."""
    width = grid_width(grid)
    columns = [f"column_{i + 1}" for i in range(width)]
    rows: List[List[str]] = [
        [str(cell) for cell in row] + [""] * (width - len(row))
        for row in grid
    ]
    return pl.DataFrame(rows, schema={c: pl.Utf8 for c in columns}, orient="row")


def write_grid(
    grid: Sequence[Sequence[Cell]],
    file_path: Union[str, Path],
    header_row_index: int = 0,
) -> Path:
    """
    Write a grid to disk.

    Args:
        grid: Cleaned grid
        file_path: Destination (.csv or .xlsx)
        header_row_index: Row to treat as the header (bolded in Excel output)

    Returns:
        The path written
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    suffix = file_path.suffix.lower()

    if suffix not in (".csv", ".xlsx"):
        raise ValueError(f"Unsupported output format: {file_path.suffix}")

    if not grid:
        logger.warning("No rows to write. Writing an empty file: %s", file_path)
        if suffix == ".csv":
            file_path.write_text("", encoding="utf-8")
        else:
            with xlsxwriter.Workbook(str(file_path)) as workbook:
                workbook.add_worksheet()
        return file_path

    df = grid_to_frame(grid)

    if suffix == ".csv":
        df.write_csv(file_path, include_header=False)
    else:
        df.write_excel(
            file_path,
            include_header=False,
            autofit=True,
            conditional_formats={
                # bold header row
                tuple(df.columns): {
                    "type": "formula",
                    "criteria": f"=ROW()={header_row_index + 1}",
                    "format": {"bold": True},
                },
            },
        )

    logger.info(f"Wrote {df.height} rows × {df.width} columns to {file_path}")
    return file_path
