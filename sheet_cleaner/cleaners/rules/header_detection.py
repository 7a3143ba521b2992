"""
Header detection.

The header is the first row that is not fully empty. Unlike the other rules
this does not transform the grid, it only locates a row index.
"""
import logging
from typing import Sequence

from ...core.cells import Cell, is_empty_row


logger = logging.getLogger(__name__)


def detect_header_row(grid: Sequence[Sequence[Cell]]) -> int:
    """
    Find the header row index.

    Args:
        grid: Grid to scan (may have zero rows)

    Returns:
        Zero-based index of the first non-empty row, or 0 if there is none.
        Callers must check the grid has rows before trusting the index.
    """
    for idx, row in enumerate(grid):
        if not is_empty_row(row):
            logger.debug(f"Detected header row: {idx}")
            return idx

    logger.debug("No non-empty row found, defaulting header row to 0")
    return 0
