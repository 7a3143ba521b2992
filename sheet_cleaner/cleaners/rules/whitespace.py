"""
Whitespace cleaning rule.

Trims leading/trailing whitespace from all text cells. Unicode whitespace
(NBSP, ideographic space) counts, and so does a stray byte order mark.
"""
from __future__ import annotations

import logging

from ...core.cells import Cell, Grid, strip_text
from ..base import ChangeType, CleaningRule, RuleResult
from ..config import CleaningConfig

logger = logging.getLogger(__name__)


def trim_cell(cell: Cell) -> Cell:
    """Strip a text cell; other kinds pass through unchanged."""
    if not cell.is_text:
        return cell
    stripped = strip_text(cell.value)
    if stripped == cell.value:
        return cell
    return Cell.text(stripped)


class WhitespaceRule(CleaningRule):
    """
    Trim whitespace from text cells.

    Same shape in, same shape out.
    """

    def __init__(self, config: CleaningConfig):
        self.config = config

    @property
    def name(self) -> str:
        return "Whitespace Trimming"

    @property
    def priority(self) -> int:
        return 10  # First: everything downstream compares trimmed text

    @property
    def description(self) -> str:
        return "Trim leading/trailing whitespace from all text values"

    def clean(self, grid: Grid) -> RuleResult:
        """
        Trim whitespace from all text cells.

        Args:
            grid: Input grid

        Returns:
            RuleResult with trimmed values
        """
        values_cleaned = 0
        rows = []

        for row in grid:
            new_row = tuple(trim_cell(cell) for cell in row)
            values_cleaned += sum(1 for old, new in zip(row, new_row) if old is not new)
            rows.append(new_row)

        result = RuleResult(grid=tuple(rows))
        result.stats["values_cleaned"] = values_cleaned

        if values_cleaned > 0:
            result.add_change(
                ChangeType.VALUE_MODIFIED,
                f"Trimmed whitespace in {values_cleaned} cells",
                {"values_modified": values_cleaned},
            )
            logger.info("Trimmed whitespace from %s values", values_cleaned)
        else:
            logger.info("No whitespace issues detected")

        return result
