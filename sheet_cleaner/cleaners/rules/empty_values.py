"""
Empty value rules.

Two rules that must run in this order:

1. EmptyRowRule drops rows where every cell is empty (Empty, or text that is
   blank after stripping). Emptiness is judged before any placeholder exists.
2. EmptyCellRule fills every remaining empty cell with the placeholder.

Row lengths are never changed by either rule.
"""
from __future__ import annotations

import logging

from ...core.cells import Cell, Grid, is_empty_row
from ..base import ChangeType, CleaningRule, RuleResult
from ..config import CleaningConfig

logger = logging.getLogger(__name__)


class EmptyRowRule(CleaningRule):
    """Remove fully empty rows."""

    def __init__(self, config: CleaningConfig):
        self.config = config

    @property
    def name(self) -> str:
        return "Empty Row Removal"

    @property
    def priority(self) -> int:
        return 40

    @property
    def description(self) -> str:
        return "Remove rows in which every cell is empty"

    def clean(self, grid: Grid) -> RuleResult:
        kept = []
        dropped_indices = []

        for idx, row in enumerate(grid):
            if is_empty_row(row):
                dropped_indices.append(idx)
            else:
                kept.append(row)

        result = RuleResult(grid=tuple(kept))
        result.stats["rows_dropped"] = len(dropped_indices)

        if dropped_indices:
            result.add_change(
                ChangeType.ROW_DROPPED,
                f"Dropped {len(dropped_indices)} empty rows",
                {"rows_dropped": len(dropped_indices), "rows": dropped_indices},
            )
            logger.info("Removed %s empty rows", len(dropped_indices))

        if not kept and grid:
            result.add_warning("Every row was empty; the cleaned grid has no rows")

        return result


class EmptyCellRule(CleaningRule):
    """
    Replace empty cells with a placeholder.

    The placeholder is inserted after duplicate removal, so two rows that only
    become identical once their blanks read "N/A" are both kept.
    """

    def __init__(self, config: CleaningConfig):
        self.config = config
        self.placeholder = Cell.text(config.placeholder)

    @property
    def name(self) -> str:
        return "Empty Cell Replacement"

    @property
    def priority(self) -> int:
        return 50  # After empty rows are gone

    @property
    def description(self) -> str:
        return f"Replace empty cells with '{self.config.placeholder}'"

    def clean(self, grid: Grid) -> RuleResult:
        cells_replaced = 0
        rows = []

        for row in grid:
            new_row = []
            for cell in row:
                if cell.is_empty():
                    new_row.append(self.placeholder)
                    cells_replaced += 1
                else:
                    new_row.append(cell)
            rows.append(tuple(new_row))

        result = RuleResult(grid=tuple(rows))
        result.stats["cells_replaced"] = cells_replaced

        if cells_replaced > 0:
            result.add_change(
                ChangeType.CELL_REPLACED,
                f"Replaced {cells_replaced} empty cells with '{self.config.placeholder}'",
                {"cells_replaced": cells_replaced, "placeholder": self.config.placeholder},
            )
            logger.info("Replaced %s empty cells", cells_replaced)

        return result
