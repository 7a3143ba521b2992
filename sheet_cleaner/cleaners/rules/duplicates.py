"""
Duplicate row rule.

Rows are compared by their canonical serialization (cell kind + value), so
equality is total and never crosses kinds: Text "5" differs from Number 5,
and Text "" differs from Empty. The first occurrence of each distinct row is
kept and survivors stay in their original order.
"""
from __future__ import annotations

import logging
from typing import Set

from ...core.cells import Grid, row_canonical
from ..base import ChangeType, CleaningRule, RuleResult
from ..config import CleaningConfig

logger = logging.getLogger(__name__)


class DuplicateRowRule(CleaningRule):
    """Drop rows that exactly repeat an earlier row."""

    def __init__(self, config: CleaningConfig):
        self.config = config

    @property
    def name(self) -> str:
        return "Duplicate Row Removal"

    @property
    def priority(self) -> int:
        return 30  # Must see trimmed, title-cased values

    @property
    def description(self) -> str:
        return "Remove rows that duplicate an earlier row"

    def clean(self, grid: Grid) -> RuleResult:
        seen: Set[str] = set()
        unique_rows = []
        dropped_indices = []

        for idx, row in enumerate(grid):
            key = row_canonical(row)
            if key in seen:
                dropped_indices.append(idx)
                continue
            seen.add(key)
            unique_rows.append(row)

        result = RuleResult(grid=tuple(unique_rows))
        result.stats["rows_dropped"] = len(dropped_indices)
        result.stats["distinct_rows"] = len(unique_rows)

        if dropped_indices:
            result.add_change(
                ChangeType.ROW_DROPPED,
                f"Dropped {len(dropped_indices)} duplicate rows",
                {"rows_dropped": len(dropped_indices), "rows": dropped_indices},
            )
            logger.info("Removed %s duplicate rows", len(dropped_indices))
            if self.config.verbose:
                logger.debug("Duplicate row indices: %s", dropped_indices)
        else:
            logger.info("No duplicate rows detected")

        return result
