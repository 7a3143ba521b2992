"""
Title case rule.

Lower-cases each non-empty text cell, then upper-cases the first word
character of every run of word characters. Word characters follow Python's
Unicode-aware ``\\w``, so "élan vital" becomes "Élan Vital" and
"o'neil-smith" becomes "O'Neil-Smith".

Known limitation: acronyms and mixed-case names are flattened
("NASA" -> "Nasa", "McDonald" -> "Mcdonald").
"""
from __future__ import annotations

import logging
import re

from ...core.cells import Cell, Grid
from ..base import ChangeType, CleaningRule, RuleResult
from ..config import CleaningConfig

logger = logging.getLogger(__name__)

WORD_START_RE = re.compile(r"\b\w")


def to_title_case(text: str) -> str:
    return WORD_START_RE.sub(lambda m: m.group(0).upper(), text.lower())


def title_case_cell(cell: Cell) -> Cell:
    if not cell.is_text or len(cell.value) == 0:
        return cell
    titled = to_title_case(cell.value)
    if titled == cell.value:
        return cell
    return Cell.text(titled)


class TitleCaseRule(CleaningRule):
    """Normalize text casing to Title Case."""

    def __init__(self, config: CleaningConfig):
        self.config = config

    @property
    def name(self) -> str:
        return "Title Case"

    @property
    def priority(self) -> int:
        return 20  # After trimming, before duplicate detection

    @property
    def description(self) -> str:
        return "Convert all text values to Title Case"

    def clean(self, grid: Grid) -> RuleResult:
        values_cleaned = 0
        rows = []

        for row in grid:
            new_row = tuple(title_case_cell(cell) for cell in row)
            values_cleaned += sum(1 for old, new in zip(row, new_row) if old is not new)
            rows.append(new_row)

        result = RuleResult(grid=tuple(rows))
        result.stats["values_cleaned"] = values_cleaned

        if values_cleaned > 0:
            result.add_change(
                ChangeType.VALUE_MODIFIED,
                f"Title-cased {values_cleaned} cells",
                {"values_modified": values_cleaned},
            )
        logger.info("Title-cased %s values", values_cleaned)

        return result
