"""
Main grid cleaning orchestrator.

Runs cleaning rules in priority order, locates the header row and assembles
the CleaningResult with a comprehensive report.
"""
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union
import logging

from ..core.cells import Grid, grid_from_values, grid_width
from .base import CleaningError, CleaningResult, CleaningRule, CleaningRuleError, ChangeType, InputError
from .config import CleaningConfig
from .report import CleaningReport
from .rules.header_detection import detect_header_row


logger = logging.getLogger(__name__)


class DataCleaner:
    """
    Orchestrates grid cleaning operations.

    Runs multiple cleaning rules in priority order and tracks all changes.
    The raw grid is converted to an immutable snapshot once; every rule
    receives the previous rule's output and returns a new grid.
    """

    def __init__(self, config: Optional[CleaningConfig] = None):
        """
        Initialize the data cleaner.

        Args:
            config: Cleaning configuration. If None, uses default config.
        """
        self.config = config or CleaningConfig.default()
        self.rules: List[CleaningRule] = []

    def register_rule(self, rule: CleaningRule):
        """
        Register a cleaning rule.

        Args:
            rule: Cleaning rule to register
        """
        self.rules.append(rule)
        # Sort rules by priority (lower = earlier)
        self.rules.sort(key=lambda r: r.priority)

    def register_rules(self, rules: List[CleaningRule]):
        """
        Register multiple cleaning rules.

        Args:
            rules: List of rules to register
        """
        for rule in rules:
            self.register_rule(rule)

    def register_default_rules(self):
        """Register the standard rules enabled in the config."""
        # Import rules here to avoid circular imports
        from .rules.whitespace import WhitespaceRule
        from .rules.casing import TitleCaseRule
        from .rules.duplicates import DuplicateRowRule
        from .rules.empty_values import EmptyRowRule, EmptyCellRule

        if self.config.trim_whitespace:
            self.register_rule(WhitespaceRule(self.config))

        if self.config.normalize_casing:
            self.register_rule(TitleCaseRule(self.config))

        if self.config.remove_duplicate_rows:
            self.register_rule(DuplicateRowRule(self.config))

        if self.config.remove_empty_rows:
            self.register_rule(EmptyRowRule(self.config))

        if self.config.replace_empty_cells:
            self.register_rule(EmptyCellRule(self.config))

    def clean(self, raw_grid: Optional[Iterable[Iterable[Any]]]) -> CleaningResult:
        """
        Clean a raw grid using registered rules.

        Args:
            raw_grid: Rows of raw values (str, int, float, bool, None) or Cells

        Returns:
            CleaningResult with the cleaned grid, header index and row counts

        Raises:
            InputError: If raw_grid is None or has no rows
            CleaningRuleError: If a rule fails unexpectedly
        """
        if raw_grid is None:
            raise InputError("No data provided to clean.")

        grid: Grid = grid_from_values(raw_grid)
        if len(grid) == 0:
            raise InputError("No data provided to clean.")

        original_row_count = len(grid)
        report = CleaningReport(
            original_shape=(original_row_count, grid_width(grid)),
            config_used=self.config.to_dict()
        )

        logger.info(f"Starting data cleaning of {original_row_count} rows with {len(self.rules)} rules")

        # Run each rule in priority order
        for rule in self.rules:
            logger.info(f"Running rule: {rule.name} (priority={rule.priority})")

            try:
                result = rule.clean(grid)
            except CleaningError:
                raise
            except Exception as e:
                logger.error(f"Rule '{rule.name}' failed: {e}", exc_info=True)
                raise CleaningRuleError(rule.name, e) from e

            grid = result.grid

            for change in result.changes:
                report.add_change(change.to_dict())

            for warning in result.warnings:
                report.add_warning(f"[{rule.name}] {warning}")

            if result.stats:
                report.add_rule_stats(rule.name, result.stats)

            logger.info(f"Rule '{rule.name}' completed: {len(result.changes)} changes, {len(result.warnings)} warnings")

        header_row_index = detect_header_row(grid)
        cleaned_row_count = len(grid)

        report.header_row_index = header_row_index
        report.cleaned_shape = (cleaned_row_count, grid_width(grid))
        if cleaned_row_count > 0:
            report.add_change({
                "type": ChangeType.HEADER_DETECTION.value,
                "description": f"Header detected at row {header_row_index}",
                "details": {"header_row": header_row_index},
            })

        logger.info(f"Cleaning completed: {original_row_count} rows → {cleaned_row_count} rows")

        return CleaningResult(
            cleaned_grid=grid,
            header_row_index=header_row_index,
            original_row_count=original_row_count,
            cleaned_row_count=cleaned_row_count,
            report=report,
        )

    def clean_file(
        self,
        file_path: Union[str, Path],
        sheet_name: Optional[str] = None
    ) -> CleaningResult:
        """
        Clean a file (Excel or CSV).

        Args:
            file_path: Path to the file
            sheet_name: Sheet name for Excel files (first sheet if None)

        Returns:
            CleaningResult for the file's grid
        """
        from ..importers.grid_source import read_grid

        grid = read_grid(file_path, sheet_name=sheet_name)
        return self.clean(grid)

    def __repr__(self) -> str:
        return f"<DataCleaner: {len(self.rules)} rules registered>"


def clean(
    raw_grid: Optional[Iterable[Iterable[Any]]],
    config: Optional[CleaningConfig] = None,
) -> CleaningResult:
    """
    Run the standard pipeline: trim, title case, dedupe, drop empty rows,
    fill empty cells, then locate the header row.

    Raises:
        InputError: If raw_grid is None or has no rows
    """
    cleaner = DataCleaner(config)
    cleaner.register_default_rules()
    return cleaner.clean(raw_grid)
