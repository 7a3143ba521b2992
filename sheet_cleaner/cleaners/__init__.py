"""
Grid cleaning module.

Turns a raw grid of spreadsheet values into a trimmed, title-cased,
deduplicated grid with no empty rows or cells.
"""
from .data_cleaner import DataCleaner, clean
from .config import CleaningConfig
from .report import CleaningReport
from .base import (
    CleaningRule,
    CleaningResult,
    RuleResult,
    Change,
    ChangeType,
    CleaningError,
    CleaningRuleError,
    InputError,
)

__all__ = [
    "DataCleaner",
    "clean",
    "CleaningConfig",
    "CleaningReport",
    "CleaningRule",
    "CleaningResult",
    "RuleResult",
    "Change",
    "ChangeType",
    "CleaningError",
    "CleaningRuleError",
    "InputError",
]
