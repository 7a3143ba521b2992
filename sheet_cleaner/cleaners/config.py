"""
Configuration for grid cleaning operations.

Defines which cleaning stages run and their settings.
"""
from dataclasses import dataclass

from ..core.config import EMPTY_CELL_PLACEHOLDER


@dataclass
class CleaningConfig:
    """
    Configuration for grid cleaning.

    Controls which rules are enabled and their specific settings. Stage
    order is fixed by rule priority; disabling a stage just skips it.
    """

    # ==================== Rule Enablement ====================

    trim_whitespace: bool = True
    normalize_casing: bool = True
    remove_duplicate_rows: bool = True
    remove_empty_rows: bool = True
    replace_empty_cells: bool = True

    # ==================== Rule-Specific Settings ====================

    # EmptyCellRule settings
    placeholder: str = EMPTY_CELL_PLACEHOLDER

    # ==================== Output Settings ====================

    verbose: bool = False  # Detailed logging

    @classmethod
    def default(cls) -> "CleaningConfig":
        """Create config with default settings (all rules enabled)."""
        return cls()

    @classmethod
    def conservative(cls) -> "CleaningConfig":
        """
        Create conservative config that leaves text casing untouched.

        Useful for data with acronyms or mixed-case proper nouns.
        """
        return cls(normalize_casing=False)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "trim_whitespace": self.trim_whitespace,
            "normalize_casing": self.normalize_casing,
            "remove_duplicate_rows": self.remove_duplicate_rows,
            "remove_empty_rows": self.remove_empty_rows,
            "replace_empty_cells": self.replace_empty_cells,
            "settings": {
                "placeholder": self.placeholder,
            }
        }
