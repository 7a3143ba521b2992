"""
Base classes and interfaces for grid cleaning.

This module provides the abstract base class for all cleaning rules,
the per-rule result and change log structures, and the final
CleaningResult handed back to callers of the pipeline.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TYPE_CHECKING
from enum import Enum

from ..core.cells import Grid, grid_to_values

if TYPE_CHECKING:
    from .report import CleaningReport


class ChangeType(Enum):
    """Types of changes that can be made during cleaning."""
    VALUE_MODIFIED = "value_modified"
    ROW_DROPPED = "row_dropped"
    CELL_REPLACED = "cell_replaced"
    HEADER_DETECTION = "header_detection"


@dataclass
class Change:
    """Represents a single change made during cleaning."""
    change_type: ChangeType
    description: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "type": self.change_type.value,
            "description": self.description,
            "details": self.details
        }


@dataclass
class RuleResult:
    """
    Result of a single cleaning rule execution.

    Contains the new grid plus metadata about what changed. The input grid
    is never modified; `grid` is always a fresh snapshot.
    """
    grid: Grid
    changes: List[Change] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)

    def add_change(self, change_type: ChangeType, description: str, details: Optional[Dict[str, Any]] = None):
        """Convenience method to add a change."""
        self.changes.append(Change(
            change_type=change_type,
            description=description,
            details=details or {}
        ))

    def add_warning(self, message: str):
        """Convenience method to add a warning."""
        self.warnings.append(message)

    def to_dict(self) -> dict:
        """Convert to dictionary (excludes the grid)."""
        return {
            "changes": [c.to_dict() for c in self.changes],
            "warnings": self.warnings,
            "stats": self.stats
        }


@dataclass
class CleaningResult:
    """
    Output of the full pipeline.

    Invariants:
    - cleaned_row_count == len(cleaned_grid)
    - cleaned_row_count <= original_row_count
    - header_row_index < cleaned_row_count whenever cleaned_row_count > 0
    """
    cleaned_grid: Grid
    header_row_index: int
    original_row_count: int
    cleaned_row_count: int
    report: Optional["CleaningReport"] = None

    def to_values(self) -> list:
        """Cleaned grid as nested lists of plain Python values."""
        return grid_to_values(self.cleaned_grid)

    def to_dict(self) -> dict:
        return {
            "cleaned_data": self.to_values(),
            "header_row_index": self.header_row_index,
            "original_row_count": self.original_row_count,
            "cleaned_row_count": self.cleaned_row_count,
            "report": self.report.to_dict() if self.report else None,
        }


class CleaningRule(ABC):
    """
    Abstract base class for all cleaning rules.

    Each rule performs a specific grid transformation and returns
    a RuleResult with the new grid and change log.
    """

    @abstractmethod
    def clean(self, grid: Grid) -> RuleResult:
        """
        Clean the grid according to this rule's logic.

        Args:
            grid: Input grid (never mutated)

        Returns:
            RuleResult with the new grid and metadata
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this rule."""
        pass

    @property
    def priority(self) -> int:
        """
        Execution priority (lower number = runs earlier).

        Default is 50. Normalizers must run before duplicate detection,
        and row removal before cell replacement.
        """
        return 50

    @property
    def description(self) -> str:
        """Description of what this rule does."""
        return ""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.name} (priority={self.priority})>"


class CleaningError(Exception):
    """Base class for errors raised by the cleaning pipeline."""
    pass


class InputError(CleaningError, ValueError):
    """Raised when the raw grid is missing or has no rows."""
    pass


class CleaningRuleError(CleaningError):
    """Raised when a cleaning rule encounters an error."""

    def __init__(self, rule_name: str, original: Exception):
        self.rule_name = rule_name
        self.original = original
        super().__init__(f"Rule '{rule_name}' failed: {original}")
