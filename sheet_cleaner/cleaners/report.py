"""
Cleaning report generation and formatting.

Tracks what was cleaned and provides output as a dict, JSON or text.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Any
import json
from datetime import datetime


@dataclass
class CleaningReport:
    """
    Report of cleaning operations performed.

    Tracks all changes made to the grid for audit trail and transparency.
    Shapes are (rows, widest row) since rows may be ragged.
    """

    # Shape information
    original_shape: Tuple[int, int] = (0, 0)
    cleaned_shape: Tuple[int, int] = (0, 0)

    # Detected header row in the cleaned grid
    header_row_index: int = 0

    # Per-rule statistics
    rule_stats: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    # All changes made (detailed log)
    changes: List[Dict[str, Any]] = field(default_factory=list)

    # Warnings/issues encountered
    warnings: List[str] = field(default_factory=list)

    # Metadata
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    config_used: Dict[str, Any] = field(default_factory=dict)

    @property
    def rows_removed(self) -> int:
        """Number of rows removed."""
        return self.original_shape[0] - self.cleaned_shape[0]

    @property
    def cells_replaced(self) -> int:
        """Number of empty cells filled with the placeholder."""
        return sum(stats.get("cells_replaced", 0) for stats in self.rule_stats.values())

    def add_rule_stats(self, rule_name: str, stats: Dict[str, Any]):
        """Add statistics for a rule execution."""
        self.rule_stats[rule_name] = stats

    def add_change(self, change: Dict[str, Any]):
        """Add a change to the log."""
        self.changes.append(change)

    def add_warning(self, warning: str):
        """Add a warning."""
        self.warnings.append(warning)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp,
            "original_shape": {"rows": self.original_shape[0], "columns": self.original_shape[1]},
            "cleaned_shape": {"rows": self.cleaned_shape[0], "columns": self.cleaned_shape[1]},
            "header_row_index": self.header_row_index,
            "summary": {
                "rows_removed": self.rows_removed,
                "cells_replaced": self.cells_replaced,
                "warnings_count": len(self.warnings),
            },
            "rule_stats": self.rule_stats,
            "changes": self.changes,
            "warnings": self.warnings,
            "config_used": self.config_used,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def to_summary(self) -> str:
        """Generate a text summary of the cleaning report."""
        lines = [
            "="*80,
            "DATA CLEANING REPORT",
            "="*80,
            f"Timestamp: {self.timestamp}",
            "",
            "SHAPE CHANGES:",
            f"  Original: {self.original_shape[0]} rows × {self.original_shape[1]} columns",
            f"  Cleaned:  {self.cleaned_shape[0]} rows × {self.cleaned_shape[1]} columns",
            f"  Removed:  {self.rows_removed} rows",
            f"  Header:   row {self.header_row_index}",
            "",
        ]

        if self.rule_stats:
            lines.extend([
                "RULE STATISTICS:",
            ])
            for rule_name, stats in self.rule_stats.items():
                lines.append(f"  {rule_name}:")
                for key, value in stats.items():
                    lines.append(f"    {key}: {value}")
            lines.append("")

        if self.warnings:
            lines.extend([
                f"WARNINGS ({len(self.warnings)}):",
            ])
            for warning in self.warnings[:5]:
                lines.append(f"  ⚠ {warning}")
            if len(self.warnings) > 5:
                lines.append(f"  ... and {len(self.warnings)-5} more")
            lines.append("")

        lines.append("="*80)

        return "\n".join(lines)

    def __str__(self) -> str:
        """String representation (summary)."""
        return self.to_summary()
