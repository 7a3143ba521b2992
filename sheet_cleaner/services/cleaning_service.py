"""
Cleaning service - runs the pipeline and the optional summarizer together.

The summarizer only ever receives the cleaned grid, and its outcome never
affects the cleaning result.
"""
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..cleaners import CleaningConfig, CleaningResult, clean
from .summarizer import Summarizer, summarize

logger = logging.getLogger(__name__)


@dataclass
class CleaningOutcome:
    """Cleaning result plus the optional AI summary."""
    result: CleaningResult
    summary: Optional[str] = None

    def to_dict(self) -> dict:
        data = self.result.to_dict()
        data["summary"] = self.summary
        return data


def run_cleaning(
    raw_grid: Optional[Iterable[Iterable[Any]]],
    *,
    ai_enabled: bool = False,
    config: Optional[CleaningConfig] = None,
    summarizer: Optional[Summarizer] = None,
) -> CleaningOutcome:
    """
    Clean a raw grid and, if requested, summarize the cleaned output.

    Args:
        raw_grid: Rows of raw values
        ai_enabled: Whether to request an AI summary
        config: Cleaning configuration
        summarizer: Replacement for the default HTTP summarizer

    Raises:
        InputError: If raw_grid is None or empty
    """
    result = clean(raw_grid, config)
    logger.info(
        f"Cleaned {result.original_row_count} rows into {result.cleaned_row_count} rows "
        f"(header at row {result.header_row_index})"
    )

    summary = None
    if ai_enabled:
        if summarizer is not None:
            try:
                summary = summarizer(result.cleaned_grid)
            except Exception as e:
                logger.error(f"Summarizer failed: {e}", exc_info=True)
                summary = None
        else:
            summary = summarize(result.cleaned_grid, enabled=True)
        if summary is None:
            logger.info("No AI summary available")

    return CleaningOutcome(result=result, summary=summary)
