"""
Cleaning API endpoints.

Accepts a raw grid as JSON, runs the cleaning pipeline and returns the
cleaned grid, its metadata and an optional AI summary.
"""
from fastapi import APIRouter, Depends, HTTPException
from typing import Optional
import logging

from sheet_cleaner.cleaners import CleaningConfig, InputError
from sheet_cleaner.core.config import settings
from sheet_cleaner.schemas.cleaning import CleanRequest, CleanResponse
from sheet_cleaner.services.cleaning_service import run_cleaning
from sheet_cleaner.services.summarizer import Summarizer

router = APIRouter()
logger = logging.getLogger(__name__)


def get_summarizer() -> Optional[Summarizer]:
    """Summarizer dependency. None means the default HTTP summarizer."""
    return None


@router.post("/clean", response_model=CleanResponse)
def clean_grid(
    request: CleanRequest,
    summarizer: Optional[Summarizer] = Depends(get_summarizer),
):
    """
    Clean a grid.

    Args:
        request: Raw grid plus options

    Returns:
        Cleaned grid, header row index, row counts, summary and report
    """
    ai_enabled = settings.AI_ENABLED if request.ai_enabled is None else request.ai_enabled
    config = CleaningConfig(
        normalize_casing=request.normalize_casing,
        placeholder=request.placeholder or settings.EMPTY_CELL_PLACEHOLDER,
    )

    try:
        outcome = run_cleaning(
            request.data,
            ai_enabled=ai_enabled,
            config=config,
            summarizer=summarizer,
        )
    except InputError as e:
        logger.warning(f"Rejected clean request: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return CleanResponse(**outcome.to_dict())
