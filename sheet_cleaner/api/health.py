from fastapi import APIRouter
from sheet_cleaner.core.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint - reports whether the AI summarizer is configured."""
    return {
        "status": "healthy",
        "ai_summarizer": "configured" if settings.AI_API_KEY else "not configured",
    }
