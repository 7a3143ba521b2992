"""
Optional AI summarizer for cleaned grids.

Sends a small sample of the *cleaned* grid to an OpenAI-compatible chat
completions endpoint and returns the model's insights as text. This is a
best-effort collaborator: every failure (disabled, no API key, network
error, bad status, malformed payload) is logged and turned into None. It
never sees the raw grid and never changes the cleaned data.
"""
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

import httpx

from ..core.cells import Cell
from ..core.config import Settings, settings

logger = logging.getLogger(__name__)

# A summarizer is any callable that turns a cleaned grid into text (or None)
Summarizer = Callable[[Sequence[Sequence[Cell]]], Optional[str]]

SYSTEM_PROMPT = (
    "You are a data quality analyst. "
    "Provide concise, actionable insights about spreadsheet data."
)


class SummaryUnavailable(Exception):
    """Raised internally when no summary can be produced."""
    pass


def sample_grid(grid: Sequence[Sequence[Cell]], sample_size: int) -> List[Sequence[Cell]]:
    """First `sample_size` rows of the grid (empty list for an empty grid)."""
    if not grid:
        return []
    return list(grid[:max(sample_size, 0)])


def format_sample(sample: Sequence[Sequence[Cell]]) -> str:
    """Render rows as tab-separated lines."""
    if not sample:
        return "No data available for analysis."
    return "\n".join("\t".join(str(cell) for cell in row) for row in sample)


def build_request(sample: Sequence[Sequence[Cell]], config: Settings) -> Dict[str, Any]:
    prompt = (
        "Analyze the following spreadsheet data sample and provide insights:\n"
        "- Identify any data inconsistencies or anomalies\n"
        "- Suggest improvements for data quality\n"
        "- Note any patterns or issues\n"
        "\n"
        f"Data sample:\n{format_sample(sample)}\n"
        "\n"
        "Please provide concise, actionable insights."
    )
    return {
        "model": config.AI_MODEL,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
        "max_tokens": config.AI_MAX_TOKENS,
        "temperature": config.AI_TEMPERATURE,
    }


def parse_response(payload: Any) -> str:
    """
    Extract the first choice's message content.

    Raises:
        SummaryUnavailable: If the payload has no usable content
    """
    if not isinstance(payload, dict):
        raise SummaryUnavailable("AI response is not a JSON object")

    choices = payload.get("choices")
    if not choices:
        raise SummaryUnavailable("No insights available from AI analysis")
    if not isinstance(choices, list):
        raise SummaryUnavailable("AI response format unexpected")

    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str) or not content.strip():
        raise SummaryUnavailable("AI response format unexpected")

    return content.strip()


def request_summary(
    sample: Sequence[Sequence[Cell]],
    api_key: str,
    config: Settings,
    client: Optional[httpx.Client] = None,
) -> str:
    """
    Call the chat completions endpoint.

    Raises:
        SummaryUnavailable: On any transport, status or payload problem
    """
    owns_client = client is None
    client = client or httpx.Client(timeout=config.AI_TIMEOUT_SECONDS)

    try:
        response = client.post(
            config.AI_API_ENDPOINT,
            json=build_request(sample, config),
            headers={"Authorization": f"Bearer {api_key}"},
        )
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPStatusError as e:
        raise SummaryUnavailable(
            f"AI API error: {e.response.status_code} - {e.response.text[:200]}"
        ) from e
    except httpx.HTTPError as e:
        raise SummaryUnavailable(f"AI API request failed: {e}") from e
    except ValueError as e:
        raise SummaryUnavailable(f"AI API returned invalid JSON: {e}") from e
    finally:
        if owns_client:
            client.close()

    return parse_response(payload)


def summarize(
    cleaned_grid: Sequence[Sequence[Cell]],
    enabled: bool = False,
    *,
    api_key: Optional[str] = None,
    client: Optional[httpx.Client] = None,
    config: Optional[Settings] = None,
) -> Optional[str]:
    """
    Summarize a cleaned grid, or return None when no summary is available.

    Args:
        cleaned_grid: Output of the cleaning pipeline
        enabled: Whether the caller asked for AI analysis
        api_key: Overrides AI_API_KEY from settings
        client: Optional httpx client (tests inject a MockTransport here)
        config: Settings to use instead of the module-level settings

    Returns:
        Insight text, or None if disabled or on any failure
    """
    if not enabled:
        return None

    config = config or settings
    api_key = api_key or config.AI_API_KEY
    if not api_key:
        logger.warning("AI analysis requested but no API key configured.")
        return None

    sample = sample_grid(cleaned_grid, config.AI_SAMPLE_SIZE)
    if not sample:
        logger.warning("No data provided for AI analysis.")
        return None

    try:
        return request_summary(sample, api_key, config, client=client)
    except SummaryUnavailable as e:
        logger.error(f"AI analysis failed: {e}")
        return None
