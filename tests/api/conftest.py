"""
Pytest fixtures for API integration tests.

Provides a FastAPI test client with the summarizer dependency overridden so
no test ever reaches the network.
"""
import pytest
from fastapi.testclient import TestClient

from sheet_cleaner.main import app
from sheet_cleaner.api.cleaning import get_summarizer


@pytest.fixture
def summaries():
    """Grids passed to the fake summarizer, for assertions."""
    return []


@pytest.fixture(scope="function")
def client(summaries):
    """
    FastAPI test client with a fake summarizer.

    The fake records the grid it receives and returns a fixed summary.
    """
    def fake_summarizer(grid):
        summaries.append(grid)
        return "Fake summary"

    app.dependency_overrides[get_summarizer] = lambda: fake_summarizer

    with TestClient(app) as test_client:
        yield test_client

    # Clean up override
    app.dependency_overrides.clear()
