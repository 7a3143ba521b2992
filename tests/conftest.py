"""
Shared fixtures for cleaning tests.
"""
import pytest

from sheet_cleaner.cleaners import CleaningConfig
from sheet_cleaner.core.cells import grid_from_values


@pytest.fixture
def config():
    """Default cleaning config."""
    return CleaningConfig.default()


@pytest.fixture
def messy_values():
    """A small contact sheet with every kind of mess the pipeline handles."""
    return [
        [None, None, None],
        ["  name ", "AGE", "active"],
        ["  alice smith  ", 30, True],
        ["Alice Smith", 30, True],
        ["   ", "", None],
        ["bob ", None, False],
        ["BOB", None, False],
    ]


@pytest.fixture
def messy_grid(messy_values):
    return grid_from_values(messy_values)
