"""
Tests for the cleaning service.
"""
import pytest

from sheet_cleaner.cleaners import CleaningConfig, InputError
from sheet_cleaner.services.cleaning_service import run_cleaning


class TestRunCleaning:
    """Tests for run_cleaning."""

    def test_no_summary_when_disabled(self):
        calls = []
        outcome = run_cleaning([["a"]], summarizer=lambda grid: calls.append(grid))

        assert outcome.summary is None
        assert calls == []
        assert outcome.result.to_values() == [["A"]]

    def test_summarizer_sees_cleaned_grid(self):
        seen = []

        def summarizer(grid):
            seen.append(grid)
            return "summary"

        outcome = run_cleaning([["  a  ", None], ["A", None]], ai_enabled=True, summarizer=summarizer)

        assert outcome.summary == "summary"
        assert seen == [outcome.result.cleaned_grid]

    def test_summarizer_failure_does_not_affect_result(self):
        def summarizer(grid):
            raise RuntimeError("quota exceeded")

        outcome = run_cleaning([["x", None]], ai_enabled=True, summarizer=summarizer)

        assert outcome.summary is None
        assert outcome.result.to_values() == [["X", "N/A"]]

    def test_config_passed_through(self):
        outcome = run_cleaning([["x", None]], config=CleaningConfig(placeholder="?"))

        assert outcome.result.to_values() == [["X", "?"]]

    def test_input_error_propagates(self):
        with pytest.raises(InputError):
            run_cleaning([], ai_enabled=True, summarizer=lambda grid: "never")

    def test_to_dict_includes_summary(self):
        outcome = run_cleaning([["a"]], ai_enabled=True, summarizer=lambda grid: "ok")
        data = outcome.to_dict()

        assert data["summary"] == "ok"
        assert data["cleaned_data"] == [["A"]]
