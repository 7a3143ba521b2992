"""
Tests for the cell model.

Validates:
- Kind detection from raw Python values
- Emptiness rules (Empty vs. whitespace-only text)
- Canonical serialization never crosses kinds
"""
from decimal import Decimal

import pytest

from sheet_cleaner.core.cells import (
    Cell,
    CellKind,
    grid_from_values,
    grid_to_values,
    grid_width,
    is_empty_row,
    row_canonical,
)


class TestFromValue:
    """Tests for Cell.from_value."""

    @pytest.mark.parametrize("value,kind", [
        (None, CellKind.EMPTY),
        ("", CellKind.TEXT),
        ("abc", CellKind.TEXT),
        (0, CellKind.NUMBER),
        (2.5, CellKind.NUMBER),
        (Decimal("1.10"), CellKind.NUMBER),
        (True, CellKind.BOOLEAN),
        (False, CellKind.BOOLEAN),
    ])
    def test_kinds(self, value, kind):
        assert Cell.from_value(value).kind is kind

    def test_bool_is_not_a_number(self):
        """bool subclasses int but must stay BOOLEAN."""
        assert Cell.from_value(True) == Cell.boolean(True)
        assert Cell.from_value(True) != Cell.number(1)

    def test_cell_passes_through(self):
        cell = Cell.text("x")
        assert Cell.from_value(cell) is cell

    def test_unknown_objects_become_text(self):
        class Thing:
            def __str__(self):
                return "thing"

        assert Cell.from_value(Thing()) == Cell.text("thing")


class TestIsEmpty:
    """Tests for Cell.is_empty."""

    def test_empty_marker(self):
        assert Cell.empty().is_empty()

    def test_blank_text(self):
        assert Cell.text("").is_empty()
        assert Cell.text("  \t\n").is_empty()
        assert Cell.text(" 　").is_empty()

    def test_byte_order_mark_only_text(self):
        assert Cell.text("\ufeff").is_empty()
        assert Cell.text("\ufeff  ").is_empty()

    def test_non_empty_values(self):
        assert not Cell.text("a").is_empty()
        assert not Cell.number(0).is_empty()
        assert not Cell.boolean(False).is_empty()


class TestCanonical:
    """Tests for canonical serialization."""

    def test_text_never_equals_number(self):
        assert Cell.text("5").canonical() != Cell.number(5).canonical()

    def test_empty_text_never_equals_empty(self):
        assert Cell.text("").canonical() != Cell.empty().canonical()

    def test_empty_equals_empty(self):
        assert Cell.empty().canonical() == Cell.from_value(None).canonical()

    def test_integral_float_equals_int(self):
        assert Cell.number(5.0).canonical() == Cell.number(5).canonical()
        assert Cell.number(Decimal("5")).canonical() == Cell.number(5).canonical()

    def test_decimal_keeps_precision_beyond_float(self):
        a = Decimal("0.10000000000000000001")
        b = Decimal("0.10000000000000000002")

        assert Cell.number(a).canonical() != Cell.number(b).canonical()
        assert Cell.number(Decimal("0.10")).canonical() == Cell.number(Decimal("0.1")).canonical()

    def test_exact_decimal_equals_float(self):
        assert Cell.number(Decimal("1.5")).canonical() == Cell.number(1.5).canonical()

    def test_special_decimals_do_not_raise(self):
        assert Cell.number(Decimal("sNaN")).canonical() != Cell.number(Decimal("NaN")).canonical()
        assert Cell.number(Decimal("Infinity")).canonical() == Cell.number(Decimal("Infinity")).canonical()

    def test_boolean_never_equals_number(self):
        assert Cell.boolean(True).canonical() != Cell.number(1).canonical()

    def test_row_key_includes_length(self):
        short = grid_from_values([["a"]])[0]
        long = grid_from_values([["a", None]])[0]
        assert row_canonical(short) != row_canonical(long)

    def test_row_key_is_unambiguous(self):
        """Commas inside text cannot fake a cell boundary."""
        one = grid_from_values([['a","b']])[0]
        two = grid_from_values([["a", "b"]])[0]
        assert row_canonical(one) != row_canonical(two)


class TestGridHelpers:
    """Tests for grid conversion helpers."""

    def test_round_trip_keeps_ragged_rows(self):
        values = [["a", 1], [None], [True, "x", 2.5]]
        grid = grid_from_values(values)

        assert isinstance(grid, tuple)
        assert all(isinstance(row, tuple) for row in grid)
        assert grid_to_values(grid) == values

    def test_grid_width(self):
        assert grid_width(grid_from_values([["a"], ["b", "c", "d"]])) == 3
        assert grid_width(()) == 0

    def test_is_empty_row(self):
        assert is_empty_row(grid_from_values([[None, " ", ""]])[0])
        assert is_empty_row(())
        assert not is_empty_row(grid_from_values([[None, 0]])[0])

    def test_str_rendering(self):
        assert str(Cell.empty()) == ""
        assert str(Cell.boolean(True)) == "TRUE"
        assert str(Cell.number(30)) == "30"
