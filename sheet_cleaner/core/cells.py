"""
Cell model - single source of truth for how grid values are typed.

Every value that enters the cleaning pipeline is wrapped in a Cell so that
emptiness, equality and casing rules are defined per kind instead of by
ad-hoc isinstance checks scattered across the rules:

- TEXT     str values (possibly empty or whitespace-only)
- NUMBER   int / float / Decimal
- BOOLEAN  bool
- EMPTY    None / missing

Grids are tuples of tuples of Cells, so a grid handed to a rule can never be
mutated underneath it.
"""
import json
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Sequence, Tuple

# str.isspace() characters plus the byte order mark, which str.strip() keeps
_EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def strip_text(text: str) -> str:
    """Strip Unicode whitespace and U+FEFF from both ends of a string."""
    return _EDGE_SPACE.sub("", text)


class CellKind(Enum):
    """Kinds of values a cell can hold."""
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    EMPTY = "empty"


@dataclass(frozen=True)
class Cell:
    """A single tabular value tagged with its kind."""
    kind: CellKind
    value: Any = None

    @classmethod
    def text(cls, value: str) -> "Cell":
        return cls(CellKind.TEXT, value)

    @classmethod
    def number(cls, value) -> "Cell":
        return cls(CellKind.NUMBER, value)

    @classmethod
    def boolean(cls, value: bool) -> "Cell":
        return cls(CellKind.BOOLEAN, bool(value))

    @classmethod
    def empty(cls) -> "Cell":
        return cls(CellKind.EMPTY, None)

    @classmethod
    def from_value(cls, value: Any) -> "Cell":
        """
        Wrap a raw Python value.

        bool is checked before numbers since bool is an int subclass.
        Unknown objects are kept as their text representation.
        """
        if isinstance(value, Cell):
            return value
        if value is None:
            return cls.empty()
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, (int, float, Decimal)):
            return cls.number(value)
        if isinstance(value, str):
            return cls.text(value)
        return cls.text(str(value))

    @property
    def is_text(self) -> bool:
        return self.kind is CellKind.TEXT

    def is_empty(self) -> bool:
        """EMPTY cells and whitespace-only (or BOM-only) text are both empty."""
        if self.kind is CellKind.EMPTY:
            return True
        if self.kind is CellKind.TEXT:
            return len(strip_text(self.value)) == 0
        return False

    def canonical(self) -> str:
        """
        Deterministic serialization used for row equality.

        The kind is part of the key, so Text "5" never equals Number 5 and
        Text "" never equals Empty.
        """
        return json.dumps([self.kind.value, _canonical_value(self)], ensure_ascii=False)

    def to_value(self) -> Any:
        """Plain Python value (None for EMPTY)."""
        return self.value

    def __str__(self) -> str:
        if self.kind is CellKind.EMPTY:
            return ""
        if self.kind is CellKind.BOOLEAN:
            return "TRUE" if self.value else "FALSE"
        return str(self.value)


Row = Tuple[Cell, ...]
Grid = Tuple[Row, ...]


def _canonical_value(cell: Cell) -> Any:
    if cell.kind is not CellKind.NUMBER:
        return cell.value

    number = cell.value
    if isinstance(number, Decimal):
        return _canonical_decimal(number)
    if isinstance(number, float):
        if math.isnan(number) or math.isinf(number):
            return repr(number)
        if number.is_integer():
            return int(number)
    return number


def _canonical_decimal(number: Decimal) -> Any:
    """
    Integral Decimals compare equal to ints, and Decimals that a float holds
    exactly compare equal to that float. Anything else keys on its normalized
    text, so precision beyond a float is never merged away.
    """
    if not number.is_finite():
        return str(number)
    if number == number.to_integral_value():
        return int(number)
    as_float = float(number)
    if Decimal(as_float) == number:
        return as_float
    return str(number.normalize())


def row_from_values(values: Iterable[Any]) -> Row:
    return tuple(Cell.from_value(v) for v in values)


def grid_from_values(rows: Iterable[Iterable[Any]]) -> Grid:
    """Build an immutable grid from nested sequences of raw values or Cells."""
    return tuple(row_from_values(row) for row in rows)


def grid_to_values(grid: Sequence[Sequence[Cell]]) -> list:
    """Unwrap a grid back into nested lists of plain Python values."""
    return [[cell.to_value() for cell in row] for row in grid]


def row_canonical(row: Sequence[Cell]) -> str:
    """Canonical key for a whole row (length is implied by the key)."""
    return "[" + ",".join(cell.canonical() for cell in row) + "]"


def is_empty_row(row: Sequence[Cell]) -> bool:
    """A row is empty when every cell is empty (a zero-cell row included)."""
    return all(cell.is_empty() for cell in row)


def grid_width(grid: Sequence[Sequence[Cell]]) -> int:
    """Widest row length (0 for a grid with no rows)."""
    return max((len(row) for row in grid), default=0)
