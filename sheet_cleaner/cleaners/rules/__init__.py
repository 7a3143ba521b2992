from .whitespace import WhitespaceRule
from .casing import TitleCaseRule, to_title_case
from .duplicates import DuplicateRowRule
from .empty_values import EmptyRowRule, EmptyCellRule
from .header_detection import detect_header_row

__all__ = [
    "WhitespaceRule",
    "TitleCaseRule",
    "to_title_case",
    "DuplicateRowRule",
    "EmptyRowRule",
    "EmptyCellRule",
    "detect_header_row",
]
