"""
Command line entry point: clean a CSV/Excel file into a new file.

    sheet-clean contacts.xlsx -o contacts_clean.csv --report
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from sheet_cleaner.cleaners import CleaningConfig, InputError
from sheet_cleaner.core.config import settings
from sheet_cleaner.export.grid_sink import write_grid
from sheet_cleaner.importers.grid_source import read_grid
from sheet_cleaner.services.cleaning_service import run_cleaning

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Clean a spreadsheet: trim, title case, dedupe and fill blanks.")
    parser.add_argument("input", type=str, help="Input .csv, .xlsx or .xls file")
    parser.add_argument("-o", "--output", type=str, required=True, help="Output .csv or .xlsx file")
    parser.add_argument("--sheet", type=str, help="Sheet name for Excel input (default: first sheet)")
    parser.add_argument("--placeholder", type=str, default=settings.EMPTY_CELL_PLACEHOLDER,
                        help="Text written into empty cells (default: %(default)s)")
    parser.add_argument("--keep-case", action="store_true", help="Skip Title Case normalization")
    parser.add_argument("--ai", action="store_true", default=settings.AI_ENABLED,
                        help="Request an AI summary of the cleaned data")
    parser.add_argument("--report", action="store_true", help="Print the cleaning report")
    parser.add_argument("--loglevel", type=str, default=settings.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log verbosity (default: %(default)s)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.loglevel, format="%(asctime)s - %(levelname)s - %(message)s")
    log.info(f"INPUT : {args.input}")
    log.info(f"OUTPUT: {args.output}")

    config = CleaningConfig(
        normalize_casing=not args.keep_case,
        placeholder=args.placeholder,
    )

    try:
        grid = read_grid(args.input, sheet_name=args.sheet)
        outcome = run_cleaning(grid, ai_enabled=args.ai, config=config)
        write_grid(outcome.result.cleaned_grid, args.output, outcome.result.header_row_index)
    except FileNotFoundError:
        log.error(f"Input file not found: {args.input}")
        return 1
    except InputError as e:
        log.error(f"Nothing to clean: {e}")
        return 1
    except ValueError as e:
        log.error(str(e))
        return 1

    result = outcome.result
    print(f"Rows: {result.original_row_count} → {result.cleaned_row_count} (header at row {result.header_row_index})")

    if args.report and result.report is not None:
        print(result.report.to_summary())

    if args.ai:
        print(outcome.summary if outcome.summary else "No AI summary available.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
