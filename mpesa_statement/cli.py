#!/usr/bin/env python3
"""
M-Pesa statement → Dynamics 365 bank statement import

Reads an M-Pesa statement workbook and writes the two import files:
  * M-Pesa-Header.xlsx  (one summary row)
  * M-Pesa-Lines.xlsx   (one row per debit/credit line)

Every pipeline switch can be set from a JSON file (--config) and overridden
by individual flags.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from mpesa_statement.controllers.statement_session import transform_statement_file
from mpesa_statement.controllers.statement_writer import write_outputs
from mpesa_statement.data_model import (
    DateFormatPolicy,
    DateRangeSource,
    LineEmission,
    MonthCheck,
    PipelineConfig,
    UnparsedDatePolicy,
)
from mpesa_statement.exceptions import StatementError
from mpesa_statement.utilities import configure_logging

log = logging.getLogger(__name__)


def _choices(enum_type) -> List[str]:
    return [m.value for m in enum_type]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="mpesa-statement",
        description="Convert an M-Pesa statement into Dynamics 365 Header/Lines import files.",
    )
    ap.add_argument("input", type=Path, help="Path to the M-Pesa statement (.xlsx or .csv)")
    ap.add_argument("-o", "--out-dir", type=Path, default=Path("."),
                    help="Directory for M-Pesa-Header/M-Pesa-Lines (default: current directory)")
    ap.add_argument("--format", choices=["xlsx", "csv"], default="xlsx",
                    help="Output file format (default: xlsx)")
    ap.add_argument("--config", type=Path, help="JSON file with pipeline settings")

    # Date handling
    ap.add_argument("--date-policy", choices=_choices(DateFormatPolicy),
                    help="How to read ambiguous dd/mm vs mm/dd dates (default: day-first)")
    ap.add_argument("--day-swap", action="store_true", default=None,
                    help="Write dates as YYYY-DD-MM for a US-locale Dynamics import")
    ap.add_argument("--unparsed-date", choices=_choices(UnparsedDatePolicy),
                    help="What to do with dates that cannot be parsed (default: raw_text)")
    ap.add_argument("--transaction-month-check", choices=_choices(MonthCheck),
                    help="Warn when booking dates fall outside the current month")
    ap.add_argument("--range-month-check", choices=_choices(MonthCheck),
                    help="Warn when the statement From/To dates fall outside the current month")

    # Lines and header
    ap.add_argument("--line-emission", choices=_choices(LineEmission),
                    help="split: separate credit/debit lines (default); netted: one line per row")
    ap.add_argument("--date-range", choices=_choices(DateRangeSource),
                    help="Header dates from the From/To labels (default) or the booking dates")
    ap.add_argument("--account", help="BANKACCOUNT value (default: MPESA)")
    ap.add_argument("--currency", help="CURRENCY value (default: KES)")

    ap.add_argument("--summary", action="store_true", help="Print the header and counts as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug output on the console")
    ap.add_argument("--log-dir", type=Path, help="Directory for the rotating log file (default: ./logs)")
    return ap


_FLAG_TO_FIELD: Dict[str, str] = {
    "date_policy": "date_format_policy",
    "day_swap": "day_swap_output",
    "unparsed_date": "unparsed_date_policy",
    "transaction_month_check": "transaction_month_check",
    "range_month_check": "range_month_check",
    "line_emission": "line_emission",
    "date_range": "date_range_source",
    "account": "bank_account",
    "currency": "currency",
}


def config_from_args(args: argparse.Namespace) -> PipelineConfig:
    """JSON file settings first, then any flag given on the command line."""
    settings: Dict[str, Any] = {}
    if args.config:
        if not args.config.is_file():
            raise SystemExit(f"Config file not found: {args.config}")
        try:
            loaded = json.loads(args.config.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise SystemExit(f"Config file is not valid JSON: {e}")
        if not isinstance(loaded, dict):
            raise SystemExit("Config file must contain a JSON object")
        settings.update(loaded)
    for flag, field_name in _FLAG_TO_FIELD.items():
        value = getattr(args, flag)
        if value is not None:
            settings[field_name] = value
    return PipelineConfig.from_dict(settings)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    configure_logging(args.log_dir, "DEBUG" if args.verbose else None)

    if not args.input.exists():
        raise SystemExit(f"Input statement not found: {args.input}")
    if not args.input.is_file():
        raise SystemExit(f"Input path is not a file: {args.input}")

    try:
        config = config_from_args(args)
        result = transform_statement_file(args.input, config)
    except StatementError as e:
        log.error("Conversion failed: %s", e)
        raise SystemExit(f"Conversion failed: {e}")

    paths = write_outputs(result, args.out_dir, args.format)
    for p in paths:
        print(p)
    if args.summary:
        print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
