"""
M-Pesa statement parsing.

Turns the raw rows of a statement sheet into typed records:
• Scan the metadata row for the "From"/"To" labels of the statement period.
• Walk the transaction table, skipping blank separator and total/summary rows.
• Normalize amounts and booking dates under the configured date policies.

Everything here is a pure function of (rows, config, today); diagnostics are
logged and collected on the returned `ParsedStatement`.
"""

# mpesa_statement/controllers/statement_parser.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, List, Optional, Sequence

from mpesa_statement.controllers.statement_reader import RawRow
from mpesa_statement.data_model import (
    DEFAULT_CONFIG,
    DateFormatPolicy,
    DateRangeSource,
    MonthCheck,
    PipelineConfig,
    StatementTransaction,
    UnparsedDatePolicy,
)
from mpesa_statement.exceptions import UnparsedDateError
from mpesa_statement.utilities import (
    cell_at,
    cell_text,
    check_current_month,
    infer_date_order,
    is_blank_cell,
    parse_amount,
    parse_statement_date,
)

log = logging.getLogger(__name__)

FOOTER_MARKERS = ("total", "summary")


@dataclass(frozen=True)
class RawDateRange:
    """The cells found next to the "From" and "To" labels ("" when absent)."""
    from_raw: Any = ""
    to_raw: Any = ""


@dataclass
class ParsedStatement:
    transactions: List[StatementTransaction] = field(default_factory=list)
    date_range: RawDateRange = field(default_factory=RawDateRange)
    from_date: Optional[datetime] = None
    to_date: Optional[datetime] = None
    date_policy: DateFormatPolicy = DateFormatPolicy.DAY_FIRST
    warnings: List[str] = field(default_factory=list)


# --- Metadata ----------------------------------------------------------------


def extract_date_range(
    rows: Sequence[RawRow], config: PipelineConfig = DEFAULT_CONFIG
) -> RawDateRange:
    """Find the statement period in the metadata row.

    The label's column moves between exports, so every cell of the row is
    checked: a cell reading "from" or "to" (any case) captures the next cell,
    when that cell is not empty. A later label overrides an earlier one.
    """
    if config.metadata_row >= len(rows):
        return RawDateRange()
    row = rows[config.metadata_row]
    from_raw: Any = ""
    to_raw: Any = ""
    for j, cell in enumerate(row):
        label = cell_text(cell).strip().lower()
        if label not in ("from", "to"):
            continue
        value = cell_at(row, j + 1)
        if is_blank_cell(value):
            continue
        if label == "from":
            from_raw = value
        else:
            to_raw = value
    if from_raw == "" and to_raw == "":
        log.info("No From/To labels found in metadata row %d", config.metadata_row)
    return RawDateRange(from_raw=from_raw, to_raw=to_raw)


# --- Transactions ------------------------------------------------------------


def is_footer_text(text: str) -> bool:
    """True for total/summary rows, which close the table but are not transactions."""
    lowered = text.lower()
    return any(marker in lowered for marker in FOOTER_MARKERS)


def iter_transaction_rows(
    rows: Sequence[RawRow], config: PipelineConfig = DEFAULT_CONFIG
) -> Iterable[tuple[int, RawRow]]:
    """Yield (row_index, row) for every data row of the transaction table."""
    doc_col = config.columns.document
    for i in range(config.first_transaction_row, len(rows)):
        row = rows[i]
        first = cell_at(row, doc_col)
        if _is_empty_document(first):
            continue
        if is_footer_text(cell_text(first)):
            log.debug("Skipping footer row %d: %r", i, first)
            continue
        yield i, row


def _is_empty_document(value: Any) -> bool:
    # a numeric 0 is a placeholder, not a receipt number; the text "0" is kept
    if isinstance(value, (int, float, Decimal)) and value == 0:
        return True
    return is_blank_cell(value)


def resolve_date_policy(
    rows: Sequence[RawRow],
    config: PipelineConfig = DEFAULT_CONFIG,
    date_range: Optional[RawDateRange] = None,
) -> DateFormatPolicy:
    """Turn AUTO into DAY_FIRST or MONTH_FIRST for this statement; others pass through."""
    if config.date_format_policy is not DateFormatPolicy.AUTO:
        return config.date_format_policy
    values: List[Any] = [
        cell_at(row, config.columns.booking_date)
        for _, row in iter_transaction_rows(rows, config)
    ]
    if date_range is not None:
        values.extend([date_range.from_raw, date_range.to_raw])
    policy = infer_date_order(values)
    log.info("Date order inferred as %s", policy.value)
    return policy


def extract_transactions(
    rows: Sequence[RawRow],
    config: PipelineConfig = DEFAULT_CONFIG,
    *,
    date_policy: Optional[DateFormatPolicy] = None,
    warnings: Optional[List[str]] = None,
    today: Optional[date] = None,
) -> List[StatementTransaction]:
    """Build one `StatementTransaction` per data row, in sheet order.

    Parameters
    ----------
    rows : Sequence[RawRow]
        Rows as returned by `read_statement_rows`.
    config : PipelineConfig
        Offsets, columns and date policies.
    date_policy : DateFormatPolicy, optional
        Already-resolved day/month order; defaults to `resolve_date_policy`.
    warnings : list, optional
        Diagnostics are appended here as well as logged.
    today : date, optional
        Reference day for the current-month check.

    Raises
    ------
    UnparsedDateError
        Only when a booking date is unparseable and the policy is ABORT.
    """
    if date_policy is None:
        date_policy = resolve_date_policy(rows, config)
    sink: List[str] = warnings if warnings is not None else []
    cols = config.columns

    out: List[StatementTransaction] = []
    for i, row in iter_transaction_rows(rows, config):
        raw_date = cell_at(row, cols.booking_date)
        booking = parse_statement_date(raw_date, date_policy)
        where = f"row {i + 1}"
        if booking is None and not is_blank_cell(raw_date):
            if _handle_unparsed(raw_date, where, config.unparsed_date_policy, sink):
                continue
        if booking is not None:
            _check_month(booking, config.transaction_month_check, today, where, sink)

        out.append(
            StatementTransaction(
                document_number=cell_text(cell_at(row, cols.document)),
                booking_date=booking,
                paid_in=parse_amount(cell_at(row, cols.paid_in)),
                withdrawn=parse_amount(cell_at(row, cols.withdrawn)),
                booking_date_raw="" if raw_date is None else raw_date,
                row_index=i,
            )
        )
    log.debug("Extracted %d transactions", len(out))
    return out


# --- Whole statement ---------------------------------------------------------


def parse_statement(
    rows: Sequence[RawRow],
    config: PipelineConfig = DEFAULT_CONFIG,
    *,
    today: Optional[date] = None,
) -> ParsedStatement:
    """Parse metadata and transactions of one statement sheet.

    The metadata period is only parsed (and checked) when the header takes
    its dates from the labels; the min/max policy ignores it.
    """
    parsed = ParsedStatement()
    parsed.date_range = extract_date_range(rows, config)
    parsed.date_policy = resolve_date_policy(rows, config, parsed.date_range)
    parsed.transactions = extract_transactions(
        rows,
        config,
        date_policy=parsed.date_policy,
        warnings=parsed.warnings,
        today=today,
    )

    if config.date_range_source is DateRangeSource.METADATA_LABELS:
        parsed.from_date = _parse_range_date(
            parsed.date_range.from_raw, "From", parsed, config, today
        )
        parsed.to_date = _parse_range_date(
            parsed.date_range.to_raw, "To", parsed, config, today
        )
    return parsed


def _parse_range_date(
    raw: Any,
    label: str,
    parsed: ParsedStatement,
    config: PipelineConfig,
    today: Optional[date],
) -> Optional[datetime]:
    value = parse_statement_date(raw, parsed.date_policy)
    where = f"statement {label} date"
    if value is None:
        if not is_blank_cell(raw):
            _handle_unparsed(raw, where, config.unparsed_date_policy, parsed.warnings)
        return None
    _check_month(value, config.range_month_check, today, where, parsed.warnings)
    return value


def _handle_unparsed(
    raw: Any, where: str, policy: UnparsedDatePolicy, sink: List[str]
) -> bool:
    """Log an unparseable date; return True when the row must be dropped."""
    if policy is UnparsedDatePolicy.ABORT:
        raise UnparsedDateError(raw, where)
    message = f"Unable to parse date {raw!r} in {where}"
    log.warning(message)
    sink.append(message)
    return policy is UnparsedDatePolicy.SKIP_ROW


def _check_month(
    value: datetime,
    mode: MonthCheck,
    today: Optional[date],
    where: str,
    sink: List[str],
) -> None:
    message = check_current_month(value, mode, today)
    if message:
        message = f"{message}: {where}"
        log.warning(message)
        sink.append(message)
