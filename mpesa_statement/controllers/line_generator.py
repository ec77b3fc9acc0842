# mpesa_statement/controllers/line_generator.py
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, List, Optional, Sequence, Tuple

from mpesa_statement.data_model import (
    DEFAULT_CONFIG,
    DateRangeSource,
    HeaderRecord,
    LedgerLine,
    LineEmission,
    PipelineConfig,
    StatementTransaction,
    UnparsedDatePolicy,
)
from mpesa_statement.utilities import (
    cell_text,
    format_booking_date,
    round_amount,
)

log = logging.getLogger(__name__)

RANGE_PADDING = timedelta(seconds=1)


def render_date(
    parsed: Optional[datetime], raw: Any, config: PipelineConfig = DEFAULT_CONFIG
) -> str:
    """Text for a date column: formatted when parsed, else raw text or "" per policy."""
    if parsed is not None:
        return format_booking_date(parsed, config.day_swap_output)
    if config.unparsed_date_policy is UnparsedDatePolicy.RAW_TEXT:
        return cell_text(raw)
    return ""


def line_amounts(
    txn: StatementTransaction, emission: LineEmission = LineEmission.SPLIT
) -> List[Decimal]:
    """Signed, 3dp-rounded amounts one transaction contributes, in emission order.

    SPLIT  → [+paid_in] and/or [-|withdrawn|], paid-in first.
    NETTED → [paid_in - |withdrawn|].
    Amounts that round to zero are not emitted.
    """
    if emission is LineEmission.NETTED:
        candidates = [txn.paid_in - abs(txn.withdrawn)]
    else:
        candidates = [txn.paid_in, -abs(txn.withdrawn)]
    rounded = (round_amount(a) for a in candidates)
    return [a for a in rounded if a != 0]


def generate_lines(
    transactions: Sequence[StatementTransaction],
    config: PipelineConfig = DEFAULT_CONFIG,
) -> List[LedgerLine]:
    """Expand transactions into numbered ledger lines.

    Line numbers start at 1 and count emitted lines only, so a transaction
    with nothing to emit does not leave a gap.
    """
    lines: List[LedgerLine] = []
    for txn in transactions:
        booking = render_date(txn.booking_date, txn.booking_date_raw, config)
        for amount in line_amounts(txn, config.line_emission):
            lines.append(
                LedgerLine(
                    line_number=len(lines) + 1,
                    booking_date=booking,
                    amount=amount,
                    document_number=txn.document_number,
                    reference_number=txn.document_number,
                    bank_account=config.bank_account,
                    statement_id=config.statement_id,
                )
            )
    log.debug(
        "Generated %d lines from %d transactions (%s)",
        len(lines),
        len(transactions),
        config.line_emission.value,
    )
    return lines


def compute_ending_balance(lines: Sequence[LedgerLine]) -> Decimal:
    """Sum of every line's 3dp-rounded amount (round first, then sum)."""
    total = sum((round_amount(line.amount) for line in lines), Decimal("0"))
    return round_amount(total)


def padded_date_range(
    transactions: Sequence[StatementTransaction],
) -> Tuple[Optional[datetime], Optional[datetime]]:
    """Earliest booking minus one second and latest plus one second.

    The padding keeps every transaction strictly inside the range even when
    several share the first or last timestamp. (None, None) without dates.
    """
    dates = [t.booking_date for t in transactions if t.booking_date is not None]
    if not dates:
        return None, None
    return min(dates) - RANGE_PADDING, max(dates) + RANGE_PADDING


def resolve_date_range(
    transactions: Sequence[StatementTransaction],
    from_date: Optional[datetime],
    to_date: Optional[datetime],
    from_raw: Any = "",
    to_raw: Any = "",
    config: PipelineConfig = DEFAULT_CONFIG,
) -> Tuple[str, str]:
    """Header FROMDATE/TODATE text under the configured date range source."""
    if config.date_range_source is DateRangeSource.MIN_MAX_PADDED:
        low, high = padded_date_range(transactions)
        return render_date(low, "", config), render_date(high, "", config)
    return (
        render_date(from_date, from_raw, config),
        render_date(to_date, to_raw, config),
    )


def build_header(
    lines: Sequence[LedgerLine],
    from_date: str,
    to_date: str,
    config: PipelineConfig = DEFAULT_CONFIG,
) -> HeaderRecord:
    return HeaderRecord(
        statement_id=config.statement_id,
        bank_account=config.bank_account,
        currency=config.currency,
        ending_balance=compute_ending_balance(lines),
        from_date=from_date,
        opening_balance=config.opening_balance,
        to_date=to_date,
    )
