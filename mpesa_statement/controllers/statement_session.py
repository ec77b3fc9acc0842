# mpesa_statement/controllers/statement_session.py
from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from mpesa_statement.controllers.line_generator import (
    build_header,
    generate_lines,
    resolve_date_range,
)
from mpesa_statement.controllers.statement_parser import parse_statement
from mpesa_statement.controllers.statement_reader import RawRow, read_statement_rows
from mpesa_statement.data_model import DEFAULT_CONFIG, PipelineConfig, StatementResult

log = logging.getLogger(__name__)


def transform_rows(
    rows: Sequence[RawRow],
    config: PipelineConfig = DEFAULT_CONFIG,
    *,
    today: Optional[date] = None,
) -> StatementResult:
    """
    rows → transactions → ledger lines → header.

    Every record is created for this call only; `config` is read, never changed,
    so concurrent calls cannot interfere.
    """
    parsed = parse_statement(rows, config, today=today)
    lines = generate_lines(parsed.transactions, config)
    from_text, to_text = resolve_date_range(
        parsed.transactions,
        parsed.from_date,
        parsed.to_date,
        parsed.date_range.from_raw,
        parsed.date_range.to_raw,
        config,
    )
    header = build_header(lines, from_text, to_text, config)
    log.info(
        "Converted %d transactions into %d lines; ending balance %s (%s to %s)",
        len(parsed.transactions),
        len(lines),
        header.ending_balance,
        from_text or "?",
        to_text or "?",
    )
    return StatementResult(
        header=header,
        lines=lines,
        transactions=parsed.transactions,
        warnings=parsed.warnings,
    )


def transform_statement(
    data: Optional[bytes],
    config: PipelineConfig = DEFAULT_CONFIG,
    *,
    filename: Optional[str] = None,
    today: Optional[date] = None,
) -> StatementResult:
    """Convert uploaded statement bytes into the Header and Lines records.

    Raises
    ------
    MissingInputError
        If `data` is None or empty; nothing is processed.
    StatementReadError
        If the bytes are not a readable workbook.
    UnparsedDateError
        If a date cannot be parsed under `UnparsedDatePolicy.ABORT`.
    """
    log.info("Converting statement %s", filename or "<upload>")
    rows = read_statement_rows(data, filename)
    return transform_rows(rows, config, today=today)


def transform_statement_file(
    path: Path,
    config: PipelineConfig = DEFAULT_CONFIG,
    *,
    today: Optional[date] = None,
) -> StatementResult:
    path = Path(path)
    return transform_statement(path.read_bytes(), config, filename=path.name, today=today)
