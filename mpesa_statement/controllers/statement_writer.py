#!/usr/bin/env python3
"""
Header/Lines table writers

Features:
- pandas DataFrames in the exact import column order
- XLSX (openpyxl engine) or CSV bytes, in memory
- Writing both files to a directory
"""

# mpesa_statement/controllers/statement_writer.py
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Dict, List, Sequence

import pandas as pd
from typing_extensions import Literal

from mpesa_statement.data_model import (
    HEADER_COLUMNS,
    LINE_COLUMNS,
    HeaderRecord,
    LedgerLine,
    StatementResult,
)
from mpesa_statement.data_model.statement import HEADER_SHEET_NAME, LINES_SHEET_NAME

log = logging.getLogger(__name__)

OutputFormat = Literal["xlsx", "csv"]

FILE_STEMS: Dict[str, str] = {
    "header": "M-Pesa-Header",
    "lines": "M-Pesa-Lines",
}
_SHEET_NAMES: Dict[str, str] = {
    "header": HEADER_SHEET_NAME,
    "lines": LINES_SHEET_NAME,
}
MEDIA_TYPES: Dict[str, str] = {
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "csv": "text/csv",
}


def lines_frame(lines: Sequence[LedgerLine]) -> pd.DataFrame:
    return pd.DataFrame([line.to_row() for line in lines], columns=list(LINE_COLUMNS))


def header_frame(header: HeaderRecord) -> pd.DataFrame:
    return pd.DataFrame([header.to_row()], columns=list(HEADER_COLUMNS))


def to_xlsx_bytes(frame: pd.DataFrame, sheet_name: str) -> bytes:
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        frame.to_excel(writer, sheet_name=sheet_name, index=False)
    return buffer.getvalue()


def to_csv_bytes(frame: pd.DataFrame) -> bytes:
    return frame.to_csv(index=False).encode("utf-8")


def output_filename(kind: str, fmt: OutputFormat = "xlsx") -> str:
    """'header' → 'M-Pesa-Header.xlsx', 'lines' → 'M-Pesa-Lines.xlsx'."""
    return f"{FILE_STEMS[kind]}.{fmt}"


def render_outputs(
    result: StatementResult, fmt: OutputFormat = "xlsx"
) -> Dict[str, bytes]:
    """Serialize both tables. Keys are "header" and "lines"."""
    if fmt not in MEDIA_TYPES:
        raise ValueError(f"Unknown output format: {fmt}")
    frames = {
        "header": header_frame(result.header),
        "lines": lines_frame(result.lines),
    }
    if fmt == "csv":
        return {kind: to_csv_bytes(frame) for kind, frame in frames.items()}
    return {
        kind: to_xlsx_bytes(frame, _SHEET_NAMES[kind]) for kind, frame in frames.items()
    }


def write_outputs(
    result: StatementResult, out_dir: Path, fmt: OutputFormat = "xlsx"
) -> List[Path]:
    """Write M-Pesa-Header and M-Pesa-Lines files into `out_dir`; return their paths."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for kind, payload in render_outputs(result, fmt).items():
        path = out_dir / output_filename(kind, fmt)
        path.write_bytes(payload)
        log.info("Wrote %s (%d bytes)", path, len(payload))
        written.append(path)
    return written
