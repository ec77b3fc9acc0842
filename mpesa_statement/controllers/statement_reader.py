# mpesa_statement/controllers/statement_reader.py
from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional

from openpyxl import load_workbook

from mpesa_statement.exceptions import MissingInputError, StatementReadError
from mpesa_statement.utilities import is_blank_cell

log = logging.getLogger(__name__)

RawRow = List[Any]

_CSV_SUFFIXES = {".csv", ".txt"}


def read_statement_rows(
    data: Optional[bytes], filename: Optional[str] = None
) -> List[RawRow]:
    """Decode an uploaded statement into raw rows of the first sheet.

    Parameters
    ----------
    data : bytes
        The file content as uploaded.
    filename : str, optional
        Only the suffix is used: ``.csv``/``.txt`` are read as CSV, everything
        else as an Excel workbook.

    Returns
    -------
    List[RawRow]
        One list per sheet row starting at row 1, so list indexes equal 0-based
        sheet row numbers. Trailing empty cells are dropped; a blank row is ``[]``.

    Raises
    ------
    MissingInputError
        If no bytes were supplied.
    StatementReadError
        If the bytes are not a readable workbook.
    """
    if not data:
        raise MissingInputError("No statement file was provided")

    suffix = Path(filename).suffix.lower() if filename else ""
    if suffix in _CSV_SUFFIXES:
        rows = _read_csv_rows(data)
    else:
        rows = _read_xlsx_rows(data)
    log.debug("Read %d rows from %s", len(rows), filename or "<upload>")
    return rows


def _read_xlsx_rows(data: bytes) -> List[RawRow]:
    try:
        wb = load_workbook(io.BytesIO(data), data_only=True)
    except Exception as e:
        raise StatementReadError(f"Could not open statement workbook: {e}") from e
    try:
        if not wb.worksheets:
            return []
        ws = wb.worksheets[0]
        return [_trim_row(r) for r in ws.iter_rows(min_row=1, values_only=True)]
    finally:
        wb.close()


def _read_csv_rows(data: bytes) -> List[RawRow]:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError:
        # Excel's "CSV" export on Windows
        text = data.decode("cp1252", errors="replace")
    try:
        return [_trim_row(r) for r in csv.reader(io.StringIO(text, newline=""))]
    except csv.Error as e:
        raise StatementReadError(f"Could not read statement CSV: {e}") from e


def _trim_row(cells: Iterable[Any]) -> RawRow:
    row = list(cells)
    while row and is_blank_cell(row[-1]):
        row.pop()
    return row
