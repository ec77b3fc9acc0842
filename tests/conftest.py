from __future__ import annotations

import io
from typing import Any, Callable, List, Optional, Sequence

import pytest
from openpyxl import Workbook

Rows = Sequence[Sequence[Any]]


def build_workbook_bytes(rows: Rows, sheet_title: str = "Statement") -> bytes:
    """Write `rows` to the first sheet starting at A1; None cells stay empty."""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title
    for r, row in enumerate(rows, start=1):
        for c, value in enumerate(row, start=1):
            if value is not None:
                ws.cell(row=r, column=c, value=value)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def statement_rows(
    metadata: Optional[List[Any]] = None, transactions: Optional[Rows] = None
) -> List[List[Any]]:
    """An M-Pesa style sheet: title rows, metadata at index 3, table from index 7."""
    rows: List[List[Any]] = [
        ["M-PESA STATEMENT"],
        ["Customer Name:", "Jane Wanjiku"],
        [],
        list(metadata) if metadata is not None else [],
        [],
        ["SUMMARY"],
        ["Receipt No.", "Completion Time", "Details", "Transaction Status",
         "Reason Type", "Paid In", "Withdrawn", "Balance"],
    ]
    rows.extend(list(r) for r in (transactions or []))
    return rows


SAMPLE_METADATA = ["", "", "From", "01/03/2024", "To", "31/03/2024"]


@pytest.fixture
def make_workbook() -> Callable[..., bytes]:
    return build_workbook_bytes


@pytest.fixture
def make_statement() -> Callable[..., List[List[Any]]]:
    return statement_rows


@pytest.fixture
def sample_metadata() -> List[Any]:
    return list(SAMPLE_METADATA)
