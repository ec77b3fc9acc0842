# mpesa_statement/data_model/statement/__init__.py
from .header_record import HeaderRecord
from .ledger_line import LedgerLine
from .schema import (
    HEADER_COLUMNS,
    HEADER_FIELDS,
    HEADER_SHEET_NAME,
    LINE_COLUMNS,
    LINE_FIELDS,
    LINES_SHEET_NAME,
)
from .statement_result import StatementResult
from .statement_transaction import StatementTransaction

__all__ = [
    "StatementTransaction",
    "LedgerLine",
    "HeaderRecord",
    "StatementResult",
    "LINE_FIELDS",
    "LINE_COLUMNS",
    "HEADER_FIELDS",
    "HEADER_COLUMNS",
    "LINES_SHEET_NAME",
    "HEADER_SHEET_NAME",
]
