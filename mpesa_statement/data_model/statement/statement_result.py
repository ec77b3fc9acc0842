# mpesa_statement/data_model/statement/statement_result.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .header_record import HeaderRecord
from .ledger_line import LedgerLine
from .statement_transaction import StatementTransaction


@dataclass
class StatementResult:
    """
    Everything one conversion produced. Owned by the caller; nothing is cached.
    """
    header: HeaderRecord
    lines: List[LedgerLine] = field(default_factory=list)
    transactions: List[StatementTransaction] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def line_rows(self) -> List[List[Any]]:
        return [line.to_row() for line in self.lines]

    def header_rows(self) -> List[List[Any]]:
        return [self.header.to_row()]

    def to_dict(self) -> Dict[str, Any]:
        """Summary used by the command line `--summary` output."""
        return {
            "header": self.header.to_dict(),
            "transaction_count": len(self.transactions),
            "line_count": len(self.lines),
            "warnings": list(self.warnings),
        }
