# mpesa_statement/data_model/statement/header_record.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, List

from ..interfaces import IToDict, RecordDict, RecordValue
from .ledger_line import _export_value
from .schema import HEADER_FIELDS


@dataclass(frozen=True)
class HeaderRecord:
    """The single summary row of the Header table."""
    ending_balance: Decimal
    from_date: str = ""
    to_date: str = ""
    statement_id: int = 1
    bank_account: str = "MPESA"
    currency: str = "KES"
    # M-Pesa exports do not state an opening balance
    opening_balance: Decimal = Decimal("0")

    def to_row(self) -> List[RecordValue]:
        return [_export_value(getattr(self, attr)) for _, attr in HEADER_FIELDS]

    def to_dict(self) -> RecordDict:
        return {col: _export_value(getattr(self, attr)) for col, attr in HEADER_FIELDS}


if TYPE_CHECKING:
    _is_idict: type[IToDict] = HeaderRecord
