# mpesa_statement/data_model/statement/ledger_line.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, List

from ..interfaces import IToDict, RecordDict, RecordValue
from .schema import LINE_FIELDS


@dataclass(frozen=True)
class LedgerLine:
    """
    One signed movement in the Lines table: credits positive, debits negative.

    The source statement carries no counter-currency, instructed-amount or
    trading-party data, so those columns hold neutral defaults.
    """
    line_number: int
    booking_date: str
    amount: Decimal
    document_number: str
    reference_number: str = ""
    bank_account: str = "MPESA"
    statement_id: int = 1
    transaction_code: str = ""
    counter_amount: int = 0
    counter_currency: str = ""
    counter_exchange_rate: int = 0
    creditor_reference: str = ""
    entry_reference: str = ""
    instructed_amount: int = 0
    instructed_currency: str = ""
    instructed_exchange_rate: int = 0
    line_status: str = "Booked"
    related_bank: str = ""
    related_bank_account: str = ""
    reversal: str = "No"
    trading_party: str = ""

    def to_row(self) -> List[RecordValue]:
        """Values in Lines column order, with Decimal amounts as floats for the sheet."""
        return [_export_value(getattr(self, attr)) for _, attr in LINE_FIELDS]

    def to_dict(self) -> RecordDict:
        return {col: _export_value(getattr(self, attr)) for col, attr in LINE_FIELDS}


def _export_value(value: object) -> RecordValue:
    if isinstance(value, Decimal):
        return float(value)
    return value  # type: ignore[return-value]


if TYPE_CHECKING:
    _is_idict: type[IToDict] = LedgerLine
