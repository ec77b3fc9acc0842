from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional


@dataclass(frozen=True)
class StatementTransaction:
    """One data row of the statement, typed.

    `booking_date` is None when the cell could not be parsed; `booking_date_raw`
    keeps the cell as read so the raw text can still be written out.
    """
    document_number: str  # raw receipt number, also the reference number
    booking_date: Optional[datetime]
    paid_in: Decimal = Decimal("0")
    withdrawn: Decimal = Decimal("0")
    booking_date_raw: Any = ""
    row_index: int = -1  # 0-based row in the source sheet
