#!/usr/bin/env python3
"""
Core Utilities

Features:
- Blank/whitespace checks for strings and spreadsheet cells
- Cell access that tolerates short rows
- Cell → text rendering that survives the float round trip of spreadsheets
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Optional, Sequence

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def is_blank_cell(value: Any) -> bool:
    """True for cells a spreadsheet would show as empty (None, NaN, blank text)."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str):
        return is_null_or_whitespace(value)
    return False


def cell_at(row: Sequence[Any], index: int) -> Any:
    """Return row[index], or None when the row is too short to have that column."""
    if 0 <= index < len(row):
        return row[index]
    return None


def cell_text(value: Any) -> str:
    """
    Render a cell as text.

    • None / NaN           → ""
    • 1234.0 (float/Decimal integral) → "1234"  (spreadsheets store ids as floats)
    • anything else        → str(value), unchanged
    """
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral():
        return str(int(value))
    return str(value)


# endregion Common functions
