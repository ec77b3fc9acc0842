# mpesa_statement/utilities/converters_scalar.py
from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime, time, timedelta
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Final, Iterable, Optional

import pandas as pd

from mpesa_statement.data_model.interfaces import DateFormatPolicy, MonthCheck

log = logging.getLogger(__name__)

# region Amounts


def parse_amount(value: Any) -> Decimal:
    """
    Convert a statement amount cell into a Decimal. Never raises.

    Supported inputs:
      - "1,234.50", " 1 234.50 " → Decimal('1234.50')
      - "(500.00)"               → Decimal('-500.00')  (accounting negative)
      - "1000.00KES", "500-"     → the leading number (1000.00, 500)
      - "", None, NaN, "abc"     → Decimal('0')
      - 1000, 250.75, Decimal    → same value as Decimal

    Rules:
      * All whitespace and every ',' are removed (',' is only ever a thousands mark).
      * A value wrapped in parentheses is negative.
      * Only the leading number is read; trailing text is ignored.
      * Anything that is not a finite number after cleaning is 0.
      * Magnitudes of 10**15 and above are not statement amounts and become 0.
    """
    if value is None or isinstance(value, bool):
        return _ZERO
    if isinstance(value, Decimal):
        return _within_bounds(value, value)
    if isinstance(value, int):
        return _within_bounds(Decimal(value), value)
    if isinstance(value, float):
        # Avoid binary float artifacts
        if not math.isfinite(value):
            return _ZERO
        return _within_bounds(Decimal(str(value)), value)

    s = _WHITESPACE_RE.sub("", str(value)).replace(",", "")
    if not s:
        return _ZERO

    neg = False
    if s.startswith("(") and s.endswith(")"):
        neg = True
        s = s[1:-1]

    m = _NUMBER_PREFIX_RE.match(s)
    if not m:
        return _ZERO
    try:
        amount = Decimal(m.group(0))
    except InvalidOperation:
        return _ZERO
    amount = _within_bounds(amount, value)
    return -amount if neg else amount


def round_amount(value: Decimal) -> Decimal:
    """Round to the 3 decimal places the import schema carries (half-up)."""
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the 3 places
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(_AMOUNT_PLACES, rounding=ROUND_HALF_UP)


def _within_bounds(amount: Decimal, raw: Any) -> Decimal:
    if not amount.is_finite():
        return _ZERO
    if amount and amount.adjusted() >= _MAX_AMOUNT_EXPONENT:
        log.warning("Ignoring out-of-range amount %r", raw)
        return _ZERO
    return amount


# endregion Amounts

# region Dates


def from_excel_serial(serial: float) -> Optional[datetime]:
    """Convert an Excel serial day count to a datetime, or None if out of range.

    - Days are counted from 1899-12-30, which lines modern serials up with
      Excel's calendar despite its fictitious 1900-02-29 (44567 → 2022-01-06).
    - The fractional part is the time of day, rounded to the second.
    """
    if serial < 0:
        return None
    try:
        return _EXCEL_EPOCH + timedelta(seconds=round(serial * _SECONDS_PER_DAY))
    except OverflowError:
        return None


def parse_statement_date(
    value: Any, policy: DateFormatPolicy = DateFormatPolicy.DAY_FIRST
) -> Optional[datetime]:
    """
    Parse a statement date cell into a naive datetime, or None if it cannot be parsed.

    Resolution order:
      1. datetime / date / pandas Timestamp → returned as datetime (date → midnight)
      2. int/float cell, or an integer-like string of at most 5 digits → Excel serial
      3. D/M/YYYY or D-M-YYYY [HH:MM[:SS]] → day/month order from `policy`; a number
         above 12 is always the day. Both above 12, or an impossible date → None.
      4. YYYY/M/D or YYYY-M-D [HH:MM[:SS]] → always year-month-day
      5. anything else with a digit → pandas' permissive parser (relative words
         such as "now" or "today" are never dates here)

    `DateFormatPolicy.AUTO` should be resolved per statement with
    `infer_date_order` first; passed here directly it behaves like DAY_FIRST.
    """
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, datetime):
        if isinstance(value, pd.Timestamp):
            value = value.to_pydatetime()
        return _naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return from_excel_serial(value)

    text = str(value).strip()
    if not text:
        return None

    if _SERIAL_RE.fullmatch(text):
        return from_excel_serial(int(text))

    m = _DMY_RE.match(text)
    if m:
        return _from_dmy_match(m, policy)

    m = _YMD_RE.match(text)
    if m:
        year, month, day = int(m.group(1)), int(m.group(2)), int(m.group(3))
        return _safe_datetime(year, month, day, m)

    return _generic_parse(text)


def format_booking_date(value: datetime, day_swap: bool = False) -> str:
    """
    Render as 'YYYY-MM-DD HH:MM:SS'.

    With `day_swap` the day and month fields trade places ('YYYY-DD-MM HH:MM:SS'),
    which is what Dynamics expects when the import runs under a US locale.
    """
    if day_swap:
        first, second = value.day, value.month
    else:
        first, second = value.month, value.day
    return (
        f"{value.year:04d}-{first:02d}-{second:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )


def infer_date_order(values: Iterable[Any]) -> DateFormatPolicy:
    """Pick DAY_FIRST or MONTH_FIRST for a whole statement.

    Only D/M/YYYY strings vote. A first number above 12 proves day-first, a second
    number above 12 proves month-first. No proof, or contradicting proof, falls back
    to DAY_FIRST, the M-Pesa Kenya convention.
    """
    day_first = month_first = False
    for v in values:
        if not isinstance(v, str):
            continue
        m = _DMY_RE.match(v.strip())
        if not m:
            continue
        first, second = int(m.group(1)), int(m.group(2))
        if first > 12 >= second:
            day_first = True
        elif second > 12 >= first:
            month_first = True
    if month_first and not day_first:
        return DateFormatPolicy.MONTH_FIRST
    return DateFormatPolicy.DAY_FIRST


def check_current_month(
    value: datetime, mode: MonthCheck, today: Optional[date] = None
) -> Optional[str]:
    """Return a diagnostic when `value` falls outside the current month, else None.

    MONTH compares the month only, STRICT compares month and year. The value is
    never changed; statements legitimately straddle month ends.
    """
    if mode is MonthCheck.OFF:
        return None
    today = today or date.today()
    mismatch = value.month != today.month
    if mode is MonthCheck.STRICT:
        mismatch = mismatch or value.year != today.year
    if not mismatch:
        return None
    return (
        f"Date {value:%Y-%m-%d} is outside the current month "
        f"({today.year:04d}-{today.month:02d})"
    )


def _from_dmy_match(m: re.Match[str], policy: DateFormatPolicy) -> Optional[datetime]:
    first, second, year = int(m.group(1)), int(m.group(2)), int(m.group(3))
    if first > 12 and second > 12:
        return None
    if first > 12:
        day, month = first, second
    elif second > 12:
        day, month = second, first
    elif policy is DateFormatPolicy.MONTH_FIRST:
        day, month = second, first
    else:
        day, month = first, second
    if year < 1900:
        return None
    return _safe_datetime(year, month, day, m)


def _safe_datetime(
    year: int, month: int, day: int, m: re.Match[str]
) -> Optional[datetime]:
    # groups 4..7 are hour, minute, second, am/pm in both date patterns
    hour = int(m.group(4)) if m.group(4) else 0
    minute = int(m.group(5)) if m.group(5) else 0
    second = int(m.group(6)) if m.group(6) else 0
    meridiem = (m.group(7) or "").lower()
    if meridiem == "pm" and hour < 12:
        hour += 12
    elif meridiem == "am" and hour == 12:
        hour = 0
    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError:
        return None


def _generic_parse(text: str) -> Optional[datetime]:
    # pandas reads "now", "today" etc. as the current time; a real date has digits
    if not _DIGIT_RE.search(text) or _RELATIVE_WORDS_RE.search(text):
        return None
    try:
        ts = pd.to_datetime(text)
    except (ValueError, TypeError, OverflowError):
        return None
    if ts is pd.NaT or pd.isna(ts):
        return None
    return _naive(ts.to_pydatetime())


def _naive(value: datetime) -> datetime:
    return value.replace(tzinfo=None) if value.tzinfo is not None else value


# endregion Dates

_ZERO: Final[Decimal] = Decimal("0")
_AMOUNT_PLACES: Final[Decimal] = Decimal("0.001")
_MAX_AMOUNT_EXPONENT: Final[int] = 15
_NUMBER_PREFIX_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")
_EXCEL_EPOCH: Final[datetime] = datetime(1899, 12, 30)
_SECONDS_PER_DAY: Final[int] = 86_400
_SERIAL_RE: Final[re.Pattern[str]] = re.compile(r"\d{1,5}")
_DIGIT_RE: Final[re.Pattern[str]] = re.compile(r"\d")
_RELATIVE_WORDS_RE: Final[re.Pattern[str]] = re.compile(
    r"\b(?:now|today|tomorrow|yesterday)\b", re.IGNORECASE
)
_TIME_PART: Final[str] = r"(?:(?:\s+|T)(\d{1,2}):(\d{2})(?::(\d{2}))?(?:\s*([AaPp][Mm]))?)?"
_DMY_RE: Final[re.Pattern[str]] = re.compile(
    r"^(\d{1,2})[/\-](\d{1,2})[/\-](\d{4})" + _TIME_PART
)
_YMD_RE: Final[re.Pattern[str]] = re.compile(
    r"^(\d{4})[/\-](\d{1,2})[/\-](\d{1,2})" + _TIME_PART
)
