from enum import Enum


class DateFormatPolicy(Enum):
    """
    How an ambiguous D/M/YYYY date (both numbers <= 12) is read.
    """
    DAY_FIRST = "day-first"  # dd/mm/yyyy, M-Pesa Kenya
    MONTH_FIRST = "month-first"  # mm/dd/yyyy
    AUTO = "auto"  # decided once per statement from its unambiguous dates
