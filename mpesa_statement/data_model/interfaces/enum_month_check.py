from enum import Enum


class MonthCheck(Enum):
    """
    Optional warning when a parsed date is not in the current month.
    """
    OFF = "off"
    MONTH = "month"  # month number only
    STRICT = "strict"  # month and year
