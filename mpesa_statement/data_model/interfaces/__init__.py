# mpesa_statement/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the statement data model.
"""

from .enum_date_format_policy import DateFormatPolicy
from .enum_date_range_source import DateRangeSource
from .enum_line_emission import LineEmission
from .enum_month_check import MonthCheck
from .enum_unparsed_date_policy import UnparsedDatePolicy
from .i_to_dict import IToDict, RecordDict, RecordValue

__all__ = [
    "DateFormatPolicy",
    "DateRangeSource",
    "LineEmission",
    "MonthCheck",
    "UnparsedDatePolicy",
    "IToDict",
    "RecordDict",
    "RecordValue",
]
