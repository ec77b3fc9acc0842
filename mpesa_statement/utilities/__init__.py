from .config_logging import LOGGING, configure_logging
from .converters_scalar import (
    check_current_month,
    format_booking_date,
    from_excel_serial,
    infer_date_order,
    parse_amount,
    parse_statement_date,
    round_amount,
)
from .core_util import cell_at, cell_text, is_blank_cell, is_null_or_whitespace

__all__ = [
    "is_null_or_whitespace",
    "is_blank_cell",
    "cell_at",
    "cell_text",
    "parse_amount",
    "round_amount",
    "from_excel_serial",
    "parse_statement_date",
    "format_booking_date",
    "infer_date_order",
    "check_current_month",
    "LOGGING",
    "configure_logging",
]
