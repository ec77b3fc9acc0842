# mpesa_statement/controllers/__init__.py
from .line_generator import (
    build_header,
    compute_ending_balance,
    generate_lines,
    resolve_date_range,
)
from .result_store import StatementResultStore
from .statement_parser import (
    ParsedStatement,
    RawDateRange,
    extract_date_range,
    extract_transactions,
    parse_statement,
)
from .statement_reader import read_statement_rows
from .statement_session import (
    transform_rows,
    transform_statement,
    transform_statement_file,
)
from .statement_writer import render_outputs, write_outputs

__all__ = [
    "read_statement_rows",
    "RawDateRange",
    "ParsedStatement",
    "extract_date_range",
    "extract_transactions",
    "parse_statement",
    "generate_lines",
    "compute_ending_balance",
    "resolve_date_range",
    "build_header",
    "transform_rows",
    "transform_statement",
    "transform_statement_file",
    "render_outputs",
    "write_outputs",
    "StatementResultStore",
]
