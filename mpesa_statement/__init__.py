# mpesa_statement/__init__.py
"""
Convert M-Pesa statement spreadsheets into the Header/Lines files of the
Dynamics 365 Finance & Operations bank statement import.
"""

from .exceptions import (
    ConfigError,
    MissingInputError,
    StatementError,
    StatementReadError,
    UnparsedDateError,
)
from .data_model import DEFAULT_CONFIG, PipelineConfig, StatementResult
from .controllers import (
    StatementResultStore,
    render_outputs,
    transform_statement,
    transform_statement_file,
    write_outputs,
)

__version__ = "1.0.0"

__all__ = [
    "StatementError",
    "MissingInputError",
    "StatementReadError",
    "UnparsedDateError",
    "ConfigError",
    "DEFAULT_CONFIG",
    "PipelineConfig",
    "StatementResult",
    "transform_statement",
    "transform_statement_file",
    "render_outputs",
    "write_outputs",
    "StatementResultStore",
]
