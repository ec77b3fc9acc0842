# mpesa_statement/exceptions.py
from __future__ import annotations


class StatementError(ValueError):
    """Base class for every error the conversion pipeline raises on purpose."""


class MissingInputError(StatementError):
    """No statement file (or an empty one) was supplied."""


class StatementReadError(StatementError):
    """The statement bytes could not be opened as a workbook."""


class UnparsedDateError(StatementError):
    """A date could not be parsed and the configured policy is ABORT."""

    def __init__(self, raw: object, where: str) -> None:
        self.raw = raw
        self.where = where
        super().__init__(f"Unrecognized date {raw!r} in {where}")


class ConfigError(StatementError):
    """A configuration mapping held an unknown key or an unusable value."""
