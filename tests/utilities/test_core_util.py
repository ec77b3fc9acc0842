from __future__ import annotations

import logging.config
from datetime import datetime
from decimal import Decimal

import pytest

from mpesa_statement.utilities import config_logging
from mpesa_statement.utilities.core_util import (
    cell_at,
    cell_text,
    is_blank_cell,
    is_null_or_whitespace,
)


# ---------- is_null_or_whitespace / is_blank_cell ----------
@pytest.mark.parametrize(
    "value,expected",
    [(None, True), ("", True), ("  \t", True), ("x", False), (" x ", False)],
)
def test_is_null_or_whitespace(value, expected):
    assert is_null_or_whitespace(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, True),
        (float("nan"), True),
        ("", True),
        ("   ", True),
        ("TXN001", False),
        (0, False),
        (0.0, False),
        (datetime(2024, 3, 1), False),
    ],
)
def test_is_blank_cell(value, expected):
    """Zero is a value, not a blank; NaN from pandas is a blank."""
    assert is_blank_cell(value) is expected


# ---------- cell_at ----------
def test_cell_at_tolerates_short_rows():
    row = ["a", "b"]
    assert cell_at(row, 0) == "a"
    assert cell_at(row, 1) == "b"
    assert cell_at(row, 6) is None
    assert cell_at([], 0) is None
    assert cell_at(row, -1) is None


# ---------- cell_text ----------
@pytest.mark.parametrize(
    "value,expected",
    [
        (None, ""),
        (float("nan"), ""),
        ("TXN001", "TXN001"),
        (" QWE12 ", " QWE12 "),
        (12345.0, "12345"),
        (12.5, "12.5"),
        (42, "42"),
        (Decimal("7.000"), "7"),
        (Decimal("7.25"), "7.25"),
    ],
)
def test_cell_text(value, expected):
    """Text is kept verbatim; whole-number floats lose the spreadsheet's '.0'."""
    assert cell_text(value) == expected


# ---------- configure_logging ----------
def test_configure_logging_points_file_handler_at_log_dir(monkeypatch, tmp_path):
    # Arrange
    applied = {}
    monkeypatch.setattr(logging.config, "dictConfig", lambda cfg: applied.update(cfg))
    log_dir = tmp_path / "nested" / "logs"

    # Act
    cfg = config_logging.configure_logging(log_dir, "debug")

    # Assert
    assert log_dir.is_dir(), "configure_logging should create the log directory"
    assert applied is not None and applied == cfg
    assert cfg["handlers"]["file"]["filename"] == str(log_dir / config_logging.LOG_FILE_NAME)
    assert cfg["handlers"]["console"]["level"] == "DEBUG"
    # the module-level template is left untouched
    assert config_logging.LOGGING["handlers"]["console"]["level"] == "INFO"
    assert config_logging.LOGGING["handlers"]["file"]["filename"].startswith("logs")
