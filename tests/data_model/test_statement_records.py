from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime
from decimal import Decimal

import pytest

from mpesa_statement.data_model import (
    HEADER_COLUMNS,
    LINE_COLUMNS,
    HeaderRecord,
    IToDict,
    LedgerLine,
    StatementResult,
    StatementTransaction,
)


def test_column_schemas_are_the_import_contract():
    """Column names and order are fixed by the Dynamics import."""
    assert LINE_COLUMNS == (
        "LINENUMBER", "BANKACCOUNT", "STATEMENTID", "BOOKINGDATE", "AMOUNT",
        "BANKSTATEMENTTRANSACTIONCODE", "COUNTERAMOUNT", "COUNTERCURRENCY",
        "COUNTEREXCHANGERATE", "CREDITORREFERENCEINFORMATION", "DOCUMENTNUMBER",
        "ENTRYREFERENCE", "INSTRUCTEDAMOUNT", "INSTRUCTEDCURRENCY",
        "INSTRUCTEDEXCHANGERATE", "LINESTATUS", "REFERENCENUMBER", "RELATEDBANK",
        "RELATEDBANKACCOUNT", "REVERSAL", "TRADINGPARTY",
    )
    assert HEADER_COLUMNS == (
        "STATEMENTID", "BANKACCOUNT", "CURRENCY", "ENDINGBALANCE", "FROMDATE",
        "OPENINGBALANCE", "TODATE",
    )


def test_ledger_line_row_has_neutral_defaults():
    # Arrange
    line = LedgerLine(
        line_number=1,
        booking_date="2024-03-15 00:00:00",
        amount=Decimal("1000.000"),
        document_number="TXN001",
        reference_number="TXN001",
    )

    # Act
    row = line.to_row()

    # Assert
    assert len(row) == len(LINE_COLUMNS)
    assert row == [
        1, "MPESA", 1, "2024-03-15 00:00:00", 1000.0, "", 0, "", 0, "", "TXN001",
        "", 0, "", 0, "Booked", "TXN001", "", "", "No", "",
    ]
    assert isinstance(row[4], float), "Amounts are written as numbers, not Decimal"


def test_ledger_line_to_dict_keys_follow_schema():
    line = LedgerLine(1, "2024-03-15 00:00:00", Decimal("-250.750"), "QWE", "QWE")
    d = line.to_dict()
    assert tuple(d) == LINE_COLUMNS
    assert d["AMOUNT"] == -250.75
    assert isinstance(line, IToDict)


def test_header_record_row():
    header = HeaderRecord(
        ending_balance=Decimal("1000.000"),
        from_date="2024-03-01 00:00:00",
        to_date="2024-03-31 00:00:00",
    )
    assert header.to_row() == [
        1, "MPESA", "KES", 1000.0, "2024-03-01 00:00:00", 0.0, "2024-03-31 00:00:00",
    ]
    assert tuple(header.to_dict()) == HEADER_COLUMNS
    assert isinstance(header, IToDict)


def test_records_are_frozen():
    txn = StatementTransaction("TXN001", datetime(2024, 3, 15))
    with pytest.raises(FrozenInstanceError):
        setattr(txn, "paid_in", Decimal("1"))
    header = HeaderRecord(ending_balance=Decimal("0"))
    with pytest.raises(FrozenInstanceError):
        setattr(header, "ending_balance", Decimal("1"))


def test_statement_result_summary():
    header = HeaderRecord(ending_balance=Decimal("-5.500"))
    lines = [LedgerLine(1, "", Decimal("-5.500"), "A", "A")]
    txns = [StatementTransaction("A", None, withdrawn=Decimal("5.5"))]
    result = StatementResult(header=header, lines=lines, transactions=txns, warnings=["w"])

    summary = result.to_dict()

    assert summary["header"]["ENDINGBALANCE"] == -5.5
    assert summary["line_count"] == 1
    assert summary["transaction_count"] == 1
    assert summary["warnings"] == ["w"]
    assert result.header_rows() == [header.to_row()]
    assert result.line_rows() == [lines[0].to_row()]
