# mpesa_statement/data_model/statement/schema.py
"""
Column layout of the Dynamics 365 F&O bank statement import.

Order and spelling are part of the import contract; each entry pairs the
column name with the record attribute that fills it.
"""

from __future__ import annotations

from typing import Final, Tuple

LINE_FIELDS: Final[Tuple[Tuple[str, str], ...]] = (
    ("LINENUMBER", "line_number"),
    ("BANKACCOUNT", "bank_account"),
    ("STATEMENTID", "statement_id"),
    ("BOOKINGDATE", "booking_date"),
    ("AMOUNT", "amount"),
    ("BANKSTATEMENTTRANSACTIONCODE", "transaction_code"),
    ("COUNTERAMOUNT", "counter_amount"),
    ("COUNTERCURRENCY", "counter_currency"),
    ("COUNTEREXCHANGERATE", "counter_exchange_rate"),
    ("CREDITORREFERENCEINFORMATION", "creditor_reference"),
    ("DOCUMENTNUMBER", "document_number"),
    ("ENTRYREFERENCE", "entry_reference"),
    ("INSTRUCTEDAMOUNT", "instructed_amount"),
    ("INSTRUCTEDCURRENCY", "instructed_currency"),
    ("INSTRUCTEDEXCHANGERATE", "instructed_exchange_rate"),
    ("LINESTATUS", "line_status"),
    ("REFERENCENUMBER", "reference_number"),
    ("RELATEDBANK", "related_bank"),
    ("RELATEDBANKACCOUNT", "related_bank_account"),
    ("REVERSAL", "reversal"),
    ("TRADINGPARTY", "trading_party"),
)

HEADER_FIELDS: Final[Tuple[Tuple[str, str], ...]] = (
    ("STATEMENTID", "statement_id"),
    ("BANKACCOUNT", "bank_account"),
    ("CURRENCY", "currency"),
    ("ENDINGBALANCE", "ending_balance"),
    ("FROMDATE", "from_date"),
    ("OPENINGBALANCE", "opening_balance"),
    ("TODATE", "to_date"),
)

LINE_COLUMNS: Final[Tuple[str, ...]] = tuple(c for c, _ in LINE_FIELDS)
HEADER_COLUMNS: Final[Tuple[str, ...]] = tuple(c for c, _ in HEADER_FIELDS)

LINES_SHEET_NAME: Final[str] = "Bank_statement_lines"
HEADER_SHEET_NAME: Final[str] = "Bank_statement_header"
