from enum import Enum


class LineEmission(Enum):
    """
    How a transaction's paid-in and withdrawn amounts become ledger lines.
    """
    SPLIT = "split"  # one credit line and/or one debit line
    NETTED = "netted"  # one line carrying paid_in - |withdrawn|
