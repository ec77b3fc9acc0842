from enum import Enum


class UnparsedDatePolicy(Enum):
    """
    What happens to a date cell that no parser understood.
    """
    RAW_TEXT = "raw_text"  # write the cell text through unchanged
    BLANK = "blank"  # keep the row, leave the date empty
    SKIP_ROW = "skip_row"  # drop the transaction entirely
    ABORT = "abort"  # fail the whole statement
