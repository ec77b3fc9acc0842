from enum import Enum


class DateRangeSource(Enum):
    """
    Where the header's FROMDATE/TODATE come from.
    """
    METADATA_LABELS = "metadata_labels"  # "From"/"To" cells in the metadata row
    MIN_MAX_PADDED = "min_max_padded"  # booking date span widened by one second
