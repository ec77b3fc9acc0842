# mpesa_statement/data_model/__init__.py
from .interfaces import (
    DateFormatPolicy, DateRangeSource, LineEmission, MonthCheck,
    UnparsedDatePolicy, IToDict, RecordDict)
from .pipeline_config import DEFAULT_CONFIG, PipelineConfig, StatementColumns
from .statement import (
    HEADER_COLUMNS, LINE_COLUMNS, HeaderRecord, LedgerLine,
    StatementResult, StatementTransaction)
__all__ = [
    "DateFormatPolicy", "DateRangeSource", "LineEmission", "MonthCheck",
    "UnparsedDatePolicy", "IToDict", "RecordDict", "DEFAULT_CONFIG",
    "PipelineConfig", "StatementColumns", "HEADER_COLUMNS", "LINE_COLUMNS",
    "HeaderRecord", "LedgerLine", "StatementResult", "StatementTransaction"]
