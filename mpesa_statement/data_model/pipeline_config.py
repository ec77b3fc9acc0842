# mpesa_statement/data_model/pipeline_config.py
from __future__ import annotations

from dataclasses import dataclass, field, fields
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Dict, Mapping, TypeVar, get_type_hints

from mpesa_statement.exceptions import ConfigError

from .interfaces import (
    DateFormatPolicy,
    DateRangeSource,
    LineEmission,
    MonthCheck,
    UnparsedDatePolicy,
)


@dataclass(frozen=True)
class StatementColumns:
    """0-based column positions of the transaction table."""
    document: int = 0
    booking_date: int = 1
    paid_in: int = 5
    withdrawn: int = 6

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ConfigError(f"Column {f.name!r} must not be negative")


@dataclass(frozen=True)
class PipelineConfig:
    """
    Every switch of the conversion pipeline, in one immutable value.

    The defaults reproduce the production M-Pesa conversion: day-first dates,
    no day/month swap, split debit/credit lines, date range from the "From"/"To"
    cells, unparsed dates written through as raw text, no month checks.
    Variants are made with `dataclasses.replace` or `from_dict`, never by mutation.
    """
    date_format_policy: DateFormatPolicy = DateFormatPolicy.DAY_FIRST
    day_swap_output: bool = False
    line_emission: LineEmission = LineEmission.SPLIT
    date_range_source: DateRangeSource = DateRangeSource.METADATA_LABELS
    unparsed_date_policy: UnparsedDatePolicy = UnparsedDatePolicy.RAW_TEXT
    transaction_month_check: MonthCheck = MonthCheck.OFF
    range_month_check: MonthCheck = MonthCheck.OFF
    bank_account: str = "MPESA"
    currency: str = "KES"
    statement_id: int = 1
    opening_balance: Decimal = Decimal("0")
    metadata_row: int = 3
    first_transaction_row: int = 7
    columns: StatementColumns = field(default_factory=StatementColumns)

    def __post_init__(self) -> None:
        if self.metadata_row < 0 or self.first_transaction_row < 0:
            raise ConfigError("Row offsets must not be negative")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PipelineConfig":
        """
        Build a config from a plain mapping (JSON file, CLI flags).

        Enum fields accept either the member value ("day-first") or its name
        ("DAY_FIRST"); `columns` accepts a nested mapping. Missing keys keep
        their defaults.

        Raises
        ------
        ConfigError
            On unknown keys or values that cannot be converted.
        """
        return _from_dict(cls, data)


DEFAULT_CONFIG = PipelineConfig()

# region Conversion helpers

DC = TypeVar("DC")
E = TypeVar("E", bound=Enum)


def _from_dict(target_type: type[DC], data: Mapping[str, Any]) -> DC:
    if not isinstance(data, Mapping):
        raise ConfigError(
            f"Expected a mapping for {target_type.__name__}, got {type(data).__name__}"
        )
    hints = get_type_hints(target_type)
    known = {f.name for f in fields(target_type)}  # type: ignore[arg-type]
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown {target_type.__name__} keys: {unknown}")

    kwargs: Dict[str, Any] = {}
    for name, value in data.items():
        try:
            kwargs[name] = _convert(hints[name], value)
        except (ValueError, TypeError) as e:
            raise ConfigError(f"Invalid value for {name!r}: {e}") from e
    return target_type(**kwargs)


def _convert(target_type: Any, value: Any) -> Any:
    if isinstance(target_type, type):
        if issubclass(target_type, Enum):
            return _to_enum(target_type, value)
        if target_type is StatementColumns:
            if isinstance(value, StatementColumns):
                return value
            return _from_dict(StatementColumns, value)
        converter = _SCALAR_CONVERTERS.get(target_type)
        if converter is not None:
            return converter(value)
    raise TypeError(f"Unsupported config type {target_type!r}")


def _to_enum(target_type: type[E], value: object) -> E:
    """
    Accepts:
      • value already of target enum → returned as-is
      • the member's *value* (e.g. "day-first") → target_type(value)
      • the member's *name*, any case (e.g. "day_first") → target_type[NAME]
    """
    if isinstance(value, target_type):
        return value
    try:
        return target_type(value)
    except ValueError:
        if isinstance(value, str):
            try:
                return target_type[value.strip().upper().replace("-", "_")]
            except KeyError:
                pass
    choices = ", ".join(repr(m.value) for m in target_type)
    raise ValueError(f"{value!r} is not a valid {target_type.__name__} ({choices})")


def _to_bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        return v.strip().lower() in _TRUE_STRINGS
    if isinstance(v, (int, float, Decimal)):
        return bool(v)
    raise TypeError(f"Cannot convert {type(v).__name__} to bool")


def _to_int(v: Any) -> int:
    # bool is a subclass of int; reject it so `true` never becomes a row offset
    if isinstance(v, bool):
        raise TypeError("Cannot convert bool to int")
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        if not v.is_integer():
            raise ValueError(f"Non-integer float {v} for int field")
        return int(v)
    if isinstance(v, str):
        return int(v.strip())
    raise TypeError(f"Cannot convert {type(v).__name__} to int")


def _to_decimal(v: Any) -> Decimal:
    if isinstance(v, Decimal):
        return v
    if isinstance(v, bool):
        raise TypeError("Cannot convert bool to Decimal")
    try:
        return Decimal(str(v).strip())
    except InvalidOperation as e:
        raise ValueError(f"Could not parse Decimal from {v!r}") from e


def _to_str(v: Any) -> str:
    return "" if v is None else str(v)


_TRUE_STRINGS = {"1", "true", "t", "yes", "y", "on"}
_SCALAR_CONVERTERS: Dict[type, Callable[[Any], Any]] = {
    bool: _to_bool,
    int: _to_int,
    Decimal: _to_decimal,
    str: _to_str,
}

# endregion Conversion helpers
