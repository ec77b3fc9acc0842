# mpesa_statement/data_model/interfaces/i_to_dict.py
from __future__ import annotations

from typing import Union

from typing_extensions import Protocol, TypeAlias, runtime_checkable

RecordValue: TypeAlias = Union[str, int, float]
RecordDict: TypeAlias = dict[str, RecordValue]


@runtime_checkable
class IToDict(Protocol):
    def to_dict(self) -> RecordDict: ...
