from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

Record = Mapping[str, Any]


class _Absent:
    """Marks a field a record doesn't have. Unlike None, which is a value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "ABSENT"

    def __bool__(self):
        return False


ABSENT = _Absent()


def as_record(obj) -> Record:
    if isinstance(obj, Mapping):
        return obj
    if hasattr(obj, "_asdict"):
        # namedtuple
        return obj._asdict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__"):
        return {name: val for name, val in vars(obj).items() if not name.startswith("_")}
    return {"value": obj}


def field_names(record: Record) -> list[str]:
    return list(as_record(record).keys())


def get_field(record: Record, name: str, default=ABSENT):
    """Exact key first, then the first key that equals `name` case-insensitively."""
    record = as_record(record)
    if name in record:
        return record[name]
    lowered = name.lower()
    for key in record:
        if isinstance(key, str) and key.lower() == lowered:
            return record[key]
    return default


def is_empty(value) -> bool:
    if value is ABSENT or value is None:
        return True
    try:
        return not value
    except ValueError:
        # e.g. numpy arrays, whose truthiness is ambiguous
        return False
