"""Shared serialization utilities for sinks."""

from dataclasses import fields
from decimal import Decimal
from enum import Enum
from typing import Any


def to_row(obj: Any, columns: tuple[str, ...]) -> list[str]:
    """Render selected dataclass fields as CSV cells, in column order."""
    names = {f.name for f in fields(obj)}
    return [serialize_value(getattr(obj, name)) if name in names else "" for name in columns]


def serialize_value(value: Any) -> str:
    """Serialize a value for CSV output.

    Decimals keep their full precision, booleans render as ``true``/``false``
    and ``None`` as an empty cell.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
