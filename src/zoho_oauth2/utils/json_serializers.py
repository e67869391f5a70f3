"""Shared JSON serialization utilities for type-safe JSON encoding."""

from datetime import date, datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import Any


def _serialize_known_type(obj: Any) -> tuple[bool, Any]:
    """Try to serialize by known type. Returns (handled, result)."""
    if isinstance(obj, (datetime, date)):
        return True, obj.isoformat()
    if isinstance(obj, timedelta):
        return True, obj.total_seconds()
    if isinstance(obj, Enum):
        return True, obj.value
    if isinstance(obj, Path):
        return True, str(obj)
    return False, None


def json_serializer(obj: Any) -> Any:
    """
    JSON ``default`` hook for log records and token diagnostics.

    - datetime/date -> ISO 8601 string
    - timedelta -> seconds as float
    - Enum (e.g. Region) -> value
    - Path -> string
    - Everything else -> string (fallback)

    Args:
        obj: Object to serialize

    Returns:
        JSON-serializable representation with proper types
    """
    handled, result = _serialize_known_type(obj)
    if handled:
        return result
    return str(obj)


__all__ = ["json_serializer"]
