"""Conversions between plain Python data, JSON text and document values."""

from __future__ import annotations

import json
from typing import Any

from diffpack.core.value import Array, Bool, Null, Number, Object, String, Value


def from_python(obj: Any) -> Value:
    """Convert JSON-compatible Python data to a document value.

    Mapping:
        None       -> Null
        bool       -> Bool
        int/float  -> Number
        str        -> String
        list/tuple -> Array
        dict       -> Object (keys must be strings)
    """
    if obj is None:
        return Null()
    if isinstance(obj, bool):  # bool is a subclass of int
        return Bool(obj)
    if isinstance(obj, (int, float)):
        return Number(obj)
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, (list, tuple)):
        return Array(from_python(item) for item in obj)
    if isinstance(obj, dict):
        entries: dict[str, Value] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be strings, got {type(key).__name__}")
            entries[key] = from_python(item)
        return Object(entries)
    raise TypeError(f"Unsupported document type: {type(obj).__name__}")


def to_python(value: Value) -> Any:
    """Convert a document value back to plain Python data.

    Inverse of ``from_python`` for JSON-compatible data.
    """
    if isinstance(value, Null):
        return None
    if isinstance(value, (Bool, Number, String)):
        return value.value
    if isinstance(value, Array):
        return [to_python(item) for item in value.items]
    if isinstance(value, Object):
        return {key: to_python(item) for key, item in value.entries.items()}
    raise TypeError(f"Unknown value type: {type(value).__name__}")


def parse_json(text: str | bytes) -> Value:
    """Parse JSON text into a document value.

    ``NaN`` and ``Infinity`` literals are rejected with ``ValueError``.
    """
    return from_python(json.loads(text, parse_constant=_reject_constant))


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not supported in JSON documents")
