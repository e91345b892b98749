"""Compact human-readable rendering of document values.

Display only: strings are wrapped in quotes without escaping and object
pairs are concatenated without a separator, so output is not valid JSON.
Numbers render through Python's ``repr``, so ``1e20`` prints as ``1e+20``
and ``1.0`` stays ``1.0``.
"""

from __future__ import annotations

from diffpack.core.value import Array, Bool, Null, Number, Object, String, Value


def stringify(value: Value) -> str:
    parts: list[str] = []
    _print(parts, value)
    return "".join(parts)


def _print(out: list[str], value: Value) -> None:
    if isinstance(value, Null):
        out.append("null")
    elif isinstance(value, Bool):
        out.append("true" if value.value else "false")
    elif isinstance(value, Number):
        out.append(repr(value.value))
    elif isinstance(value, String):
        out.append(_quoted(value.value))
    elif isinstance(value, Array):
        out.append("[")
        for index, item in enumerate(value.items):
            if index:
                out.append(", ")
            _print(out, item)
        out.append("]")
    elif isinstance(value, Object):
        out.append("{")
        for key, item in value.entries.items():
            out.append(_quoted(key))
            out.append(":")
            _print(out, item)
        out.append("}")
    else:
        raise TypeError(f"Unknown value type: {type(value).__name__}")


def _quoted(text: str) -> str:
    return f'"{text}"'
