"""Recursive structural diff engine for document values.

Objects are reconciled by key, arrays strictly by position. A pair of values
of different kinds is reported as a single ``Changed`` record; there is no
separate "type changed" record.

The engine touches nothing but its two inputs: no I/O, no plugin hooks, no
shared state. Recursion depth follows the deeper input tree, and exceeding
the interpreter limit raises ``RecursionError``.
"""

from __future__ import annotations

from diffpack.core.value import Array, Bool, Null, Number, Object, String, Value, singleton
from diffpack.diff.exceptions import ReconciliationInvariantError
from diffpack.diff.models import Added, Changed, Difference, LocatedDifference, Removed

_MISSING = object()
_SCALAR_TYPES = (Null, Bool, Number, String)

PathToken = str | int
_Collected = list[tuple[tuple[PathToken, ...], Difference]]


def calculate(left: Value, right: Value) -> list[Difference]:
    """Diff ``left`` (original) against ``right`` (modified).

    Returns an empty list when the values are deep-equal. Object orphans are
    wrapped in a one-entry object keyed by the field name; array orphans are
    reported bare. Neither input is mutated.
    """
    collected: _Collected = []
    _diff(left, right, path=(), out=collected)
    return [difference for _path, difference in collected]


def locate(left: Value, right: Value) -> list[LocatedDifference]:
    """Same records as ``calculate``, each paired with its JSON pointer."""
    collected: _Collected = []
    _diff(left, right, path=(), out=collected)
    return [
        LocatedDifference(path=_json_pointer(path), difference=difference)
        for path, difference in collected
    ]


def _diff(left: Value, right: Value, *, path: tuple[PathToken, ...], out: _Collected) -> None:
    if type(left) is not type(right):
        out.append((path, Changed(original=left, modified=right)))
    elif isinstance(left, _SCALAR_TYPES):
        if left != right:
            out.append((path, Changed(original=left, modified=right)))
    elif isinstance(left, Object):
        _diff_objects(left, right, path=path, out=out)
    elif isinstance(left, Array):
        _diff_arrays(left, right, path=path, out=out)
    else:
        raise TypeError(f"Unsupported value type: {type(left).__name__}")


def _diff_objects(
    left: Object,
    right: Object,
    *,
    path: tuple[PathToken, ...],
    out: _Collected,
) -> None:
    for key in sorted(set(left.entries) | set(right.entries)):
        left_value = left.entries.get(key, _MISSING)
        right_value = right.entries.get(key, _MISSING)
        child_path = path + (key,)

        if left_value is not _MISSING and right_value is not _MISSING:
            _diff(left_value, right_value, path=child_path, out=out)
        elif left_value is not _MISSING:
            out.append((child_path, Removed(singleton(key, left_value))))
        elif right_value is not _MISSING:
            out.append((child_path, Added(singleton(key, right_value))))
        else:
            raise ReconciliationInvariantError(
                f"key {key!r} is in the key union but in neither object"
            )


def _diff_arrays(
    left: Array,
    right: Array,
    *,
    path: tuple[PathToken, ...],
    out: _Collected,
) -> None:
    left_items = left.items
    right_items = right.items

    for index in range(max(len(left_items), len(right_items))):
        child_path = path + (index,)
        if index < len(left_items) and index < len(right_items):
            _diff(left_items[index], right_items[index], path=child_path, out=out)
        elif index < len(left_items):
            out.append((child_path, Removed(left_items[index])))
        else:
            out.append((child_path, Added(right_items[index])))


def _json_pointer(path: tuple[PathToken, ...]) -> str:
    return "".join(f"/{_escape_json_pointer(str(token))}" for token in path)


def _escape_json_pointer(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")
