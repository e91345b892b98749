"""Closed tagged-union value model for JSON-shaped documents.

Six variants exist and no others: ``Null``, ``Bool``, ``Number``, ``String``,
``Array`` and ``Object``. Every variant is a frozen slotted dataclass, so
equality is variant-aware: ``Bool(True) != Number(1)`` even though the
underlying Python payloads compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import ClassVar, Iterable, Iterator, Mapping

VALUE_KINDS = ("null", "bool", "number", "string", "array", "object")


class Value:
    """Base class for document values. Not instantiated directly."""

    __slots__ = ()

    kind: ClassVar[str] = ""


@dataclass(frozen=True, slots=True)
class Null(Value):
    kind: ClassVar[str] = "null"

    def __repr__(self) -> str:
        return "Null"


@dataclass(frozen=True, slots=True)
class Bool(Value):
    kind: ClassVar[str] = "bool"

    value: bool

    def __repr__(self) -> str:
        return f"Bool({self.value!r})"


@dataclass(frozen=True, slots=True, order=True)
class Number(Value):
    """A finite integer or float. Ordering compares the real value."""

    kind: ClassVar[str] = "number"

    value: int | float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"Number requires int or float, got {type(self.value).__name__}")
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise ValueError("NaN and infinity are not valid document numbers")

    def __repr__(self) -> str:
        return f"Number({self.value!r})"


@dataclass(frozen=True, slots=True)
class String(Value):
    kind: ClassVar[str] = "string"

    value: str

    def __repr__(self) -> str:
        return f"String({self.value!r})"


@dataclass(frozen=True, slots=True)
class Array(Value):
    """An ordered sequence of values."""

    kind: ClassVar[str] = "array"

    items: tuple[Value, ...]

    def __init__(self, items: Iterable[Value] = ()) -> None:
        object.__setattr__(self, "items", tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"Array({list(self.items)!r})"


@dataclass(frozen=True, slots=True)
class Object(Value):
    """A mapping of text keys to values. Key order does not affect equality."""

    kind: ClassVar[str] = "object"

    entries: dict[str, Value]

    def __init__(self, entries: Mapping[str, Value] | None = None) -> None:
        object.__setattr__(self, "entries", dict(entries or {}))

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def keys(self) -> Iterable[str]:
        return self.entries.keys()

    def get(self, key: str, default: object = None) -> object:
        return self.entries.get(key, default)

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def __repr__(self) -> str:
        return f"Object({self.entries!r})"


def singleton(key: str, value: Value) -> Object:
    """Wrap ``value`` in a one-entry object keyed by ``key``."""
    return Object({key: value})
