"""Document value model and conversions."""

from diffpack.core.convert import from_python, parse_json, to_python
from diffpack.core.printer import stringify
from diffpack.core.value import (
    VALUE_KINDS,
    Array,
    Bool,
    Null,
    Number,
    Object,
    String,
    Value,
    singleton,
)

__all__ = [
    "VALUE_KINDS",
    "Value",
    "Null",
    "Bool",
    "Number",
    "String",
    "Array",
    "Object",
    "singleton",
    "from_python",
    "to_python",
    "parse_json",
    "stringify",
]
