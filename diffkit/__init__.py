"""Stable public API surface for diffkit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from diffpack.core import (
    Array,
    Bool,
    Null,
    Number,
    Object,
    String,
    Value,
    from_python,
    parse_json,
    stringify,
    to_python,
)
from diffpack.diff import (
    Added,
    Changed,
    Difference,
    DocumentDiffResult,
    LocatedDifference,
    Removed,
    calculate,
    diff_documents,
    locate,
)
from diffpack.document import (
    DocumentError,
    DocumentParseError,
    DocumentReadError,
    read_document,
)

__version__ = "0.1.0"


def compare(left: Any, right: Any) -> list[Difference]:
    """Diff two plain Python JSON-compatible objects.

    Args:
        left: Original data (dicts, lists, strings, numbers, booleans, None).
        right: Modified data of the same shape family.

    Returns:
        Difference records, empty when the inputs are deep-equal.
    """
    return calculate(from_python(left), from_python(right))


def diff(left: str | Path, right: str | Path) -> DocumentDiffResult:
    """Diff two JSON files and return structured comparison data.

    Args:
        left: Path to the original document.
        right: Path to the modified document.

    Returns:
        Structured document diff result with JSON pointer paths.
    """
    return diff_documents(left, right)


def load(path: str | Path) -> Value:
    """Read a JSON file into a document value."""
    return read_document(path)


__all__ = [
    "__version__",
    "Value",
    "Null",
    "Bool",
    "Number",
    "String",
    "Array",
    "Object",
    "Difference",
    "Changed",
    "Added",
    "Removed",
    "LocatedDifference",
    "DocumentDiffResult",
    "DocumentError",
    "DocumentReadError",
    "DocumentParseError",
    "calculate",
    "locate",
    "compare",
    "diff",
    "load",
    "parse_json",
    "from_python",
    "to_python",
    "stringify",
]
