"""Diff subsystem for diffkit."""

from diffpack.diff.documents import diff_documents
from diffpack.diff.engine import calculate, locate
from diffpack.diff.exceptions import ReconciliationInvariantError
from diffpack.diff.formatting import render_debug, render_diff_summary
from diffpack.diff.models import (
    DIFFERENCE_KINDS,
    Added,
    Changed,
    Difference,
    DifferenceKind,
    DocumentDiffResult,
    LocatedDifference,
    Removed,
    summarize,
)

__all__ = [
    "DIFFERENCE_KINDS",
    "DifferenceKind",
    "Difference",
    "Changed",
    "Added",
    "Removed",
    "LocatedDifference",
    "DocumentDiffResult",
    "ReconciliationInvariantError",
    "calculate",
    "locate",
    "diff_documents",
    "summarize",
    "render_debug",
    "render_diff_summary",
]
