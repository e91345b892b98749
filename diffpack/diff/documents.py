"""Diff two JSON files from disk, reporting lifecycle events to plugins."""

from __future__ import annotations

from pathlib import Path

from diffpack.diff.engine import locate
from diffpack.diff.models import DocumentDiffResult
from diffpack.document.io import read_document
from diffpack.plugins import DiffEndEvent, DiffStartEvent, active_plugins


def diff_documents(left_path: str | Path, right_path: str | Path) -> DocumentDiffResult:
    """Read both documents and locate their differences.

    Document errors propagate unchanged. ``on_diff_start`` fires once both
    documents parsed; ``on_diff_end`` fires on success and on failure.
    """
    plugins = active_plugins()
    left = read_document(left_path)
    right = read_document(right_path)
    left_name, right_name = str(left_path), str(right_path)

    plugins.notify(
        DiffStartEvent(
            left_path=left_name,
            right_path=right_name,
            left_kind=left.kind,
            right_kind=right.kind,
        )
    )
    try:
        located = locate(left, right)
    except Exception as error:
        plugins.notify(
            DiffEndEvent(
                left_path=left_name,
                right_path=right_name,
                status="error",
                error_type=error.__class__.__name__,
                error_message=str(error),
            )
        )
        raise

    result = DocumentDiffResult.for_paths(left_path, right_path, located)
    plugins.notify(
        DiffEndEvent(
            left_path=left_name,
            right_path=right_name,
            status="ok",
            difference_count=len(located),
            summary=result.summary(),
        )
    )
    return result
