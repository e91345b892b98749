"""Read JSON documents from disk into document values."""

from __future__ import annotations

from pathlib import Path

from diffpack.core.convert import parse_json
from diffpack.core.value import Value
from diffpack.document.exceptions import DocumentError, DocumentParseError, DocumentReadError
from diffpack.plugins import DocumentReadEvent, active_plugins


def read_document(path: str | Path) -> Value:
    """Read a whole file and parse it as JSON.

    Raises ``DocumentReadError`` when the file cannot be read and
    ``DocumentParseError`` when its contents are not valid JSON or nest too
    deeply to parse.
    """
    document_path = Path(path)
    plugins = active_plugins()
    try:
        raw = _read_bytes(document_path)
        value = _parse_bytes(raw, document_path)
    except DocumentError as error:
        plugins.notify(
            DocumentReadEvent(
                path=str(document_path),
                status="error",
                error_type=error.__class__.__name__,
                error_message=str(error),
            )
        )
        raise

    plugins.notify(
        DocumentReadEvent(
            path=str(document_path),
            status="ok",
            byte_count=len(raw),
            value_kind=value.kind,
        )
    )
    return value


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as error:
        reason = error.strerror or error.__class__.__name__
        raise DocumentReadError(f"could not read {path}: {reason}", path=path) from error


def _parse_bytes(raw: bytes, path: Path) -> Value:
    try:
        return parse_json(raw)
    except ValueError as error:
        raise DocumentParseError(f"could not parse JSON in {path}: {error}", path=path) from error
    except RecursionError as error:
        raise DocumentParseError(f"could not parse JSON in {path}: nesting too deep", path=path) from error
