"""Document loading exceptions."""

from __future__ import annotations

from pathlib import Path


class DocumentError(Exception):
    """Base class for document read and parse failures."""

    def __init__(self, message: str, *, path: str | Path) -> None:
        super().__init__(message)
        self.path = str(path)


class DocumentReadError(DocumentError):
    """The document path could not be opened or fully read."""


class DocumentParseError(DocumentError):
    """The document bytes are not well-formed JSON."""
