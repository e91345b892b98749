"""Document loading subsystem."""

from diffpack.document.exceptions import DocumentError, DocumentParseError, DocumentReadError
from diffpack.document.io import read_document

__all__ = [
    "DocumentError",
    "DocumentReadError",
    "DocumentParseError",
    "read_document",
]
