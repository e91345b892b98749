"""Lifecycle events raised at the document boundary, and the plugin base class.

Each event names the plugin method it is delivered to through ``hook``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Literal, Union

PLUGIN_API_VERSION = "1.0"

LifecycleStatus = Literal["ok", "error"]


@dataclass(frozen=True, slots=True)
class DocumentReadEvent:
    hook: ClassVar[str] = "on_document_read"

    path: str
    status: LifecycleStatus
    byte_count: int | None = None
    value_kind: str | None = None
    error_type: str | None = None
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class DiffStartEvent:
    hook: ClassVar[str] = "on_diff_start"

    left_path: str
    right_path: str
    left_kind: str
    right_kind: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class DiffEndEvent:
    hook: ClassVar[str] = "on_diff_end"

    left_path: str
    right_path: str
    status: LifecycleStatus
    difference_count: int | None = None
    summary: dict[str, int] | None = None
    error_type: str | None = None
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


LifecycleEvent = Union[DocumentReadEvent, DiffStartEvent, DiffEndEvent]


class LifecyclePlugin:
    """No-op base; subclasses override the hooks they care about."""

    api_version = PLUGIN_API_VERSION
    name = "lifecycle-plugin"

    def on_document_read(self, event: DocumentReadEvent) -> None:
        return None

    def on_diff_start(self, event: DiffStartEvent) -> None:
        return None

    def on_diff_end(self, event: DiffEndEvent) -> None:
        return None
