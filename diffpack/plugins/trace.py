"""NDJSON trace of lifecycle events."""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path

from diffpack.plugins.events import (
    DiffEndEvent,
    DiffStartEvent,
    DocumentReadEvent,
    LifecycleEvent,
    LifecyclePlugin,
)


@dataclass(slots=True)
class TraceFilePlugin(LifecyclePlugin):
    """Appends one JSON line per event to ``path``."""

    path: str = "diffkit-trace.ndjson"
    name: str = "trace-file"

    def on_document_read(self, event: DocumentReadEvent) -> None:
        self._write(event)

    def on_diff_start(self, event: DiffStartEvent) -> None:
        self._write(event)

    def on_diff_end(self, event: DiffEndEvent) -> None:
        self._write(event)

    def _write(self, event: LifecycleEvent) -> None:
        target = Path(self.path)
        target.parent.mkdir(parents=True, exist_ok=True)
        line = json.dumps(
            {"hook": event.hook, "plugin": self.name, "event": event.to_dict()},
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
        with target.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
