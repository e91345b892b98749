"""Data models for structural document differences."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, Literal, Union

from diffpack.core.convert import to_python
from diffpack.core.value import Value

DifferenceKind = Literal["changed", "added", "removed"]
DIFFERENCE_KINDS: tuple[DifferenceKind, ...] = ("changed", "added", "removed")


@dataclass(frozen=True, slots=True)
class Changed:
    """The value exists on both sides but differs by type or content."""

    kind: ClassVar[DifferenceKind] = "changed"

    original: Value
    modified: Value

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "original": to_python(self.original),
            "modified": to_python(self.modified),
        }


@dataclass(frozen=True, slots=True)
class Added:
    """The value exists only on the modified (right) side."""

    kind: ClassVar[DifferenceKind] = "added"

    value: Value

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "value": to_python(self.value)}


@dataclass(frozen=True, slots=True)
class Removed:
    """The value exists only on the original (left) side."""

    kind: ClassVar[DifferenceKind] = "removed"

    value: Value

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "value": to_python(self.value)}


Difference = Union[Changed, Added, Removed]


@dataclass(frozen=True, slots=True)
class LocatedDifference:
    """A difference paired with the JSON pointer of the position it describes."""

    path: str
    difference: Difference

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, **self.difference.to_dict()}


def summarize(differences: list[Difference]) -> dict[str, int]:
    counts = {kind: 0 for kind in DIFFERENCE_KINDS}
    for difference in differences:
        counts[difference.kind] += 1
    return counts


@dataclass(slots=True)
class DocumentDiffResult:
    """Structured diff for two documents read from disk."""

    left_path: str
    right_path: str
    located: list[LocatedDifference]

    @property
    def differences(self) -> list[Difference]:
        return [entry.difference for entry in self.located]

    @property
    def identical(self) -> bool:
        return not self.located

    def summary(self) -> dict[str, int]:
        return summarize(self.differences)

    def to_dict(self) -> dict[str, Any]:
        return {
            "left_path": self.left_path,
            "right_path": self.right_path,
            "identical": self.identical,
            "summary": self.summary(),
            "differences": [entry.to_dict() for entry in self.located],
        }

    @classmethod
    def for_paths(
        cls,
        left_path: str | Path,
        right_path: str | Path,
        located: list[LocatedDifference],
    ) -> "DocumentDiffResult":
        return cls(left_path=str(left_path), right_path=str(right_path), located=located)
