"""CLI-friendly rendering for diff results."""

from __future__ import annotations

from diffpack.core.value import Array, Object, Value
from diffpack.diff.models import Changed, Difference, DocumentDiffResult

_INDENT = "    "


def render_diff_summary(result: DocumentDiffResult) -> str:
    summary = result.summary()
    return (
        f"left={result.left_path} right={result.right_path} "
        f"identical={result.identical} changed={summary['changed']} "
        f"added={summary['added']} removed={summary['removed']}"
    )


def render_debug(differences: list[Difference]) -> str:
    """Structural dump with one record per line and nested values indented.

    Distinct from the compact printer: every value keeps its variant name.
    """
    if not differences:
        return "[]"

    lines = ["["]
    for difference in differences:
        _dump_difference(lines, difference, depth=1)
    lines.append("]")
    return "\n".join(lines)


def _dump_difference(lines: list[str], difference: Difference, *, depth: int) -> None:
    pad = _INDENT * depth
    lines.append(f"{pad}{difference.__class__.__name__}(")
    if isinstance(difference, Changed):
        fields = (("original", difference.original), ("modified", difference.modified))
    else:
        fields = (("value", difference.value),)
    for name, value in fields:
        _dump_value(lines, value, depth=depth + 1, prefix=f"{name}=", suffix=",")
    lines.append(f"{pad}),")


def _dump_value(lines: list[str], value: Value, *, depth: int, prefix: str, suffix: str) -> None:
    pad = _INDENT * depth
    if isinstance(value, Array) and value.items:
        lines.append(f"{pad}{prefix}Array([")
        for item in value.items:
            _dump_value(lines, item, depth=depth + 1, prefix="", suffix=",")
        lines.append(f"{pad}]){suffix}")
    elif isinstance(value, Object) and value.entries:
        lines.append(f"{pad}{prefix}Object({{")
        for key, item in value.entries.items():
            _dump_value(lines, item, depth=depth + 1, prefix=f"{key!r}: ", suffix=",")
        lines.append(f"{pad}}}){suffix}")
    elif isinstance(value, Array):
        lines.append(f"{pad}{prefix}Array([]){suffix}")
    elif isinstance(value, Object):
        lines.append(f"{pad}{prefix}Object({{}}){suffix}")
    else:
        lines.append(f"{pad}{prefix}{value!r}{suffix}")
