from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as package_version
import json
from pathlib import Path
from typing import Any

import typer

from diffpack.core import stringify
from diffpack.diff import diff_documents, render_debug, render_diff_summary
from diffpack.document import DocumentError, read_document
from diffpack.plugins import PluginError

app = typer.Typer(help="Structural diff for JSON documents.")


@dataclass(slots=True)
class _Settings:
    quiet: bool = False
    stable_json: bool = True


_SETTINGS = _Settings()


def _installed_version() -> str:
    try:
        return package_version("diffkit")
    except PackageNotFoundError:
        from diffkit import __version__

        return __version__


def _print_version(requested: bool) -> None:
    if requested:
        typer.echo(_installed_version())
        raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show diffkit version and exit.",
    ),
    quiet: bool = typer.Option(False, "--quiet", help="Only print errors and JSON payloads."),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Compact sorted JSON, or indented JSON.",
    ),
) -> None:
    """Options shared by every command."""
    _SETTINGS.quiet = quiet
    _SETTINGS.stable_json = stable_json


def _echo(message: str, *, err: bool = False) -> None:
    if _SETTINGS.quiet and not err:
        return
    typer.echo(message, err=err)


def _echo_json(payload: dict[str, Any]) -> None:
    if _SETTINGS.stable_json:
        typer.echo(json.dumps(payload, ensure_ascii=True, sort_keys=True, separators=(",", ":")))
    else:
        typer.echo(json.dumps(payload, ensure_ascii=True, sort_keys=True, indent=2))


@app.command()
def diff(
    left: Path = typer.Argument(..., help="Original JSON document."),
    right: Path = typer.Argument(..., help="Modified JSON document."),
    json_output: bool = typer.Option(False, "--json", help="Emit differences as JSON with pointer paths."),
    summary: bool = typer.Option(False, "--summary", help="Append per-kind difference counts."),
    fail_on_difference: bool = typer.Option(
        False,
        "--fail-on-difference",
        help="Exit 1 when the documents differ.",
    ),
) -> None:
    """Diff two JSON documents."""
    try:
        result = diff_documents(left, right)
    except (DocumentError, PluginError) as error:
        message = f"diff failed: {error}"
        if json_output:
            _echo_json(
                {
                    "status": "error",
                    "exit_code": 1,
                    "message": message,
                    "failed_path": getattr(error, "path", None),
                    "left_path": str(left),
                    "right_path": str(right),
                }
            )
        else:
            _echo(message, err=True)
        raise typer.Exit(code=1) from error

    exit_code = int(fail_on_difference and not result.identical)
    if json_output:
        _echo_json({**result.to_dict(), "status": "ok", "exit_code": exit_code, "message": "diff completed"})
    else:
        _echo(render_debug(result.differences))
        if summary:
            _echo(render_diff_summary(result))

    if exit_code:
        raise typer.Exit(code=exit_code)


@app.command()
def show(path: Path = typer.Argument(..., help="JSON document to print.")) -> None:
    """Print a compact rendering of a JSON document."""
    try:
        value = read_document(path)
    except (DocumentError, PluginError) as error:
        _echo(f"show failed: {error}", err=True)
        raise typer.Exit(code=1) from error

    _echo(stringify(value))


def main() -> None:
    app()
