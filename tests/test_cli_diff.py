import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from diffpack.cli.app import app
from diffpack.plugins import PLUGIN_CONFIG_ENV_VAR, reset_plugin_cache

FIXTURES = Path(__file__).parent / "fixtures" / "documents"
CONFIG_V1 = str(FIXTURES / "config_v1.json")
CONFIG_V2 = str(FIXTURES / "config_v2.json")


def test_cli_diff_text_prints_structural_dump() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["diff", CONFIG_V1, CONFIG_V2])

    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0] == "["
    assert lines[-1] == "]"
    assert "    Changed(" in lines
    assert "        original=Number(8080)," in lines
    assert "        modified=Number(9090)," in lines
    assert "            'owner': String('ops')," in lines


def test_cli_diff_identical_documents_print_empty_dump() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["diff", CONFIG_V1, CONFIG_V1])

    assert result.exit_code == 0
    assert result.stdout.strip() == "[]"


def test_cli_diff_summary_line() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["diff", CONFIG_V1, CONFIG_V2, "--summary"])

    assert result.exit_code == 0
    assert result.stdout.splitlines()[-1].endswith("changed=1 added=2 removed=1")


def test_cli_diff_json_output() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["diff", CONFIG_V1, CONFIG_V2, "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout.strip())

    assert payload["status"] == "ok"
    assert payload["identical"] is False
    assert payload["summary"] == {"changed": 1, "added": 2, "removed": 1}
    by_path = {entry["path"]: entry for entry in payload["differences"]}
    assert by_path["/service/port"] == {
        "path": "/service/port",
        "kind": "changed",
        "original": 8080,
        "modified": 9090,
    }
    assert by_path["/owner"]["value"] == {"owner": "ops"}
    assert by_path["/hosts/2"]["value"] == "c"


def test_cli_diff_pretty_json_output() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--pretty-json", "diff", CONFIG_V1, CONFIG_V1, "--json"])

    assert result.exit_code == 0
    assert "\n  " in result.stdout
    assert json.loads(result.stdout)["identical"] is True


def test_cli_diff_fail_on_difference_sets_exit_code() -> None:
    runner = CliRunner()
    differing = runner.invoke(app, ["diff", CONFIG_V1, CONFIG_V2, "--fail-on-difference"])
    identical = runner.invoke(app, ["diff", CONFIG_V1, CONFIG_V1, "--fail-on-difference"])

    assert differing.exit_code == 1
    assert identical.exit_code == 0


def test_cli_diff_non_zero_on_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing-left.json"
    runner = CliRunner()
    result = runner.invoke(app, ["diff", str(missing), CONFIG_V2])

    assert result.exit_code == 1
    assert "diff failed:" in result.output
    assert str(missing) in result.output


def test_cli_diff_non_zero_on_malformed_json() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["diff", CONFIG_V1, str(FIXTURES / "broken.json"), "--json"])

    assert result.exit_code == 1
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "error"
    assert payload["failed_path"].endswith("broken.json")
    assert "could not parse JSON" in payload["message"]


def test_cli_quiet_suppresses_dump() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--quiet", "diff", CONFIG_V1, CONFIG_V2])

    assert result.exit_code == 0
    assert result.stdout == ""


def test_cli_diff_reports_deeply_nested_document(tmp_path: Path) -> None:
    deep = tmp_path / "deep.json"
    deep.write_text("[" * 100_000 + "]" * 100_000, encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["diff", CONFIG_V1, str(deep)])

    assert result.exit_code == 1
    assert "diff failed:" in result.output
    assert str(deep) in result.output
    assert not isinstance(result.exception, RecursionError)


def test_cli_diff_reports_broken_plugin_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "plugins.json"
    config_path.write_text("{", encoding="utf-8")
    monkeypatch.setenv(PLUGIN_CONFIG_ENV_VAR, str(config_path))
    reset_plugin_cache()
    runner = CliRunner()

    try:
        result = runner.invoke(app, ["diff", CONFIG_V1, CONFIG_V2, "--json"])
    finally:
        reset_plugin_cache()

    assert result.exit_code == 1
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "error"
    assert payload["failed_path"] is None
    assert "plugin config" in payload["message"]


def test_cli_has_no_color_switch() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--no-color", "diff", CONFIG_V1, CONFIG_V2])

    assert result.exit_code == 2
