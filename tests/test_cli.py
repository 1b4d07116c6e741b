"""Tests for tokenparse CLI entrypoints."""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path

import pytest

import tokenparse.main as main


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests from installing Rich handlers on the root logger."""
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)


def test_main_requires_command(capsys: pytest.CaptureFixture[str]) -> None:
    """Missing subcommands make the CLI print help and fail."""
    exit_code = main.main([])

    assert exit_code == 1
    assert "Tokenparse" in capsys.readouterr().out


def test_rows_json_from_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "data.csv"
    source.write_text('a, "b,c"\nd,e\n', encoding="utf-8")

    exit_code = main.main(["rows", str(source), "--json"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == [["a", "b,c"], ["d", "e"], [""]]


def test_rows_from_stdin_with_separator(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("x;y"))

    exit_code = main.main(["rows", "--separator", ";", "--json"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == [["x", "y"]]


def test_rows_table_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "data.csv"
    source.write_text("alpha,beta", encoding="utf-8")

    assert main.main(["rows", str(source)]) == 0
    out = capsys.readouterr().out
    assert "alpha" in out and "beta" in out


def test_rows_settings_from_inline_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = tmp_path / "data.txt"
    source.write_text("a|b", encoding="utf-8")

    exit_code = main.main(["-c", '{"rows": {"separator": "|"}}', "rows", str(source), "--json"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == [["a", "b"]]


def test_rows_unterminated_quote_fails(tmp_path: Path) -> None:
    source = tmp_path / "bad.csv"
    source.write_text('"abc', encoding="utf-8")

    assert main.main(["rows", str(source)]) == 1


def test_rows_missing_file_fails(tmp_path: Path) -> None:
    assert main.main(["rows", str(tmp_path / "missing.csv")]) == 1


def test_config_command(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main.main(["config", 'key1=value1;key2="quoted value"'])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {"key1": "value1", "key2": "quoted value"}


def test_config_command_allow_spaces(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main.main(["config", "--allow-spaces", "-s", "&", "Data Source=x&b=1"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {"Data Source": "x", "b": "1"}


def test_config_command_malformed_entry() -> None:
    assert main.main(["config", "key"]) == 1


def test_tokens_command_json(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main.main(["tokens", 'a,"b"', "--json"])

    assert exit_code == 0
    dumped = json.loads(capsys.readouterr().out)
    assert [entry["kind"] for entry in dumped] == ["DATA", "SEPARATOR", "QUOTATION"]
    assert dumped[2]["text"] == "b"
    assert dumped[2]["raw"] == '"b"'
