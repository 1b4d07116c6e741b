"""Settings schema and loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from tokenparse.config import (
    ConfigStringConfig,
    RowParserConfig,
    TokenParseConfig,
    load_config,
)


def test_defaults() -> None:
    cfg = load_config(None)

    assert cfg.rows == RowParserConfig(separator=",", quote='"', escape="\\")
    assert cfg.config_string == ConfigStringConfig(separator=";", allow_spaces_in_keys=False)


def test_load_from_dict() -> None:
    cfg = load_config({"rows": {"separator": ";"}, "config_string": {"separator": "&"}})

    assert cfg.rows.separator == ";"
    assert cfg.config_string.separator == "&"


def test_load_from_toml_file(tmp_path: Path) -> None:
    path = tmp_path / "settings.toml"
    path.write_text(
        '[rows]\nseparator = "|"\nescape = "^"\n\n[config_string]\nallow_spaces_in_keys = true\n',
        encoding="utf-8",
    )

    cfg = load_config(path)

    assert cfg.rows.separator == "|"
    assert cfg.rows.escape == "^"
    assert cfg.config_string.allow_spaces_in_keys is True


def test_load_from_json_file_given_as_string(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text('{"rows": {"quote": "\'"}}', encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg.rows.quote == "'"


def test_load_inline_json_and_toml() -> None:
    assert load_config('{"rows": {"separator": "\\t"}}').rows.separator == "\t"
    assert load_config('[config_string]\nseparator = "&"').config_string.separator == "&"


def test_invalid_documents() -> None:
    with pytest.raises(ValueError):
        load_config("[1, 2]")
    with pytest.raises(ValueError):
        load_config("{not json")
    with pytest.raises(TypeError):
        load_config(42)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "settings",
    [
        {"quote": "''"},
        {"escape": ""},
        {"separator": ""},
        {"separator": "\n"},
        {"separator": '"'},
        {"quote": "\\"},
        {"unknown": 1},
    ],
)
def test_row_settings_validation(settings) -> None:
    with pytest.raises(ValidationError):
        RowParserConfig(**settings)


def test_unknown_section_rejected() -> None:
    with pytest.raises(ValidationError):
        TokenParseConfig.from_dict({"csv": {}})
