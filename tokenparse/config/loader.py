"""Helpers for loading tokenparse settings from TOML/JSON sources.

`load_config` accepts various configuration sources:

* None -> default TokenParseConfig
* dict -> TokenParseConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Union

from tokenparse.config.schema import TokenParseConfig

logger = logging.getLogger("tokenparse.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _guess_format(text: str) -> str:
    return "json" if text.lstrip().startswith(("{", "[")) else "toml"


def load_config(source: ConfigSource) -> TokenParseConfig:
    """Load TokenParseConfig from a configuration source.

    Args:
        source: One of:
            * None: returns TokenParseConfig.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        TokenParseConfig instance.

    Raises:
        ValueError: The source does not hold a mapping, or cannot be decoded.
        TypeError: The source type is not supported.
    """
    if source is None:
        logger.debug("No config source provided; using defaults")
        return TokenParseConfig.default()

    if isinstance(source, dict):
        logger.debug("Loading TokenParseConfig from provided dict")
        return TokenParseConfig.from_dict(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        # Multi-line or very long sources are always inline text.
        looks_like_path = "\n" not in str(source) and len(str(source)) < 1024
        if isinstance(source, Path) or (looks_like_path and path.is_file()):
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = _guess_format(text)
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _guess_format(text)
            logger.info("Loading configuration from inline %s string", fmt)

        try:
            data = json.loads(text) if fmt == "json" else tomllib.loads(text)
        except (json.JSONDecodeError, tomllib.TOMLDecodeError) as err:
            raise ValueError(f"Invalid {fmt.upper()} configuration: {err}") from err

        if not isinstance(data, dict):
            raise ValueError("Top-level configuration must be a mapping/dict")

        return TokenParseConfig.from_dict(data)

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["load_config", "ConfigSource"]
