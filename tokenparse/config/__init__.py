"""Configuration schema and loading for tokenparse."""

from .loader import load_config
from .schema import ConfigStringConfig, RowParserConfig, TokenParseConfig

__all__ = [
    "ConfigStringConfig",
    "RowParserConfig",
    "TokenParseConfig",
    "load_config",
]
