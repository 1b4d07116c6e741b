"""Parser for ``key=value`` configuration strings.

Typical inputs are connection strings and option lists such as
``host=db1; port=5432; name="sales; archive"``. Entries are separated by
a configurable separator (``;`` by default), values may mix quoted and
unquoted spans (``key=abc"def"ghi`` reads as ``abcdefghi``), and a key
that appears twice keeps its last value.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from typing import Dict, List

from tokenparse.config.schema import ConfigStringConfig
from tokenparse.tokenizer.engine import Tokenizer
from tokenparse.tokenizer.errors import MalformedEntryError, UnexpectedTokenError
from tokenparse.tokenizer.rules import (
    CharacterClass,
    Escape,
    Literal,
    Rule,
    Section,
    TokenMode,
)
from tokenparse.tokenizer.tokens import TokenList

logger = logging.getLogger("tokenparse.parsers.config_string")


class ConfigToken(Enum):
    """Token kinds of the config-string grammar."""

    WHITESPACE = "whitespace"
    TEXT = "text"
    SEPARATOR = "separator"
    QUOTE = "quote"
    EQUALS = "equals"


def build_config_grammar(separator: str) -> List[Rule]:
    return [
        CharacterClass(ConfigToken.TEXT, modes=(TokenMode.ANY,)),
        CharacterClass(ConfigToken.WHITESPACE, modes=(TokenMode.WHITESPACE,)),
        Literal(ConfigToken.SEPARATOR, separator),
        Literal(ConfigToken.EQUALS, "="),
        Section(ConfigToken.QUOTE, '"', '"'),
        Escape("\\"),
    ]


class ConfigStringParser:
    """Reads ``key=value`` entries into an insertion-ordered dict.

    Args:
        separator: Text separating entries.
        allow_spaces_in_keys: Accept multi-word keys (``Data Source=...``).

    Raises:
        pydantic.ValidationError: The separator is empty or collides with
            ``=``, the quote or the escape character.
    """

    def __init__(self, separator: str = ";", allow_spaces_in_keys: bool = False):
        self.config = ConfigStringConfig(
            separator=separator, allow_spaces_in_keys=allow_spaces_in_keys
        )
        self.tokenizer = Tokenizer(build_config_grammar(self.config.separator))

    @classmethod
    def from_config(cls, config: ConfigStringConfig) -> "ConfigStringParser":
        return cls(config.separator, config.allow_spaces_in_keys)

    def parse(self, text: str) -> Dict[str, str]:
        """Parse a config string.

        Entries that are blank after trimming (for example after a trailing
        separator) are skipped. Everything after the first ``=`` belongs to
        the value, including interior whitespace and further ``=`` signs
        (``key=a=b`` reads as ``a=b``).

        Args:
            text: The configuration string.

        Returns:
            Mapping of keys to values in first-seen key order.

        Raises:
            MalformedEntryError: An entry has no key or no ``=``.
            UnterminatedSectionError: A quoted value is never closed.
        """
        result: Dict[str, str] = {}
        for entry in self.tokenizer.tokenize(text).split(ConfigToken.SEPARATOR):
            raw = entry.raw().strip()
            entry.trim(ConfigToken.WHITESPACE)
            if not entry:
                continue

            try:
                key = self._read_key(entry)
                entry.trim_start(ConfigToken.WHITESPACE)
                entry.consume(ConfigToken.EQUALS)
            except UnexpectedTokenError as err:
                raise MalformedEntryError(raw, str(err)) from err

            entry.trim_start(ConfigToken.WHITESPACE)
            value = entry.consume_all(
                ConfigToken.TEXT,
                ConfigToken.QUOTE,
                ConfigToken.WHITESPACE,
                ConfigToken.EQUALS,
            )

            if key in result:
                logger.debug("Duplicate key %r: %r replaces %r", key, value, result[key])
            result[key] = value

        return result

    def _read_key(self, entry: TokenList) -> str:
        if not self.config.allow_spaces_in_keys:
            return entry.consume(ConfigToken.TEXT).text

        key = entry.consume_all(ConfigToken.TEXT, ConfigToken.WHITESPACE).rstrip()
        if not key:
            raise UnexpectedTokenError((ConfigToken.TEXT,), entry.peek())
        return key


# Parsers for recently used separators.
PARSER_CACHE_SIZE = 16


@lru_cache(maxsize=PARSER_CACHE_SIZE)
def get_parser(separator: str = ";") -> ConfigStringParser:
    return ConfigStringParser(separator)


def parse(text: str, separator: str = ";") -> Dict[str, str]:
    """Parse ``text`` with a cached parser for ``separator``."""
    return get_parser(separator).parse(text)


__all__ = [
    "ConfigToken",
    "ConfigStringParser",
    "build_config_grammar",
    "get_parser",
    "parse",
]
