"""tokenparse - rule-driven string tokenizer with row and config-string parsers."""

from tokenparse.parsers.config_string import ConfigStringParser
from tokenparse.parsers.config_string import parse as parse_config
from tokenparse.parsers.rows import RowParser, parse_row, parse_rows
from tokenparse.tokenizer import (
    CharacterClass,
    Escape,
    Grammar,
    GrammarError,
    Literal,
    MalformedEntryError,
    NoMatchingRuleError,
    Section,
    Token,
    TokenizeError,
    Tokenizer,
    TokenList,
    TokenMode,
    TokenParseError,
    UnexpectedTokenError,
    UnterminatedSectionError,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "CharacterClass",
    "ConfigStringParser",
    "Escape",
    "Grammar",
    "GrammarError",
    "Literal",
    "MalformedEntryError",
    "NoMatchingRuleError",
    "RowParser",
    "Section",
    "Token",
    "TokenList",
    "TokenMode",
    "TokenParseError",
    "TokenizeError",
    "Tokenizer",
    "UnexpectedTokenError",
    "UnterminatedSectionError",
    "parse_config",
    "parse_row",
    "parse_rows",
    "tokenize",
]
