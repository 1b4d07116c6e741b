"""Rule-driven tokenizer package.

This package contains the reusable building blocks:
- rules: declarative token rules (character classes, literals, sections, escapes)
- tokens: Token and the TokenList split/trim/consume algebra
- engine: the Tokenizer that applies an ordered rule list to text
- errors: exception hierarchy shared with the parsers
"""

from tokenparse.tokenizer.engine import Grammar, Tokenizer, tokenize
from tokenparse.tokenizer.errors import (
    GrammarError,
    MalformedEntryError,
    NoMatchingRuleError,
    TokenizeError,
    TokenParseError,
    UnexpectedTokenError,
    UnterminatedSectionError,
)
from tokenparse.tokenizer.rules import (
    CharacterClass,
    Escape,
    Literal,
    Rule,
    Section,
    TokenMode,
)
from tokenparse.tokenizer.tokens import Token, TokenList

__all__ = [
    "Grammar",
    "Tokenizer",
    "tokenize",
    "CharacterClass",
    "Escape",
    "Literal",
    "Rule",
    "Section",
    "TokenMode",
    "Token",
    "TokenList",
    "TokenParseError",
    "GrammarError",
    "TokenizeError",
    "UnterminatedSectionError",
    "NoMatchingRuleError",
    "UnexpectedTokenError",
    "MalformedEntryError",
]
