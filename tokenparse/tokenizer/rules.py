"""Declarative token rules.

A grammar is an ordered sequence of rules. The set of rule types is
closed: character-class runs, literal strings, delimited sections and
escape markers. Rules are immutable once built and may be shared freely
between tokenizers and threads.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Iterable, Optional, Tuple, Union

from tokenparse.tokenizer.errors import GrammarError


class TokenMode(Enum):
    """Character classes understood by CharacterClass rules."""

    ANY = "any"
    LETTER = "letter"
    DIGIT = "digit"
    LETTER_OR_DIGIT = "letter_or_digit"
    WHITESPACE = "whitespace"
    END_OF_LINE = "end_of_line"
    SYMBOLS = "symbols"


def _accepts_mode(mode: TokenMode, c: str) -> bool:
    if mode is TokenMode.ANY:
        return True
    if mode is TokenMode.LETTER:
        return c.isalpha()
    if mode is TokenMode.DIGIT:
        return c.isdigit()
    if mode is TokenMode.LETTER_OR_DIGIT:
        return c.isalnum()
    if mode is TokenMode.WHITESPACE:
        return c.isspace()
    if mode is TokenMode.END_OF_LINE:
        return c in "\r\n"
    if mode is TokenMode.SYMBOLS:
        return unicodedata.category(c)[0] in "PS"
    return False


def _as_texts(value: Union[str, Iterable[str]], what: str) -> Tuple[str, ...]:
    """Normalize one or more alternative strings, longest first."""
    texts = (value,) if isinstance(value, str) else tuple(value)
    if not texts:
        raise GrammarError(f"{what} needs at least one text")
    for text in texts:
        if not isinstance(text, str) or not text:
            raise GrammarError(f"{what} texts must be non-empty strings, got {text!r}")
    # Stable sort keeps declaration order among equal lengths.
    return tuple(sorted(texts, key=len, reverse=True))


def _match_any(texts: Tuple[str, ...], source: str, position: int) -> Optional[str]:
    for text in texts:
        if source.startswith(text, position):
            return text
    return None


@dataclass(frozen=True)
class CharacterClass:
    """Greedy run of characters belonging to a character class.

    Attributes:
        kind: Tag copied onto the tokens this rule produces.
        modes: Character classes accepted by this rule.
        include: Extra characters accepted regardless of ``modes``.
        exclude: Characters never accepted, even when a mode matches.
        discard: Consume matching input without emitting tokens.
    """

    kind: Any
    modes: Tuple[TokenMode, ...] = (TokenMode.ANY,)
    include: FrozenSet[str] = field(default_factory=frozenset)
    exclude: FrozenSet[str] = field(default_factory=frozenset)
    discard: bool = False

    def __post_init__(self) -> None:
        modes = (self.modes,) if isinstance(self.modes, TokenMode) else tuple(self.modes)
        if not modes and not self.include:
            raise GrammarError("CharacterClass needs at least one mode or included character")
        for mode in modes:
            if not isinstance(mode, TokenMode):
                raise GrammarError(f"Unknown token mode: {mode!r}")
        object.__setattr__(self, "modes", modes)
        object.__setattr__(self, "include", frozenset(self.include))
        object.__setattr__(self, "exclude", frozenset(self.exclude))

    @property
    def is_catch_all(self) -> bool:
        """True when the class accepts any character not explicitly excluded."""
        return TokenMode.ANY in self.modes

    def accepts(self, c: str) -> bool:
        if c in self.exclude:
            return False
        if c in self.include:
            return True
        return any(_accepts_mode(mode, c) for mode in self.modes)


@dataclass(frozen=True)
class Literal:
    """Exact text such as a separator, ``=`` or a keyword.

    ``texts`` may hold several alternatives; the longest one present at
    the cursor is matched.
    """

    kind: Any
    texts: Tuple[str, ...]
    discard: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "texts", _as_texts(self.texts, "Literal"))

    def match(self, source: str, position: int) -> Optional[str]:
        return _match_any(self.texts, source, position)


@dataclass(frozen=True)
class Section:
    """Delimited span such as a quoted string.

    The token produced by a section carries the unescaped interior as its
    text; the delimiters only appear in the token's raw text.

    Attributes:
        kind: Tag copied onto the produced token.
        start: Opening text.
        end: One or more closing texts; the first one found closes the section.
        discard: Consume the section without emitting a token (e.g. comments).
    """

    kind: Any
    start: str
    end: Tuple[str, ...]
    discard: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.start, str) or not self.start:
            raise GrammarError("Section start text must be a non-empty string")
        object.__setattr__(self, "end", _as_texts(self.end, "Section end"))

    def match(self, source: str, position: int) -> Optional[str]:
        return self.start if source.startswith(self.start, position) else None

    def match_end(self, source: str, position: int) -> Optional[str]:
        return _match_any(self.end, source, position)


@dataclass(frozen=True)
class Escape:
    """Escape character honoured while scanning a section.

    Never produces tokens; outside of sections the character is ordinary text.
    """

    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise GrammarError(f"Escape must be a single character, got {self.char!r}")


Rule = Union[CharacterClass, Literal, Section, Escape]
RULE_TYPES = (CharacterClass, Literal, Section, Escape)


__all__ = [
    "TokenMode",
    "CharacterClass",
    "Literal",
    "Section",
    "Escape",
    "Rule",
    "RULE_TYPES",
]
