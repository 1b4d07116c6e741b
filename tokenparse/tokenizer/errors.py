"""Exception hierarchy for the tokenizer and the parsers built on it.

All errors raised by tokenparse derive from TokenParseError so callers
embedding the library can catch a single base class. Errors are raised
synchronously from the call that detected them; nothing is retried or
coerced into a partial result.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple


class TokenParseError(Exception):
    """Base class for all tokenparse errors."""
    pass


class GrammarError(TokenParseError, ValueError):
    """A rule or grammar was declared with invalid arguments."""
    pass


def advance_position(
    source: str, start: int, end: int, line: int = 1, column: int = 1
) -> Tuple[int, int]:
    """Move a 1-based (line, column) position over ``source[start:end]``.

    ``\\r\\n``, ``\\r`` and ``\\n`` each count as a single line break.
    """
    length = len(source)
    for i in range(start, end):
        c = source[i]
        if c == "\n" or (c == "\r" and (i + 1 >= length or source[i + 1] != "\n")):
            line += 1
            column = 1
        else:
            column += 1
    return line, column


def locate(source: str, offset: int) -> Tuple[int, int]:
    """Translate a character offset into a 1-based (line, column) pair."""
    return advance_position(source, 0, max(0, min(offset, len(source))))


class TokenizeError(TokenParseError):
    """Tokenizing failed at a specific position of the source text.

    Attributes:
        offset: 0-based character offset where the failure was detected.
        line: 1-based line number of ``offset``.
        column: 1-based column number of ``offset``.
    """

    def __init__(self, message: str, offset: int, source: str):
        self.offset = offset
        self.line, self.column = locate(source, offset)
        self.reason = message
        super().__init__(f"{message} at {self.line}:{self.column} (offset {offset})")


class UnterminatedSectionError(TokenizeError):
    """A section was opened but its end text never appeared."""

    def __init__(self, start: str, offset: int, source: str):
        self.start = start
        super().__init__(f"Unterminated section opened by {start!r}", offset, source)


class NoMatchingRuleError(TokenizeError):
    """No declared rule accepts the character at the cursor."""

    def __init__(self, offset: int, source: str):
        self.character = source[offset] if offset < len(source) else ""
        super().__init__(f"No rule matches {self.character!r}", offset, source)


def kind_name(kind: Any) -> str:
    """Readable name for a kind tag (Enum member name, string, or repr)."""
    name = getattr(kind, "name", None)
    if isinstance(name, str):
        return name
    return kind if isinstance(kind, str) else repr(kind)


class UnexpectedTokenError(TokenParseError):
    """A token of a specific kind was required but something else was found.

    Attributes:
        expected: Kinds that would have been accepted (empty means any).
        actual: The offending token, or None at the end of the list.
        offset: Source offset of the offending token, or None at the end.
    """

    def __init__(self, expected: Sequence[Any], actual: Optional[Any]):
        self.expected = tuple(expected)
        self.actual = actual
        self.offset = actual.offset if actual is not None else None

        wanted = " or ".join(kind_name(k) for k in self.expected) or "any token"
        if actual is None:
            message = f"Expected {wanted}, found end of input"
        else:
            message = (
                f"Expected {wanted}, found {kind_name(actual.kind)} {actual.text!r} "
                f"at {actual.line}:{actual.column}"
            )
        super().__init__(message)


class MalformedEntryError(TokenParseError):
    """A config-string entry could not be read as ``key=value``.

    The underlying UnexpectedTokenError is chained as ``__cause__``.
    """

    def __init__(self, entry: str, detail: str = ""):
        self.entry = entry
        message = f"Malformed entry {entry!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


__all__ = [
    "TokenParseError",
    "GrammarError",
    "TokenizeError",
    "UnterminatedSectionError",
    "NoMatchingRuleError",
    "UnexpectedTokenError",
    "MalformedEntryError",
    "locate",
    "advance_position",
    "kind_name",
]
