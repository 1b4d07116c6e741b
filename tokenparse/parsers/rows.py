"""Delimited-row parser (comma separated values and friends).

Rows are read with the generic tokenizer: one tokenize call, a split on
the line ending, a split on the field separator, then trim/consume_all
per field. Quoted fields may contain separators and line breaks; a
backslash inside quotes escapes the next character.

Empty input and blank trailing lines are kept: ``""`` parses to
``[[""]]`` and ``"a,b\\n"`` to ``[["a", "b"], [""]]``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List, Optional

from tokenparse.config.schema import RowParserConfig
from tokenparse.tokenizer.engine import Tokenizer
from tokenparse.tokenizer.rules import (
    CharacterClass,
    Escape,
    Literal,
    Rule,
    Section,
    TokenMode,
)
from tokenparse.tokenizer.tokens import Token, TokenList

logger = logging.getLogger("tokenparse.parsers.rows")

# Only the first line endings are sampled when guessing the terminator.
LINE_ENDING_SAMPLE = 100


class RowToken(Enum):
    """Token kinds of the row grammar."""

    WHITESPACE = "whitespace"
    DATA = "data"
    SEPARATOR = "separator"
    QUOTATION = "quotation"
    NEWLINE = "newline"
    LINEFEED = "linefeed"


def build_row_grammar(config: RowParserConfig) -> List[Rule]:
    """Rule list for delimited rows under ``config``."""
    rules: List[Rule] = [
        CharacterClass(RowToken.DATA, modes=(TokenMode.ANY,)),
        CharacterClass(RowToken.WHITESPACE, modes=(TokenMode.WHITESPACE,)),
        Literal(RowToken.NEWLINE, "\r\n"),
        Literal(RowToken.LINEFEED, "\n"),
        Literal(RowToken.SEPARATOR, config.separator),
        Section(RowToken.QUOTATION, config.quote, config.quote),
    ]
    if config.escape:
        rules.append(Escape(config.escape))
    return rules


def guess_line_ending(tokens: Iterable[Token]) -> RowToken:
    """Pick the row terminator used by ``tokens``.

    CRLF wins only when it is strictly more frequent than LF among the
    first LINE_ENDING_SAMPLE line endings; otherwise LF is assumed.
    """
    crlf = lf = 0
    for token in tokens:
        if token.kind is RowToken.NEWLINE:
            crlf += 1
        elif token.kind is RowToken.LINEFEED:
            lf += 1
        if crlf + lf > LINE_ENDING_SAMPLE:
            break
    return RowToken.NEWLINE if crlf > lf else RowToken.LINEFEED


class RowParser:
    """Parser turning delimited text into rows of string fields.

    The grammar is built once per parser and is safe to share between
    threads; each call works on its own TokenList.

    Args:
        config: Separator, quote and escape settings (defaults: ``,`` ``"`` ``\\``).
    """

    def __init__(self, config: Optional[RowParserConfig] = None):
        self.config = config or RowParserConfig()
        self.tokenizer = Tokenizer(build_row_grammar(self.config))

    def tokenize(self, text: str) -> TokenList:
        return self.tokenizer.tokenize(text)

    def parse_rows(self, text: str) -> List[List[str]]:
        """Parse every row of ``text``.

        Args:
            text: Complete delimited text.

        Returns:
            One list of fields per row, empty rows and fields preserved.

        Raises:
            UnterminatedSectionError: A quoted field is never closed.
        """
        tokens = self.tokenize(text)
        terminator = guess_line_ending(tokens)
        stray = RowToken.LINEFEED if terminator is RowToken.NEWLINE else RowToken.NEWLINE

        rows = [
            self._fields(
                line,
                edges=(RowToken.WHITESPACE, stray),
                content=(RowToken.DATA, RowToken.WHITESPACE, RowToken.QUOTATION, stray),
            )
            for line in tokens.split(terminator)
        ]
        logger.debug("Parsed %d rows (terminator=%s)", len(rows), terminator.name)
        return rows

    def parse_row(self, text: str) -> List[str]:
        """Parse ``text`` as a single row; line breaks are field content."""
        line_endings = (RowToken.NEWLINE, RowToken.LINEFEED)
        return self._fields(
            self.tokenize(text),
            edges=(RowToken.WHITESPACE,) + line_endings,
            content=(RowToken.DATA, RowToken.WHITESPACE, RowToken.QUOTATION) + line_endings,
        )

    def _fields(self, line: TokenList, edges: tuple, content: tuple) -> List[str]:
        fields = []
        for field in line.split(RowToken.SEPARATOR):
            field.trim(*edges)
            fields.append(field.consume_all(*content))
        return fields


_default_parser = RowParser()


def parse_rows(text: str) -> List[List[str]]:
    """Parse ``text`` into rows using the default ``,`` ``"`` ``\\`` grammar."""
    return _default_parser.parse_rows(text)


def parse_row(text: str) -> List[str]:
    """Parse single-row ``text`` using the default grammar."""
    return _default_parser.parse_row(text)


__all__ = [
    "RowToken",
    "RowParser",
    "build_row_grammar",
    "guess_line_ending",
    "parse_rows",
    "parse_row",
]
