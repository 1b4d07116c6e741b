"""Rule-driven string tokenizer.

The tokenizer scans text left to right against an ordered list of
rules and produces a flat TokenList covering the whole input.

Match selection at each cursor position:

1. Anchored rules (literals and section openings) are tried first. The
   longest opening wins; equal lengths go to the earliest declared rule.
2. Otherwise the character belongs to a character-class rule: the first
   declared specific class that accepts it, else the first declared
   catch-all class. The run extends greedily while the same rule keeps
   claiming characters and no anchored rule starts.
3. A character nothing claims raises NoMatchingRuleError.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from tokenparse.tokenizer.errors import (
    GrammarError,
    NoMatchingRuleError,
    UnterminatedSectionError,
    advance_position,
)
from tokenparse.tokenizer.rules import (
    RULE_TYPES,
    CharacterClass,
    Escape,
    Literal,
    Rule,
    Section,
)
from tokenparse.tokenizer.tokens import Token, TokenList

logger = logging.getLogger("tokenparse.tokenizer.engine")

_Anchored = Tuple[Rule, str]


class Tokenizer:
    """An immutable grammar: an ordered rule list plus the scanning engine.

    Instances hold no per-call state and can be shared across threads.

    Args:
        rules: Rules in priority order. Declaration order breaks ties.

    Raises:
        GrammarError: An element is not a rule, or the grammar emits nothing.
    """

    def __init__(self, rules: Iterable[Rule]):
        rules = tuple(rules)
        for rule in rules:
            if not isinstance(rule, RULE_TYPES):
                raise GrammarError(f"Not a token rule: {rule!r}")
        if not any(not isinstance(rule, Escape) for rule in rules):
            raise GrammarError("A grammar needs at least one matching rule")

        self._rules = rules
        self._escapes = frozenset(r.char for r in rules if isinstance(r, Escape))

        # Anchored rules indexed by first character, declaration order kept.
        anchored: Dict[str, List[Rule]] = {}
        for rule in rules:
            if isinstance(rule, Literal):
                firsts = {text[0] for text in rule.texts}
            elif isinstance(rule, Section):
                firsts = {rule.start[0]}
            else:
                continue
            for c in firsts:
                anchored.setdefault(c, []).append(rule)
        self._anchored = {c: tuple(found) for c, found in anchored.items()}

        classes = [r for r in rules if isinstance(r, CharacterClass)]
        self._classes = tuple(
            [r for r in classes if not r.is_catch_all]
            + [r for r in classes if r.is_catch_all]
        )

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    @property
    def escape_chars(self) -> frozenset:
        return self._escapes

    def tokenize(self, text: str) -> TokenList:
        """Split ``text`` into tokens.

        Args:
            text: Already decoded input text.

        Returns:
            TokenList covering the input with no gaps or overlaps (tokens of
            discarded rules are consumed but not emitted).

        Raises:
            UnterminatedSectionError: A section is never closed.
            NoMatchingRuleError: A character is claimed by no rule.
        """
        tokens: List[Token] = []
        length = len(text)
        cursor = 0
        line = column = 1

        while cursor < length:
            anchored = self._match_anchored(text, cursor)
            if anchored is not None:
                rule, opening = anchored
                if isinstance(rule, Section):
                    value, end = self._scan_section(text, cursor, rule, opening)
                else:
                    value, end = opening, cursor + len(opening)
            else:
                rule = self._classify(text[cursor])
                if rule is None:
                    raise NoMatchingRuleError(cursor, text)
                end = cursor + 1
                while (
                    end < length
                    and self._classify(text[end]) is rule
                    and self._match_anchored(text, end) is None
                ):
                    end += 1
                value = text[cursor:end]

            if not rule.discard:
                tokens.append(Token(rule.kind, value, text[cursor:end], cursor, line, column))

            line, column = advance_position(text, cursor, end, line, column)
            cursor = end

        logger.debug("Tokenized %d characters into %d tokens", length, len(tokens))
        return TokenList(tokens)

    def _match_anchored(self, text: str, position: int) -> Optional[_Anchored]:
        best: Optional[_Anchored] = None
        for rule in self._anchored.get(text[position], ()):
            opening = rule.match(text, position)
            if opening is not None and (best is None or len(opening) > len(best[1])):
                best = (rule, opening)
        return best

    def _classify(self, c: str) -> Optional[CharacterClass]:
        for rule in self._classes:
            if rule.accepts(c):
                return rule
        return None

    def _scan_section(
        self, text: str, start: int, rule: Section, opening: str
    ) -> Tuple[str, int]:
        """Read a section interior; return (unescaped text, end offset)."""
        parts: List[str] = []
        position = start + len(opening)
        length = len(text)

        while position < length:
            c = text[position]
            if c in self._escapes:
                if position + 1 >= length:
                    break
                parts.append(text[position + 1])
                position += 2
                continue
            closing = rule.match_end(text, position)
            if closing is not None:
                return "".join(parts), position + len(closing)
            parts.append(c)
            position += 1

        raise UnterminatedSectionError(opening, start, text)


def tokenize(grammar: Tokenizer, text: str) -> TokenList:
    """Tokenize ``text`` with ``grammar``."""
    return grammar.tokenize(text)


Grammar = Tokenizer

__all__ = ["Tokenizer", "Grammar", "tokenize"]
