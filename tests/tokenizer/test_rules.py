"""Token rule construction and character-class tests."""

from __future__ import annotations

import pytest

from tokenparse.tokenizer.errors import GrammarError
from tokenparse.tokenizer.rules import (
    CharacterClass,
    Escape,
    Literal,
    Section,
    TokenMode,
)


def test_character_class_modes() -> None:
    """Each mode should accept exactly its character class."""
    letters = CharacterClass("w", modes=(TokenMode.LETTER,))
    digits = CharacterClass("d", modes=TokenMode.DIGIT)
    spaces = CharacterClass("s", modes=(TokenMode.WHITESPACE,))
    eol = CharacterClass("e", modes=(TokenMode.END_OF_LINE,))
    symbols = CharacterClass("p", modes=(TokenMode.SYMBOLS,))

    assert letters.accepts("a") and letters.accepts("é") and not letters.accepts("1")
    assert digits.accepts("7") and not digits.accepts("x")
    assert spaces.accepts(" ") and spaces.accepts("\t") and not spaces.accepts("_")
    assert eol.accepts("\n") and eol.accepts("\r") and not eol.accepts(" ")
    assert symbols.accepts("+") and symbols.accepts(",") and not symbols.accepts("a")


def test_character_class_include_and_exclude() -> None:
    """Include adds characters, exclude removes them even from ANY."""
    ident = CharacterClass("id", modes=(TokenMode.LETTER_OR_DIGIT,), include="_-")
    data = CharacterClass("data", modes=(TokenMode.ANY,), exclude=",")

    assert ident.accepts("_") and ident.accepts("-") and ident.accepts("9")
    assert not ident.accepts(".")
    assert data.accepts("x") and not data.accepts(",")
    assert data.is_catch_all
    assert not ident.is_catch_all


def test_character_class_needs_something_to_match() -> None:
    with pytest.raises(GrammarError):
        CharacterClass("nothing", modes=())


def test_literal_orders_alternatives_longest_first() -> None:
    """Longest alternative must win when several share a prefix."""
    rule = Literal("eol", ("\n", "\r\n", "\r"))

    assert rule.texts[0] == "\r\n"
    assert rule.match("a\r\nb", 1) == "\r\n"
    assert rule.match("a\rb", 1) == "\r"
    assert rule.match("ab", 1) is None


@pytest.mark.parametrize("texts", ["", (), ("ok", "")])
def test_literal_rejects_empty_texts(texts) -> None:
    with pytest.raises(GrammarError):
        Literal("bad", texts)


def test_section_validation_and_matching() -> None:
    """Sections need non-empty delimiters and report their end text."""
    comment = Section("comment", "/*", "*/")

    assert comment.end == ("*/",)
    assert comment.match("x /* y */", 2) == "/*"
    assert comment.match_end("y */", 2) == "*/"

    with pytest.raises(GrammarError):
        Section("bad", "", '"')
    with pytest.raises(GrammarError):
        Section("bad", '"', "")


def test_escape_must_be_single_character() -> None:
    assert Escape("\\").char == "\\"
    with pytest.raises(GrammarError):
        Escape("\\\\")


def test_grammar_error_is_value_error() -> None:
    """Invalid rule arguments surface as ValueError to generic callers."""
    with pytest.raises(ValueError):
        Literal("bad", "")


def test_rules_are_immutable() -> None:
    rule = Literal("eq", "=")
    with pytest.raises(AttributeError):
        rule.kind = "other"  # type: ignore[misc]
