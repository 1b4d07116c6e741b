"""Configuration schema definitions using Pydantic for validation.

This module provides strongly-typed settings for the parsers built on
the tokenizer. Using Pydantic ensures configuration errors (for example
a multi-character quote or a separator that collides with the escape
character) are caught before any grammar is built.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


def _single_char(value: str, name: str) -> str:
    if len(value) != 1:
        raise ValueError(f"{name} must be exactly one character, got {value!r}")
    return value


class RowParserConfig(BaseModel):
    """Settings for the delimited-row parser.

    Attributes:
        separator: Field separator text.
        quote: Character opening and closing a quoted field.
        escape: Escape character inside quoted fields (None disables escaping).
    """

    separator: str = ","
    quote: str = '"'
    escape: Optional[str] = "\\"

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Separators must be non-empty and never contain line breaks."""
        if not v:
            raise ValueError("separator must not be empty")
        if "\r" in v or "\n" in v:
            raise ValueError("separator must not contain line breaks")
        return v

    @field_validator("quote")
    @classmethod
    def validate_quote(cls, v: str) -> str:
        return _single_char(v, "quote")

    @field_validator("escape")
    @classmethod
    def validate_escape(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _single_char(v, "escape")

    @model_validator(mode="after")
    def check_distinct(self) -> "RowParserConfig":
        """Separator, quote and escape must not overlap."""
        specials = [self.separator, self.quote] + ([self.escape] if self.escape else [])
        if len(set(specials)) != len(specials):
            raise ValueError("separator, quote and escape must all differ")
        if self.quote in self.separator:
            raise ValueError("separator must not contain the quote character")
        return self


class ConfigStringConfig(BaseModel):
    """Settings for the ``key=value`` config-string parser.

    Attributes:
        separator: Text separating entries.
        allow_spaces_in_keys: Accept keys made of several words, such as
            ``Data Source`` in connection strings.
    """

    separator: str = ";"
    allow_spaces_in_keys: bool = False

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Separators must be non-empty and distinct from ``=`` and quotes."""
        if not v:
            raise ValueError("separator must not be empty")
        if "=" in v or '"' in v or "\\" in v:
            raise ValueError(f"separator {v!r} collides with '=', '\"' or '\\\\'")
        return v


class TokenParseConfig(BaseModel):
    """Top-level settings object, as loaded by the CLI.

    Attributes:
        rows: Row parser settings.
        config_string: Config-string parser settings.
    """

    rows: RowParserConfig = Field(default_factory=RowParserConfig)
    config_string: ConfigStringConfig = Field(default_factory=ConfigStringConfig)

    model_config = {"extra": "forbid"}

    @classmethod
    def default(cls) -> "TokenParseConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenParseConfig":
        """Build settings from a parsed mapping (TOML/JSON).

        Args:
            data: Mapping with optional ``rows`` and ``config_string`` tables.

        Returns:
            Validated TokenParseConfig.

        Raises:
            pydantic.ValidationError: The mapping contains invalid settings.
        """
        return cls.model_validate(data)
