"""Parsers built on the generic tokenizer.

- rows: delimited rows of fields (CSV-style, quoted, backslash-escaped)
- config_string: ``key=value`` entries separated by a configurable delimiter
"""

from tokenparse.parsers.config_string import ConfigStringParser, ConfigToken
from tokenparse.parsers.rows import RowParser, RowToken, guess_line_ending

__all__ = [
    "ConfigStringParser",
    "ConfigToken",
    "RowParser",
    "RowToken",
    "guess_line_ending",
]
