"""Rows and tokens command implementations."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from tokenparse.config.loader import load_config
from tokenparse.config.schema import RowParserConfig
from tokenparse.parsers.rows import RowParser
from tokenparse.tokenizer.errors import TokenParseError
from tokenparse.tokenizer.tokens import kind_name

logger = logging.getLogger("tokenparse.cli.rows")


def _read_source(path_arg) -> str:
    if not path_arg or path_arg == "-":
        return sys.stdin.read()
    return Path(path_arg).read_text(encoding="utf-8")


def _row_parser(args) -> RowParser:
    settings = load_config(getattr(args, "config", None)).rows
    overrides = {}
    if getattr(args, "separator", None):
        overrides["separator"] = args.separator
    if overrides:
        settings = RowParserConfig(**{**settings.model_dump(), **overrides})
    return RowParser(settings)


def rows_command(args) -> int:
    """Execute rows command.

    Args:
        args: Parsed command-line arguments containing:
            - source: Input file path ("-" or omitted for stdin)
            - separator: Field separator override (optional)
            - json: Emit JSON instead of a table

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        parser = _row_parser(args)
        text = _read_source(getattr(args, "source", None))
        rows = parser.parse_rows(text)
    except (OSError, ValueError, TokenParseError) as err:
        logger.error("Row parsing failed: %s", err)
        return 1

    logger.info("Parsed %d rows", len(rows))

    if getattr(args, "json", False):
        print(json.dumps(rows, ensure_ascii=False))
        return 0

    width = max((len(row) for row in rows), default=0)
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    for i in range(width):
        table.add_column(str(i + 1))
    for number, row in enumerate(rows, start=1):
        table.add_row(str(number), *(row + [""] * (width - len(row))))
    Console().print(table)
    return 0


def tokens_command(args) -> int:
    """Execute tokens command: dump the row grammar's token stream."""
    try:
        parser = _row_parser(args)
        tokens = parser.tokenize(args.text)
    except (ValueError, TokenParseError) as err:
        logger.error("Tokenizing failed: %s", err)
        return 1

    if getattr(args, "json", False):
        print(
            json.dumps(
                [
                    {
                        "kind": kind_name(token.kind),
                        "text": token.text,
                        "raw": token.raw,
                        "line": token.line,
                        "column": token.column,
                    }
                    for token in tokens
                ],
                ensure_ascii=False,
            )
        )
        return 0

    table = Table(show_header=True, header_style="bold")
    table.add_column("Position", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Text")
    table.add_column("Raw", style="dim")
    for token in tokens:
        table.add_row(
            f"{token.line}:{token.column}",
            kind_name(token.kind),
            repr(token.text),
            repr(token.raw),
        )
    Console().print(table)
    return 0
