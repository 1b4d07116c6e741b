"""Main CLI entry point for tokenparse.

Provides commands: rows, config, tokens
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from tokenparse.cli.config import config_command
from tokenparse.cli.rows import rows_command, tokens_command

logger = logging.getLogger("tokenparse.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tokenparse",
        description="Tokenparse - delimited rows and key=value config strings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional parser settings. Can be a path to a TOML/JSON file "
            "or an inline TOML/JSON string. When omitted, built-in defaults "
            "are used."
        ),
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    rows_parser = subparsers.add_parser(
        "rows",
        help="Parse delimited rows from a file or stdin",
    )
    rows_parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Input file (default: stdin)",
    )
    rows_parser.add_argument(
        "-s",
        "--separator",
        help="Field separator (default: ',')",
    )
    rows_parser.add_argument(
        "--json",
        action="store_true",
        help="Print rows as a JSON array instead of a table",
    )

    config_parser = subparsers.add_parser(
        "config",
        help="Parse a key=value config string",
    )
    config_parser.add_argument("text", help="Config string, e.g. 'a=1;b=\"x y\"'")
    config_parser.add_argument(
        "-s",
        "--separator",
        help="Entry separator (default: ';')",
    )
    config_parser.add_argument(
        "--allow-spaces",
        action="store_true",
        help="Accept keys containing spaces (e.g. 'Data Source=...')",
    )

    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Show the token stream the row grammar produces for TEXT",
    )
    tokens_parser.add_argument("text", help="Text to tokenize")
    tokens_parser.add_argument(
        "-s",
        "--separator",
        help="Field separator (default: ',')",
    )
    tokens_parser.add_argument(
        "--json",
        action="store_true",
        help="Print tokens as JSON",
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)
    logger.debug("Running command: %s", args.command)

    if args.command == "rows":
        return rows_command(args)
    if args.command == "config":
        return config_command(args)
    if args.command == "tokens":
        return tokens_command(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
