"""Config-string command implementation."""

from __future__ import annotations

import json
import logging

from tokenparse.config.loader import load_config
from tokenparse.parsers.config_string import ConfigStringParser
from tokenparse.tokenizer.errors import TokenParseError

logger = logging.getLogger("tokenparse.cli.config")


def config_command(args) -> int:
    """Execute config command.

    Args:
        args: Parsed command-line arguments containing:
            - text: The config string to parse
            - separator: Entry separator override (optional)
            - allow_spaces: Accept multi-word keys

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        settings = load_config(getattr(args, "config", None)).config_string
        parser = ConfigStringParser(
            separator=getattr(args, "separator", None) or settings.separator,
            allow_spaces_in_keys=getattr(args, "allow_spaces", False)
            or settings.allow_spaces_in_keys,
        )
        result = parser.parse(args.text)
    except (ValueError, TokenParseError) as err:
        logger.error("Config string parsing failed: %s", err)
        return 1

    logger.info("Parsed %d entries", len(result))
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0
