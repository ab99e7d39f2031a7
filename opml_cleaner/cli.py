"""
Command-line entry point.

Usage: opml-cleaner [INPUT] [-o OUTPUT] [--timeout SECONDS] [--title TITLE]
"""

import argparse
import asyncio
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from . import __version__
from .cleaner import run
from .config import CleanerSettings
from .exceptions import FatalInputError, FatalOutputError
from .logging_config import get_logger, init_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Unset flags stay None so settings keep their value."""
    parser = argparse.ArgumentParser(
        prog="opml-cleaner",
        description="Drop dead or broken feeds from an OPML subscription list.",
    )
    parser.add_argument(
        "input_path", nargs="?", help="OPML file to clean (default: rss-export.opml)"
    )
    parser.add_argument("-o", "--output", dest="output_path", help="write to file instead of stdout")
    parser.add_argument("--timeout", type=float, help="per-request timeout in seconds")
    parser.add_argument("--title", help="title of the cleaned document")
    parser.add_argument("--log-level", dest="log_level", help="logging level (default: INFO)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_settings(args: argparse.Namespace) -> CleanerSettings:
    """Merge command-line flags over environment settings."""
    overrides: dict[str, Any] = {
        key: value for key, value in vars(args).items() if value is not None
    }
    return CleanerSettings(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the cleaner from the command line.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv.

    Returns:
        Exit status: 0 on success, 1 on a fatal input or output error,
        2 on invalid configuration.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)
    except ValidationError as e:
        init_logging()
        logger.error(f"Invalid configuration: {e}")
        return 2

    init_logging(settings.log_level)

    try:
        asyncio.run(run(settings))
    except (FatalInputError, FatalOutputError) as e:
        logger.error(str(e))
        return 1

    return 0
