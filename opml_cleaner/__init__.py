"""
OPML cleaner package.

Checks every feed in an OPML subscription list and writes a new OPML
document without the dead or broken ones.
"""

__version__ = "0.1.0"

from .cleaner import CleanResult, clean_opml, partition_outlines, read_opml, run, write_opml
from .config import CleanerSettings
from .logging_config import get_logger, init_logging
from .opml import OPMLDocument, OPMLHead, Outline, build_opml, parse_opml, serialize_opml
from .parser import ParsedFeed, parse_feed
from .validator import create_client, validate_feed

__all__ = [
    "CleanResult",
    "CleanerSettings",
    "OPMLDocument",
    "OPMLHead",
    "Outline",
    "ParsedFeed",
    "build_opml",
    "clean_opml",
    "create_client",
    "get_logger",
    "init_logging",
    "parse_feed",
    "parse_opml",
    "partition_outlines",
    "read_opml",
    "run",
    "serialize_opml",
    "validate_feed",
    "write_opml",
]
