"""
Logging configuration.

Line-oriented progress logging to stderr; stdout carries the OPML output.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def init_logging(level: str | int = "INFO") -> None:
    """
    Configure the opml_cleaner logger hierarchy.

    Calling it again replaces the previous handler, so the current
    sys.stderr is always the target.

    Args:
        level: Logging level name or number.
    """
    global _handler

    root = logging.getLogger("opml_cleaner")
    root.setLevel(level.upper() if isinstance(level, str) else level)

    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
