"""
Error taxonomy.

Document model errors, per-feed validation errors, and the fatal errors
that abort a cleaning run.
"""


class OPMLCleanerError(Exception):
    """Base class for all opml-cleaner errors."""


class OPMLParseError(OPMLCleanerError):
    """Raised when an OPML document cannot be parsed."""


class OPMLSerializeError(OPMLCleanerError):
    """Raised when an OPML document cannot be rendered to XML."""


class FeedValidationError(OPMLCleanerError):
    """Raised when a feed URL fails validation. Recovered per entry."""

    def __init__(self, url: str, message: str):
        super().__init__(f'"{url}": {message}')
        self.url = url


class FeedFetchError(FeedValidationError):
    """Network-level failure while fetching a feed."""


class FeedStatusError(FeedValidationError):
    """Feed responded with a status code other than 200."""

    def __init__(self, url: str, status_code: int):
        super().__init__(url, f"status {status_code}")
        self.status_code = status_code


class FeedParseError(FeedValidationError):
    """Feed body is not a parseable RSS/Atom document."""


class FatalInputError(OPMLCleanerError):
    """Input document is unreadable or invalid. Aborts the run."""


class FatalOutputError(OPMLCleanerError):
    """Output document could not be serialized. Aborts the run."""
