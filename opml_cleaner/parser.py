"""
Feed body check.

Runs a fetched body through feedparser and rejects anything that is not
an RSS or Atom feed.
"""

import io

import feedparser
from feedparser import FeedParserDict

from .exceptions import FeedParseError


class ParsedFeed:
    """Handle for a body that parsed as a feed; only a few fields are kept."""

    def __init__(self, data: FeedParserDict):
        feed_info = data.get("feed", {})
        self.format = data.get("version", "")
        self.title = feed_info.get("title", "")
        self.site_url = feed_info.get("link", "")
        self.entry_count = len(data.get("entries", []))


async def parse_feed(content: bytes, url: str) -> ParsedFeed:
    """
    Check that a fetched body is an RSS/Atom feed.

    The body is handed to feedparser as a stream so it is never taken for
    a file name or URL.

    Args:
        content: Response body.
        url: Feed URL (used in error messages).

    Returns:
        Parsed feed handle.

    Raises:
        FeedParseError: If feedparser finds no feed format, or flags the body
            as malformed and finds no entries.
    """
    data = feedparser.parse(io.BytesIO(content))

    if data.get("bozo", False) and not data.get("entries"):
        raise FeedParseError(
            url, f"Failed to parse feed: {data.get('bozo_exception', 'Unknown error')}"
        )

    if not data.get("version"):
        raise FeedParseError(url, "Failed to parse feed: unknown feed format")

    return ParsedFeed(data)
