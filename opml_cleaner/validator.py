"""
Feed validation.

Fetches a feed URL and checks that it answers 200 OK with a parseable feed.
"""

import httpx

from . import __version__
from .exceptions import FeedFetchError, FeedStatusError
from .parser import ParsedFeed, parse_feed

USER_AGENT = f"opml-cleaner/{__version__}"


def create_client(
    timeout: float | None = None, user_agent: str = USER_AGENT
) -> httpx.AsyncClient:
    """
    Create the HTTP client shared by all feed validations in a run.

    Args:
        timeout: Per-request timeout in seconds. None keeps the httpx default.
        user_agent: User-Agent header sent with every request.

    Returns:
        Configured async HTTP client. The caller owns and closes it.
    """
    kwargs = {}
    if timeout is not None:
        kwargs["timeout"] = timeout
    return httpx.AsyncClient(
        follow_redirects=True, headers={"User-Agent": user_agent}, **kwargs
    )


async def validate_feed(url: str, client: httpx.AsyncClient) -> ParsedFeed:
    """
    Fetch a feed and parse it to check that it is alive and well-formed.

    The response is released before returning or raising.

    Args:
        url: Feed URL. Must not be empty.
        client: HTTP client used for the request.

    Returns:
        Parsed feed.

    Raises:
        FeedFetchError: If the URL is invalid or the request fails at the
            transport level.
        FeedStatusError: If the final status code is not 200.
        FeedParseError: If the body is not a valid feed.
    """
    try:
        async with client.stream("GET", url) as response:
            # if status is not 200 the feed doesn't exist
            if response.status_code != 200:
                raise FeedStatusError(url, response.status_code)
            content = await response.aread()
    except httpx.HTTPError as e:
        raise FeedFetchError(url, f"Failed to fetch feed: {e}") from e
    except (httpx.InvalidURL, ValueError) as e:
        # malformed hosts (e.g. bad punycode) fail while the request URL is built
        raise FeedFetchError(url, f"Invalid feed URL: {e}") from e

    return await parse_feed(content, url)
