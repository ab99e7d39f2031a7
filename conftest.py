"""Global pytest fixtures for testing."""

from collections.abc import Callable

import httpx
import pytest

RSS_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example Blog</title>
    <link>https://blog.example.com/</link>
    <description>Posts from an example blog</description>
    <item>
      <title>Hello world</title>
      <link>https://blog.example.com/hello</link>
      <guid>https://blog.example.com/hello</guid>
      <pubDate>Mon, 05 Oct 2026 09:00:00 GMT</pubDate>
    </item>
  </channel>
</rss>
"""

ATOM_FEED = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Example Atom</title>
  <link href="https://atom.example.com/"/>
  <id>urn:uuid:60a76c80-d399-11d9-b93C-0003939e0af6</id>
  <updated>2026-10-05T09:00:00Z</updated>
  <entry>
    <title>First entry</title>
    <link href="https://atom.example.com/first"/>
    <id>urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6a</id>
    <updated>2026-10-05T09:00:00Z</updated>
  </entry>
</feed>
"""

HTML_PAGE = b"""<!DOCTYPE html>
<html><head><title>Not a feed</title></head><body><p>Hello</p></body></html>
"""


class RecordingLogger:
    """Progress logger that keeps messages in memory."""

    def __init__(self):
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, msg: str) -> None:
        self.infos.append(msg)

    def error(self, msg: str) -> None:
        self.errors.append(msg)


class FakeFeedServer:
    """
    In-memory HTTP backend for feed requests.

    Routes map a URL to a (status, body) pair or to an exception class
    raised as a transport error.
    """

    def __init__(self):
        self.routes: dict[str, tuple[int, bytes] | type[httpx.TransportError]] = {}
        self.requested: list[str] = []

    def add(self, url: str, status: int = 200, body: bytes = RSS_FEED) -> None:
        self.routes[url] = (status, body)

    def fail(self, url: str, error: type[httpx.TransportError] = httpx.ConnectError) -> None:
        self.routes[url] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        route = self.routes.get(url)
        if route is None:
            return httpx.Response(404, content=b"not found")
        if isinstance(route, tuple):
            status, body = route
            return httpx.Response(status, content=body)
        raise route("simulated failure", request=request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.MockTransport(self.handler), follow_redirects=True
        )


@pytest.fixture
def feed_server() -> FakeFeedServer:
    return FakeFeedServer()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def opml_file(tmp_path) -> Callable[[str], str]:
    """Write OPML body outlines into a full document on disk and return its path."""

    def _write(outlines: str, name: str = "rss-export.opml") -> str:
        path = tmp_path / name
        path.write_text(
            f"""<?xml version="1.0" encoding="UTF-8"?>
<opml version="1.0">
  <head>
    <title>Exported subscriptions</title>
    <dateCreated>Sat, 01 Feb 2025 08:00:00 GMT</dateCreated>
  </head>
  <body>
{outlines}
  </body>
</opml>
""",
            encoding="utf-8",
        )
        return str(path)

    return _write


@pytest.fixture
def patched_client(monkeypatch, feed_server) -> FakeFeedServer:
    """Route the clients created by a cleaning run through the fake feed server."""
    monkeypatch.setattr(
        "opml_cleaner.cleaner.create_client", lambda *args, **kwargs: feed_server.client()
    )
    return feed_server
