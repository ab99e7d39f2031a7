"""
OPML cleaning pipeline.

Reads an OPML subscription list, validates every feed one at a time and
writes a new OPML document containing only the feeds that passed.
"""

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

import httpx

from .config import CleanerSettings
from .exceptions import (
    FatalInputError,
    FatalOutputError,
    FeedValidationError,
    OPMLParseError,
    OPMLSerializeError,
)
from .logging_config import get_logger
from .opml import DEFAULT_TITLE, OPMLDocument, Outline, build_opml, parse_opml, serialize_opml
from .validator import create_client, validate_feed

logger = get_logger(__name__)


class ProgressLogger(Protocol):
    """Sink for progress and diagnostic messages."""

    def info(self, msg: str) -> None: ...

    def error(self, msg: str) -> None: ...


@dataclass
class CleanResult:
    """Outcome of validating the outlines of one document."""

    succeeded: list[Outline] = field(default_factory=list)
    failed: list[tuple[Outline, FeedValidationError]] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def failure_count(self) -> int:
        return len(self.failed)


def read_opml(path: Path, log: ProgressLogger = logger) -> OPMLDocument:
    """
    Read and parse the input OPML file.

    Args:
        path: OPML file path.
        log: Progress logger.

    Returns:
        Parsed OPML document.

    Raises:
        FatalInputError: If the file cannot be read or parsed.
    """
    log.info(f"reading {path}")
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise FatalInputError(f"Cannot read {path}: {e}") from e

    try:
        return parse_opml(data)
    except OPMLParseError as e:
        raise FatalInputError(f"Cannot parse {path}: {e}") from e


async def partition_outlines(
    outlines: Sequence[Outline],
    client: httpx.AsyncClient,
    log: ProgressLogger = logger,
) -> CleanResult:
    """
    Validate outlines in order and split them into succeeded and failed.

    Outlines without a feed URL are skipped and land in neither group.

    Args:
        outlines: Outlines in document order.
        client: HTTP client used for feed requests.
        log: Progress logger.

    Returns:
        Validation result.
    """
    result = CleanResult()
    total = len(outlines)

    for i, outline in enumerate(outlines, start=1):
        log.info(f"[{i}/{total}] {outline.title}")

        # skip outline elements that are not feeds
        if not outline.xml_url:
            log.info(f"no xml url {outline.title}")
            continue

        try:
            await validate_feed(outline.xml_url, client)
        except FeedValidationError as e:
            log.error(str(e))
            result.failed.append((outline, e))
            continue

        result.succeeded.append(outline)

    log.info(f"success: {result.success_count} failed: {result.failure_count}")
    return result


async def clean_opml(
    document: OPMLDocument,
    client: httpx.AsyncClient,
    log: ProgressLogger = logger,
    title: str = DEFAULT_TITLE,
) -> tuple[CleanResult, bytes]:
    """
    Validate a document's feeds and render the cleaned document.

    The input document is left untouched; a new one is built from the
    outlines that passed.

    Args:
        document: Input OPML document.
        client: HTTP client used for feed requests.
        log: Progress logger.
        title: Title of the output document.

    Returns:
        Tuple of (validation result, serialized output OPML).

    Raises:
        FatalOutputError: If the output document cannot be serialized.
    """
    result = await partition_outlines(document.outlines, client, log)

    cleaned = build_opml(result.succeeded, title=title)
    try:
        output = serialize_opml(cleaned)
    except OPMLSerializeError as e:
        raise FatalOutputError(f"Cannot serialize output: {e}") from e

    return result, output


def write_opml(data: bytes, output_path: Path | None = None) -> None:
    """
    Write serialized OPML to a file, or to stdout when no path is given.

    Raises:
        FatalOutputError: If the output file cannot be written.
    """
    if output_path is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return

    try:
        Path(output_path).write_bytes(data)
    except OSError as e:
        raise FatalOutputError(f"Cannot write {output_path}: {e}") from e


async def run(settings: CleanerSettings, log: ProgressLogger = logger) -> CleanResult:
    """
    Run one cleaning pass from the configured input to the configured output.

    Args:
        settings: Run configuration.
        log: Progress logger.

    Returns:
        Validation result.

    Raises:
        FatalInputError: If the input cannot be read or parsed. Nothing is
            fetched or written.
        FatalOutputError: If the output cannot be serialized or written.
    """
    document = read_opml(settings.input_path, log)
    log.info(f"found {len(document.outlines)} entries")

    async with create_client(settings.timeout, settings.user_agent) as client:
        result, output = await clean_opml(document, client, log, title=settings.title)

    write_opml(output, settings.output_path)
    return result
