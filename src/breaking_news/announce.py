"""Announce summarizable records on standard output."""

from typing import TextIO

import structlog

from .records import ShortPost, Summary

log = structlog.get_logger()

ANNOUNCE_PREFIX = "Breaking news! "


def announce(item: Summary, file: TextIO | None = None) -> None:
    """Print a breaking-news line for any summarizable record.

    The record is only read, never modified.

    Args:
        item: Any object implementing the Summary protocol.
        file: Stream to write to. Defaults to sys.stdout.

    Raises:
        OSError: If the stream cannot be written to.
        ValueError: If the stream is already closed.
    """
    summary = item.summarize()
    print(f"{ANNOUNCE_PREFIX}{summary}", file=file)
    log.debug("announced", record_type=type(item).__name__)


def make_summarizable() -> Summary:
    """Build a record that callers can only use through Summary.

    Returns:
        A summarizable record with fixed contents.
    """
    return ShortPost(
        author="horse_ebooks",
        content="of course, as your probably already know, people",
        is_reply=False,
        is_retweet=False,
    )
