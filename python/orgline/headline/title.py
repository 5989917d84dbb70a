"""Title region parsing.

The text after the priority cookie may hold, in this order and each
optional: a leading title fragment, a stats cookie, a tag list, and trailing
leftover text. Each step is tried on its own; a failed step consumes nothing
and its text ends up in the leftover fragment instead.
"""

from __future__ import annotations

import logging

from .cookies import scan_stats, scan_tag_list
from .errors import EncodingError, HeadingError
from .markers import SEPARATORS, skip_separators
from .types import TitleMeta

logger = logging.getLogger(__name__)

TITLE_STOP_CHARS = "\n:["


def check_text(region: str) -> str:
    """Reject regions holding bytes that were not valid UTF-8.

    Byte input is decoded with ``surrogateescape``, so bad bytes show up as
    lone surrogates U+DC80..U+DCFF.
    """
    for ch in region:
        if "\udc80" <= ch <= "\udcff":
            raise EncodingError(f"Invalid UTF-8 byte 0x{ord(ch) - 0xDC00:02x} in heading text")
    return region


def _title_start_end(text: str) -> int:
    end = 0
    while end < len(text) and text[end] not in TITLE_STOP_CHARS:
        end += 1
    return end


def scan_title_start(text: str) -> tuple[str | None, str]:
    end = _title_start_end(text)
    if end == 0:
        return None, text
    return check_text(text[:end]), text[end:]


def scan_leftover(text: str) -> tuple[str | None, str]:
    end = text.find("\n")
    if end < 0:
        end = len(text)
    if end == 0:
        return None, text
    return check_text(text[:end]), text[end:]


def merge_title(start: str | None, leftover: str | None) -> str | None:
    """Join the title fragments.

    No separator is inserted; spacing inside the title is kept as written and
    only outer spaces, tabs and line endings are stripped.
    """
    title = (start or "") + (leftover or "")
    title = title.strip(SEPARATORS + "\n")
    return title or None


def scan_title_meta(text: str) -> tuple[TitleMeta, str]:
    """Split the title region into its fragments, cookies and tags."""
    try:
        start, rest = scan_title_start(text)
    except EncodingError as exc:
        logger.debug("Title start rejected: %s", exc)
        start, rest = None, text[_title_start_end(text):]
    rest = skip_separators(rest)

    stats = None
    try:
        stats, rest = scan_stats(rest)
        rest = skip_separators(rest)
    except HeadingError as exc:
        logger.debug("No stats cookie at %r: %s", rest[:16], exc)

    tags: tuple[str, ...] = ()
    try:
        tags, rest = scan_tag_list(rest)
        rest = skip_separators(rest)
    except HeadingError as exc:
        logger.debug("No tag list at %r: %s", rest[:16], exc)

    try:
        leftover, rest = scan_leftover(rest)
    except EncodingError as exc:
        logger.debug("Leftover title text rejected: %s", exc)
        leftover = None
        end = rest.find("\n")
        rest = rest[end:] if end >= 0 else ""

    return TitleMeta(start=start, stats=stats, tags=tags, leftover=leftover), rest
