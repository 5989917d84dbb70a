"""Heading line parser.

Grammar::

    heading := MARKER+ WS (keyword WS)? (priority WS)? title_meta

Only a missing depth marker (or missing separator after the markers) fails
the parse. Keyword, priority and the title region degrade to absent fields.
"""

from __future__ import annotations

import logging

from .context import OrgContext
from .errors import HeadingError, StructuralError
from .markers import scan_depth, scan_keyword, scan_priority, skip_separators
from .title import merge_title, scan_title_meta
from .types import Heading

logger = logging.getLogger(__name__)

# A line ending right after the markers does not make a heading.
MARKER_SEPARATORS = " \t"


def parse_heading(line: str | bytes, context: OrgContext | None = None) -> Heading:
    """Parse one heading line into a Heading.

    Raises StructuralError if the line does not start with ``*`` markers
    followed by whitespace.
    """
    if context is None:
        context = OrgContext.default()
    text = _as_text(line)

    depth, rest = scan_depth(text)
    if not rest or rest[0] not in MARKER_SEPARATORS:
        raise StructuralError("Heading markers must be followed by whitespace")
    rest = skip_separators(rest)

    keyword, rest = scan_keyword(rest, context.keywords)
    rest = skip_separators(rest)

    priority = None
    try:
        priority, rest = scan_priority(rest)
        rest = skip_separators(rest)
    except HeadingError as exc:
        if rest.startswith("[#"):
            logger.debug("Priority cookie rejected: %s", exc)

    meta, _ = scan_title_meta(rest)

    return Heading(
        depth=depth,
        keyword=keyword,
        priority=priority,
        title=merge_title(meta.start, meta.leftover),
        timestamp=None,
        stats=meta.stats,
        tags=meta.tags,
    )


def try_parse_heading(line: str | bytes, context: OrgContext | None = None) -> Heading | None:
    """Parse a heading, returning None for lines that are not headings."""
    try:
        return parse_heading(line, context)
    except StructuralError:
        return None


def is_heading(line: str | bytes) -> bool:
    return try_parse_heading(line) is not None


def _as_text(line: str | bytes) -> str:
    if isinstance(line, bytes):
        # Bad bytes become lone surrogates and fail only the region holding them.
        return line.decode("utf-8", errors="surrogateescape")
    return line
