"""OrgContext -- the set of recognized keywords, passed explicitly to the parser.

A context can also be read from a YAML mapping carrying ``org-keywords`` and
``org-inlinetask-min-level`` keys.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import yaml

from .types import Heading

logger = logging.getLogger(__name__)

DEFAULT_KEYWORDS: frozenset[str] = frozenset({"TODO", "DONE"})
DEFAULT_INLINETASK_MIN_LEVEL = 15


@dataclass(frozen=True)
class OrgContext:
    """Processing context shared by every heading parsed from one document."""

    keywords: frozenset[str] = field(default=DEFAULT_KEYWORDS)
    inlinetask_min_level: int = DEFAULT_INLINETASK_MIN_LEVEL

    @staticmethod
    def default() -> OrgContext:
        return OrgContext()

    def with_keywords(self, *extra: str) -> OrgContext:
        """Return a copy that also recognizes ``extra`` keywords."""
        return OrgContext(
            keywords=self.keywords | frozenset(extra),
            inlinetask_min_level=self.inlinetask_min_level,
        )

    def is_inline_task(self, heading: Heading) -> bool:
        """Whether a heading is deep enough to be an inline task."""
        return heading.depth >= self.inlinetask_min_level


def parse_context(yaml_str: str) -> OrgContext | None:
    """Build an OrgContext from a YAML mapping.

    Returns None if the YAML is invalid or has none of the ``org-*`` keys.
    Keywords listed under ``org-keywords`` extend the default TODO/DONE pair.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        logger.debug("Ignoring invalid context YAML: %s", exc)
        return None

    if not isinstance(data, dict):
        return None

    raw_keywords = data.get("org-keywords")
    raw_level = data.get("org-inlinetask-min-level")
    if raw_keywords is None and raw_level is None:
        return None

    ctx = OrgContext.default()
    if raw_keywords is not None:
        if isinstance(raw_keywords, str):
            raw_keywords = raw_keywords.split()
        if isinstance(raw_keywords, list):
            keywords = [str(k).strip() for k in raw_keywords if str(k).strip()]
            ctx = ctx.with_keywords(*keywords)
        else:
            logger.debug("Ignoring org-keywords %r", raw_keywords)
    if raw_level is not None:
        try:
            level = int(raw_level)
        except (TypeError, ValueError):
            level = 0
        if level >= 1:
            ctx = OrgContext(keywords=ctx.keywords, inlinetask_min_level=level)
        else:
            logger.debug("Ignoring org-inlinetask-min-level %r", raw_level)
    return ctx
