"""orgline.headline -- Org-mode heading line grammar and record types."""

from .context import OrgContext, parse_context
from .cookies import scan_stats, scan_tag_list
from .errors import (
    CookieShapeError,
    EncodingError,
    HeadingError,
    NumericOverflowError,
    StructuralError,
)
from .markers import scan_depth, scan_keyword, scan_priority
from .node import OrgElement, OrgNode, OrgSection
from .parser import is_heading, parse_heading, try_parse_heading
from .title import merge_title, scan_title_meta
from .types import Heading, Percentage, Ratio, Stat, TitleMeta, stat_from_dict

__all__ = [
    "Heading",
    "Percentage",
    "Ratio",
    "Stat",
    "TitleMeta",
    "stat_from_dict",
    "OrgContext",
    "parse_context",
    "HeadingError",
    "StructuralError",
    "NumericOverflowError",
    "EncodingError",
    "CookieShapeError",
    "scan_depth",
    "scan_keyword",
    "scan_priority",
    "scan_stats",
    "scan_tag_list",
    "scan_title_meta",
    "merge_title",
    "parse_heading",
    "try_parse_heading",
    "is_heading",
    "OrgElement",
    "OrgNode",
    "OrgSection",
]
