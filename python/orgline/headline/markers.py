"""Leading heading markers: depth stars, keyword and priority cookie.

Each scanner takes the remaining line text and returns ``(value, rest)``.
"""

from __future__ import annotations

from collections.abc import Iterable

from .errors import CookieShapeError, StructuralError

DEPTH_MARKER = "*"
SEPARATORS = " \t\r"


def skip_separators(text: str) -> str:
    """Drop separating whitespace, stopping at the end of the line."""
    return text.lstrip(SEPARATORS)


def at_boundary(text: str) -> bool:
    """Whether text starts with whitespace or is exhausted."""
    return not text or text[0] in SEPARATORS or text[0] == "\n"


def scan_depth(text: str) -> tuple[int, str]:
    """Count the leading run of ``*`` markers."""
    depth = 0
    for ch in text:
        if ch != DEPTH_MARKER:
            break
        depth += 1
    if depth == 0:
        raise StructuralError("Heading must start with at least one '*'")
    return depth, text[depth:]


def scan_keyword(text: str, keywords: Iterable[str]) -> tuple[str | None, str]:
    """Match a keyword at the start of text.

    The keyword must be followed by whitespace or the end of input. Returns
    ``(None, text)`` when nothing matches.
    """
    for keyword in sorted(keywords, key=len, reverse=True):
        if keyword and text.startswith(keyword) and at_boundary(text[len(keyword):]):
            return keyword, text[len(keyword):]
    return None, text


def scan_priority(text: str) -> tuple[str, str]:
    """Parse a ``[#A]`` priority cookie."""
    if not text.startswith("[#"):
        raise CookieShapeError("Priority cookie must start with '[#'")
    close = text.find("]", 2)
    if close < 0:
        raise CookieShapeError("Priority cookie is not closed")
    inner = text[2:close]
    if len(inner) != 1:
        raise CookieShapeError(f"Priority cookie needs exactly one letter, got '{inner}'")
    if not (inner.isascii() and inner.isalpha()):
        raise CookieShapeError(f"Priority must be a letter, got '{inner}'")
    rest = text[close + 1:]
    if not at_boundary(rest):
        raise CookieShapeError("Priority cookie must be followed by whitespace")
    return inner, rest
