"""Stats cookies (``[3/4]``, ``[75%]``) and colon-delimited tag lists."""

from __future__ import annotations

from .errors import CookieShapeError, NumericOverflowError
from .types import Percentage, Ratio, Stat

DIGITS = "0123456789"
MAX_STAT_VALUE = 255


def scan_stats(text: str) -> tuple[Stat, str]:
    """Parse a percentage or ratio stats cookie.

    Percentage is tried first. A number above 255 raises
    NumericOverflowError; any other shape raises CookieShapeError.
    """
    try:
        return _scan_percentage(text)
    except CookieShapeError:
        return _scan_ratio(text)


def is_tag_char(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch == "_" or ch == "@"


def scan_tag_list(text: str) -> tuple[tuple[str, ...], str]:
    """Parse ``:tag:tag:`` into a sorted, deduplicated tuple.

    Empty tokens (``::``) are dropped. Scanning stops before a token that is
    not closed by ``:``, leaving it in the rest.
    """
    if not text.startswith(":"):
        raise CookieShapeError("Tag list must start with ':'")
    pos = 1
    tokens: list[str] = []
    closed = 0
    while True:
        end = pos
        while end < len(text) and is_tag_char(text[end]):
            end += 1
        if end >= len(text) or text[end] != ":":
            break
        tokens.append(text[pos:end])
        closed += 1
        pos = end + 1
    if closed == 0:
        raise CookieShapeError("Tag list has no closing ':'")
    return tuple(sorted({t for t in tokens if t})), text[pos:]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _scan_digits(text: str) -> tuple[int, str]:
    end = 0
    while end < len(text) and text[end] in DIGITS:
        end += 1
    if end == 0:
        raise CookieShapeError("Expected digits in stats cookie")
    digits = text[:end]
    significant = digits.lstrip("0")
    # Long runs are rejected before int() to avoid converting huge numbers.
    if len(significant) > len(str(MAX_STAT_VALUE)):
        raise NumericOverflowError(digits)
    value = int(digits)
    if value > MAX_STAT_VALUE:
        raise NumericOverflowError(digits)
    return value, text[end:]


def _expect(text: str, literal: str) -> str:
    if not text.startswith(literal):
        raise CookieShapeError(f"Expected '{literal}' in stats cookie")
    return text[len(literal):]


def _scan_percentage(text: str) -> tuple[Stat, str]:
    rest = _expect(text, "[")
    value, rest = _scan_digits(rest)
    rest = _expect(rest, "%]")
    return Percentage(value), rest


def _scan_ratio(text: str) -> tuple[Stat, str]:
    rest = _expect(text, "[")
    done, rest = _scan_digits(rest)
    rest = _expect(rest, "/")
    total, rest = _scan_digits(rest)
    rest = _expect(rest, "]")
    return Ratio(done, total), rest
