"""Heading parse errors.

Only ``StructuralError`` escapes ``parse_heading``. The others are raised by
the optional sub-grammars and recovered by their caller, which treats the
affected field as absent.
"""

from __future__ import annotations


class HeadingError(ValueError):
    """Base class for every heading grammar failure."""


class StructuralError(HeadingError):
    """The line is not a heading: no depth markers or no separator after them."""


class NumericOverflowError(HeadingError):
    """A stats cookie number does not fit in an unsigned byte."""

    def __init__(self, digits: str) -> None:
        super().__init__(f"Number too large for stats cookie: '{digits}'")
        self.digits = digits


class EncodingError(HeadingError):
    """A captured region holds bytes that are not valid UTF-8."""


class CookieShapeError(HeadingError):
    """A priority, stats, or tag cookie has the wrong delimiters or arity."""
