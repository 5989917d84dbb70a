"""orgline -- parse Org-mode outline heading lines into Heading records."""

from .headline import (
    Heading,
    HeadingError,
    OrgContext,
    OrgNode,
    Percentage,
    Ratio,
    StructuralError,
    parse_heading,
    parse_context,
)

# Module-level default context (created lazily)
_default_context: OrgContext = None


def get_context() -> OrgContext:
    """Return the context used by ``parse``."""
    global _default_context
    if _default_context is None:
        _default_context = OrgContext.default()
    return _default_context


def configure(context: OrgContext) -> OrgContext:
    """Replace the context used by ``parse``."""
    global _default_context
    _default_context = context
    return _default_context


def parse(line):
    """Parse a heading line with the module-level context."""
    return parse_heading(line, get_context())


__all__ = [
    'Heading', 'OrgContext', 'OrgNode',
    'Percentage', 'Ratio',
    'HeadingError', 'StructuralError',
    'parse', 'configure', 'get_context',
    'parse_heading', 'parse_context',
]
