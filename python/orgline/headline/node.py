"""OrgNode -- a parsed Heading plus the document-level data attached to it.

Planning timestamps, properties and the section body are filled in by the
document layer; this module only defines the shape it fills.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .types import Heading, Stat


class OrgElement(Enum):
    BLOCK = "block"
    DRAWER = "drawer"
    PLAIN_LIST = "plain-list"
    FOOTNOTE = "footnote"
    TABLE = "table"
    INLINE_TASK = "inline-task"


@dataclass(frozen=True)
class OrgSection:
    contents: tuple[OrgElement, ...] = ()


@dataclass(frozen=True)
class OrgNode:
    """Wraps a Heading without copying or changing it."""

    heading: Heading
    scheduled: str | None = None
    deadline: str | None = None
    closed: str | None = None
    properties: dict[str, str] = field(default_factory=dict, hash=False)
    body: OrgSection | None = None

    @classmethod
    def from_heading(cls, heading: Heading, **fields) -> OrgNode:
        return cls(heading=heading, **fields)

    @property
    def depth(self) -> int:
        return self.heading.depth

    @property
    def keyword(self) -> str | None:
        return self.heading.keyword

    @property
    def priority(self) -> str | None:
        return self.heading.priority

    @property
    def title(self) -> str | None:
        return self.heading.title

    @property
    def stats(self) -> Stat | None:
        return self.heading.stats

    @property
    def tags(self) -> tuple[str, ...]:
        return self.heading.tags
