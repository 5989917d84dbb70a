"""Heading types -- the parsed record, stats cookies and title metadata."""

from __future__ import annotations

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class Percentage:
    value: int

    def to_dict(self) -> dict:
        return {"kind": "percentage", "value": self.value}


@dataclass(frozen=True)
class Ratio:
    done: int
    total: int

    def to_dict(self) -> dict:
        return {"kind": "ratio", "done": self.done, "total": self.total}


Stat = Percentage | Ratio


def stat_from_dict(d: dict) -> Stat:
    """Rebuild a stats cookie from its ``to_dict`` form."""
    kind = d.get("kind")
    if kind == "percentage":
        return Percentage(d["value"])
    if kind == "ratio":
        return Ratio(d["done"], d["total"])
    raise ValueError(f"Unknown stats kind: '{kind}'")


@dataclass(frozen=True)
class TitleMeta:
    """Pieces of the title region before they are merged into one title."""

    start: str | None = None
    stats: Stat | None = None
    tags: tuple[str, ...] = ()
    leftover: str | None = None


@dataclass(frozen=True)
class Heading:
    """One parsed outline heading line.

    ``tags`` is deduplicated and sorted, so two lines listing the same tags in
    a different order compare equal. ``timestamp`` is reserved for the node
    layer and is always ``None`` here.
    """

    depth: int
    keyword: str | None = None
    priority: str | None = None
    title: str | None = None
    timestamp: str | None = None
    stats: Stat | None = None
    tags: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        d: dict = {
            "depth": self.depth,
            "keyword": self.keyword,
            "priority": self.priority,
            "title": self.title,
            "timestamp": self.timestamp,
            "stats": self.stats.to_dict() if self.stats is not None else None,
            "tags": list(self.tags),
        }
        return d

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls, d: dict) -> Heading:
        stats = d.get("stats")
        return cls(
            depth=d["depth"],
            keyword=d.get("keyword"),
            priority=d.get("priority"),
            title=d.get("title"),
            timestamp=d.get("timestamp"),
            stats=stat_from_dict(stats) if stats is not None else None,
            tags=tuple(sorted(set(d.get("tags", [])))),
        )

    @classmethod
    def from_json(cls, s: str) -> Heading:
        return cls.from_dict(json.loads(s))
