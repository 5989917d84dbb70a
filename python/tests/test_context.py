"""Tests for orgline.headline.context -- OrgContext and YAML loading."""

from orgline.headline.context import OrgContext, parse_context
from orgline.headline.types import Heading


def test_default_keywords():
    ctx = OrgContext.default()
    assert ctx.keywords == frozenset({"TODO", "DONE"})
    assert ctx.inlinetask_min_level == 15


def test_with_keywords_returns_new_context():
    base = OrgContext.default()
    extended = base.with_keywords("NEXT")
    assert "NEXT" in extended.keywords
    assert "TODO" in extended.keywords
    assert "NEXT" not in base.keywords


def test_is_inline_task():
    ctx = OrgContext(inlinetask_min_level=3)
    assert not ctx.is_inline_task(Heading(depth=2))
    assert ctx.is_inline_task(Heading(depth=3))


def test_parse_context_keyword_list():
    ctx = parse_context("org-keywords: [NEXT, WAITING]\n")
    assert ctx is not None
    assert ctx.keywords == frozenset({"TODO", "DONE", "NEXT", "WAITING"})


def test_parse_context_keyword_string():
    ctx = parse_context("org-keywords: NEXT WAITING\n")
    assert ctx.keywords == frozenset({"TODO", "DONE", "NEXT", "WAITING"})


def test_parse_context_inlinetask_level():
    ctx = parse_context("org-inlinetask-min-level: 4\n")
    assert ctx.inlinetask_min_level == 4
    assert ctx.keywords == frozenset({"TODO", "DONE"})


def test_parse_context_ignores_bad_level():
    ctx = parse_context("org-keywords: [NEXT]\norg-inlinetask-min-level: nope\n")
    assert ctx.inlinetask_min_level == 15
    assert "NEXT" in ctx.keywords


def test_parse_context_without_org_keys_returns_none():
    assert parse_context("title: Notes\n") is None


def test_parse_context_invalid_yaml_returns_none():
    assert parse_context("org-keywords: [unclosed\n") is None


def test_parse_context_non_mapping_returns_none():
    assert parse_context("- just\n- a list\n") is None


def test_parse_context_ignores_bad_keywords():
    assert parse_context("org-keywords: 5\n") == OrgContext.default()
    assert parse_context("org-keywords: true\n") == OrgContext.default()
    ctx = parse_context("org-keywords: {a: b}\norg-inlinetask-min-level: 4\n")
    assert ctx.keywords == frozenset({"TODO", "DONE"})
    assert ctx.inlinetask_min_level == 4
