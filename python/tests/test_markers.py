"""Tests for orgline.headline.markers -- depth, keyword and priority scanners."""

import pytest

from orgline.headline.errors import CookieShapeError, StructuralError
from orgline.headline.markers import scan_depth, scan_keyword, scan_priority, skip_separators


# --- depth ---

def test_scan_depth():
    assert scan_depth("***** TODO [#A] Heading") == (5, " TODO [#A] Heading")


def test_scan_depth_single_marker():
    assert scan_depth("* x") == (1, " x")


def test_scan_depth_without_markers_fails():
    with pytest.raises(StructuralError):
        scan_depth("TODO no stars")


def test_scan_depth_empty_input_fails():
    with pytest.raises(StructuralError):
        scan_depth("")


# --- keyword ---

def test_scan_keyword_todo():
    assert scan_keyword("TODO [#A] Heading", {"TODO", "DONE"}) == ("TODO", " [#A] Heading")


def test_scan_keyword_no_match_consumes_nothing():
    assert scan_keyword("Heading only", {"TODO", "DONE"}) == (None, "Heading only")


def test_scan_keyword_requires_word_boundary():
    assert scan_keyword("TODOS are fun", {"TODO"}) == (None, "TODOS are fun")


def test_scan_keyword_at_end_of_line():
    assert scan_keyword("DONE\n", {"TODO", "DONE"}) == ("DONE", "\n")
    assert scan_keyword("DONE", {"TODO", "DONE"}) == ("DONE", "")


def test_scan_keyword_custom_set():
    keywords = {"TODO", "DONE", "WAIT", "WAITING"}
    assert scan_keyword("WAITING on review", keywords) == ("WAITING", " on review")
    assert scan_keyword("WAIT here", keywords) == ("WAIT", " here")


def test_scan_keyword_is_case_sensitive():
    assert scan_keyword("todo lower", {"TODO"}) == (None, "todo lower")


# --- priority ---

def test_scan_priority():
    assert scan_priority("[#A] Heading") == ("A", " Heading")


def test_scan_priority_lowercase_letter():
    assert scan_priority("[#c] x") == ("c", " x")


@pytest.mark.parametrize("text", [
    "[#AB] text",
    "[#] text",
    "[#1] text",
    "[A] text",
    "(#A) text",
    "[#A text",
    "[#A]text",
])
def test_scan_priority_rejects_malformed_cookie(text):
    with pytest.raises(CookieShapeError):
        scan_priority(text)


def test_skip_separators_stops_at_newline():
    assert skip_separators(" \t \nnext") == "\nnext"
