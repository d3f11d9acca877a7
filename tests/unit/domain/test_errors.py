from __future__ import annotations

"""
Unit tests for Domain Error Types.

Verifies position reporting and message rendering of ParseError.
"""

from shelltree.domain.errors import ParseError, StructuralInvariantError


def test_parse_error_reports_line_and_column():
    text = "$ cd /\n$ ls\nbogus line\n"
    pos = text.index("bogus")

    err = ParseError(text, pos, "'dir <name>' or '<size> <name>'")

    assert err.position == pos
    assert err.line == 3
    assert err.column == 1
    assert err.fragment == "bogus line"
    assert str(err) == (
        "line 3, column 1: expected 'dir <name>' or '<size> <name>', found 'bogus line'"
    )


def test_parse_error_at_end_of_input():
    err = ParseError("abc", 3, "'$ cd <name>'")
    assert err.fragment == ""
    assert "found end of input" in str(err)


def test_parse_error_fragment_is_clipped_to_line():
    err = ParseError("12 name\r\nnext", 3, "x")
    assert err.fragment == "name"
    assert err.column == 4


def test_error_hierarchy():
    assert issubclass(ParseError, ValueError)
    assert issubclass(StructuralInvariantError, RuntimeError)
