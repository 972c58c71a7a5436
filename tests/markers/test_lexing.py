# fmtmark:header:start
#
#   project      : FmtMark
#   file         : test_lexing.py
#   file_relpath : tests/markers/test_lexing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Unit tests for the comment and string literal skippers."""

from __future__ import annotations

from fmtmark.markers.cursor import Cursor
from fmtmark.markers.lexing import (
    SkipOutcome,
    skip_block_comment,
    skip_line_comment,
    skip_quote_char_literal,
    skip_string,
    try_skip_raw_string,
)
from tests.conftest import parametrize


def _cursor_after(source: str, opener: str) -> Cursor:
    """Return a cursor positioned just past ``opener`` at the start of ``source``."""
    assert source.startswith(opener)
    cursor = Cursor(source)
    cursor.pos = len(opener)
    return cursor


def test_line_comment_stops_after_line_feed() -> None:
    """A line comment ends just past its LF."""
    cursor = _cursor_after("// x _blank_!();\nnext", "//")

    assert skip_line_comment(cursor) is SkipOutcome.CLOSED
    assert cursor.source[cursor.pos :] == "next"


def test_line_comment_at_end_of_input() -> None:
    """A final comment without LF runs to the end."""
    cursor = _cursor_after("// tail", "//")

    assert skip_line_comment(cursor) is SkipOutcome.UNTERMINATED
    assert cursor.at_end


@parametrize(
    "source, rest",
    [
        ("/* a */b", "b"),
        ("/* /* nested */ still */b", "b"),
        ("/* /* /* deep */ */ */b", "b"),
        ("/*/ still open */b", "b"),
        ("/* a **/b", "b"),
        ("/**/b", "b"),
    ],
)
def test_block_comment_nesting(source: str, rest: str) -> None:
    """Block comments nest and close on the matching `*/`."""
    cursor = _cursor_after(source, "/*")

    assert skip_block_comment(cursor) is SkipOutcome.CLOSED
    assert cursor.source[cursor.pos :] == rest


def test_unterminated_nested_block_comment() -> None:
    """A nested comment missing its outer closer runs to the end."""
    cursor = _cursor_after("/* /* inner */ never closed", "/*")

    assert skip_block_comment(cursor) is SkipOutcome.UNTERMINATED
    assert cursor.at_end


@parametrize(
    "source, rest",
    [
        ('"plain"x', "x"),
        ('"esc \\" quote"x', "x"),
        ('"two \\\\"x', "x"),
        ('"three \\\\\\" still"x', "x"),
        ('"multi\nline"x', "x"),
        ('""x', "x"),
    ],
)
def test_string_escape_parity(source: str, rest: str) -> None:
    """Quotes after an odd run of backslashes are escaped, after an even run they close."""
    cursor = _cursor_after(source, '"')

    assert skip_string(cursor) is SkipOutcome.CLOSED
    assert cursor.source[cursor.pos :] == rest


def test_unterminated_string() -> None:
    """A string missing its closing quote runs to the end."""
    cursor = _cursor_after('"open \\"', '"')

    assert skip_string(cursor) is SkipOutcome.UNTERMINATED
    assert cursor.at_end


@parametrize(
    "source, rest",
    [
        ('r"raw \\"x', "x"),
        ('r#"has "quote""#x', "x"),
        ('r##"one "# inside"##x', "x"),
        ('r""x', "x"),
    ],
)
def test_raw_string_fences(source: str, rest: str) -> None:
    """Raw strings close only on a quote followed by the same number of fences."""
    cursor = _cursor_after(source, "r")

    assert try_skip_raw_string(cursor) is SkipOutcome.CLOSED
    assert cursor.source[cursor.pos :] == rest


@parametrize("source", ["r#ident", "return", "r#", "r"])
def test_raw_string_not_applicable_leaves_cursor(source: str) -> None:
    """Text after `r` that does not open a raw string is left for ordinary scanning."""
    cursor = _cursor_after(source, "r")

    assert try_skip_raw_string(cursor) is SkipOutcome.NOT_APPLICABLE
    assert cursor.pos == 1


def test_unterminated_raw_string() -> None:
    """A raw string missing its closing fence runs to the end."""
    cursor = _cursor_after('r##"body"#', "r")

    assert try_skip_raw_string(cursor) is SkipOutcome.UNTERMINATED
    assert cursor.at_end


@parametrize("source, closed", [("'\"'x", True), ("'\\\"'x", True), ("'a'x", False)])
def test_quote_char_literal(source: str, closed: bool) -> None:
    """Only char literals holding a double quote are skipped."""
    cursor = _cursor_after(source, "'")

    outcome = skip_quote_char_literal(cursor)

    if closed:
        assert outcome is SkipOutcome.CLOSED
        assert cursor.source[cursor.pos :] == "x"
    else:
        assert outcome is SkipOutcome.NOT_APPLICABLE
        assert cursor.pos == 1
