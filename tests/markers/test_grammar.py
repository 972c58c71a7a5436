# fmtmark:header:start
#
#   project      : FmtMark
#   file         : test_grammar.py
#   file_relpath : tests/markers/test_grammar.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Unit tests for the table-driven marker matchers."""

from __future__ import annotations

import pytest

from fmtmark.core.errors import MalformedSourceError
from fmtmark.markers.cursor import Cursor
from fmtmark.markers.grammar import (
    BLANK_MARKER,
    COMMENT_MARKER,
    DOC_BLOCK,
    MARKER_GRAMMARS,
    MarkerMatch,
    match_marker,
    select_grammar,
)

pytestmark: pytest.MarkDecorator = pytest.mark.markers


def test_grammar_leads_and_signatures() -> None:
    """Blank and comment markers share a lead and differ by signature."""
    assert BLANK_MARKER.lead == COMMENT_MARKER.lead == "_"
    assert BLANK_MARKER.signature == "_b"
    assert COMMENT_MARKER.signature == "_c"
    assert DOC_BLOCK.lead == "#"


def test_select_grammar() -> None:
    """The signature at the cursor picks the grammar."""
    assert select_grammar(Cursor("_blank_!();"), MARKER_GRAMMARS) is BLANK_MARKER
    assert select_grammar(Cursor("_comment_!();"), MARKER_GRAMMARS) is COMMENT_MARKER
    assert select_grammar(Cursor("_x"), MARKER_GRAMMARS) is None
    assert select_grammar(Cursor("#[doc]"), MARKER_GRAMMARS) is None
    assert select_grammar(Cursor("#[doc]"), (*MARKER_GRAMMARS, DOC_BLOCK)) is DOC_BLOCK


def test_match_blank_marker_with_indent() -> None:
    """The match span includes the indentation and the line ending."""
    source = "    _blank_!(2);\nrest"
    cursor = Cursor(source)
    cursor.pos = 4

    match = match_marker(cursor, BLANK_MARKER, indent=4)

    assert isinstance(match, MarkerMatch)
    assert (match.start, match.end) == (0, len("    _blank_!(2);\n"))
    assert match.value == 2
    assert match.line_ending == "\n"
    assert match.render() == "\n\n"
    assert cursor.source[cursor.pos :] == "rest"


def test_match_tolerates_whitespace_between_tokens() -> None:
    """Formatters may wrap a macro call across lines."""
    cursor = Cursor('_comment_ !\n(\n  "x"\n)\n;\r\n')

    match = match_marker(cursor, COMMENT_MARKER)

    assert match is not None
    assert match.value == "x"
    assert match.line_ending == "\r\n"
    assert match.render() == "// x\r\n"


def test_prefix_mismatch_is_not_a_marker() -> None:
    """A partial prefix returns None with the cursor on the first unmatched character."""
    cursor = Cursor("_blank!();\n")

    assert match_marker(cursor, BLANK_MARKER) is None
    assert cursor.current == "!"


def test_whitespace_inside_a_token_is_not_tolerated() -> None:
    """`_bl ank_` is not the `_blank_` token."""
    cursor = Cursor("_bl ank_!();\n")

    assert match_marker(cursor, BLANK_MARKER) is None


def test_doc_attribute_with_arguments_is_not_a_doc_block() -> None:
    """`#[doc(hidden)]` fails in the prefix and is left alone."""
    cursor = Cursor("#[doc(hidden)]\n")

    assert match_marker(cursor, DOC_BLOCK) is None


def test_committed_grammar_raises_with_offset() -> None:
    """After the prefix, violations raise at the offending offset."""
    cursor = Cursor("_blank_!(1 2);\n")

    with pytest.raises(MalformedSourceError) as info:
        match_marker(cursor, BLANK_MARKER)

    assert info.value.offset == len("_blank_!(1 ")
    assert "expected ')'" in info.value.reason


def test_doc_block_requires_payload() -> None:
    """Doc blocks have no optional payload."""
    with pytest.raises(MalformedSourceError):
        match_marker(Cursor("#[doc = ]\n"), DOC_BLOCK)
