# fmtmark:header:start
#
#   project      : FmtMark
#   file         : lexing.py
#   file_relpath : src/fmtmark/markers/lexing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Skippers for Rust comments and string literals.

Each skipper is entered with the cursor just past the opening sequence and
leaves it just past the closing sequence (or at end of input). Contents are
never interpreted, so marker-shaped text inside comments and strings is left
alone.

Ordinary comments and strings are lenient: running into end of input simply
stops. The result tells callers that need strictness (the marker matchers)
whether the construct was actually closed.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fmtmark.markers.cursor import Cursor


class SkipOutcome(Enum):
    """Result of a skip attempt."""

    CLOSED = "closed"
    UNTERMINATED = "unterminated"
    NOT_APPLICABLE = "not applicable"


def skip_line_comment(cursor: Cursor) -> SkipOutcome:
    """Skip to just past the next line feed (entered after ``//``)."""
    end = cursor.source.find("\n", cursor.pos)
    if end < 0:
        cursor.pos = cursor.length
        return SkipOutcome.UNTERMINATED
    cursor.pos = end + 1
    return SkipOutcome.CLOSED


def skip_block_comment(cursor: Cursor) -> SkipOutcome:
    """Skip a possibly nested block comment (entered after ``/*``).

    Openers and closers are consumed pairwise from left to right, so ``/*/``
    opens a comment and ``*/*`` closes one.
    """
    source = cursor.source
    pos = cursor.pos
    depth = 1

    while depth:
        close = source.find("*/", pos)
        if close < 0:
            cursor.pos = cursor.length
            return SkipOutcome.UNTERMINATED
        # An opener that starts before the closer wins (also covers "/*/")
        opening = source.find("/*", pos, close + 1)
        if opening >= 0:
            depth += 1
            pos = opening + 2
        else:
            depth -= 1
            pos = close + 2

    cursor.pos = pos
    return SkipOutcome.CLOSED


def skip_string(cursor: Cursor) -> SkipOutcome:
    """Skip a quoted string literal (entered after the opening ``"``).

    Escape state toggles on every backslash and clears on any other character,
    so ``\\"`` keeps the string open while ``\\\\"`` closes it.
    """
    source, pos, length = cursor.source, cursor.pos, cursor.length
    in_escape = False

    while pos < length:
        ch = source[pos]
        pos += 1
        if ch == "\\":
            in_escape = not in_escape
        elif ch == '"' and not in_escape:
            cursor.pos = pos
            return SkipOutcome.CLOSED
        else:
            in_escape = False

    cursor.pos = length
    return SkipOutcome.UNTERMINATED


def try_skip_raw_string(cursor: Cursor) -> SkipOutcome:
    """Skip a raw string literal (entered after the ``r`` prefix).

    Matches zero or more ``#`` fences followed by ``"``, then scans for ``"``
    followed by the same number of fences. A closing quote with fewer fences
    is part of the body.

    Returns:
        SkipOutcome: ``NOT_APPLICABLE`` (cursor untouched) when the text after
        ``r`` is not a raw string opener, e.g. a raw identifier ``r#ident``.
    """
    source = cursor.source
    start = cursor.pos
    quote = start
    while quote < cursor.length and source[quote] == "#":
        quote += 1
    if quote >= cursor.length or source[quote] != '"':
        return SkipOutcome.NOT_APPLICABLE

    closing = '"' + "#" * (quote - start)
    end = source.find(closing, quote + 1)
    if end < 0:
        cursor.pos = cursor.length
        return SkipOutcome.UNTERMINATED
    cursor.pos = end + len(closing)
    return SkipOutcome.CLOSED


def skip_quote_char_literal(cursor: Cursor) -> SkipOutcome:
    """Skip a ``'"'`` or ``'\\"'`` char literal (entered after the first ``'``).

    Any other use of ``'`` (lifetimes, labels, other char literals) is left to
    ordinary scanning.
    """
    for body in ("\"'", "\\\"'"):
        if cursor.startswith(body):
            cursor.pos += len(body)
            return SkipOutcome.CLOSED
    return SkipOutcome.NOT_APPLICABLE
