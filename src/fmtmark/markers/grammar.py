# fmtmark:header:start
#
#   project      : FmtMark
#   file         : grammar.py
#   file_relpath : src/fmtmark/markers/grammar.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Table-driven matchers for the three marker grammars.

Each grammar is a `MarkerGrammar` record: prefix tokens, a payload kind and
suffix tokens, followed by a mandatory line ending. Whitespace is tolerated
between tokens (formatters wrap long macro calls) but never inside a token or
inside the literal payload::

    _blank_   WS* ! WS* ( [INTEGER] WS* ) WS* ; LINE-END
    _comment_ WS* ! WS* ( [STRING]  WS* ) WS* ; LINE-END
    #         WS* [ WS* doc WS* = WS* STRING WS* ] LINE-END

Matching is speculative until the whole prefix has matched: a mismatch there
means "not a marker" and the driver resumes ordinary scanning at the first
unmatched character. After the prefix the grammar is committed, and every
violation raises `MalformedSourceError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

from fmtmark.core.errors import LiteralError, MalformedSourceError
from fmtmark.markers.cursor import WHITESPACE
from fmtmark.markers.lexing import SkipOutcome, skip_string, try_skip_raw_string
from fmtmark.markers.literals import parse_integer_literal, parse_string_literal
from fmtmark.markers.render import (
    CRLF,
    LF,
    render_blanks,
    render_comments,
    render_doc_block,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from fmtmark.markers.cursor import Cursor

# Characters an integer payload may contain (digits, radix letters, suffix, '_')
_INTEGER_CHARS: Final[frozenset[str]] = frozenset(
    "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)


class PayloadKind(Enum):
    """Shape of the literal between a grammar's prefix and suffix."""

    OPTIONAL_INTEGER = "optional integer literal"
    OPTIONAL_STRING = "optional string literal"
    STRING = "string literal"


@dataclass(frozen=True, slots=True)
class MarkerGrammar:
    """Declarative description of one marker family.

    Attributes:
        name (str): Short name used in logs.
        prefix (tuple[str, ...]): Tokens identifying the marker. The first
            token's first character is the lead character the driver dispatches on.
        payload (PayloadKind): Literal expected after the prefix.
        suffix (tuple[str, ...]): Tokens closing the marker.
        render (Callable[[Any, str, int], str]): Renderer receiving the decoded
            payload (or None), the line ending and the indentation width.
    """

    name: str
    prefix: tuple[str, ...]
    payload: PayloadKind
    suffix: tuple[str, ...]
    render: Callable[[Any, str, int], str]

    @property
    def lead(self) -> str:
        """The character that makes the driver try this grammar."""
        return self.prefix[0][0]

    @property
    def signature(self) -> str:
        """The shortest text that selects this grammar among those sharing a lead."""
        return self.prefix[0][:2]


@dataclass(frozen=True, slots=True)
class MarkerMatch:
    """A fully matched marker, ready to be rendered.

    Attributes:
        grammar (MarkerGrammar): The grammar that matched.
        start (int): Start of the replaced span, including leading indentation.
        end (int): End of the replaced span, just past the line ending.
        indent (int): Number of spaces before the marker text.
        value (int | str | None): Decoded payload (None when omitted).
        line_ending (str): ``"\\n"`` or ``"\\r\\n"``, as found after the marker.
    """

    grammar: MarkerGrammar
    start: int
    end: int
    indent: int
    value: int | str | None
    line_ending: str

    def render(self) -> str:
        """Render the replacement text for this match."""
        return self.grammar.render(self.value, self.line_ending, self.indent)


BLANK_MARKER: Final[MarkerGrammar] = MarkerGrammar(
    name="blank",
    prefix=("_blank_", "!", "("),
    payload=PayloadKind.OPTIONAL_INTEGER,
    suffix=(")", ";"),
    render=render_blanks,
)

COMMENT_MARKER: Final[MarkerGrammar] = MarkerGrammar(
    name="comment",
    prefix=("_comment_", "!", "("),
    payload=PayloadKind.OPTIONAL_STRING,
    suffix=(")", ";"),
    render=render_comments,
)

DOC_BLOCK: Final[MarkerGrammar] = MarkerGrammar(
    name="doc block",
    prefix=("#", "[", "doc", "="),
    payload=PayloadKind.STRING,
    suffix=("]",),
    render=render_doc_block,
)

MARKER_GRAMMARS: Final[tuple[MarkerGrammar, ...]] = (BLANK_MARKER, COMMENT_MARKER)


def select_grammar(cursor: Cursor, grammars: Sequence[MarkerGrammar]) -> MarkerGrammar | None:
    """Return the grammar whose signature starts at the cursor, if any."""
    for grammar in grammars:
        if cursor.startswith(grammar.signature):
            return grammar
    return None


def match_marker(cursor: Cursor, grammar: MarkerGrammar, indent: int = 0) -> MarkerMatch | None:
    """Try to match ``grammar`` at the cursor (positioned on the lead character).

    Args:
        cursor (Cursor): Cursor positioned on the grammar's lead character.
        grammar (MarkerGrammar): The grammar to match.
        indent (int): Number of spaces directly before the lead character; they
            become part of the replaced span.

    Returns:
        MarkerMatch | None: The match, or None when the prefix did not match. On
        None the cursor rests on the first character that did not match.

    Raises:
        MalformedSourceError: If the prefix matched but the rest of the grammar
            (payload, suffix or line ending) did not.
    """
    start = cursor.pos
    if not _match_tokens(cursor, grammar.prefix):
        return None

    value_start = cursor.pos
    value_end = _skip_payload(cursor, grammar.payload)
    for token in grammar.suffix:
        _expect_token(cursor, token)
    line_ending = _expect_line_ending(cursor)

    literal = cursor.source[value_start:value_end]
    value = _decode_payload(cursor, grammar.payload, literal, value_start)

    return MarkerMatch(
        grammar=grammar,
        start=start - indent,
        end=cursor.pos,
        indent=indent,
        value=value,
        line_ending=line_ending,
    )


def _match_token(cursor: Cursor, token: str) -> bool:
    """Consume ``token`` one character at a time; stop on the first mismatch."""
    for expected in token:
        if cursor.current != expected:
            return False
        cursor.pos += 1
    return True


def _match_tokens(cursor: Cursor, tokens: Sequence[str]) -> bool:
    first, *rest = tokens
    if not _match_token(cursor, first):
        return False
    for token in rest:
        cursor.skip_whitespace()
        if not _match_token(cursor, token):
            return False
    return True


def _describe_current(cursor: Cursor) -> str:
    ch = cursor.current
    return "end of input" if not ch else repr(ch)


def _fail(cursor: Cursor, reason: str, offset: int | None = None) -> MalformedSourceError:
    return MalformedSourceError(
        reason,
        source=cursor.source,
        offset=cursor.pos if offset is None else offset,
    )


def _expect_token(cursor: Cursor, token: str) -> None:
    cursor.skip_whitespace()
    token_start = cursor.pos
    if not _match_token(cursor, token):
        found = _describe_current(cursor)
        raise _fail(cursor, f"expected {token!r} but found {found}", token_start)


def _expect_line_ending(cursor: Cursor) -> str:
    if cursor.startswith(CRLF):
        cursor.pos += 2
        return CRLF
    if cursor.current == LF:
        cursor.pos += 1
        return LF
    found = _describe_current(cursor)
    raise _fail(cursor, f"expected a line ending (LF or CRLF) but found {found}")


def _skip_payload(cursor: Cursor, kind: PayloadKind) -> int:
    """Skip the payload literal and return its exclusive end offset."""
    cursor.skip_whitespace()

    if kind is PayloadKind.OPTIONAL_INTEGER:
        source, pos, length = cursor.source, cursor.pos, cursor.length
        while pos < length and source[pos] in _INTEGER_CHARS:
            pos += 1
        cursor.pos = pos
        return pos

    literal_start = cursor.pos
    ch = cursor.current
    if ch == '"':
        cursor.pos += 1
        outcome = skip_string(cursor)
    elif ch == "r":
        cursor.pos += 1
        outcome = try_skip_raw_string(cursor)
        if outcome is SkipOutcome.NOT_APPLICABLE:
            raise _fail(cursor, "expected a raw string literal after 'r'", literal_start)
    elif ch == ")" and kind is PayloadKind.OPTIONAL_STRING:
        return cursor.pos
    else:
        expected = (
            "')' or a string literal"
            if kind is PayloadKind.OPTIONAL_STRING
            else "a string literal"
        )
        raise _fail(cursor, f"expected {expected} but found {_describe_current(cursor)}")

    if outcome is SkipOutcome.UNTERMINATED:
        raise _fail(cursor, "unterminated string literal", literal_start)
    return cursor.pos


def _decode_payload(
    cursor: Cursor,
    kind: PayloadKind,
    literal: str,
    offset: int,
) -> int | str | None:
    if not literal.strip():
        return None
    try:
        if kind is PayloadKind.OPTIONAL_INTEGER:
            return parse_integer_literal(literal)
        return parse_string_literal(literal)
    except LiteralError as exc:
        raise _fail(cursor, f"invalid {kind.value}: {exc}", offset) from exc
