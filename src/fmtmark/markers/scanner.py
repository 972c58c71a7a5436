# fmtmark:header:start
#
#   project      : FmtMark
#   file         : scanner.py
#   file_relpath : src/fmtmark/markers/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Single-pass marker replacement driver.

The driver jumps from one *lead* character to the next and dispatches:

- ``"`` → quoted string, ``r`` → possible raw string, ``'`` → possible
  ``'"'`` char literal, ``/`` → possible comment: skipped verbatim;
- ``_`` (and ``#`` when doc blocks are enabled) → possible marker: matched by
  `fmtmark.markers.grammar.match_marker` and, on success, replaced.

Everything else is ordinary text and is never looked at twice. Spaces directly
in front of a marker are counted so the replacement can reproduce the
indentation.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from fmtmark.config.logging import get_logger
from fmtmark.markers.cursor import Cursor
from fmtmark.markers.grammar import (
    DOC_BLOCK,
    MARKER_GRAMMARS,
    match_marker,
    select_grammar,
)
from fmtmark.markers.lexing import (
    skip_block_comment,
    skip_line_comment,
    skip_quote_char_literal,
    skip_string,
    try_skip_raw_string,
)

if TYPE_CHECKING:
    from fmtmark.config.logging import FmtmarkLogger
    from fmtmark.markers.grammar import MarkerGrammar
    from fmtmark.markers.result import ReplaceResult

logger: FmtmarkLogger = get_logger(__name__)

_SKIP_LEADS: Final[str] = "\"r'/"


def _lead_pattern(grammars: tuple[MarkerGrammar, ...]) -> re.Pattern[str]:
    leads = _SKIP_LEADS + "".join(sorted({g.lead for g in grammars}))
    return re.compile(f"[{re.escape(leads)}]")


_GRAMMARS: Final[dict[bool, tuple[MarkerGrammar, ...]]] = {
    False: MARKER_GRAMMARS,
    True: (*MARKER_GRAMMARS, DOC_BLOCK),
}
_LEAD_PATTERNS: Final[dict[bool, re.Pattern[str]]] = {
    flag: _lead_pattern(grammars) for flag, grammars in _GRAMMARS.items()
}


def _indent_before(source: str, lead: int, floor: int) -> int:
    """Count the spaces directly before ``lead``, not looking behind ``floor``."""
    idx = lead
    while idx > floor and source[idx - 1] == " ":
        idx -= 1
    return lead - idx


def replace_markers(source: str, replace_doc_blocks: bool = False) -> ReplaceResult:
    """Replace blank/comment markers (and optionally doc blocks) in formatted source.

    Markers inside comments, string literals and raw string literals are left
    untouched. The scan is a single left-to-right pass; no output is assembled
    unless at least one marker is found.

    Args:
        source (str): Formatted Rust source text.
        replace_doc_blocks (bool): Also rewrite ``#[doc = "..."]`` attributes
            into ``///`` doc comments.

    Returns:
        ReplaceResult: ``UNCHANGED`` carrying ``source`` itself when nothing
        matched, otherwise ``REWRITTEN`` carrying the new text.

    Raises:
        MalformedSourceError: If text that starts like a marker or doc block
            does not complete its grammar.
    """
    grammars = _GRAMMARS[replace_doc_blocks]
    lead_pattern = _LEAD_PATTERNS[replace_doc_blocks]
    cursor = Cursor(source)
    # Start of the text scanned as ordinary characters (bounds indentation counting)
    floor = 0

    while True:
        found = lead_pattern.search(source, cursor.pos)
        if found is None:
            break
        lead = found.start()
        ch = source[lead]
        cursor.pos = lead

        if ch == '"':
            cursor.pos += 1
            skip_string(cursor)
        elif ch == "r":
            cursor.pos += 1
            try_skip_raw_string(cursor)
        elif ch == "'":
            cursor.pos += 1
            skip_quote_char_literal(cursor)
        elif ch == "/":
            cursor.pos += 1
            nxt = cursor.current
            if nxt == "/":
                cursor.pos += 1
                skip_line_comment(cursor)
            elif nxt == "*":
                cursor.pos += 1
                skip_block_comment(cursor)
        else:
            grammar = select_grammar(cursor, grammars)
            if grammar is None:
                cursor.pos += 1
            else:
                indent = _indent_before(source, lead, floor)
                match = match_marker(cursor, grammar, indent)
                if match is not None:
                    cursor.replace(match.start, match.end, match.render())
                    logger.trace(
                        "Replaced %s marker at %d..%d (indent=%d)",
                        grammar.name,
                        match.start,
                        match.end,
                        indent,
                    )

        floor = cursor.pos

    result = cursor.finish()
    logger.debug(
        "Marker scan finished: %s, %d replacement(s), %d -> %d chars",
        result.status.value,
        result.replacements,
        len(source),
        len(result.text),
    )
    return result

