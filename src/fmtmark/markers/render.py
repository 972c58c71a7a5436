# fmtmark:header:start
#
#   project      : FmtMark
#   file         : render.py
#   file_relpath : src/fmtmark/markers/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Renderers turning decoded marker payloads into final source text.

Renderers are pure: they return the replacement text and leave buffer
management to the cursor. They never trim or reflow payload text; they only
split it on line feeds.
"""

from __future__ import annotations

from typing import Final

LF: Final[str] = "\n"
CRLF: Final[str] = "\r\n"

EMPTY_COMMENT: Final[str] = "//"
COMMENT_PREFIX: Final[str] = "// "
DOC_COMMENT_PREFIX: Final[str] = "///"
DOC_COMMENT_LEAD: Final[str] = "/// "


def payload_lines(text: str) -> list[str]:
    """Split ``text`` into lines the way Rust's ``str::lines`` does.

    Lines end at ``\\n`` (a preceding ``\\r`` is dropped) and a final line
    ending does not produce an extra empty line. A ``\\r`` not followed by
    ``\\n`` is kept. Unlike `str.splitlines`, no other characters count as
    line boundaries.
    """
    if not text:
        return []
    *ended, last = text.split(LF)
    lines = [line[:-1] if line.endswith("\r") else line for line in ended]
    if last:
        lines.append(last)
    return lines


def render_blanks(count: int | None, ending: str, indent: int = 0) -> str:
    """Return ``count`` blank lines (one when ``count`` is None).

    Indentation is not reproduced: blank lines carry no trailing whitespace.
    """
    return ending * (1 if count is None else count)


def render_comments(text: str | None, ending: str, indent: int = 0) -> str:
    """Return one ``//`` comment line per payload line.

    Empty payload lines (and an empty or absent payload) become a bare ``//``.
    """
    pad = " " * indent
    lines = payload_lines(text or "") or [""]
    return "".join(
        f"{pad}{EMPTY_COMMENT}{ending}" if not line else f"{pad}{COMMENT_PREFIX}{line}{ending}"
        for line in lines
    )


def render_doc_block(text: str | None, ending: str, indent: int = 0) -> str:
    """Return one ``///`` doc comment line per payload line.

    ``#[doc = "x"]`` and ``#[doc = " x"]`` both render ``/// x``: a line that
    already starts with whitespace follows ``///`` as is, any other non-empty
    line gets one separating space. Empty lines become a bare ``///``.
    """
    pad = " " * indent
    lines = payload_lines(text or "") or [""]
    return "".join(f"{pad}{_doc_line(line)}{ending}" for line in lines)


def _doc_line(line: str) -> str:
    if not line or line[0].isspace():
        return f"{DOC_COMMENT_PREFIX}{line}"
    return f"{DOC_COMMENT_LEAD}{line}"
