# fmtmark:header:start
#
#   project      : FmtMark
#   file         : strategies_fmtmark.py
#   file_relpath : tests/strategies_fmtmark.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Hypothesis strategies for generating Rust-like source text.

The generated text approximates formatted, generated Rust: statements, line
comments, block comments, quoted and raw strings. Two families matter for
property tests:

- marker-free source (no ``_blank_``/``_comment_`` prefixes and no doc
  attributes anywhere), and
- source whose only marker-shaped text is hidden inside comments or string
  literals.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

LINE_ENDINGS: tuple[str, ...] = ("\n", "\r\n")

# Marker-shaped snippets that must survive untouched inside comments and strings
MARKER_SNIPPETS: tuple[str, ...] = (
    "_blank_!();",
    "_blank_!(3);",
    '_comment_!("hidden");',
    "_comment_!();",
    '#[doc = "hidden"]',
)

_IDENTS = st.sampled_from(["x", "value", "count", "name", "self_", "buf", "r", "br"])
_PLAIN_TEXT = st.text(
    alphabet=st.characters(
        min_codepoint=0x20,
        max_codepoint=0x7E,
        blacklist_characters='"\\/*_#\'r',
    ),
    max_size=20,
)


@st.composite
def s_statement(draw: Draw) -> str:
    """A single-line statement without string literals or markers."""
    ident: str = draw(_IDENTS)
    number: int = draw(st.integers(min_value=0, max_value=10_000))
    indent: str = " " * draw(st.sampled_from([0, 4, 8]))
    return f"{indent}let {ident} = {number};"


@st.composite
def s_string_literal(draw: Draw, payload: st.SearchStrategy[str] = _PLAIN_TEXT) -> str:
    """A quoted or raw string literal wrapping ``payload``."""
    body: str = draw(payload)
    if draw(st.booleans()):
        return '"' + body.replace("\\", "\\\\").replace('"', '\\"') + '"'
    fences: str = "#" * draw(st.integers(min_value=1, max_value=3))
    return f'r{fences}"{body}"{fences}'


@st.composite
def s_line(draw: Draw, hidden: bool = False) -> str:
    """One source line (without its ending).

    Args:
        draw (Draw): Hypothesis draw function.
        hidden (bool): If True, some lines embed marker snippets inside a
            comment or string literal.
    """
    snippet: st.SearchStrategy[str] = (
        st.sampled_from(MARKER_SNIPPETS) if hidden else _PLAIN_TEXT
    )
    kind: str = draw(st.sampled_from(["stmt", "line_comment", "block_comment", "string", "blank"]))
    if kind == "stmt":
        return draw(s_statement())
    if kind == "line_comment":
        return "// " + draw(snippet)
    if kind == "block_comment":
        return "/* " + draw(snippet) + " */"
    if kind == "string":
        return f"let s = {draw(s_string_literal(snippet))};"
    return ""


@st.composite
def s_source(draw: Draw, hidden: bool = False) -> str:
    """A multi-line source text with a single, consistent line ending."""
    ending: str = draw(st.sampled_from(LINE_ENDINGS))
    lines: list[str] = draw(st.lists(s_line(hidden), max_size=12))
    return "".join(line + ending for line in lines)
