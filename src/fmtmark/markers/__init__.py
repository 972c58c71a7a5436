# fmtmark:header:start
#
#   project      : FmtMark
#   file         : __init__.py
#   file_relpath : src/fmtmark/markers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Marker replacement for formatted, generated Rust source.

The scanner walks formatted text once, skipping comments and string literals,
and rewrites three placeholder families into their final form:

- ``_blank_!(N);``       → ``N`` blank lines (default 1)
- ``_comment_!("...");`` → one ``//`` comment line per line of the payload
- ``#[doc = "..."]``     → one ``///`` doc comment line per line of the payload
  (only when doc-block replacement is enabled)

Entry point: `fmtmark.markers.scanner.replace_markers`.
"""

from __future__ import annotations

from fmtmark.markers.result import ReplaceResult, ReplaceStatus
from fmtmark.markers.scanner import replace_markers

__all__ = [
    "ReplaceResult",
    "ReplaceStatus",
    "replace_markers",
]
