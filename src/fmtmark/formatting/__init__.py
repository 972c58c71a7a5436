# fmtmark:header:start
#
#   project      : FmtMark
#   file         : __init__.py
#   file_relpath : src/fmtmark/formatting/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Source formatters and the post-processing step that follows them.

- `Formatter`: base class (``format_str`` / ``format_file``).
- `RustFmt`: runs the external ``rustfmt`` executable.
- `CallableFormatter` / `PassthroughFormatter`: in-process formatters.
"""

from __future__ import annotations

from fmtmark.formatting.base import Formatter, post_process_text
from fmtmark.formatting.callable import CallableFormatter, PassthroughFormatter
from fmtmark.formatting.rustfmt import RustFmt

__all__ = [
    "CallableFormatter",
    "Formatter",
    "PassthroughFormatter",
    "RustFmt",
    "post_process_text",
]
