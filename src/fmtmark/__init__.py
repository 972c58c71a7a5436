# fmtmark:header:start
#
#   project      : FmtMark
#   file         : __init__.py
#   file_relpath : src/fmtmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""FmtMark package.

FmtMark post-processes formatted, machine-generated Rust source. Code generators
emit lightweight placeholder macros (``_blank_!()``, ``_comment_!("...")``) and
``#[doc = "..."]`` attributes because formatters cannot be told where to put
blank lines or comments; FmtMark runs the formatter and then rewrites those
placeholders into real blank lines, ``//`` comments and ``///`` doc comments.

The public surface is intentionally small:

- `replace_markers` and its tagged `ReplaceResult`.
- The `Formatter` family (`RustFmt`, `CallableFormatter`, `PassthroughFormatter`).
- The configuration snapshot `Config` and its builder `MutableConfig`.
"""

from __future__ import annotations

from fmtmark.config.model import Config, Edition, MutableConfig, PostProcess
from fmtmark.core.errors import (
    ConfigError,
    FmtmarkError,
    FormatterError,
    FormatterNotFoundError,
    LiteralError,
    MalformedSourceError,
)
from fmtmark.formatting.base import Formatter, post_process_text
from fmtmark.formatting.callable import CallableFormatter, PassthroughFormatter
from fmtmark.formatting.rustfmt import RustFmt
from fmtmark.markers.result import ReplaceResult, ReplaceStatus
from fmtmark.markers.scanner import replace_markers

__all__ = [
    "CallableFormatter",
    "Config",
    "ConfigError",
    "Edition",
    "FmtmarkError",
    "Formatter",
    "FormatterError",
    "FormatterNotFoundError",
    "LiteralError",
    "MalformedSourceError",
    "MutableConfig",
    "PassthroughFormatter",
    "PostProcess",
    "ReplaceResult",
    "ReplaceStatus",
    "RustFmt",
    "post_process_text",
    "replace_markers",
]
