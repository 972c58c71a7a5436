# fmtmark:header:start
#
#   project      : FmtMark
#   file         : __init__.py
#   file_relpath : src/fmtmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Configuration layer for FmtMark.

Exposes the immutable runtime `Config`, its mutable builder `MutableConfig`,
and the `Edition` / `PostProcess` enums. TOML I/O lives in `fmtmark.config.io`
and logging setup in `fmtmark.config.logging`.
"""

from __future__ import annotations

from fmtmark.config.model import Config, Edition, MutableConfig, PostProcess, resolve_rustfmt_path

__all__ = [
    "Config",
    "Edition",
    "MutableConfig",
    "PostProcess",
    "resolve_rustfmt_path",
]
