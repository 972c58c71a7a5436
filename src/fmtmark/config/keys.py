# fmtmark:header:start
#
#   project      : FmtMark
#   file         : keys.py
#   file_relpath : src/fmtmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Canonical TOML section and key names for FmtMark configuration.

These constants are the external configuration schema as it appears in
``fmtmark.toml`` and in ``[tool.fmtmark]`` inside ``pyproject.toml``::

    root = true

    [rustfmt]
    path = "rustfmt"
    edition = "2021"

    [rustfmt.options]
    max_width = 100
    reorder_imports = false

    [post_process]
    mode = "replace-markers"

Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by FmtMark configuration."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [rustfmt]
    SECTION_RUSTFMT: Final[str] = "rustfmt"

    KEY_PATH: Final[str] = "path"
    KEY_EDITION: Final[str] = "edition"

    # [rustfmt.options]
    SECTION_OPTIONS: Final[str] = "options"

    # [post_process]
    SECTION_POST_PROCESS: Final[str] = "post_process"

    KEY_MODE: Final[str] = "mode"
