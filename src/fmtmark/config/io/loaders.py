# fmtmark:header:start
#
#   project      : FmtMark
#   file         : loaders.py
#   file_relpath : src/fmtmark/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading FmtMark configuration from
on-disk TOML files (``fmtmark.toml`` / ``pyproject.toml``) and the runtime
defaults. Parsing is done with `tomlkit` and returned as plain `dict`
structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from fmtmark.config.keys import Toml
from fmtmark.config.logging import get_logger
from fmtmark.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from fmtmark.config.logging import FmtmarkLogger

    from .types import TomlTable

logger: FmtmarkLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return FmtMark's **runtime defaults** as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.SECTION_RUSTFMT: {
            Toml.KEY_EDITION: "2021",
            Toml.SECTION_OPTIONS: {},
        },
        Toml.SECTION_POST_PROCESS: {
            Toml.KEY_MODE: "none",
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``fmtmark.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tool_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the FmtMark table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.fmtmark]`` (None when absent); any
    other file is a FmtMark config file in its entirety.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        return None
    return cast("TomlTable", section)
