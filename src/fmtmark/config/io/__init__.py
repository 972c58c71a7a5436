# fmtmark:header:start
#
#   project      : FmtMark
#   file         : __init__.py
#   file_relpath : src/fmtmark/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""TOML I/O helpers for FmtMark configuration.

FmtMark uses `tomlkit` for parsing and rendering:

- `load_toml_dict()` parses on-disk TOML and returns plain dicts.
- `to_toml()` renders a table (after stripping TOML-incompatible ``None``).
- The getters read typed values out of parsed tables.
"""

from __future__ import annotations

from .getters import (
    coerce_option_value,
    get_bool_value,
    get_enum_value_or_none,
    get_options_table,
    get_string_value_or_none,
    get_table_value,
)
from .loaders import extract_tool_table, load_defaults_dict, load_toml_dict
from .render import nest_under_tool_section, to_toml
from .types import TomlTable

__all__ = [
    "TomlTable",
    "coerce_option_value",
    "extract_tool_table",
    "get_bool_value",
    "get_enum_value_or_none",
    "get_options_table",
    "get_string_value_or_none",
    "get_table_value",
    "load_defaults_dict",
    "load_toml_dict",
    "nest_under_tool_section",
    "to_toml",
]
