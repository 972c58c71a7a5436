# fmtmark:header:start
#
#   project      : FmtMark
#   file         : getters.py
#   file_relpath : src/fmtmark/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Typed accessors for values inside parsed TOML tables.

Getters never raise on missing keys. Wrong types are reported through
`fmtmark.core.errors.ConfigError` since a value that is present but unusable is
a user mistake worth surfacing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, cast

from fmtmark.config.logging import get_logger
from fmtmark.core.errors import ConfigError

if TYPE_CHECKING:
    from fmtmark.config.logging import FmtmarkLogger
    from fmtmark.core.enum_mixins import KeyedStrEnum

    from .types import TomlTable

logger: FmtmarkLogger = get_logger(__name__)

KS = TypeVar("KS", bound="KeyedStrEnum")


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    if isinstance(value, Mapping):
        return dict(cast("Mapping[str, Any]", value))
    if value is not None:
        logger.warning("Ignoring non-table value for [%s]: %r", key, value)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent.

    Raises:
        ConfigError: If the key is present but not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}: {value!r}")


def get_bool_value(table: TomlTable, key: str, default: bool = False) -> bool:
    """Extract a boolean value from a TOML table, falling back to ``default``."""
    value: Any | None = table.get(key)
    if isinstance(value, bool):
        return value
    if value is not None:
        logger.debug("Cannot coerce %r to bool, returning default (%s)", value, default)
    return default


def get_enum_value_or_none(table: TomlTable, key: str, enum_cls: type[KS]) -> KS | None:
    """Extract an optional `KeyedStrEnum` member from a TOML table.

    Integers are accepted as keys too, so ``edition = 2021`` works like
    ``edition = "2021"``.

    Raises:
        ConfigError: If the value is present but names no member of ``enum_cls``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    member: KS | None = enum_cls.parse(value) if isinstance(value, str) else None
    if member is None:
        allowed: str = ", ".join(enum_cls.keys())
        raise ConfigError(f"Invalid value for '{key}': {value!r} (allowed values: {allowed})")
    return member


def coerce_option_value(key: str, value: object) -> str:
    """Render a rustfmt option value the way rustfmt's ``--config`` expects it.

    Booleans become ``true``/``false``; strings and numbers pass through.

    Raises:
        ConfigError: If ``value`` is not a scalar.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ConfigError(f"Unsupported value for rustfmt option '{key}': {value!r}")


def get_options_table(table: TomlTable, key: str) -> dict[str, str]:
    """Extract a ``key = value`` table of rustfmt options as strings."""
    return {str(k): coerce_option_value(str(k), v) for k, v in get_table_value(table, key).items()}
