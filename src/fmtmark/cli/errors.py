# fmtmark:header:start
#
#   project      : FmtMark
#   file         : errors.py
#   file_relpath : src/fmtmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Exceptions for the FmtMark CLI.

Library errors (`fmtmark.core.errors`) are plain exceptions; the CLI wraps them
in these `click.ClickException` subclasses so each failure exits with a
sysexits-style code (see `exit_code_for`).

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from fmtmark.cli.exit_codes import ExitCode
from fmtmark.core.errors import (
    ConfigError,
    FormatterError,
    FormatterNotFoundError,
    MalformedSourceError,
)


class FmtmarkCliError(click.ClickException):
    """Base class for all FmtMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class FmtmarkUsageError(FmtmarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class FmtmarkConfigError(FmtmarkCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


def exit_code_for(exc: BaseException) -> ExitCode:
    """Map a library or filesystem error onto its CLI exit code.

    Args:
        exc (BaseException): The error raised while processing one input.

    Returns:
        ExitCode: The code the CLI should exit with for this error.
    """
    if isinstance(exc, (MalformedSourceError, UnicodeDecodeError)):
        return ExitCode.DATA_ERROR
    if isinstance(exc, FormatterNotFoundError):
        return ExitCode.UNAVAILABLE
    if isinstance(exc, FormatterError):
        return ExitCode.SOFTWARE_ERROR
    if isinstance(exc, ConfigError):
        return ExitCode.CONFIG_ERROR
    if isinstance(exc, (FileNotFoundError, IsADirectoryError)):
        return ExitCode.FILE_NOT_FOUND
    if isinstance(exc, PermissionError):
        return ExitCode.PERMISSION_DENIED
    if isinstance(exc, OSError):
        return ExitCode.IO_ERROR
    return ExitCode.UNEXPECTED_ERROR
