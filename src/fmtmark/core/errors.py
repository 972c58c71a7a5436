# fmtmark:header:start
#
#   project      : FmtMark
#   file         : errors.py
#   file_relpath : src/fmtmark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Exceptions raised by the FmtMark library layer.

These are plain exceptions: the library never prints or exits. The CLI maps
them onto click exceptions with sysexits-style exit codes (see
`fmtmark.cli.errors`).

Hierarchy:
    FmtmarkError
    ├── MalformedSourceError   marker or doc block does not satisfy its grammar
    ├── LiteralError           string/integer literal payload failed to decode
    ├── FormatterError         external formatter rejected the input
    │   └── FormatterNotFoundError
    └── ConfigError            invalid configuration value
"""

from __future__ import annotations

# Characters of context shown on each side of an error offset
EXCERPT_RADIUS: int = 24


class FmtmarkError(Exception):
    """Base class for all FmtMark library errors."""


class MalformedSourceError(FmtmarkError):
    """Text that starts like a marker or doc block but breaks its grammar.

    Markers are emitted by code generators, so this almost always means the
    generator produced broken output rather than a user mistake.

    Attributes:
        reason (str): What was expected versus what was found.
        offset (int): Character offset into the source where the problem was detected.
        line (int): 1-based line number of ``offset``.
        column (int): 1-based column of ``offset``.
        excerpt (str): The source text surrounding ``offset`` (newlines escaped).
    """

    reason: str
    offset: int
    line: int
    column: int
    excerpt: str

    def __init__(self, reason: str, *, source: str, offset: int) -> None:
        offset = max(0, min(offset, len(source)))
        self.reason = reason
        self.offset = offset
        self.line = source.count("\n", 0, offset) + 1
        self.column = offset - (source.rfind("\n", 0, offset) + 1) + 1
        self.excerpt = make_excerpt(source, offset)
        super().__init__(f"{reason} at line {self.line}, column {self.column}: {self.excerpt}")


class LiteralError(FmtmarkError, ValueError):
    """A literal payload could not be decoded."""


class FormatterError(FmtmarkError):
    """The external formatter failed or rejected the source.

    Attributes:
        stderr (str): Diagnostic output captured from the formatter, if any.
    """

    def __init__(self, message: str, *, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


class FormatterNotFoundError(FormatterError):
    """The formatter executable could not be launched."""


class ConfigError(FmtmarkError):
    """A configuration value is missing, of the wrong type, or not recognized."""


def make_excerpt(source: str, offset: int, radius: int = EXCERPT_RADIUS) -> str:
    """Return a one-line excerpt of ``source`` around ``offset``.

    Args:
        source (str): Full source text.
        offset (int): Position of interest.
        radius (int): Number of characters to keep on each side.

    Returns:
        str: The excerpt with CR/LF escaped and ellipses where text was cut.
    """
    start: int = max(0, offset - radius)
    end: int = min(len(source), offset + radius)
    text: str = source[start:end].replace("\r", "\\r").replace("\n", "\\n")
    if start > 0:
        text = "..." + text
    if end < len(source):
        text = text + "..."
    return f"'{text}'" if text else "<end of input>"
