# fmtmark:header:start
#
#   project      : FmtMark
#   file         : result.py
#   file_relpath : src/fmtmark/markers/result.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Tagged result of a marker replacement run."""

from __future__ import annotations

from dataclasses import dataclass

from yachalk import chalk

from fmtmark.rendering.colored_enum import ColoredStrEnum


class ReplaceStatus(ColoredStrEnum):
    """Whether a replacement run changed the source."""

    UNCHANGED = ("unchanged", chalk.green)
    REWRITTEN = ("rewritten", chalk.yellow)


@dataclass(frozen=True, slots=True)
class ReplaceResult:
    """Outcome of `replace_markers`.

    When ``status`` is `ReplaceStatus.UNCHANGED`, ``text`` is the very object
    that was passed in: no output buffer was allocated.

    Attributes:
        status (ReplaceStatus): ``UNCHANGED`` or ``REWRITTEN``.
        text (str): The resulting source text.
        replacements (int): Number of markers and doc blocks rewritten.
    """

    status: ReplaceStatus
    text: str
    replacements: int = 0

    @classmethod
    def unchanged(cls, source: str) -> ReplaceResult:
        """Return a result that hands back ``source`` untouched."""
        return cls(status=ReplaceStatus.UNCHANGED, text=source, replacements=0)

    @classmethod
    def rewritten(cls, text: str, replacements: int) -> ReplaceResult:
        """Return a result carrying newly assembled text."""
        return cls(status=ReplaceStatus.REWRITTEN, text=text, replacements=replacements)

    @property
    def changed(self) -> bool:
        """True when at least one marker was replaced."""
        return self.status == ReplaceStatus.REWRITTEN

    def __str__(self) -> str:
        return self.text
