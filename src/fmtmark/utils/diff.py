# fmtmark:header:start
#
#   project      : FmtMark
#   file         : diff.py
#   file_relpath : src/fmtmark/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Unified diff helpers for previewing rewrites (``fmtmark replace --diff``)."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def compute_diff(before: str, after: str, path: str) -> list[str]:
    """Return the unified diff lines between ``before`` and ``after``."""
    return list(
        difflib.unified_diff(
            before.splitlines(keepends=True),
            after.splitlines(keepends=True),
            fromfile=f"{path} (original)",
            tofile=f"{path} (rewritten)",
        )
    )


def render_patch(patch: Sequence[str] | str, color: bool = True) -> str:
    """Render a unified diff for terminal display.

    Control characters are shown explicitly so CRLF changes stay visible.

    Args:
        patch (Sequence[str] | str): Diff lines or a single multiline string.
        color (bool): Colorize added/removed lines with yachalk.

    Returns:
        str: The rendered diff, one line per diff line.
    """
    lines: list[str] = patch.splitlines() if isinstance(patch, str) else list(patch)

    def process_line(line: str) -> str:
        content: str = line.replace("\r", "\\r").replace("\n", "\\n")
        if not color or not line:
            return content
        match line[0]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return content

    return "".join(f"{process_line(line)}\n" for line in lines)
