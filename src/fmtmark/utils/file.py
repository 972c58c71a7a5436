# fmtmark:header:start
#
#   project      : FmtMark
#   file         : file.py
#   file_relpath : src/fmtmark/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""File helpers for FmtMark.

Source files are read and written with ``newline=""`` so CRLF sequences reach
the marker scanner untouched and rewritten text is written back byte-for-byte.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fmtmark.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from fmtmark.config.logging import FmtmarkLogger

logger: FmtmarkLogger = get_logger(__name__)


def read_source_text(path: Path) -> str:
    """Read a UTF-8 source file without newline translation.

    Args:
        path (Path): File to read.

    Returns:
        str: The file contents.

    Raises:
        OSError: If the file cannot be opened.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with path.open("r", encoding="utf-8", newline="") as f:
        text: str = f.read()
    logger.trace("Read %d characters from %s", len(text), path)
    return text


def write_source_text(path: Path, text: str) -> int:
    """Write ``text`` to ``path`` as UTF-8 without newline translation.

    Returns:
        int: Number of UTF-8 bytes written.
    """
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)
    bytes_written: int = len(text.encode("utf-8"))
    logger.debug("Wrote %d bytes to file %s", bytes_written, path)
    return bytes_written
