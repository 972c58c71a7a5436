# fmtmark:header:start
#
#   project      : FmtMark
#   file         : base.py
#   file_relpath : src/fmtmark/formatting/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Formatter base class and the post-processing step.

Every formatter runs its upstream formatting first and then hands the result to
`post_process_text`, which replaces ``_blank_!``/``_comment_!`` markers (and,
optionally, ``#[doc = "..."]`` attributes) according to a `PostProcess` mode.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from fmtmark.config.logging import get_logger
from fmtmark.config.model import PostProcess
from fmtmark.markers.scanner import replace_markers
from fmtmark.utils.file import read_source_text, write_source_text

if TYPE_CHECKING:
    from pathlib import Path

    from fmtmark.config.logging import FmtmarkLogger
    from fmtmark.markers.result import ReplaceResult

logger: FmtmarkLogger = get_logger(__name__)


def post_process_text(mode: PostProcess, text: str) -> str:
    """Apply the post-processing ``mode`` to formatted ``text``.

    Args:
        mode (PostProcess): What to rewrite.
        text (str): Formatter output.

    Returns:
        str: The rewritten text, or ``text`` itself when nothing changed.

    Raises:
        MalformedSourceError: If a marker or doc block breaks its grammar.
    """
    if not mode.replace_markers:
        return text
    result: ReplaceResult = replace_markers(text, mode.replace_doc_blocks)
    logger.debug("Post processing (%s): %s", mode.key, result.status.value)
    return result.text


class Formatter(ABC):
    """Base class for formatters.

    Attributes:
        post_process (PostProcess): Post-processing applied after formatting.
    """

    post_process: PostProcess

    def __init__(self, post_process: PostProcess = PostProcess.NONE) -> None:
        self.post_process = post_process

    @abstractmethod
    def format_str(self, source: str) -> str:
        """Format ``source`` and return the post-processed result.

        Raises:
            FormatterError: If the formatter rejects the source.
            MalformedSourceError: If post processing finds a broken marker.
        """

    def format_file(self, path: Path) -> None:
        """Format the file at ``path`` in place.

        The file is only written when formatting and post processing both succeed.

        Raises:
            OSError: If the file cannot be read or written.
            FormatterError: If the formatter rejects the source.
            MalformedSourceError: If post processing finds a broken marker.
        """
        source: str = read_source_text(path)
        result: str = self.format_str(source)
        write_source_text(path, result)
