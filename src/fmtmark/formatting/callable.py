# fmtmark:header:start
#
#   project      : FmtMark
#   file         : callable.py
#   file_relpath : src/fmtmark/formatting/callable.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""In-process formatters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fmtmark.config.model import PostProcess
from fmtmark.formatting.base import Formatter, post_process_text

if TYPE_CHECKING:
    from collections.abc import Callable


class CallableFormatter(Formatter):
    """Formatter wrapping a plain ``str -> str`` function.

    Args:
        func (Callable[[str], str]): The upstream formatting function.
        post_process (PostProcess): Post-processing applied to its output.
    """

    def __init__(
        self,
        func: Callable[[str], str],
        post_process: PostProcess = PostProcess.NONE,
    ) -> None:
        super().__init__(post_process)
        self.func = func

    def format_str(self, source: str) -> str:
        return post_process_text(self.post_process, self.func(source))


class PassthroughFormatter(CallableFormatter):
    """Formatter for already formatted source: only post processing is applied."""

    def __init__(self, post_process: PostProcess = PostProcess.REPLACE_MARKERS) -> None:
        super().__init__(lambda source: source, post_process)
