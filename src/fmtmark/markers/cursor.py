# fmtmark:header:start
#
#   project      : FmtMark
#   file         : cursor.py
#   file_relpath : src/fmtmark/markers/cursor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Read cursor with copy-on-write output bookkeeping.

The cursor walks an immutable source string and tracks two positions:

- ``pos``: index of the next character to read.
- ``copy_mark``: index up to which source text has already been copied into
  the output buffer (``copy_mark <= pos`` at all times).

Source text is only ever copied by `Cursor.flush_to`, and the output buffer is
created on the first flush. If nothing is replaced, `Cursor.finish` hands back
the original string object and no buffer exists.
"""

from __future__ import annotations

from typing import Final

from fmtmark.markers.result import ReplaceResult

# Whitespace tolerated between marker tokens. ASCII only: formatters do not
# emit non-ASCII whitespace between tokens.
WHITESPACE: Final[frozenset[str]] = frozenset(" \t\n\r\x0b\x0c")


class Cursor:
    """Character cursor over ``source`` with lazy output assembly.

    Attributes:
        source (str): The text being scanned (never modified).
        length (int): ``len(source)``.
        pos (int): Index of the next character to read.
        copy_mark (int): Index up to which ``source`` has been copied out.
        replacements (int): Number of rendered replacements emitted so far.
    """

    __slots__ = ("source", "length", "pos", "copy_mark", "replacements", "_parts")

    source: str
    length: int
    pos: int
    copy_mark: int
    replacements: int
    _parts: list[str] | None

    def __init__(self, source: str) -> None:
        self.source = source
        self.length = len(source)
        self.pos = 0
        self.copy_mark = 0
        self.replacements = 0
        self._parts = None

    @property
    def at_end(self) -> bool:
        """True once every character has been read."""
        return self.pos >= self.length

    @property
    def current(self) -> str:
        """The character at ``pos``, or ``""`` at end of input."""
        return self.source[self.pos] if self.pos < self.length else ""

    def peek(self, offset: int = 1) -> str:
        """Return the character ``offset`` places after ``pos`` (``""`` past the end)."""
        idx = self.pos + offset
        return self.source[idx] if idx < self.length else ""

    def advance(self) -> str:
        """Consume and return the current character (``""`` at end of input)."""
        ch = self.current
        if ch:
            self.pos += 1
        return ch

    def startswith(self, token: str) -> bool:
        """True if the unread text begins with ``token``."""
        return self.source.startswith(token, self.pos)

    def skip_whitespace(self) -> None:
        """Advance past any run of `WHITESPACE` characters."""
        source, pos, length = self.source, self.pos, self.length
        while pos < length and source[pos] in WHITESPACE:
            pos += 1
        self.pos = pos

    def flush_to(self, end: int, new_copy_mark: int) -> None:
        """Copy ``source[copy_mark:end]`` to the output and move ``copy_mark``.

        Args:
            end (int): Exclusive end of the verbatim region to copy.
            new_copy_mark (int): Where verbatim copying resumes next time.
        """
        if self._parts is None:
            self._parts = []
        if end > self.copy_mark:
            self._parts.append(self.source[self.copy_mark : end])
        self.copy_mark = new_copy_mark

    def replace(self, start: int, end: int, text: str) -> None:
        """Replace ``source[start:end]`` with ``text`` in the output.

        Everything between the copy mark and ``start`` is flushed verbatim first.
        """
        self.flush_to(start, end)
        assert self._parts is not None
        self._parts.append(text)
        self.replacements += 1

    def finish(self) -> ReplaceResult:
        """Flush the tail and return the tagged result.

        Returns:
            ReplaceResult: ``UNCHANGED`` with the original object when nothing was
            flushed, otherwise ``REWRITTEN`` with the assembled text.
        """
        if self._parts is None:
            return ReplaceResult.unchanged(self.source)
        self.flush_to(self.length, self.length)
        return ReplaceResult.rewritten("".join(self._parts), self.replacements)
