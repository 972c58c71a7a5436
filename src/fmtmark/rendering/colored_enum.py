# fmtmark:header:start
#
#   project      : FmtMark
#   file         : colored_enum.py
#   file_relpath : src/fmtmark/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Color-aware enum primitives for human-facing rendering.

`ColoredStrEnum` keeps ``_value_`` as the plain ``str`` and stores a colorizer
(typically a `yachalk.ChalkBuilder`) separately, preserving Enum semantics
(hashing, equality, ``repr``) while letting the CLI decorate labels.

Example:
    ```python
    from yachalk import chalk

    class ReplaceStatus(ColoredStrEnum):
        UNCHANGED = ("unchanged", chalk.green)
        REWRITTEN = ("rewritten", chalk.yellow)

    print(ReplaceStatus.REWRITTEN.color("file.rs"))
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color
