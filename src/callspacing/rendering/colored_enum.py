# topmark:header:start
#
#   project      : CallSpacing
#   file         : colored_enum.py
#   file_relpath : src/callspacing/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware string enum used for human-facing outcome labels.

Members are declared as ``(text, colorizer)`` pairs. The enum ``.value`` stays
the plain text; the colorizer (typically a yachalk style) is exposed via
``.color``::

    class FileOutcome(ColoredStrEnum):
        CLEAN = ("clean", chalk.green)

    FileOutcome.CLEAN.value            # 'clean'
    FileOutcome.CLEAN.color("clean")   # green 'clean'
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display (see ``yachalk.ChalkBuilder``)."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return ``args`` joined by ``sep`` and decorated."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a member storing ``text`` as value and ``color`` apart."""
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def styled(self, enabled: bool = True) -> str:
        """Return the value, colorized when ``enabled``."""
        return self._color(self.value) if enabled else self.value
