from __future__ import annotations

from enum import Enum
from typing import Union


class Style(str, Enum):
    """Gnuplot drawing styles.

    ``default`` is a real member: it draws with ``lines``.
    """

    default = "default"
    lines = "lines"
    points = "points"
    linespoints = "linespoints"
    impulses = "impulses"
    dots = "dots"
    steps = "steps"
    fsteps = "fsteps"
    histeps = "histeps"
    boxes = "boxes"

    @classmethod
    def from_str(cls, name: str) -> "Style":
        """Parse a style name or symbol; unknown input gives ``lines``."""
        key = str(name).strip().lower()
        try:
            return cls(key)
        except ValueError:
            return _ALIASES.get(key, cls.lines)

    @classmethod
    def from_index(cls, index: int) -> "Style":
        """Map ``0..9`` (declaration order) to a style; unknown gives ``lines``."""
        try:
            return _BY_INDEX[int(index)]
        except (KeyError, TypeError, ValueError):
            return cls.lines

    @classmethod
    def coerce(cls, value: Union["Style", str, int]) -> "Style":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.lines
        if isinstance(value, int):
            return cls.from_index(value)
        return cls.from_str(value)

    @property
    def display(self) -> str:
        if self is Style.default:
            return Style.lines.value
        return self.value

    def __str__(self) -> str:
        return self.display


_ALIASES: dict[str, Style] = {
    "-": Style.lines,
    "+": Style.points,
    "-+-": Style.linespoints,
    "|": Style.impulses,
    ".": Style.dots,
    "_|": Style.steps,
    "|-": Style.fsteps,
    "_-_": Style.histeps,
    "_--_": Style.boxes,
}

_BY_INDEX: dict[int, Style] = {i: style for i, style in enumerate(Style)}
