from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional

from ..configuration.plot import quote
from ..contracts.enums import Style
from ..gnuplot.script import format_path
from ..process.error import ProcessError, ProcessErrors

if TYPE_CHECKING:
    from ..density import Densities


class SequenceError(ProcessError):
    """Mean and standard error per index 0, 1, 2, ..., drawn with error bars."""

    def __init__(self, data: Iterable[Iterable[float]]) -> None:
        data = [tuple(values) for values in data]
        super().__init__(range(len(data)), data)

    @property
    def data(self) -> tuple:
        return self.image

    @classmethod
    def from_densities(cls, densities: "Densities") -> "SequenceError":
        """Summarise every density of a comparison, keeping its configuration."""
        sequence_error = cls(density.realizations for density in densities)
        sequence_error.config = densities.config.copy()
        return sequence_error

    def draw_entries(self, path: Path, style: Style, dashtype: int, legend: Optional[str] = None) -> list[str]:
        title = f" title {quote(legend)}" if legend is not None else ""
        return [
            f"{format_path(path)} using 1:2 with {style.display}{title} dashtype {dashtype}",
            f"{format_path(path)} using 1:2:3 with yerrorbars notitle",
        ]


class SequenceErrors(ProcessErrors):
    entity_class = SequenceError
