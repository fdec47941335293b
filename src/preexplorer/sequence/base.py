from __future__ import annotations

from typing import Any, Iterable

from ..base import Comparison, Entity
from ..configuration.plot import quote
from ..gnuplot.script import format_path, format_value, plot_command


class Sequence(Entity):
    """Values indexed by 0, 1, 2, ..."""

    def __init__(self, data: Iterable[Any]) -> None:
        super().__init__()
        self.data = tuple(data)

    def __len__(self) -> int:
        return len(self.data)

    def plotable_data(self) -> str:
        self._warn_if_empty(self.data)
        return "".join(f"{counter}\t{format_value(value)}\n" for counter, value in enumerate(self.data))

    def _script_body(self) -> str:
        dashtype = self.dashtype if self.dashtype is not None else 1
        return f"plot {format_path(self.data_path())} using 1:2 with {self.style.display} dashtype {dashtype}\n"


class Sequences(Comparison):
    """Several ``Sequence`` plotted on the same axes, titles used as legend."""

    entity_class = Sequence

    def _script_body(self) -> str:
        return plot_command(
            f"{format_path(s.path)} using 1:2 with {s.style.display} title {quote(s.legend)} dashtype {s.dashtype}"
            for s in self.series()
        )
