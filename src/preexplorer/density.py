from __future__ import annotations

from typing import Any, Iterable

from .base import Comparison, Entity
from .configuration.plot import quote
from .contracts.enums import Style
from .gnuplot.script import format_path, format_value, plot_command
from .gnuplot.templates import histogram_macros
from .stats import bounds


class Density(Entity):
    """Realizations of one random variable, drawn as a normalised 20-bin histogram."""

    def __init__(self, realizations: Iterable[Any]) -> None:
        super().__init__(style=Style.steps)
        self.realizations = tuple(realizations)

    def __len__(self) -> int:
        return len(self.realizations)

    def plotable_data(self) -> str:
        self._warn_if_empty(self.realizations)
        return "".join(f"{format_value(value)}\n" for value in self.realizations)

    def _script_body(self) -> str:
        minimum, maximum, length = bounds(self.realizations)
        dashtype = self.dashtype if self.dashtype is not None else 1
        script = "# Warning: this script only works when the data are real numbers.\n\n"
        script += histogram_macros(minimum, maximum, length)
        script += (
            f"plot {format_path(self.data_path())} using (hist($1,width)):(1.0/len) "
            f"smooth frequency with {self.style.display} dashtype {dashtype}\n"
        )
        return script


class Densities(Comparison):
    entity_class = Density

    def _script_body(self) -> str:
        script = ""
        entries = []
        for s in self.series():
            minimum, maximum, length = bounds(s.entity.realizations)
            suffix = f"_{s.index}"
            script += histogram_macros(minimum, maximum, length, suffix)
            entries.append(
                f"{format_path(s.path)} using (hist{suffix}($1,width{suffix})):(1.0/len{suffix}) "
                f"smooth frequency with {s.style.display} title {quote(s.legend)} dashtype {s.dashtype}"
            )
        return script + plot_command(entries)
