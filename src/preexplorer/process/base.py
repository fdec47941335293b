from __future__ import annotations

from typing import Any, Iterable

from ..base import Comparison, Entity
from ..configuration.plot import quote
from ..contracts.errors import ValidationError
from ..gnuplot.script import format_path, format_value, plot_command


class Process(Entity):
    """Values indexed by an arbitrary domain, e.g. a time series."""

    def __init__(self, domain: Iterable[Any], image: Iterable[Any]) -> None:
        super().__init__()
        self.domain = tuple(domain)
        self.image = tuple(image)
        if len(self.domain) != len(self.image):
            raise ValidationError(f"domain has {len(self.domain)} points but image has {len(self.image)}")

    def __len__(self) -> int:
        return len(self.domain)

    def plotable_data(self) -> str:
        self._warn_if_empty(self.domain)
        return "".join(
            f"{format_value(time)}\t{format_value(value)}\n" for time, value in zip(self.domain, self.image)
        )

    def _script_body(self) -> str:
        dashtype = self.dashtype if self.dashtype is not None else 1
        return f"plot {format_path(self.data_path())} using 1:2 with {self.style.display} dashtype {dashtype}\n"


class Processes(Comparison):
    entity_class = Process

    def _script_body(self) -> str:
        return plot_command(
            f"{format_path(s.path)} using 1:2 with {s.style.display} title {quote(s.legend)} dashtype {s.dashtype}"
            for s in self.series()
        )
