from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional

from ..base import Comparison, Entity
from ..configuration.plot import quote
from ..contracts.enums import Style
from ..contracts.errors import ValidationError
from ..gnuplot.script import format_path, format_value, plot_command
from ..stats import variance_stats


class ProcessError(Entity):
    """Mean and standard error of the samples at every domain point, drawn as a band."""

    def __init__(self, domain: Iterable[Any], image: Iterable[Iterable[float]]) -> None:
        super().__init__()
        self.domain = tuple(domain)
        self.image = tuple(variance_stats(values) for values in image)
        if len(self.domain) != len(self.image):
            raise ValidationError(
                f"domain has {len(self.domain)} points but image has {len(self.image)} buckets"
            )

    def __len__(self) -> int:
        return len(self.image)

    def plotable_data(self) -> str:
        self._warn_if_empty(self.image)
        return "".join(
            f"{format_value(x)}\t{format_value(mean)}\t{format_value(error)}\n"
            for x, (mean, error) in zip(self.domain, self.image)
        )

    def draw_entries(self, path: Path, style: Style, dashtype: int, legend: Optional[str] = None) -> list[str]:
        title = f" title {quote(legend)}" if legend is not None else ""
        return [
            f"{format_path(path)} using 1:2 with {style.display}{title} dashtype {dashtype}",
            '"" using 1:($2+$3):($2-$3) with filledcurves fs transparent solid 0.5 '
            'linecolor rgb "dark-grey" notitle',
        ]

    def _script_body(self) -> str:
        dashtype = self.dashtype if self.dashtype is not None else 1
        return plot_command(self.draw_entries(self.data_path(), self.style, dashtype))


class ProcessErrors(Comparison):
    entity_class = ProcessError

    def _script_body(self) -> str:
        entries = []
        for s in self.series():
            entries.extend(s.entity.draw_entries(s.path, s.style, s.dashtype, s.legend))
        return plot_command(entries)
