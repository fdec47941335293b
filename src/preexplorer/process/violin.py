from __future__ import annotations

from typing import Any, Iterable

from ..base import Comparison, Entity
from ..contracts.errors import NoDataError, ValidationError
from ..gnuplot.script import plot_command
from ..gnuplot.templates import bucket_rows, coordinates_array, kdensity_tables, violin_entries


class ProcessViolin(Entity):
    """A kernel density estimate of the samples at every domain point, drawn as violins."""

    def __init__(self, domain: Iterable[Any], image: Iterable[Iterable[Any]]) -> None:
        super().__init__()
        self.domain = tuple(domain)
        self.image = tuple(tuple(values) for values in image)
        if len(self.domain) != len(self.image):
            raise ValidationError(
                f"domain has {len(self.domain)} points but image has {len(self.image)} buckets"
            )

    def __len__(self) -> int:
        return len(self.image)

    def plotable_data(self) -> str:
        self._warn_if_empty(self.image)
        return bucket_rows(self.domain, self.image)

    def _check_data(self) -> None:
        if not self.image:
            raise NoDataError(f"{type(self).__name__} has no buckets to plot")
        for coordinate, values in zip(self.domain, self.image):
            if not values:
                # an empty block would shift every later gnuplot index by one
                raise NoDataError(f"{type(self).__name__} bucket at {coordinate!r} has no samples")

    def _script_body(self) -> str:
        self._check_data()
        path = self.data_path()
        script = coordinates_array(self.domain)
        script += kdensity_tables(path, len(self))
        script += "\n# Plotting the violins\n"
        script += "set style fill transparent solid 0.5\n"
        script += plot_command(violin_entries(path, len(self)))
        return script


class ProcessViolins(Comparison):
    entity_class = ProcessViolin

    def _script_body(self) -> str:
        script = ""
        entries = []
        for s in self.series():
            s.entity._check_data()
            suffix = f"_{s.index}"
            script += f"# {type(s.entity).__name__} number {s.index}\n"
            script += coordinates_array(s.entity.domain, suffix)
            script += kdensity_tables(s.path, len(s.entity), suffix)
            script += "\n"
            entries.extend(violin_entries(s.path, len(s.entity), suffix, str(s.index + 1), s.legend))
        script += "# Plotting the violins\n"
        script += "set style fill transparent solid 0.5\n"
        script += plot_command(entries)
        return script
