from __future__ import annotations

import logging
from typing import Any, Iterable

from .base import Entity
from .contracts.errors import PlottingError, ValidationError
from .gnuplot.script import format_path, format_value

logger = logging.getLogger(__name__)


class Data(Entity):
    """Generic rows of ``dim`` values, saved for a hand-written gnuplot script.

    There is no sensible default drawing for arbitrary columns, so ``plot``
    writes the files and then raises ``PlottingError``.
    """

    def __init__(self, values: Iterable[Any], dim: int) -> None:
        super().__init__()
        if dim < 1:
            raise ValidationError(f"dim must be positive, got {dim}")
        self.values = tuple(values)
        self.dim = int(dim)
        if len(self.values) % self.dim:
            raise ValidationError(f"{len(self.values)} values cannot be split into rows of {self.dim}")

    def __len__(self) -> int:
        return len(self.values) // self.dim

    def plotable_data(self) -> str:
        self._warn_if_empty(self.values)
        text = ""
        for start in range(0, len(self.values), self.dim):
            row = self.values[start : start + self.dim]
            text += "\t".join(format_value(v) for v in row) + "\n"
        return text

    def _script_body(self) -> str:
        return (
            "# Generic data: edit the plot directive below to draw it.\n"
            f"# Columns: {self.dim}, rows separated by new lines, values by tabs.\n"
            "# Run it with: gnuplot <this script>\n"
            f"plot {format_path(self.data_path())}\n"
        )

    def plot(self, id: object):
        self.plot_later(id)
        logger.warning("Data %s saved but not plotted", self.checked_id())
        raise PlottingError(
            f"Data cannot be plotted automatically; edit and run {self.plot_path()} by hand"
        )
