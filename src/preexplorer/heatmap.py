from __future__ import annotations

from typing import Any, Iterable, Optional

import numpy as np

from .base import Comparison, Entity
from .configuration.plot import quote
from .contracts.enums import Style
from .contracts.errors import ValidationError
from .gnuplot.script import format_path, format_value, multiplot_layout


def grid_from_array(matrix: Any) -> tuple[list[int], list[int], list[Any]]:
    """Grid coordinates for a 2-D array: x is the column, row 0 is drawn on top."""
    arr = np.asarray(matrix)
    if arr.ndim != 2:
        raise ValidationError(f"expected a 2-D array, got shape {arr.shape}")
    rows, columns = arr.shape
    xs = list(range(columns))
    ys = list(range(rows - 1, -1, -1))
    return xs, ys, arr.T.reshape(-1).tolist()


class Heatmap(Entity):
    """Values over the grid ``xs x ys``; ``values`` is row-major over xs."""

    def __init__(self, xs: Iterable[Any], ys: Iterable[Any], values: Iterable[Any]) -> None:
        super().__init__()
        self.xs = tuple(xs)
        self.ys = tuple(ys)
        self.values = tuple(values)
        if len(self.xs) * len(self.ys) != len(self.values):
            raise ValidationError(
                f"The numbers of values ({len(self.values)}) does not match the grid "
                f"({len(self.xs)}x{len(self.ys)})"
            )

    @classmethod
    def from_array(cls, matrix: Any):
        return cls(*grid_from_array(matrix))

    def __len__(self) -> int:
        return len(self.values)

    def _rows(self, row_break: str = "") -> str:
        self._warn_if_empty(self.values)
        text = ""
        width = len(self.ys)
        for i, x in enumerate(self.xs):
            for j, y in enumerate(self.ys):
                text += f"{format_value(x)}\t{format_value(y)}\t{format_value(self.values[i * width + j])}\n"
            text += row_break
        return text

    def plotable_data(self) -> str:
        return self._rows()

    def draw(self, path, style: Optional[Style] = None) -> str:
        return f"plot {format_path(path)} using 1:2:3 with image\n"

    def _script_body(self) -> str:
        return self.draw(self.data_path())


class Heatmaps(Comparison):
    """Heatmaps side by side in one multiplot grid, child titles above each panel."""

    entity_class = Heatmap

    def _script_body(self) -> str:
        series = self.series()
        script = multiplot_layout(len(series), self.title or "")
        for s in series:
            script += f"set title {quote(s.legend)}\n"
            script += s.entity.draw(s.path, s.style)
        script += "unset multiplot\n"
        return script
