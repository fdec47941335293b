from __future__ import annotations

from typing import Optional

from .configuration.plot import quote
from .contracts.enums import Style
from .gnuplot.script import format_path
from .heatmap import Heatmap, Heatmaps


class Contour(Heatmap):
    """Surface with isolines over the grid ``xs x ys``."""

    def __init__(self, xs, ys, values) -> None:
        super().__init__(xs, ys, values)
        self.config.plot_config.default_style = Style.lines

    def plotable_data(self) -> str:
        # gnuplot reads a grid only when every x row ends with a blank line
        return self._rows(row_break="\n")

    def draw(self, path, style: Optional[Style] = None) -> str:
        style = style or self.style
        script = "set surface # unset to plot only isolines\n"
        script += "set contour\n"
        if self.zlabel is not None:
            script += f"set zlabel {quote(self.zlabel)}\n"
        script += f"splot {format_path(path)} using 1:2:3 with {style.display}\n"
        return script


class Contours(Heatmaps):
    entity_class = Contour
