from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..contracts.enums import Style


def quote(text: object) -> str:
    """Render ``text`` as a double-quoted gnuplot string."""
    escaped = str(text).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _format_bound(value: Optional[float]) -> str:
    # An open bound keeps gnuplot's autoscaling on that side.
    if value is None:
        return "*"
    return f"{value:g}" if isinstance(value, float) else str(value)


def _logscale(axis: str, factor: Optional[float]) -> str:
    if factor is None:
        return ""
    if factor <= 0:
        return f"set logscale {axis}\n"
    return f"set logscale {axis} {factor:g}\n"


@dataclass
class PlotConfiguration:
    """Everything that shapes the gnuplot script of one plot."""

    title: Optional[str] = None
    logx: Optional[float] = None
    logy: Optional[float] = None
    xlabel: Optional[str] = None
    ylabel: Optional[str] = None
    zlabel: Optional[str] = None
    xrange: Optional[Tuple[Optional[float], Optional[float]]] = None
    yrange: Optional[Tuple[Optional[float], Optional[float]]] = None
    xtics: Optional[str] = None
    ytics: Optional[str] = None
    dashtype: Optional[int] = None
    pause: Optional[float] = None
    # None until a style is chosen explicitly; readers go through ``style``.
    style_override: Optional[Style] = None
    default_style: Style = Style.default

    @property
    def style(self) -> Style:
        if self.style_override is not None:
            return self.style_override
        return self.default_style

    def opening_script(self, comparison: bool = False) -> str:
        script = ""
        if not comparison:
            script += "unset key\n"
        script += f"set title {quote(self.title or '')}\n"
        script += f"set xlabel {quote(self.xlabel or '')}\n"
        script += f"set ylabel {quote(self.ylabel or '')}\n"
        script += _logscale("x", self.logx)
        script += _logscale("y", self.logy)
        if self.xrange is not None:
            script += f"set xrange [{_format_bound(self.xrange[0])}:{_format_bound(self.xrange[1])}]\n"
        if self.yrange is not None:
            script += f"set yrange [{_format_bound(self.yrange[0])}:{_format_bound(self.yrange[1])}]\n"
        if self.xtics is not None:
            script += f"set xtics {self.xtics}\n"
        if self.ytics is not None:
            script += f"set ytics {self.ytics}\n"
        return script

    def closing_script(self) -> str:
        if self.pause is None:
            return "pause -1\n"
        return f"pause {self.pause:g}\n"
