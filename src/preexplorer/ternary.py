"""Points on the 2-simplex, drawn inside an equilateral triangle."""

from __future__ import annotations

from typing import Any, Iterable

from .base import Comparison, Entity
from .configuration.plot import quote
from .contracts.enums import Style
from .contracts.errors import ValidationError
from .gnuplot.script import format_path, format_value, plot_command

# Corners: first coordinate bottom-left, second bottom-right, third on top.
TERNARY_FRAME = """# Barycentric to cartesian projection
tern_x(a,b,c) = (b + c / 2.0) / (a + b + c)
tern_y(a,b,c) = (sqrt(3.0) / 2.0) * c / (a + b + c)

unset border
unset xtics
unset ytics
unset xlabel
unset ylabel
set size ratio -1
set xrange [-0.1:1.1]
set yrange [-0.1:1.0]

# Triangle border
set arrow 1 from 0,0 to 1,0 nohead
set arrow 2 from 1,0 to 0.5,sqrt(3.0)/2.0 nohead
set arrow 3 from 0.5,sqrt(3.0)/2.0 to 0,0 nohead
"""


def ternary_frame(owner) -> str:
    """Projection, border and corner labels taken from the x, y and z labels of ``owner``."""
    a, b, c = owner.xlabel or "", owner.ylabel or "", owner.zlabel or ""
    return TERNARY_FRAME + (
        f"set label 1 {quote(a)} at -0.05,-0.05 center\n"
        f"set label 2 {quote(b)} at 1.05,-0.05 center\n"
        f"set label 3 {quote(c)} at 0.5,sqrt(3.0)/2.0+0.05 center\n\n"
    )


def _entry(path, style: Style) -> str:
    return f"{format_path(path)} using (tern_x($1,$2,$3)):(tern_y($1,$2,$3)) with {style.display}"


class Ternary(Entity):
    """Points with three non-negative coordinates, as fractions of a whole."""

    def __init__(self, points: Iterable[Iterable[Any]]) -> None:
        super().__init__(style=Style.points)
        self.points = tuple(tuple(point) for point in points)
        for point in self.points:
            if len(point) != 3:
                raise ValidationError(f"ternary points need 3 coordinates, got {len(point)}: {point!r}")

    def __len__(self) -> int:
        return len(self.points)

    def plotable_data(self) -> str:
        self._warn_if_empty(self.points)
        return "".join("\t".join(format_value(v) for v in point) + "\n" for point in self.points)

    def _script_body(self) -> str:
        dashtype = self.dashtype if self.dashtype is not None else 1
        return ternary_frame(self) + f"plot {_entry(self.data_path(), self.style)} dashtype {dashtype}\n"


class Ternaries(Comparison):
    entity_class = Ternary

    def _script_body(self) -> str:
        script = ternary_frame(self)
        return script + plot_command(
            f"{_entry(s.path, s.style)} title {quote(s.legend)} dashtype {s.dashtype}" for s in self.series()
        )
