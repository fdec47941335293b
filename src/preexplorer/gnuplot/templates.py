"""Gnuplot snippets shared by the bucketed kinds (bins, violins, densities).

Every helper takes a ``suffix`` that is appended to the gnuplot variables it
defines, so several children of one comparison can live in the same script.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

from ..configuration.plot import quote
from .script import format_path, format_value, gnuplot_array, path_stem


def bucket_rows(coordinates: Iterable[Any], buckets: Iterable[Sequence[Any]]) -> str:
    """One ``coordinate<TAB>value`` row per sample, buckets split by a double blank line."""
    text = ""
    for coordinate, values in zip(coordinates, buckets):
        for value in values:
            text += f"{format_value(coordinate)}\t{format_value(value)}\n"
        text += "\n\n"
    return text


def _first_title(legend: Optional[str]) -> str:
    if legend is None:
        return ""
    return f' title (i == 0 ? {quote(legend)} : "")'


def coordinates_array(coordinates: Sequence[Any], suffix: str = "") -> str:
    return gnuplot_array(f"TIMES{suffix}", coordinates)


def histogram_tables(data_path: Path, counts: Sequence[int], binwidth: float, suffix: str = "") -> str:
    """Write one normalised histogram table per bucket next to the data file."""
    return (
        f"BINWIDTH{suffix} = {format_value(binwidth)}\n"
        + gnuplot_array(f"DATA_POINTS{suffix}", counts)
        + f"""# Plotting each histogram
do for [i=0:{len(counts) - 1}] {{
    set table {path_stem(data_path)}.'_partial_plot'.i
    WEIGHT{suffix} = 1. / (DATA_POINTS{suffix}[i+1] * BINWIDTH{suffix})
    plot {format_path(data_path)} index i using 2:(WEIGHT{suffix}) bins binwidth=BINWIDTH{suffix} with boxes
    unset table
}}
"""
    )


def histogram_entry(
    data_path: Path,
    buckets: int,
    suffix: str = "",
    color: str = "i",
    legend: Optional[str] = None,
) -> str:
    """Draw every bucket histogram sideways at its coordinate (x:y:xlow:xhigh:ylow:yhigh)."""
    times = f"TIMES{suffix}[i+1]"
    return (
        f"for [i=0:{buckets - 1}] {path_stem(data_path)}.'_partial_plot'.i "
        f"using ({times}):1:({times}):({times}+$2):3:4 with boxxyerrorbars linecolor {color}"
        + _first_title(legend)
    )


def kdensity_tables(data_path: Path, buckets: int, suffix: str = "") -> str:
    """Write one kernel density table per bucket and track the largest density."""
    path = format_path(data_path)
    return f"""RENORMALIZE{suffix} = 2
do for [i=0:{buckets - 1}] {{
    # Computing some values
    set table $_
    plot {path} index i using 2:(1) smooth kdensity
    unset table
    RENORMALIZE{suffix} = (RENORMALIZE{suffix} < 2 * GPVAL_Y_MAX) ? 2 * GPVAL_Y_MAX : RENORMALIZE{suffix}
    # Plotting a greater domain
    set table {path_stem(data_path)}.'_partial_plot'.i
    x_min = GPVAL_X_MIN - 5 * GPVAL_KDENSITY_BANDWIDTH
    x_max = GPVAL_X_MAX + 5 * GPVAL_KDENSITY_BANDWIDTH
    set xrange [x_min:x_max]
    plot {path} index i using 2:(1) smooth kdensity
    unset table
    # Clean the plotting
    unset xrange
    unset yrange
}}
"""


def violin_entries(
    data_path: Path,
    buckets: int,
    suffix: str = "",
    color: str = "i",
    legend: Optional[str] = None,
) -> list[str]:
    """Right and left halves of every violin, mirrored around its coordinate."""
    times = f"TIMES{suffix}[i+1]"
    table = f"{path_stem(data_path)}.'_partial_plot'.i"
    right = (
        f"for [i=0:{buckets - 1}] {table} using ({times} + $2/RENORMALIZE{suffix}):1 "
        f"with filledcurve x={times} linecolor {color}" + _first_title(legend)
    )
    left = (
        f"for [i=0:{buckets - 1}] {table} using ({times} - $2/RENORMALIZE{suffix}):1 "
        f"with filledcurve x={times} linecolor {color} notitle"
    )
    return [right, left]


def histogram_macros(minimum: float, maximum: float, length: int, suffix: str = "", nbins: int = 20) -> str:
    """Variables and bucketing function for an empirical density."""
    script = f"nbins{suffix} = {nbins}.0 # number of bins\n"
    script += f"max{suffix} = {format_value(maximum)} # max value\n"
    script += f"min{suffix} = {format_value(minimum)} # min value\n"
    script += f"len{suffix} = {length}.0 # number of values\n"
    if maximum > minimum:
        script += f"width{suffix} = (max{suffix} - min{suffix}) / nbins{suffix} # width\n\n"
    else:
        script += f"width{suffix} = 1.0 # width, all values are equal\n\n"
    script += "# function used to map a value to the intervals\n"
    script += f"hist{suffix}(x,width) = width * floor(x/width) + width / 2.0\n\n"
    return script
