from .runner import GnuplotRunner, default_gnuplot_bin
from .script import format_path, format_value, gnuplot_array, multiplot_layout, path_stem, plot_command

__all__ = [
    "GnuplotRunner",
    "default_gnuplot_bin",
    "format_path",
    "format_value",
    "gnuplot_array",
    "multiplot_layout",
    "path_stem",
    "plot_command",
]
