"""Mutable plotting and saving options shared by every plottable kind."""

from __future__ import annotations

import copy
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from ..contracts.enums import Style
from .plot import PlotConfiguration, quote
from .save import DATA_DIR, PLOT_DIR, PLOT_EXTENSION, SaveConfiguration, default_root

Bound = Optional[float]


class Configuration:
    """Plot options + save options + free-form gnuplot ``set`` options.

    Setters mutate in place and return ``self`` so they can be chained.
    """

    def __init__(self, style: Union[Style, str, int] = Style.default) -> None:
        self.plot_config = PlotConfiguration(default_style=Style.coerce(style))
        self.save_config = SaveConfiguration()
        self.custom: Dict[str, str] = {}

    def __repr__(self) -> str:
        return (
            f"Configuration(plot_config={self.plot_config!r}, "
            f"save_config={self.save_config!r}, custom={self.custom!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return (
            self.plot_config == other.plot_config
            and self.save_config == other.save_config
            and self.custom == other.custom
        )

    def copy(self) -> "Configuration":
        return copy.deepcopy(self)

    # Scripts

    def opening_script(self, comparison: bool = False) -> str:
        script = self.plot_config.opening_script(comparison)
        for key, value in self.custom.items():
            script += f"set {key} {value}".rstrip() + "\n"
        return script

    def closing_script(self) -> str:
        return self.plot_config.closing_script()

    # Plot setters

    def set_title(self, title: object) -> "Configuration":
        self.plot_config.title = str(title)
        return self

    def set_logx(self, base: float = 0) -> "Configuration":
        self.plot_config.logx = float(base)
        return self

    def set_logy(self, base: float = 0) -> "Configuration":
        self.plot_config.logy = float(base)
        return self

    def set_xlabel(self, label: object) -> "Configuration":
        self.plot_config.xlabel = str(label)
        return self

    def set_ylabel(self, label: object) -> "Configuration":
        self.plot_config.ylabel = str(label)
        return self

    def set_zlabel(self, label: object) -> "Configuration":
        self.plot_config.zlabel = str(label)
        return self

    def set_xrange(self, low: Bound, high: Bound) -> "Configuration":
        self.plot_config.xrange = (low, high)
        return self

    def set_yrange(self, low: Bound, high: Bound) -> "Configuration":
        self.plot_config.yrange = (low, high)
        return self

    def set_xtics(self, tics: object) -> "Configuration":
        self.plot_config.xtics = str(tics)
        return self

    def set_ytics(self, tics: object) -> "Configuration":
        self.plot_config.ytics = str(tics)
        return self

    def set_style(self, style: Union[Style, str, int]) -> "Configuration":
        self.plot_config.style_override = Style.coerce(style)
        return self

    def set_dashtype(self, dashtype: int) -> "Configuration":
        self.plot_config.dashtype = int(dashtype)
        return self

    def set_pause(self, seconds: float) -> "Configuration":
        self.plot_config.pause = float(seconds)
        return self

    # Save setters

    def set_directory(self, root: Union[str, Path]) -> "Configuration":
        self.save_config.root = Path(root)
        return self

    def set_extension(self, extension: str) -> "Configuration":
        self.save_config.extension = str(extension).lstrip(".")
        return self

    def set_header(self, header: bool) -> "Configuration":
        self.save_config.header = bool(header)
        return self

    def set_date(self, date: datetime) -> "Configuration":
        self.save_config.date = date
        return self

    def set_id(self, id: object) -> "Configuration":
        self.save_config.id = str(id)
        return self

    def set_custom(self, key: str, value: object = "") -> "Configuration":
        self.custom[str(key)] = str(value)
        return self

    # Getters

    @property
    def title(self) -> Optional[str]:
        return self.plot_config.title

    @property
    def logx(self) -> Optional[float]:
        return self.plot_config.logx

    @property
    def logy(self) -> Optional[float]:
        return self.plot_config.logy

    @property
    def xlabel(self) -> Optional[str]:
        return self.plot_config.xlabel

    @property
    def ylabel(self) -> Optional[str]:
        return self.plot_config.ylabel

    @property
    def zlabel(self) -> Optional[str]:
        return self.plot_config.zlabel

    @property
    def xrange(self) -> Optional[Tuple[Bound, Bound]]:
        return self.plot_config.xrange

    @property
    def yrange(self) -> Optional[Tuple[Bound, Bound]]:
        return self.plot_config.yrange

    @property
    def xtics(self) -> Optional[str]:
        return self.plot_config.xtics

    @property
    def ytics(self) -> Optional[str]:
        return self.plot_config.ytics

    @property
    def style(self) -> Style:
        return self.plot_config.style

    @property
    def style_override(self) -> Optional[Style]:
        return self.plot_config.style_override

    @property
    def dashtype(self) -> Optional[int]:
        return self.plot_config.dashtype

    @property
    def pause(self) -> Optional[float]:
        return self.plot_config.pause

    @property
    def directory(self) -> Path:
        return self.save_config.root

    @property
    def extension(self) -> str:
        return self.save_config.extension

    @property
    def header(self) -> bool:
        return self.save_config.header

    @property
    def date(self) -> datetime:
        return self.save_config.date

    @property
    def id(self) -> Optional[str]:
        return self.save_config.id

    def checked_id(self) -> str:
        return self.save_config.checked_id()

    def get_custom(self, key: str) -> Optional[str]:
        return self.custom.get(key)

    # Paths

    def data_path(self) -> Path:
        return self.save_config.data_path_for(self.checked_id())

    def plot_path(self) -> Path:
        return self.save_config.plot_path_for(self.checked_id())


__all__ = [
    "Configuration",
    "PlotConfiguration",
    "SaveConfiguration",
    "DATA_DIR",
    "PLOT_DIR",
    "PLOT_EXTENSION",
    "default_root",
    "quote",
]
