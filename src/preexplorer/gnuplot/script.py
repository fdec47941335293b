from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Sequence

from ..configuration.plot import quote


def format_value(v: Any) -> str:
    return str(v)


def format_path(path: Path) -> str:
    """Quoted, forward-slash path usable by gnuplot on every platform."""
    return quote(Path(path).as_posix())


def path_stem(path: Path) -> str:
    """Path without extension, as a gnuplot string to concatenate suffixes onto."""
    return quote(Path(path).with_suffix("").as_posix())


def gnuplot_array(name: str, values: Sequence[Any]) -> str:
    """``array NAME[n] = [v1, v2, ...]``; gnuplot arrays are 1-indexed."""
    items = ", ".join(format_value(v) for v in values)
    return f"array {name}[{len(values)}] = [{items}]\n"


def plot_command(entries: Iterable[str], command: str = "plot") -> str:
    """Join several plot entries into one continued ``plot`` directive."""
    entries = list(entries)
    if not entries:
        return ""
    return f"{command} " + ", \\\n     ".join(entries) + "\n"


def multiplot_layout(count: int, title: str) -> str:
    rows = 1
    while rows * rows < count:
        rows += 1
    columns = -(-count // rows) if count else 1
    return f"set multiplot layout {rows},{columns} rowsfirst downwards title {quote(title)}\n"
