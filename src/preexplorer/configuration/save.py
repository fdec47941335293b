from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..contracts.errors import MissingIdError

DATA_DIR = "data"
PLOT_DIR = "plots"
PLOT_EXTENSION = "gnu"
DEFAULT_ROOT = Path("target") / "preexplorer"
ROOT_ENV_VAR = "PREEXPLORER_DIR"


def default_root() -> Path:
    """Output root: ``$PREEXPLORER_DIR`` or ``target/preexplorer``."""
    env_root = os.environ.get(ROOT_ENV_VAR)
    if env_root:
        return Path(env_root)
    return DEFAULT_ROOT


@dataclass
class SaveConfiguration:
    """Where and how the data of one plot is written."""

    root: Path = field(default_factory=default_root)
    extension: str = "txt"
    header: bool = True
    date: datetime = field(default_factory=datetime.now)
    id: Optional[str] = None

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        self.extension = self.extension.lstrip(".")

    def checked_id(self) -> str:
        if self.id is None:
            raise MissingIdError()
        return self.id

    def data_dir(self) -> Path:
        return self.root / DATA_DIR

    def plot_dir(self) -> Path:
        return self.root / PLOT_DIR

    def data_path_for(self, id: str) -> Path:
        name = f"{id}.{self.extension}" if self.extension else str(id)
        return self.data_dir() / name

    def plot_path_for(self, id: str) -> Path:
        return self.plot_dir() / f"{id}.{PLOT_EXTENSION}"

    def header_block(self, id: str, title: Optional[str]) -> str:
        if not self.header:
            return ""
        lines = []
        if title is not None:
            lines.append(f"# {title}")
        lines.append(f"# {id}")
        lines.append(f"# {self.date.isoformat(sep=' ', timespec='seconds')}")
        return "\n".join(lines) + "\n"
