from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from ..contracts.errors import PlottingError

logger = logging.getLogger(__name__)

GNUPLOT_ENV_VAR = "PREEXPLORER_GNUPLOT"


def default_gnuplot_bin() -> str:
    return os.environ.get(GNUPLOT_ENV_VAR) or "gnuplot"


class GnuplotRunner:
    """Launch gnuplot on a written script without waiting for it."""

    name = "gnuplot_run"

    def __init__(self, gnuplot_bin: Optional[str] = None) -> None:
        self.gnuplot_bin = gnuplot_bin or default_gnuplot_bin()

    def command(self, script_path: Path) -> list[str]:
        gnuplot_path = shutil.which(self.gnuplot_bin) or self.gnuplot_bin
        return [gnuplot_path, str(script_path)]

    def spawn(self, script_path: Path) -> subprocess.Popen:
        """Start gnuplot on ``script_path``; the exit status is never collected."""
        script_path = Path(script_path)
        if not script_path.exists():
            raise PlottingError(f"gnuplot script not found: {script_path}")

        cmd = self.command(script_path)
        logger.info("Launching %s", " ".join(cmd))
        try:
            return subprocess.Popen(cmd)
        except FileNotFoundError as exc:
            raise PlottingError(f"gnuplot executable not found: {self.gnuplot_bin}") from exc
        except OSError as exc:
            raise PlottingError(f"could not launch gnuplot on {script_path}: {exc}") from exc
