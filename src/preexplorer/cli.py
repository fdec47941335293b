from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from .configuration.save import DATA_DIR, PLOT_DIR, PLOT_EXTENSION, default_root
from .contracts.errors import PreexplorerError
from .gnuplot.runner import GnuplotRunner
from .io import load_data_table
from .logging_utils import configure_logging, get_logger

logger = get_logger(__name__)


def saved_ids(root: Path) -> dict[str, tuple[bool, bool]]:
    """Map every saved id under ``root`` to (has data file, has plot script)."""
    data = {path.stem for path in (root / DATA_DIR).glob("*") if path.is_file()}
    plots = {path.stem for path in (root / PLOT_DIR).glob(f"*.{PLOT_EXTENSION}")}
    return {id: (id in data, id in plots) for id in sorted(data | plots)}


def _find_data_file(root: Path, id: str) -> Path:
    matches = sorted((root / DATA_DIR).glob(f"{id}.*"))
    if not matches:
        raise PreexplorerError(f"no data file for id {id!r} in {root / DATA_DIR}")
    return matches[0]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="preexplorer", description="Inspect and replot saved preexplorer output")
    parser.add_argument("--log-level", default=None, help="Logging level (defaults to $LOG_LEVEL or INFO).")
    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List saved ids.")
    show_parser = subparsers.add_parser("show", help="Summarise a saved data file.")
    show_parser.add_argument("id", help="Id the data was saved with.")
    replot_parser = subparsers.add_parser("replot", help="Launch gnuplot on a saved script.")
    replot_parser.add_argument("id", help="Id the script was saved with.")
    for sub in (list_parser, show_parser, replot_parser):
        sub.add_argument("--dir", type=Path, default=None, help="Output root (defaults to $PREEXPLORER_DIR).")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    if args.command is None:
        parser.print_help()
        return 0

    root = args.dir or default_root()
    try:
        if args.command == "list":
            for id, (has_data, has_plot) in saved_ids(root).items():
                print(f"{id}\tdata={'yes' if has_data else 'no'}\tplot={'yes' if has_plot else 'no'}")
        elif args.command == "show":
            table = load_data_table(_find_data_file(root, args.id))
            print(table.describe().to_string())
        elif args.command == "replot":
            GnuplotRunner().spawn(root / PLOT_DIR / f"{args.id}.{PLOT_EXTENSION}")
            print(f"gnuplot launched on {args.id}")
    except PreexplorerError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
