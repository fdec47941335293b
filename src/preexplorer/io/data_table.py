from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import Sequence

import pandas as pd

from ..contracts.errors import NoDataError, ValidationError

INDEX_COLUMN = "index"


def _split_blocks(text: str) -> list[list[str]]:
    """Group data lines into gnuplot index blocks (split on double blank lines)."""
    blocks: list[list[str]] = [[]]
    blank_run = 0
    for line in text.splitlines():
        if line.startswith("#"):
            continue
        if not line.strip():
            blank_run += 1
            continue
        if blank_run >= 2 and blocks[-1]:
            blocks.append([])
        blank_run = 0
        blocks[-1].append(line)
    return [block for block in blocks if block]


def load_data_table(path: Path, columns: Sequence[str] | None = None) -> pd.DataFrame:
    """Load a data file written by ``save_with_id`` into a DataFrame.

    Handling:
    - ``#`` header lines are skipped.
    - A single blank line (contour rows) is ignored.
    - A double blank line starts a new gnuplot index block; the block number is
      kept in an ``index`` column.
    - ``columns`` names the data columns; otherwise they are ``c0..cN``.
    Raises NoDataError on a missing or empty file, ValidationError on a column
    count mismatch.
    """
    path = Path(path)
    if not path.exists():
        raise NoDataError(f"data file not found: {path}")

    blocks = _split_blocks(path.read_text(encoding="utf-8"))
    if not blocks:
        raise NoDataError(f"No data rows found in {path}")

    frames = []
    for number, lines in enumerate(blocks):
        df = pd.read_csv(StringIO("\n".join(lines)), sep="\t", header=None, engine="python")
        df = df.dropna(axis=1, how="all")
        df.insert(0, INDEX_COLUMN, number)
        frames.append(df)
    table = pd.concat(frames, ignore_index=True)

    width = table.shape[1] - 1
    if columns is not None:
        if len(columns) != width:
            raise ValidationError(f"Column count mismatch: expected {len(columns)} vs data {width} in {path}")
        names = list(columns)
    else:
        names = [f"c{i}" for i in range(width)]
    table.columns = [INDEX_COLUMN] + names
    return table
