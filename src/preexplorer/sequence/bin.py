from __future__ import annotations

from typing import Any, Iterable

from ..process.bin import ProcessBin, ProcessBins


class SequenceBin(ProcessBin):
    """A histogram per index 0, 1, 2, ... drawn side by side."""

    def __init__(self, data: Iterable[Iterable[Any]], binwidth: float) -> None:
        data = [tuple(values) for values in data]
        super().__init__(range(len(data)), data, binwidth)

    @property
    def data(self) -> tuple:
        return self.image


class SequenceBins(ProcessBins):
    entity_class = SequenceBin
