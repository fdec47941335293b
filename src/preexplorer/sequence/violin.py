from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from ..process.violin import ProcessViolin, ProcessViolins

if TYPE_CHECKING:
    from ..density import Densities


class SequenceViolin(ProcessViolin):
    """Violins at indices 0, 1, 2, ..."""

    def __init__(self, data: Iterable[Iterable[Any]]) -> None:
        data = [tuple(values) for values in data]
        super().__init__(range(len(data)), data)

    @property
    def data(self) -> tuple:
        return self.image

    @classmethod
    def from_densities(cls, densities: "Densities") -> "SequenceViolin":
        """One violin per density, keeping the comparison's configuration."""
        violin = cls(density.realizations for density in densities)
        violin.config = densities.config.copy()
        return violin


class SequenceViolins(ProcessViolins):
    entity_class = SequenceViolin
