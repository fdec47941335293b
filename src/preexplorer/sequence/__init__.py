from .base import Sequence, Sequences
from .bin import SequenceBin, SequenceBins
from .error import SequenceError, SequenceErrors
from .violin import SequenceViolin, SequenceViolins

__all__ = [
    "Sequence",
    "Sequences",
    "SequenceBin",
    "SequenceBins",
    "SequenceError",
    "SequenceErrors",
    "SequenceViolin",
    "SequenceViolins",
]
