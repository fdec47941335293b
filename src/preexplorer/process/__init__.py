from .base import Process, Processes
from .bin import ProcessBin, ProcessBins
from .error import ProcessError, ProcessErrors
from .violin import ProcessViolin, ProcessViolins

__all__ = [
    "Process",
    "Processes",
    "ProcessBin",
    "ProcessBins",
    "ProcessError",
    "ProcessErrors",
    "ProcessViolin",
    "ProcessViolins",
]
