"""Save data and gnuplot scripts to explore results before plotting them properly."""

import logging

from .base import Comparison, Entity, Plotable, Saveable
from .configuration import DATA_DIR, PLOT_DIR, Configuration, PlotConfiguration, SaveConfiguration
from .contour import Contour, Contours
from .contracts import (
    ContractError,
    MissingIdError,
    NoDataError,
    OutputError,
    PlottingError,
    PreexplorerError,
    SavingError,
    Style,
    ValidationError,
)
from .data import Data
from .density import Densities, Density
from .explore import preexplore
from .heatmap import Heatmap, Heatmaps
from .io import load_data_table
from .process import (
    Process,
    ProcessBin,
    ProcessBins,
    Processes,
    ProcessError,
    ProcessErrors,
    ProcessViolin,
    ProcessViolins,
)
from .sequence import (
    Sequence,
    SequenceBin,
    SequenceBins,
    SequenceError,
    SequenceErrors,
    Sequences,
    SequenceViolin,
    SequenceViolins,
)
from .stats import variance_stats
from .ternary import Ternaries, Ternary

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Comparison",
    "Configuration",
    "Contour",
    "Contours",
    "ContractError",
    "DATA_DIR",
    "Data",
    "Densities",
    "Density",
    "Entity",
    "Heatmap",
    "Heatmaps",
    "MissingIdError",
    "NoDataError",
    "OutputError",
    "PLOT_DIR",
    "PlotConfiguration",
    "Plotable",
    "PlottingError",
    "PreexplorerError",
    "Process",
    "ProcessBin",
    "ProcessBins",
    "ProcessError",
    "ProcessErrors",
    "ProcessViolin",
    "ProcessViolins",
    "Processes",
    "SaveConfiguration",
    "Saveable",
    "SavingError",
    "Sequence",
    "SequenceBin",
    "SequenceBins",
    "SequenceError",
    "SequenceErrors",
    "SequenceViolin",
    "SequenceViolins",
    "Sequences",
    "Style",
    "Ternaries",
    "Ternary",
    "ValidationError",
    "load_data_table",
    "preexplore",
    "variance_stats",
]
