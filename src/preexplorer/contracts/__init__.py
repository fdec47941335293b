from .enums import Style
from .errors import (
    PreexplorerError,
    ContractError,
    ValidationError,
    MissingIdError,
    NoDataError,
    OutputError,
    SavingError,
    PlottingError,
)

__all__ = [
    "Style",
    "PreexplorerError",
    "ContractError",
    "ValidationError",
    "MissingIdError",
    "NoDataError",
    "OutputError",
    "SavingError",
    "PlottingError",
]
