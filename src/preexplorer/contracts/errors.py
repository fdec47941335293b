from __future__ import annotations


class PreexplorerError(Exception):
    """Base error for preexplorer."""


class ContractError(PreexplorerError):
    """Raised when the library is used against its contract (a programming error)."""


class ValidationError(ContractError):
    """Raised when input data does not have the expected shape."""


class MissingIdError(ContractError):
    """Raised when an identifier is required but was never set."""

    def __init__(self, message: str = "Uninitialized id. Consider giving an id before processing.") -> None:
        super().__init__(message)


class NoDataError(ValidationError):
    """Raised when statistics are requested over an empty data set."""


class OutputError(PreexplorerError):
    """Raised when writing artifacts or launching gnuplot fails."""


class SavingError(OutputError):
    """Raised when a data or script file cannot be written."""


class PlottingError(OutputError):
    """Raised when gnuplot cannot be launched for a script."""
