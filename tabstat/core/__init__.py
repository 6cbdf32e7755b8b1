"""Core data model for tabstat.

This module contains:
- Dataset with typed column access and numeric coercion
- Error taxonomy shared by every analysis
- CSV/Excel loading and CSV export
"""

from tabstat.core.dataset import Dataset, DatasetSummary, NumericCoercion
from tabstat.core.errors import (
    ColumnNotFoundError,
    EmptyInputError,
    ErrorKind,
    InsufficientDataError,
    InvalidDegreesOfFreedomError,
    InvalidTestTypeError,
    MismatchedLengthError,
    NoNumericDataError,
    SampleSizeTooLargeError,
    TabstatError,
    UnsupportedFormatError,
    ZeroVarianceError,
)

__all__ = [
    "ColumnNotFoundError",
    "Dataset",
    "DatasetSummary",
    "EmptyInputError",
    "ErrorKind",
    "InsufficientDataError",
    "InvalidDegreesOfFreedomError",
    "InvalidTestTypeError",
    "MismatchedLengthError",
    "NoNumericDataError",
    "NumericCoercion",
    "SampleSizeTooLargeError",
    "TabstatError",
    "UnsupportedFormatError",
    "ZeroVarianceError",
]


def __getattr__(name: str):
    """Lazy imports for the file loaders."""
    if name in ("read_file", "read_csv_file", "read_excel_file", "save_dataset_to_csv"):
        from tabstat.core import loader

        return getattr(loader, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
