"""Error taxonomy for tabstat.

Every failure raised by the computational core belongs to one closed set of
kinds. Callers branch on ``error.kind`` (or the exception class) and read the
structured fields instead of parsing messages.

Example:
    >>> try:
    ...     dataset.get_numeric_column("city")
    ... except TabstatError as e:
    ...     if e.kind == ErrorKind.NO_NUMERIC_DATA:
    ...         print(f"{e.column} is not numeric")
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Kinds of errors the core can raise."""

    COLUMN_NOT_FOUND = "column_not_found"
    NO_NUMERIC_DATA = "no_numeric_data"
    EMPTY_INPUT = "empty_input"
    INSUFFICIENT_DATA = "insufficient_data"
    MISMATCHED_LENGTH = "mismatched_length"
    INVALID_TEST_TYPE = "invalid_test_type"
    SAMPLE_SIZE_TOO_LARGE = "sample_size_too_large"
    ZERO_VARIANCE = "zero_variance"
    INVALID_DEGREES_OF_FREEDOM = "invalid_degrees_of_freedom"
    UNSUPPORTED_FORMAT = "unsupported_format"


class TabstatError(Exception):
    """Base class for all tabstat errors.

    Attributes:
        kind: Category of the error
        message: Human-readable message
        details: Structured fields describing the failure
    """

    kind: ErrorKind

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "details": self.details,
        }


class ColumnNotFoundError(TabstatError):
    """Requested header is not present in the dataset."""

    kind = ErrorKind.COLUMN_NOT_FOUND

    def __init__(self, column: str) -> None:
        super().__init__(f"Column '{column}' not found", column=column)
        self.column = column


class NoNumericDataError(TabstatError):
    """Column exists but none of its cells parse as numbers."""

    kind = ErrorKind.NO_NUMERIC_DATA

    def __init__(self, column: str) -> None:
        super().__init__(f"No numeric data found in column '{column}'", column=column)
        self.column = column


class EmptyInputError(TabstatError):
    """A statistic was requested on an empty sequence."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Cannot compute {operation} for empty data", operation=operation
        )
        self.operation = operation


class InsufficientDataError(TabstatError):
    """Fewer observations than a test requires."""

    kind = ErrorKind.INSUFFICIENT_DATA

    def __init__(self, required: int, actual: int, group: str | None = None) -> None:
        where = f" in group '{group}'" if group else ""
        super().__init__(
            f"At least {required} observations required{where}, got {actual}",
            required=required,
            actual=actual,
            group=group,
        )
        self.required = required
        self.actual = actual
        self.group = group


class MismatchedLengthError(TabstatError):
    """Paired sequences have different lengths."""

    kind = ErrorKind.MISMATCHED_LENGTH

    def __init__(self, first_length: int, second_length: int) -> None:
        super().__init__(
            f"Paired data must have equal lengths, got {first_length} and {second_length}",
            first_length=first_length,
            second_length=second_length,
        )
        self.first_length = first_length
        self.second_length = second_length


class InvalidTestTypeError(TabstatError):
    """Unrecognized alternative-hypothesis selector."""

    kind = ErrorKind.INVALID_TEST_TYPE

    def __init__(self, selector: Any) -> None:
        super().__init__(
            f"Invalid test type: {selector!r}. "
            "Use 'two-sided' (1), 'greater' (2) or 'less' (3)",
            selector=selector,
        )
        self.selector = selector


class SampleSizeTooLargeError(TabstatError):
    """Requested sample exceeds the population size."""

    kind = ErrorKind.SAMPLE_SIZE_TOO_LARGE

    def __init__(self, size: int, population: int) -> None:
        super().__init__(
            f"Sample size {size} cannot be larger than dataset size {population}",
            size=size,
            population=population,
        )
        self.size = size
        self.population = population


class ZeroVarianceError(TabstatError):
    """Standard error of a t statistic is zero, so t is undefined."""

    kind = ErrorKind.ZERO_VARIANCE

    def __init__(self, test: str, mean_difference: float) -> None:
        super().__init__(
            f"Standard error is zero in {test}; the t statistic is undefined "
            f"(mean difference = {mean_difference:.4g})",
            test=test,
            mean_difference=mean_difference,
        )
        self.test = test
        self.mean_difference = mean_difference


class InvalidDegreesOfFreedomError(TabstatError):
    """A t distribution was requested with non-positive or non-finite df."""

    kind = ErrorKind.INVALID_DEGREES_OF_FREEDOM

    def __init__(self, df: float) -> None:
        super().__init__(
            f"Degrees of freedom must be positive and finite, got {df}", df=df
        )
        self.df = df


class UnsupportedFormatError(TabstatError):
    """File extension is not one the loader understands."""

    kind = ErrorKind.UNSUPPORTED_FORMAT

    def __init__(self, path: str, extension: str) -> None:
        super().__init__(
            f"Unsupported file format: '{extension or '(none)'}' ({path})",
            path=path,
            extension=extension,
        )
        self.path = path
        self.extension = extension
