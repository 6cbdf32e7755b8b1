"""Descriptive statistics over numeric and categorical columns.

This module provides:
- Summary statistics (mean, median, sample variance and standard deviation,
  min/max, quartiles)
- Frequency tables for categorical values
- Equal-width binned frequencies for numeric values

Quartiles use linear interpolation between order statistics (the R-7 rule):
index = p * (n - 1), interpolating between the floor and ceiling elements.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from tabstat.core.dataset import Dataset
from tabstat.core.errors import EmptyInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BasicStats:
    """Summary statistics for a numeric sequence.

    Attributes:
        mean: Arithmetic mean
        median: Median of the sorted values
        std_dev: Sample standard deviation (n - 1 denominator)
        variance: Sample variance (n - 1 denominator)
        min: Smallest value
        max: Largest value
        count: Number of values
        q1: 25th percentile (linear interpolation)
        q3: 75th percentile (linear interpolation)
    """

    mean: float
    median: float
    std_dev: float
    variance: float
    min: float
    max: float
    count: int
    q1: float
    q3: float

    @property
    def iqr(self) -> float:
        """Interquartile range."""
        return self.q3 - self.q1

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "mean": self.mean,
            "median": self.median,
            "std_dev": self.std_dev,
            "variance": self.variance,
            "min": self.min,
            "max": self.max,
            "count": self.count,
            "q1": self.q1,
            "q3": self.q3,
        }

    def format_for_display(self, column: str) -> str:
        """Format as human-readable string."""
        lines = [
            f"=== Basic Statistics for '{column}' ===",
            f"Count: {self.count}",
            f"Mean: {self.mean:.4f}",
            f"Median: {self.median:.4f}",
            f"Standard Deviation: {self.std_dev:.4f}",
            f"Variance: {self.variance:.4f}",
            f"Minimum: {self.min:.4f}",
            f"Maximum: {self.max:.4f}",
            f"Q1 (25th percentile): {self.q1:.4f}",
            f"Q3 (75th percentile): {self.q3:.4f}",
        ]
        return "\n".join(lines)


@dataclass(frozen=True)
class FrequencyTable:
    """Occurrence counts of distinct values.

    The mapping is unordered; use ``most_common`` for a deterministic order.

    Attributes:
        frequencies: Distinct value -> count
        total_count: Number of values counted
    """

    frequencies: dict[str, int] = field(default_factory=dict)
    total_count: int = 0

    @property
    def distinct_count(self) -> int:
        return len(self.frequencies)

    def relative_frequencies(self) -> dict[str, float]:
        """Get count / total for every value."""
        if self.total_count == 0:
            return {}
        return {k: v / self.total_count for k, v in self.frequencies.items()}

    def most_common(self, limit: int | None = None) -> list[tuple[str, int]]:
        """Get (value, count) pairs by descending count, ties broken by value."""
        ordered = sorted(self.frequencies.items(), key=lambda kv: (-kv[1], kv[0]))
        return ordered if limit is None else ordered[:limit]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "frequencies": dict(self.most_common()),
            "total_count": self.total_count,
        }

    def format_for_display(self, column: str, limit: int = 10) -> str:
        """Format the top ``limit`` values as a human-readable string."""
        lines = [
            f"=== Frequency Analysis for '{column}' ===",
            f"Total Count: {self.total_count}",
        ]
        for value, count in self.most_common(limit):
            percentage = count / self.total_count * 100.0
            lines.append(f"{value}: {count} ({percentage:.2f}%)")

        remaining = self.distinct_count - limit
        if remaining > 0:
            lines.append(f"... and {remaining} more unique values")
        return "\n".join(lines)


@dataclass(frozen=True)
class FrequencyBin:
    """One equal-width interval of a binned frequency table."""

    start: float
    end: float
    count: int
    relative_frequency: float


@dataclass(frozen=True)
class BinnedFrequency:
    """Counts of numeric values per equal-width interval.

    Attributes:
        bins: Intervals in ascending order
        total_count: Number of values counted
    """

    bins: tuple[FrequencyBin, ...]
    total_count: int

    @property
    def counts(self) -> list[int]:
        return [b.count for b in self.bins]

    @property
    def is_constant(self) -> bool:
        """True when all values were equal and collapsed into one bin."""
        return len(self.bins) == 1 and self.bins[0].start == self.bins[0].end

    def format_for_display(self, column: str) -> str:
        """Format as a human-readable table."""
        lines = [f"=== Binned Frequency for '{column}' ==="]
        if self.is_constant:
            lines.append(f"All values are equal: {self.bins[0].start}")
            lines.append(f"Frequency: {self.total_count}")
            return "\n".join(lines)

        lines.append(f"{'Interval':<24} {'Count':<10} {'Relative':<10}")
        lines.append("-" * 44)
        for i, b in enumerate(self.bins):
            closing = "]" if i == len(self.bins) - 1 else ")"
            interval = f"[{b.start:.2f}, {b.end:.2f}{closing}"
            lines.append(f"{interval:<24} {b.count:<10} {b.relative_frequency:<10.4f}")
        return "\n".join(lines)


def median(sorted_values: Sequence[float]) -> float:
    """Median of already sorted values.

    Raises:
        EmptyInputError: If there are no values
    """
    n = len(sorted_values)
    if n == 0:
        raise EmptyInputError("median")
    mid = n // 2
    if n % 2 == 0:
        return (float(sorted_values[mid - 1]) + float(sorted_values[mid])) / 2.0
    return float(sorted_values[mid])


def quartile(sorted_values: Sequence[float], percentile: float) -> float:
    """Quantile of already sorted values by linear interpolation.

    Args:
        sorted_values: Values in ascending order
        percentile: Quantile level in [0, 1] (0.25 for Q1, 0.75 for Q3)

    Returns:
        Interpolated quantile

    Raises:
        EmptyInputError: If there are no values
        ValueError: If percentile is outside [0, 1]
    """
    if not 0.0 <= percentile <= 1.0:
        raise ValueError(f"Percentile must be within [0, 1], got {percentile}")
    n = len(sorted_values)
    if n == 0:
        raise EmptyInputError("quartile")

    index = percentile * (n - 1)
    lower = math.floor(index)
    upper = math.ceil(index)

    if lower == upper:
        return float(sorted_values[lower])

    weight = index - lower
    return float(sorted_values[lower]) * (1.0 - weight) + float(sorted_values[upper]) * weight


def basic_stats(values: Iterable[float]) -> BasicStats:
    """Compute summary statistics.

    A single observation has no sample variance; variance and standard
    deviation are NaN in that case.

    Args:
        values: Numeric values

    Returns:
        BasicStats

    Raises:
        EmptyInputError: If ``values`` is empty

    Example:
        >>> stats = basic_stats([2, 4, 4, 4, 5, 5, 7, 9])
        >>> stats.mean, round(stats.std_dev, 4)
        (5.0, 2.1381)
    """
    data = np.asarray(list(values), dtype=float)
    if data.size == 0:
        raise EmptyInputError("basic statistics")

    sorted_data = np.sort(data)
    count = int(data.size)
    variance = float(data.var(ddof=1)) if count > 1 else math.nan

    return BasicStats(
        mean=float(data.mean()),
        median=median(sorted_data),
        std_dev=math.sqrt(variance),
        variance=variance,
        min=float(sorted_data[0]),
        max=float(sorted_data[-1]),
        count=count,
        q1=quartile(sorted_data, 0.25),
        q3=quartile(sorted_data, 0.75),
    )


def frequency_table(values: Iterable[str]) -> FrequencyTable:
    """Count occurrences of each distinct value by exact string equality."""
    items = [str(v) for v in values]
    return FrequencyTable(frequencies=dict(Counter(items)), total_count=len(items))


def binned_frequency(values: Iterable[float], bins: int = 10) -> BinnedFrequency:
    """Count numeric values per equal-width interval between min and max.

    The maximum lands in the last bin. When every value is equal the result
    has a single zero-width bin holding all values.

    Args:
        values: Numeric values
        bins: Number of intervals

    Returns:
        BinnedFrequency

    Raises:
        EmptyInputError: If ``values`` is empty
        ValueError: If ``bins`` is less than 1
    """
    if bins < 1:
        raise ValueError(f"Number of bins must be at least 1, got {bins}")

    data = np.asarray(list(values), dtype=float)
    if data.size == 0:
        raise EmptyInputError("binned frequency")

    total = int(data.size)
    lo = float(data.min())
    hi = float(data.max())
    width = (hi - lo) / bins

    if width == 0.0:
        return BinnedFrequency(
            bins=(FrequencyBin(start=lo, end=hi, count=total, relative_frequency=1.0),),
            total_count=total,
        )

    indices = np.minimum(((data - lo) / width).astype(int), bins - 1)
    counts = np.bincount(indices, minlength=bins)

    result = []
    for i in range(bins):
        start = lo + i * width
        end = hi if i == bins - 1 else start + width
        count = int(counts[i])
        result.append(
            FrequencyBin(start=start, end=end, count=count, relative_frequency=count / total)
        )

    return BinnedFrequency(bins=tuple(result), total_count=total)


def analyze_column(dataset: Dataset, column: str) -> BasicStats:
    """Summary statistics of a dataset column's numeric values."""
    stats = basic_stats(dataset.get_numeric_column(column))
    logger.debug(f"Computed basic statistics for '{column}' (n={stats.count})")
    return stats


def analyze_column_frequency(dataset: Dataset, column: str) -> FrequencyTable:
    """Frequency table of a dataset column's raw cells."""
    return frequency_table(dataset.get_column(column))


def histogram_counts(
    values: Iterable[float], bins: int = 20
) -> tuple[list[int], list[float]]:
    """Counts over ``bins`` equal-width intervals spanning the data.

    A constant sequence is spread over a unit-wide range around its value.

    Returns:
        (counts, edges) with ``len(edges) == bins + 1``

    Raises:
        EmptyInputError: If ``values`` is empty
        ValueError: If ``bins`` is less than 1
    """
    if bins < 1:
        raise ValueError(f"Number of bins must be at least 1, got {bins}")
    data = np.asarray(list(values), dtype=float)
    if data.size == 0:
        raise EmptyInputError("histogram")

    counts, edges = np.histogram(data, bins=bins)
    return [int(c) for c in counts], [float(e) for e in edges]
