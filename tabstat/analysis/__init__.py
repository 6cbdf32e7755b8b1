"""Statistical analyses over Datasets.

This module contains:
- Descriptive statistics, frequency tables and binned frequencies
- Student's t distribution and normal quantiles
- One-sample, independent-samples and paired-samples t-tests
- Pearson correlation
- Random and stratified sampling
"""

from tabstat.analysis.correlation import pearson_correlation
from tabstat.analysis.descriptive import (
    BasicStats,
    BinnedFrequency,
    FrequencyBin,
    FrequencyTable,
    analyze_column,
    analyze_column_frequency,
    basic_stats,
    binned_frequency,
    frequency_table,
    histogram_counts,
    median,
    quartile,
)
from tabstat.analysis.distributions import StudentT, normal_quantiles
from tabstat.analysis.hypothesis import (
    Alternative,
    GroupStats,
    TTestKind,
    TTestParams,
    TTestResult,
    independent_samples_t_test,
    one_sample_t_test,
    paired_samples_t_test,
    welch_degrees_of_freedom,
)
from tabstat.analysis.sampling import random_sample, stratified_sample

__all__ = [
    # Descriptive
    "BasicStats",
    "BinnedFrequency",
    "FrequencyBin",
    "FrequencyTable",
    "analyze_column",
    "analyze_column_frequency",
    "basic_stats",
    "binned_frequency",
    "frequency_table",
    "histogram_counts",
    "median",
    "quartile",
    # Distributions
    "StudentT",
    "normal_quantiles",
    # Hypothesis tests
    "Alternative",
    "GroupStats",
    "TTestKind",
    "TTestParams",
    "TTestResult",
    "independent_samples_t_test",
    "one_sample_t_test",
    "paired_samples_t_test",
    "welch_degrees_of_freedom",
    # Correlation and sampling
    "pearson_correlation",
    "random_sample",
    "stratified_sample",
]
