"""Student's t-tests: one-sample, independent-samples and paired-samples.

Each test is a single call that takes the data plus one ``TTestParams`` value
(significance level, alternative hypothesis, equal-variance flag) and returns
an immutable ``TTestResult``.

p-values and critical values come from a Student's t distribution with the
computed degrees of freedom:

==========  ====================  =====================
Alternative  p-value               critical value
==========  ====================  =====================
two-sided   2 * (1 - CDF(|t|))    invCDF(1 - alpha / 2)
greater     1 - CDF(t)            invCDF(1 - alpha)
less        CDF(t)                invCDF(alpha)
==========  ====================  =====================

The null hypothesis is rejected when p < alpha.

Example:
    >>> params = TTestParams(alpha=0.05, alternative="two-sided", equal_variance=True)
    >>> result = independent_samples_t_test(
    ...     [20, 22, 19, 24, 25], [28, 30, 27, 26, 29], params
    ... )
    >>> result.reject_null
    True
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from tabstat.analysis.correlation import pearson_correlation
from tabstat.analysis.descriptive import BasicStats, basic_stats
from tabstat.analysis.distributions import StudentT
from tabstat.core.errors import (
    InsufficientDataError,
    InvalidTestTypeError,
    MismatchedLengthError,
    ZeroVarianceError,
)

logger = logging.getLogger(__name__)

MIN_OBSERVATIONS = 2


class Alternative(str, Enum):
    """Alternative hypothesis of a t-test."""

    TWO_SIDED = "two-sided"  # mean differs
    GREATER = "greater"  # mean is larger
    LESS = "less"  # mean is smaller

    @classmethod
    def parse(cls, selector: Any) -> Alternative:
        """Resolve a selector to an Alternative.

        Accepts members, their values or names, the menu choices "1", "2" and
        "3", and a few common spellings ("two-tailed", "right", "<", ...).

        Raises:
            InvalidTestTypeError: If the selector is not recognized
        """
        if isinstance(selector, cls):
            return selector

        key = str(selector).strip().lower().replace("_", "-").replace(" ", "-")
        aliases = {
            "1": cls.TWO_SIDED,
            "two-sided": cls.TWO_SIDED,
            "twosided": cls.TWO_SIDED,
            "two-tailed": cls.TWO_SIDED,
            "both": cls.TWO_SIDED,
            "!=": cls.TWO_SIDED,
            "ne": cls.TWO_SIDED,
            "2": cls.GREATER,
            "greater": cls.GREATER,
            "right": cls.GREATER,
            ">": cls.GREATER,
            "gt": cls.GREATER,
            "3": cls.LESS,
            "less": cls.LESS,
            "left": cls.LESS,
            "<": cls.LESS,
            "lt": cls.LESS,
        }
        try:
            return aliases[key]
        except KeyError:
            raise InvalidTestTypeError(selector) from None

    @property
    def symbol(self) -> str:
        """Relation asserted by the alternative hypothesis."""
        return {"two-sided": "≠", "greater": ">", "less": "<"}[self.value]

    @property
    def null_symbol(self) -> str:
        """Relation asserted by the matching null hypothesis."""
        return {"two-sided": "=", "greater": "≤", "less": "≥"}[self.value]


class TTestKind(str, Enum):
    """Which t-test produced a result."""

    ONE_SAMPLE = "one_sample"
    INDEPENDENT = "independent_samples"
    PAIRED = "paired_samples"


class TTestParams(BaseModel):
    """Parameters shared by all t-tests.

    Attributes:
        alpha: Significance level, strictly between 0 and 1
        alternative: Alternative hypothesis
        equal_variance: Pool variances in the independent-samples test
            (False selects Welch's test); ignored by the other tests
    """

    model_config = ConfigDict(frozen=True)

    alpha: float = Field(default=0.05, gt=0.0, lt=1.0, description="Significance level")
    alternative: Alternative = Field(
        default=Alternative.TWO_SIDED, description="Alternative hypothesis"
    )
    equal_variance: bool = Field(
        default=True, description="Assume equal variances (pooled test)"
    )

    @field_validator("alternative", mode="before")
    @classmethod
    def parse_alternative(cls, v: Any) -> Alternative:
        """Accept menu choices and aliases for the alternative."""
        return Alternative.parse(v)


@dataclass(frozen=True)
class GroupStats:
    """Descriptive statistics of one group entering a t-test."""

    name: str
    n: int
    mean: float
    std_dev: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"name": self.name, "n": self.n, "mean": self.mean, "std_dev": self.std_dev}


@dataclass(frozen=True)
class TTestResult:
    """Outcome of a t-test.

    Attributes:
        kind: Which test was run
        alternative: Alternative hypothesis
        alpha: Significance level
        groups: Descriptive statistics per group (one or two)
        statistic: t statistic
        df: Degrees of freedom (fractional for Welch's test)
        p_value: p-value under the chosen alternative
        critical_value: Critical t for the chosen alternative
        standard_error: Standard error in the denominator of t
        mean_difference: Numerator of t (mean - mu0, mean1 - mean2 or mean of differences)
        reject_null: True when p_value < alpha
        mu0: Hypothesized mean (one-sample test)
        equal_variance: Pooled (True) or Welch (False) (independent test)
        correlation: Pearson r between the measurements (paired test)
        difference_summary: Summary of the paired differences (paired test)
    """

    kind: TTestKind
    alternative: Alternative
    alpha: float
    groups: tuple[GroupStats, ...]
    statistic: float
    df: float
    p_value: float
    critical_value: float
    standard_error: float
    mean_difference: float
    reject_null: bool
    mu0: float | None = None
    equal_variance: bool | None = None
    correlation: float | None = None
    difference_summary: BasicStats | None = None

    def hypotheses(self) -> tuple[str, str]:
        """Get the (H0, H1) statements."""
        alt = self.alternative
        if self.kind == TTestKind.ONE_SAMPLE:
            lhs, rhs = "μ", f"{self.mu0:g}"
        elif self.kind == TTestKind.INDEPENDENT:
            lhs, rhs = "μ₁", "μ₂"
        else:
            lhs, rhs = "μd", "0"
        return f"H₀: {lhs} {alt.null_symbol} {rhs}", f"H₁: {lhs} {alt.symbol} {rhs}"

    def conclusion(self) -> str:
        """Plain-language statement of the decision."""
        alt = self.alternative
        if self.kind == TTestKind.ONE_SAMPLE:
            subject = "The sample mean"
            target = f"{self.mu0:g}"
        elif self.kind == TTestKind.INDEPENDENT:
            subject = f"The mean of '{self.groups[0].name}'"
            target = f"the mean of '{self.groups[1].name}'"
        else:
            subject = f"'{self.groups[0].name}'"
            target = f"'{self.groups[1].name}'"

        relation = {
            Alternative.TWO_SIDED: "different from",
            Alternative.GREATER: "greater than",
            Alternative.LESS: "less than",
        }[alt]

        if self.reject_null:
            return f"{subject} is significantly {relation} {target}."
        return f"{subject} is not significantly {relation} {target}."

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        h0, h1 = self.hypotheses()
        return {
            "kind": self.kind.value,
            "alternative": self.alternative.value,
            "alpha": self.alpha,
            "groups": [g.to_dict() for g in self.groups],
            "statistic": self.statistic,
            "df": self.df,
            "p_value": self.p_value,
            "critical_value": self.critical_value,
            "standard_error": self.standard_error,
            "mean_difference": self.mean_difference,
            "reject_null": self.reject_null,
            "null_hypothesis": h0,
            "alternative_hypothesis": h1,
            "mu0": self.mu0,
            "equal_variance": self.equal_variance,
            "correlation": self.correlation,
            "difference_summary": (
                self.difference_summary.to_dict() if self.difference_summary else None
            ),
        }

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        titles = {
            TTestKind.ONE_SAMPLE: "One-Sample t-Test",
            TTestKind.INDEPENDENT: "Independent-Samples t-Test",
            TTestKind.PAIRED: "Paired-Samples t-Test",
        }
        lines = [f"=== {titles[self.kind]} ==="]

        for i, g in enumerate(self.groups, start=1):
            label = g.name if len(self.groups) == 1 else f"Group {i} ({g.name})"
            lines.append(f"{label}: n = {g.n}, mean = {g.mean:.4f}, s = {g.std_dev:.4f}")

        if self.kind == TTestKind.ONE_SAMPLE:
            lines.append(f"Hypothesized mean (μ₀): {self.mu0:.4f}")
        elif self.kind == TTestKind.INDEPENDENT:
            lines.append(f"Mean difference: {self.mean_difference:.4f}")
            lines.append(
                f"Equal variances assumed: {'yes' if self.equal_variance else 'no (Welch)'}"
            )
        else:
            lines.append(f"Correlation (r): {self.correlation:.4f}")
            lines.append(f"Mean difference (d̄): {self.mean_difference:.4f}")
            if self.difference_summary is not None:
                lines.append(f"Std dev of differences: {self.difference_summary.std_dev:.4f}")
        lines.append(f"Standard error: {self.standard_error:.4f}")

        h0, h1 = self.hypotheses()
        lines.extend(["", "Hypotheses:", f"  {h0}", f"  {h1}"])

        df_format = ".2f" if self.kind == TTestKind.INDEPENDENT else ".0f"
        critical = (
            f"±{self.critical_value:.4f}"
            if self.alternative == Alternative.TWO_SIDED
            else f"{self.critical_value:.4f}"
        )
        lines.extend([
            "",
            "Test statistic:",
            f"  t = {self.statistic:.4f}",
            f"  df = {self.df:{df_format}}",
            f"  p-value = {self.p_value:.6f}",
            f"  α = {self.alpha:.3f}",
            f"  critical value = {critical}",
            "",
            "Conclusion:",
        ])

        if self.reject_null:
            lines.append(f"  p-value ({self.p_value:.6f}) < α ({self.alpha:.3f}): reject H₀.")
        else:
            lines.append(
                f"  p-value ({self.p_value:.6f}) ≥ α ({self.alpha:.3f}): fail to reject H₀."
            )
        lines.append(f"  {self.conclusion()}")

        if self.difference_summary is not None:
            d = self.difference_summary
            lines.extend([
                "",
                "Differences:",
                f"  min = {d.min:.4f}, max = {d.max:.4f}, median = {d.median:.4f}",
            ])

        return "\n".join(lines)


def _as_array(data: Sequence[float]) -> np.ndarray:
    return np.asarray(list(data), dtype=float)


def _require(data: np.ndarray, group: str | None = None) -> None:
    if data.size < MIN_OBSERVATIONS:
        raise InsufficientDataError(MIN_OBSERVATIONS, int(data.size), group)


def _group_stats(name: str, data: np.ndarray) -> GroupStats:
    return GroupStats(
        name=name,
        n=int(data.size),
        mean=float(data.mean()),
        std_dev=float(data.std(ddof=1)),
    )


def _decide(
    statistic: float, df: float, params: TTestParams
) -> tuple[float, float, bool]:
    """p-value, critical value and decision for a t statistic."""
    dist = StudentT(df)
    alpha = params.alpha

    if params.alternative == Alternative.TWO_SIDED:
        p_value = 2.0 * dist.sf(abs(statistic))
        critical = dist.inverse_cdf(1.0 - alpha / 2.0)
    elif params.alternative == Alternative.GREATER:
        p_value = dist.sf(statistic)
        critical = dist.inverse_cdf(1.0 - alpha)
    else:
        p_value = dist.cdf(statistic)
        critical = dist.inverse_cdf(alpha)

    p_value = min(1.0, p_value)
    return p_value, critical, p_value < alpha


def one_sample_t_test(
    data: Sequence[float],
    mu0: float,
    params: TTestParams | None = None,
    name: str = "sample",
) -> TTestResult:
    """Test whether a population mean equals ``mu0``.

    Args:
        data: Observations
        mu0: Hypothesized population mean
        params: Significance level and alternative
        name: Label for the sample in reports

    Returns:
        TTestResult with df = n - 1

    Raises:
        InsufficientDataError: If fewer than 2 observations
        ZeroVarianceError: If all observations are equal
    """
    params = params or TTestParams()
    x = _as_array(data)
    _require(x, name)

    group = _group_stats(name, x)
    standard_error = group.std_dev / math.sqrt(group.n)
    difference = group.mean - mu0

    if np.ptp(x) == 0.0 or standard_error == 0.0:
        raise ZeroVarianceError("one-sample t-test", difference)

    statistic = difference / standard_error
    df = group.n - 1.0
    p_value, critical, reject = _decide(statistic, df, params)

    logger.info(
        f"One-sample t-test on '{name}': t={statistic:.4f}, df={df:.0f}, p={p_value:.6f}"
    )

    return TTestResult(
        kind=TTestKind.ONE_SAMPLE,
        alternative=params.alternative,
        alpha=params.alpha,
        groups=(group,),
        statistic=statistic,
        df=df,
        p_value=p_value,
        critical_value=critical,
        standard_error=standard_error,
        mean_difference=difference,
        reject_null=reject,
        mu0=float(mu0),
    )


def welch_degrees_of_freedom(var1: float, n1: int, var2: float, n2: int) -> float:
    """Welch-Satterthwaite approximation of the degrees of freedom."""
    a = var1 / n1
    b = var2 / n2
    return (a + b) ** 2 / (a**2 / (n1 - 1) + b**2 / (n2 - 1))


def independent_samples_t_test(
    data1: Sequence[float],
    data2: Sequence[float],
    params: TTestParams | None = None,
    names: tuple[str, str] = ("group 1", "group 2"),
) -> TTestResult:
    """Compare the means of two independent groups.

    With ``params.equal_variance`` the pooled-variance test is used
    (df = n1 + n2 - 2); otherwise Welch's test with Welch-Satterthwaite df.

    Args:
        data1: Observations of the first group
        data2: Observations of the second group
        params: Significance level, alternative and equal-variance flag
        names: Labels for the two groups

    Returns:
        TTestResult with t = (mean1 - mean2) / SE

    Raises:
        InsufficientDataError: If either group has fewer than 2 observations
        ZeroVarianceError: If both groups are constant
    """
    params = params or TTestParams()
    x1 = _as_array(data1)
    x2 = _as_array(data2)
    _require(x1, names[0])
    _require(x2, names[1])

    g1 = _group_stats(names[0], x1)
    g2 = _group_stats(names[1], x2)
    n1, n2 = g1.n, g2.n
    var1 = g1.std_dev**2
    var2 = g2.std_dev**2
    difference = g1.mean - g2.mean

    if params.equal_variance:
        pooled = ((n1 - 1) * var1 + (n2 - 1) * var2) / (n1 + n2 - 2)
        standard_error = math.sqrt(pooled * (1.0 / n1 + 1.0 / n2))
    else:
        standard_error = math.sqrt(var1 / n1 + var2 / n2)

    if standard_error == 0.0:
        raise ZeroVarianceError("independent-samples t-test", difference)

    if params.equal_variance:
        df = float(n1 + n2 - 2)
    else:
        df = welch_degrees_of_freedom(var1, n1, var2, n2)

    statistic = difference / standard_error
    p_value, critical, reject = _decide(statistic, df, params)

    logger.info(
        f"Independent-samples t-test ({'pooled' if params.equal_variance else 'Welch'}): "
        f"t={statistic:.4f}, df={df:.2f}, p={p_value:.6f}"
    )

    return TTestResult(
        kind=TTestKind.INDEPENDENT,
        alternative=params.alternative,
        alpha=params.alpha,
        groups=(g1, g2),
        statistic=statistic,
        df=df,
        p_value=p_value,
        critical_value=critical,
        standard_error=standard_error,
        mean_difference=difference,
        reject_null=reject,
        equal_variance=params.equal_variance,
    )


def paired_samples_t_test(
    data1: Sequence[float],
    data2: Sequence[float],
    params: TTestParams | None = None,
    names: tuple[str, str] = ("measurement 1", "measurement 2"),
) -> TTestResult:
    """Test whether the mean of paired differences (data1 - data2) is zero.

    Args:
        data1: First measurement per subject
        data2: Second measurement per subject, aligned with ``data1``
        params: Significance level and alternative
        names: Labels for the two measurements

    Returns:
        TTestResult with df = n - 1, the Pearson correlation of the
        measurements and a summary of the differences

    Raises:
        MismatchedLengthError: If the sequences differ in length
        InsufficientDataError: If fewer than 2 pairs
        ZeroVarianceError: If every difference is the same
    """
    params = params or TTestParams()
    x1 = _as_array(data1)
    x2 = _as_array(data2)

    if x1.size != x2.size:
        raise MismatchedLengthError(int(x1.size), int(x2.size))
    _require(x1, "pairs")

    differences = x1 - x2
    summary = basic_stats(differences)
    n = summary.count
    standard_error = summary.std_dev / math.sqrt(n)

    if np.ptp(differences) == 0.0 or standard_error == 0.0:
        raise ZeroVarianceError("paired-samples t-test", summary.mean)

    statistic = summary.mean / standard_error
    df = n - 1.0
    p_value, critical, reject = _decide(statistic, df, params)

    logger.info(
        f"Paired-samples t-test: t={statistic:.4f}, df={df:.0f}, p={p_value:.6f}"
    )

    return TTestResult(
        kind=TTestKind.PAIRED,
        alternative=params.alternative,
        alpha=params.alpha,
        groups=(_group_stats(names[0], x1), _group_stats(names[1], x2)),
        statistic=statistic,
        df=df,
        p_value=p_value,
        critical_value=critical,
        standard_error=standard_error,
        mean_difference=summary.mean,
        reject_null=reject,
        correlation=pearson_correlation(x1, x2),
        difference_summary=summary,
    )
