"""Distribution primitives used by the t-tests and the Q-Q plot."""

from __future__ import annotations

import math

import numpy as np
from scipy import stats

from tabstat.core.errors import EmptyInputError, InvalidDegreesOfFreedomError


class StudentT:
    """Student's t distribution with location 0 and scale 1.

    Args:
        df: Degrees of freedom (positive, finite; need not be an integer)

    Raises:
        InvalidDegreesOfFreedomError: If ``df`` is not positive and finite

    Example:
        >>> dist = StudentT(9)
        >>> round(dist.inverse_cdf(0.975), 4)
        2.2622
    """

    def __init__(self, df: float) -> None:
        df = float(df)
        if not math.isfinite(df) or df <= 0.0:
            raise InvalidDegreesOfFreedomError(df)
        self.df = df
        self._dist = stats.t(df)

    def __repr__(self) -> str:
        return f"StudentT(df={self.df:g})"

    def cdf(self, t: float) -> float:
        """P(T <= t)."""
        return float(self._dist.cdf(t))

    def sf(self, t: float) -> float:
        """P(T > t), i.e. 1 - cdf(t) without cancellation in the tail."""
        return float(self._dist.sf(t))

    def inverse_cdf(self, p: float) -> float:
        """Value t such that cdf(t) == p.

        Raises:
            ValueError: If ``p`` is outside (0, 1)
        """
        if not 0.0 < p < 1.0:
            raise ValueError(f"Probability must be within (0, 1), got {p}")
        return float(self._dist.ppf(p))


def normal_quantiles(n: int) -> np.ndarray:
    """Standard normal quantiles at plotting positions (i - 0.5) / n.

    Args:
        n: Number of points

    Returns:
        Array of ``n`` increasing theoretical quantiles

    Raises:
        EmptyInputError: If ``n`` is less than 1
    """
    if n < 1:
        raise EmptyInputError("normal quantiles")
    positions = (np.arange(1, n + 1) - 0.5) / n
    return stats.norm.ppf(positions)
