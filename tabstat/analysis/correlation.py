"""Pearson correlation between two paired numeric sequences."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy import stats

from tabstat.core.errors import EmptyInputError, MismatchedLengthError


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation coefficient of paired values.

    Args:
        x: First sequence
        y: Second sequence, same length as ``x``

    Returns:
        Coefficient in [-1, 1]; 0.0 when either sequence has no variation

    Raises:
        MismatchedLengthError: If the sequences differ in length
        EmptyInputError: If the sequences are empty
    """
    if len(x) != len(y):
        raise MismatchedLengthError(len(x), len(y))
    if len(x) == 0:
        raise EmptyInputError("correlation")

    a = np.asarray(x, dtype=float)
    b = np.asarray(y, dtype=float)

    # Constant input (including a single pair) has no defined r
    if np.ptp(a) == 0 or np.ptp(b) == 0:
        return 0.0

    pearson_r, _ = stats.pearsonr(a, b)
    return max(-1.0, min(1.0, float(pearson_r)))
