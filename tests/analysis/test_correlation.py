"""Tests for Pearson correlation."""

import numpy as np
import pytest
from scipy import stats

from tabstat.analysis.correlation import pearson_correlation
from tabstat.core.errors import EmptyInputError, MismatchedLengthError


class TestPearsonCorrelation:
    """Tests for pearson_correlation."""

    def test_perfect_correlations(self) -> None:
        """Test linear relationships give +1 and -1."""
        x = [1, 2, 3, 4]

        assert pearson_correlation(x, [2, 4, 6, 8]) == pytest.approx(1.0)
        assert pearson_correlation(x, [8, 6, 4, 2]) == pytest.approx(-1.0)

    def test_matches_scipy(self) -> None:
        """Test against scipy's pearsonr."""
        rng = np.random.default_rng(3)
        x = rng.normal(size=30)
        y = 0.5 * x + rng.normal(size=30)

        assert pearson_correlation(x, y) == pytest.approx(stats.pearsonr(x, y)[0])

    def test_zero_variance_gives_zero(self) -> None:
        """Test a constant sequence yields 0.0."""
        assert pearson_correlation([1, 1, 1], [1, 2, 3]) == 0.0
        assert pearson_correlation([1, 2, 3], [4, 4, 4]) == 0.0

    def test_single_pair_gives_zero(self) -> None:
        """Test one pair has no variation and yields 0.0."""
        assert pearson_correlation([2.5], [7.0]) == 0.0

    def test_mismatched_lengths(self) -> None:
        """Test different lengths are rejected."""
        with pytest.raises(MismatchedLengthError):
            pearson_correlation([1, 2], [1, 2, 3])

    def test_empty(self) -> None:
        """Test empty input is rejected."""
        with pytest.raises(EmptyInputError):
            pearson_correlation([], [])
