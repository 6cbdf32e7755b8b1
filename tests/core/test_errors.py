"""Tests for the error taxonomy."""

from tabstat.core.errors import (
    ErrorKind,
    InsufficientDataError,
    SampleSizeTooLargeError,
    TabstatError,
    ZeroVarianceError,
)


class TestErrors:
    """Tests for structured error fields."""

    def test_kind_and_fields(self) -> None:
        """Test errors expose their kind and structured attributes."""
        error = SampleSizeTooLargeError(size=10, population=5)

        assert isinstance(error, TabstatError)
        assert error.kind == ErrorKind.SAMPLE_SIZE_TOO_LARGE
        assert error.size == 10
        assert error.population == 5

    def test_to_dict(self) -> None:
        """Test dictionary form includes kind and details."""
        error = InsufficientDataError(required=2, actual=1, group="before")
        data = error.to_dict()

        assert data["kind"] == "insufficient_data"
        assert data["details"] == {"required": 2, "actual": 1, "group": "before"}
        assert "before" in data["message"]

    def test_zero_variance_carries_difference(self) -> None:
        """Test the mean difference travels with the error."""
        error = ZeroVarianceError("paired-samples t-test", 0.0)

        assert error.mean_difference == 0.0
        assert "zero" in str(error)
