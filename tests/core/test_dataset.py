"""Tests for the Dataset data model."""

import math

import pytest

from tabstat.core.dataset import Dataset
from tabstat.core.errors import ColumnNotFoundError, ErrorKind, NoNumericDataError


class TestColumnAccess:
    """Tests for column lookup."""

    def test_get_column_returns_cells_in_row_order(self, students_dataset: Dataset) -> None:
        """Test raw cells come back in row order."""
        assert students_dataset.get_column("grade") == ("A", "C", "A", "D", "B", "B")

    def test_missing_column_raises(self, students_dataset: Dataset) -> None:
        """Test unknown column names raise ColumnNotFoundError."""
        with pytest.raises(ColumnNotFoundError) as exc_info:
            students_dataset.get_column("height")

        assert exc_info.value.column == "height"
        assert exc_info.value.kind == ErrorKind.COLUMN_NOT_FOUND

    def test_short_rows_read_as_empty(self) -> None:
        """Test ragged rows yield empty strings for missing cells."""
        ds = Dataset(headers=["a", "b", "c"], rows=[["1", "2", "3"], ["4"]])

        assert ds.get_column("c") == ("3", "")
        assert ds.get_row(1) == ("4",)

    def test_duplicate_headers_resolve_to_first(self) -> None:
        """Test repeated header names use the first position."""
        ds = Dataset(headers=["x", "y", "x"], rows=[["1", "2", "3"]])

        assert ds.column_index("x") == 0
        assert ds.get_column("x") == ("1",)
        assert ds.duplicate_headers == ("x",)

    def test_row_and_column_counts(self, students_dataset: Dataset) -> None:
        """Test shape properties."""
        assert students_dataset.row_count == 6
        assert students_dataset.column_count == 5

    def test_get_row_out_of_range(self, students_dataset: Dataset) -> None:
        """Test out-of-range rows return None."""
        assert students_dataset.get_row(6) is None
        assert students_dataset.get_row(-1) is None


class TestNumericCoercion:
    """Tests for numeric column parsing."""

    def test_unparseable_cells_are_dropped(self, students_dataset: Dataset) -> None:
        """Test that 'n/a' is skipped rather than zero-filled."""
        values = students_dataset.get_numeric_column("score")

        assert values == (88.5, 72.0, 91.2, 65.3, 80.1)

    def test_rejected_cells_are_reported(self, students_dataset: Dataset) -> None:
        """Test try_numeric_column reports rejected cells with their rows."""
        coercion = students_dataset.try_numeric_column("score")

        assert coercion.accepted_count == 5
        assert coercion.rejected == ((5, "n/a"),)
        assert coercion.is_numeric
        assert not coercion.is_complete

    def test_non_numeric_column_raises(self, students_dataset: Dataset) -> None:
        """Test a column with no numbers raises NoNumericDataError."""
        with pytest.raises(NoNumericDataError) as exc_info:
            students_dataset.get_numeric_column("city")

        assert exc_info.value.column == "city"

    def test_blank_and_nan_cells_are_rejected(self) -> None:
        """Test empty and NaN cells never become values."""
        ds = Dataset(headers=["v"], rows=[["1"], [""], ["NaN"], ["2e3"], [" 3 "]])
        coercion = ds.try_numeric_column("v")

        assert all(not math.isnan(v) for v in coercion.values)
        assert 1.0 in coercion.values
        assert 2000.0 in coercion.values
        assert (1, "") in coercion.rejected
        assert (4, " 3 ") in coercion.rejected

    def test_padded_cells_are_rejected(self) -> None:
        """Test cells with surrounding whitespace are not parsed."""
        ds = Dataset(headers=["v"], rows=[["1"], [" 2"], ["2 "], [" 3 "]])
        coercion = ds.try_numeric_column("v")

        assert coercion.values == (1.0,)
        assert coercion.rejected == ((1, " 2"), (2, "2 "), (3, " 3 "))

    def test_infinite_cells_are_rejected(self) -> None:
        """Test infinities and overflowing literals are not values."""
        ds = Dataset(headers=["v"], rows=[["inf"], ["-inf"], ["1e400"], ["4.5"]])
        coercion = ds.try_numeric_column("v")

        assert coercion.values == (4.5,)
        assert coercion.rejected_count == 3

    def test_numeric_headers(self, students_dataset: Dataset) -> None:
        """Test detection of columns with numeric content."""
        assert students_dataset.numeric_headers() == ["age", "score"]
        assert students_dataset.is_numeric("age")
        assert not students_dataset.is_numeric("name")


class TestExtractSubset:
    """Tests for row/column extraction."""

    def test_defaults_reproduce_cells(self, students_dataset: Dataset) -> None:
        """Test an unrestricted subset copies every cell."""
        subset = students_dataset.extract_subset()

        assert subset.headers == students_dataset.headers
        assert subset.rows == students_dataset.rows
        assert subset.source_label == "students.csv_subset"

    def test_select_rows_and_columns(self, students_dataset: Dataset) -> None:
        """Test selection keeps the requested order."""
        subset = students_dataset.extract_subset(
            row_indices=[2, 0], column_names=["score", "name"]
        )

        assert subset.headers == ("score", "name")
        assert subset.rows == (("91.2", "Chloe"), ("88.5", "Alice"))

    def test_out_of_range_rows_are_skipped(self, students_dataset: Dataset) -> None:
        """Test indices past the end are ignored."""
        subset = students_dataset.extract_subset(row_indices=[0, 99])

        assert subset.row_count == 1

    def test_unknown_column_raises(self, students_dataset: Dataset) -> None:
        """Test extracting a missing column fails."""
        with pytest.raises(ColumnNotFoundError):
            students_dataset.extract_subset(column_names=["name", "height"])

    def test_source_is_unchanged(self, students_dataset: Dataset) -> None:
        """Test extraction does not modify the source dataset."""
        before = students_dataset.rows
        students_dataset.extract_subset(row_indices=[0], column_names=["name"])

        assert students_dataset.rows == before
        assert students_dataset.column_count == 5


class TestSummary:
    """Tests for dataset summaries."""

    def test_summary_fields(self, students_dataset: Dataset) -> None:
        """Test summary shape and numeric headers."""
        summary = students_dataset.summary(preview_rows=3)

        assert summary.row_count == 6
        assert summary.numeric_headers == ("age", "score")
        assert len(summary.preview) == 3

    def test_format_for_display(self, students_dataset: Dataset) -> None:
        """Test the display text mentions the source and headers."""
        text = students_dataset.summary().format_for_display()

        assert "students.csv" in text
        assert "Rows: 6" in text
        assert "Alice" in text

    def test_to_frame_pads_short_rows(self) -> None:
        """Test DataFrame conversion fills missing cells."""
        ds = Dataset(headers=["a", "b"], rows=[["1"]])
        frame = ds.to_frame()

        assert frame.iloc[0].tolist() == ["1", ""]
