"""Tests for CSV/Excel loading and CSV export."""

from pathlib import Path

import pandas as pd
import pytest

from tabstat.core.dataset import Dataset
from tabstat.core.errors import UnsupportedFormatError
from tabstat.core.loader import read_csv_file, read_file, save_dataset_to_csv


@pytest.fixture
def csv_path(tmp_path: Path) -> Path:
    """Write a small CSV file."""
    path = tmp_path / "scores.csv"
    path.write_text(
        "name,score,grade\n"
        "Alice,88.5,A\n"
        "Bruno,,C\n"
        "Chloe,91.2,A\n",
        encoding="utf-8",
    )
    return path


class TestReadCsv:
    """Tests for CSV loading."""

    def test_reads_headers_and_rows(self, csv_path: Path) -> None:
        """Test headers, rows and source label."""
        ds = read_file(csv_path)

        assert ds.headers == ("name", "score", "grade")
        assert ds.row_count == 3
        assert ds.source_label == str(csv_path)

    def test_blank_cells_are_empty_strings(self, csv_path: Path) -> None:
        """Test blanks are kept as empty strings, not NaN."""
        ds = read_csv_file(csv_path)

        assert ds.get_column("score") == ("88.5", "", "91.2")

    def test_numbers_stay_strings(self, csv_path: Path) -> None:
        """Test numeric-looking cells are not converted on load."""
        ds = read_csv_file(csv_path)

        assert ds.rows[0] == ("Alice", "88.5", "A")

    def test_duplicate_headers_are_kept(self, tmp_path: Path) -> None:
        """Test repeated header names are not renamed."""
        path = tmp_path / "dup.csv"
        path.write_text("x,x,y\n1,2,3\n", encoding="utf-8")

        ds = read_file(path)

        assert ds.headers == ("x", "x", "y")
        assert ds.get_column("x") == ("1",)
        assert ds.duplicate_headers == ("x",)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test reading a missing file propagates FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_file(tmp_path / "missing.csv")


class TestReadExcel:
    """Tests for Excel loading."""

    def test_reads_first_sheet(self, tmp_path: Path) -> None:
        """Test an xlsx workbook loads with its first row as headers."""
        path = tmp_path / "book.xlsx"
        pd.DataFrame({"city": ["Seoul", "Busan"], "age": [23, 31]}).to_excel(
            path, index=False
        )

        ds = read_file(path)

        assert ds.headers == ("city", "age")
        assert ds.get_column("city") == ("Seoul", "Busan")
        assert ds.get_numeric_column("age") == (23.0, 31.0)


class TestUnsupportedFormat:
    """Tests for extension dispatch."""

    @pytest.mark.parametrize("name", ["data.txt", "data.json", "data"])
    def test_unsupported_extension(self, tmp_path: Path, name: str) -> None:
        """Test unknown extensions raise UnsupportedFormatError."""
        with pytest.raises(UnsupportedFormatError) as exc_info:
            read_file(tmp_path / name)

        assert exc_info.value.extension == Path(name).suffix.lstrip(".")

    def test_extension_is_case_insensitive(self, tmp_path: Path) -> None:
        """Test .CSV is read as CSV."""
        path = tmp_path / "UPPER.CSV"
        path.write_text("a\n1\n", encoding="utf-8")

        assert read_file(path).get_column("a") == ("1",)


class TestSaveCsv:
    """Tests for CSV export."""

    def test_save_and_reload(self, tmp_path: Path, students_dataset: Dataset) -> None:
        """Test a saved subset reloads with the same cells."""
        subset = students_dataset.extract_subset(
            row_indices=[0, 1], column_names=["name", "score"]
        )
        path = save_dataset_to_csv(subset, tmp_path / "out" / "subset.csv")

        assert path.exists()
        reloaded = read_file(path)
        assert reloaded.headers == ("name", "score")
        assert reloaded.rows == (("Alice", "88.5"), ("Bruno", "72.0"))
