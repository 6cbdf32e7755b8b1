"""Tests for sample data generation."""

from pathlib import Path

import numpy as np

from tabstat.core.loader import read_file
from tabstat.demo import SAMPLE_COLUMNS, create_sample_data, generate_sample_frame


class TestSampleData:
    """Tests for the demo dataset."""

    def test_frame_shape_and_ranges(self) -> None:
        """Test columns and value ranges."""
        frame = generate_sample_frame(100, np.random.default_rng(1))

        assert list(frame.columns) == SAMPLE_COLUMNS
        assert len(frame) == 100
        assert frame["age"].between(20, 64).all()
        assert frame["score"].between(60.0, 99.9).all()
        assert set(frame["grade"]) <= {"A", "B", "C", "D"}
        assert frame["name"].is_unique

    def test_files_are_not_overwritten(self, tmp_path: Path) -> None:
        """Test a second run picks a new file name."""
        first = create_sample_data(tmp_path)
        second = create_sample_data(tmp_path)

        assert first.name == "sample_data.csv"
        assert second.name == "sample_data_1.csv"

    def test_written_file_loads(self, tmp_path: Path) -> None:
        """Test the CSV loads with numeric age and score columns."""
        ds = read_file(create_sample_data(tmp_path, rows=20))

        assert ds.row_count == 20
        assert ds.numeric_headers() == ["age", "score"]
