"""Tests for the interactive analysis session."""

from collections.abc import Callable

import pytest

from tabstat.config import Settings
from tabstat.core.dataset import Dataset
from tabstat.core.loader import read_file
from tabstat.interactive.prompts import parse_column_selection, parse_row_selection
from tabstat.interactive.session import AnalysisSession


@pytest.fixture
def run_session(settings: Settings, scripted_input) -> Callable[..., str]:
    """Return a helper that runs a session over scripted answers."""

    def run(dataset: Dataset, *answers: str) -> str:
        output: list[str] = []
        session = AnalysisSession(
            dataset, settings, read_line=scripted_input(*answers), write=output.append
        )
        session.run()
        return "\n".join(output)

    return run


class TestMenus:
    """Tests for menu navigation."""

    def test_exit(self, run_session, students_dataset: Dataset) -> None:
        """Test choosing exit ends the session."""
        output = run_session(students_dataset, "7")

        assert "Dataset Summary" in output
        assert "Analysis finished." in output

    def test_end_of_input(self, run_session, students_dataset: Dataset) -> None:
        """Test running out of input ends the session."""
        output = run_session(students_dataset)

        assert "Analysis finished." in output

    def test_invalid_choice(self, run_session, students_dataset: Dataset) -> None:
        """Test unknown menu choices are reported."""
        output = run_session(students_dataset, "9", "7")

        assert "Invalid choice" in output


class TestAnalyses:
    """Tests for the statistics actions."""

    def test_descriptive_statistics(self, run_session, students_dataset: Dataset) -> None:
        """Test descriptive statistics for a chosen numeric column."""
        output = run_session(students_dataset, "1", "2", "7")

        assert "Basic Statistics for 'score'" in output
        assert "Count: 5" in output

    def test_frequency_categorical(self, run_session, students_dataset: Dataset) -> None:
        """Test a text column gets a frequency table."""
        output = run_session(students_dataset, "2", "4", "7")

        assert "Frequency Analysis for 'grade'" in output

    def test_frequency_numeric(self, run_session, students_dataset: Dataset) -> None:
        """Test a numeric column gets binned frequencies."""
        output = run_session(students_dataset, "2", "2", "7")

        assert "Binned Frequency for 'age'" in output

    def test_bad_column_number(self, run_session, students_dataset: Dataset) -> None:
        """Test malformed selections are reported and the session continues."""
        output = run_session(students_dataset, "1", "x", "7")

        assert "Invalid input" in output
        assert "Analysis finished." in output


class TestTTests:
    """Tests for the t-test actions."""

    def test_one_sample(self, run_session, students_dataset: Dataset) -> None:
        """Test a one-sample test with the default alpha."""
        output = run_session(students_dataset, "4", "1", "2", "80", "", "1", "4", "7")

        assert "One-Sample t-Test" in output
        assert "H₀: μ = 80" in output

    def test_invalid_alternative(self, run_session, students_dataset: Dataset) -> None:
        """Test a bad alternative is reported as an error."""
        output = run_session(students_dataset, "4", "1", "2", "80", "", "9", "4", "7")

        assert "Error: Invalid test type" in output
        assert "Analysis finished." in output

    def test_invalid_alpha(self, run_session, students_dataset: Dataset) -> None:
        """Test a malformed alpha is reported."""
        output = run_session(students_dataset, "4", "1", "2", "80", "abc", "4", "7")

        assert "Invalid input" in output

    def test_paired(self, run_session, paired_dataset: Dataset) -> None:
        """Test a paired test over two columns."""
        output = run_session(paired_dataset, "4", "3", "1", "1", "0.05", "3", "4", "7")

        assert "Paired-Samples t-Test" in output
        assert "Correlation (r)" in output

    def test_independent_needs_two_numeric(self, run_session) -> None:
        """Test the independent test explains when columns are missing."""
        ds = Dataset(headers=("x", "label"), rows=(("1", "a"), ("2", "b")))
        output = run_session(ds, "4", "2", "4", "7")

        assert "At least 2 numeric columns are required." in output

    def test_zero_variance_reported(self, run_session) -> None:
        """Test zero variance surfaces as an error message."""
        ds = Dataset(headers=("v",), rows=(("10",), ("10",), ("10",)))
        output = run_session(ds, "4", "1", "1", "10", "", "1", "4", "7")

        assert "Standard error is zero" in output


class TestOutputs:
    """Tests for actions that write files."""

    def test_histogram_saved(
        self, run_session, students_dataset: Dataset, settings: Settings
    ) -> None:
        """Test a histogram is written to the result directory."""
        run_session(students_dataset, "3", "3", "2", "8", "7")

        assert (settings.result_dir / "histogram_score.html").exists()

    def test_stem_and_leaf(self, run_session, students_dataset: Dataset) -> None:
        """Test the stem-and-leaf plot is printed."""
        output = run_session(students_dataset, "3", "5", "1", "8", "7")

        assert "Stem-and-Leaf Plot for 'age'" in output

    def test_extract_subset(
        self, run_session, students_dataset: Dataset, settings: Settings
    ) -> None:
        """Test extracted columns and rows are saved as CSV."""
        run_session(students_dataset, "5", "1,3", "1-2", "7")

        saved = read_file(settings.result_dir / "students_subset.csv")
        assert saved.headers == ("name", "score")
        assert saved.rows == (("Alice", "88.5"), ("Bruno", "72.0"))

    def test_random_sample(
        self, run_session, students_dataset: Dataset, settings: Settings
    ) -> None:
        """Test a random sample is saved."""
        run_session(students_dataset, "6", "1", "3", "3", "7")

        saved = read_file(settings.result_dir / "students_sample_3.csv")
        assert saved.row_count == 3

    def test_sample_too_large(self, run_session, students_dataset: Dataset) -> None:
        """Test oversize samples are reported."""
        output = run_session(students_dataset, "6", "1", "10", "3", "7")

        assert "cannot be larger than dataset size 6" in output

    def test_stratified_sample(
        self, run_session, students_dataset: Dataset, settings: Settings
    ) -> None:
        """Test one row per grade with a total size of four."""
        run_session(students_dataset, "6", "2", "4", "4", "3", "7")

        saved = read_file(settings.result_dir / "students_stratified_sample_4.csv")
        assert sorted(saved.get_column("grade")) == ["A", "B", "C", "D"]


class TestParsers:
    """Tests for selection parsing."""

    def test_column_selection(self) -> None:
        """Test 1-based numbers map to headers."""
        headers = ["a", "b", "c"]

        assert parse_column_selection("2", headers) == ["b"]
        assert parse_column_selection("3, 1", headers, allow_multiple=True) == ["c", "a"]

    @pytest.mark.parametrize("text", ["0", "4", "a", "1,2"])
    def test_column_selection_invalid(self, text: str) -> None:
        """Test out-of-range and malformed selections."""
        with pytest.raises(ValueError):
            parse_column_selection(text, ["a", "b", "c"])

    def test_row_selection(self) -> None:
        """Test numbers and ranges become 0-based indices."""
        assert parse_row_selection("1,4-6", 10) == [0, 3, 4, 5]
        assert parse_row_selection("  ", 10) is None

    @pytest.mark.parametrize("text", ["0", "11", "5-3", "x"])
    def test_row_selection_invalid(self, text: str) -> None:
        """Test invalid row selections."""
        with pytest.raises(ValueError):
            parse_row_selection(text, 10)
