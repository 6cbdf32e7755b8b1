"""Tests for text renderings of distributions."""

from tabstat.visualization.text import (
    dot_plot_counts,
    render_dot_plot,
    render_stem_and_leaf,
    round_half_away_from_zero,
    stem_and_leaf,
)


class TestStemAndLeaf:
    """Tests for stem-and-leaf grouping."""

    def test_basic(self) -> None:
        """Test stems and sorted leaves at one decimal place."""
        assert stem_and_leaf([1.5, 1.2, 2.3, 2.3]) == {"1": [2, 5], "2": [3, 3]}

    def test_negative_zero_stem(self) -> None:
        """Test values in (-1, 0) use the '-0' stem, ordered below '0'."""
        stems = stem_and_leaf([-0.4, 0.3, -1.2])

        assert list(stems) == ["-1", "-0", "0"]
        assert stems["-0"] == [4]
        assert stems["-1"] == [2]

    def test_rounds_to_one_decimal(self) -> None:
        """Test values are rounded before splitting."""
        assert stem_and_leaf([3.26]) == {"3": [3]}

    def test_render(self) -> None:
        """Test rendered text has one line per stem."""
        text = render_stem_and_leaf([1.2, 1.5, 2.3], "score")

        assert "'score'" in text
        assert "1 | 2 5" in text
        assert "2 | 3" in text


class TestDotPlot:
    """Tests for dot plot counting."""

    def test_round_half_away_from_zero(self) -> None:
        """Test ties round away from zero."""
        assert list(round_half_away_from_zero([2.5, -2.5, 0.4, -0.6])) == [3, -3, 0, -1]

    def test_counts(self) -> None:
        """Test counts per rounded value in ascending order."""
        assert dot_plot_counts([1.4, 1.5, 2.0, 0.5]) == {1: 2, 2: 2}

    def test_render(self) -> None:
        """Test one row of dots per value."""
        text = render_dot_plot([1, 1, 3], "v")

        assert "1 | ● ●" in text
        assert "3 | ●" in text
