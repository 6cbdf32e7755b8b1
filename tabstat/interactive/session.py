"""Menu-driven analysis of one loaded dataset.

The session holds the dataset, the settings and the I/O callables; nothing is
kept in module globals. Each menu action gathers its inputs, calls the
analysis layer once and prints the result. Errors raised by the analysis
layer, and malformed answers, are reported and the session carries on. End
of input ends the session.

Example:
    >>> from tabstat.core.loader import read_file
    >>> session = AnalysisSession(read_file("data.csv"))
    >>> session.run()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from tabstat.analysis.descriptive import (
    analyze_column,
    analyze_column_frequency,
    binned_frequency,
)
from tabstat.analysis.hypothesis import (
    TTestParams,
    independent_samples_t_test,
    one_sample_t_test,
    paired_samples_t_test,
)
from tabstat.analysis.sampling import random_sample, stratified_sample
from tabstat.config import Settings, get_settings
from tabstat.core.dataset import Dataset
from tabstat.core.errors import TabstatError
from tabstat.core.loader import save_dataset_to_csv
from tabstat.interactive.prompts import (
    Prompter,
    ReadLine,
    Write,
    parse_row_selection,
)
from tabstat.visualization.plots import (
    PlotResult,
    create_bar_chart,
    create_box_plot,
    create_dot_plot,
    create_histogram,
    create_pie_chart,
    create_qq_plot,
    sanitize_filename,
)
from tabstat.visualization.text import render_dot_plot, render_stem_and_leaf

logger = logging.getLogger(__name__)

MAIN_MENU = (
    "Descriptive statistics",
    "Frequency analysis",
    "Charts",
    "t-tests",
    "Extract columns/rows",
    "Sampling",
    "Exit",
)

CHART_MENU = (
    "Bar chart",
    "Pie chart",
    "Histogram",
    "Box plot",
    "Stem-and-leaf plot",
    "Dot plot",
    "Normal Q-Q plot",
    "Back to main menu",
)

T_TEST_MENU = (
    "One-sample t-test",
    "Independent-samples t-test",
    "Paired-samples t-test",
    "Back to main menu",
)

SAMPLING_MENU = (
    "Simple random sample",
    "Stratified sample",
    "Back to main menu",
)


class AnalysisSession:
    """Interactive analysis of a dataset.

    Args:
        dataset: Dataset to analyze
        settings: Output directories and analysis defaults
        read_line: Line reader with :func:`input` semantics
        write: Line writer with :func:`print` semantics
    """

    def __init__(
        self,
        dataset: Dataset,
        settings: Settings | None = None,
        read_line: ReadLine = input,
        write: Write = print,
    ) -> None:
        self.dataset = dataset
        self.settings = settings or get_settings()
        self.prompt = Prompter(read_line, write)
        self.write = write

    # ------------------------------------------------------------------
    # Menu plumbing
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Show the main menu until the user exits or input ends."""
        self.write(self.dataset.summary().format_for_display())
        try:
            self._main_loop()
        except EOFError:
            logger.debug("End of input, leaving analysis session")
        self.write("Analysis finished.")

    def _main_loop(self) -> None:
        handlers = {
            "1": self.descriptive_statistics,
            "2": self.frequency_analysis,
            "3": self.charts_menu,
            "4": self.t_test_menu,
            "5": self.extract_subset,
            "6": self.sampling_menu,
        }
        while True:
            self.write(
                f"\n=== Data Analysis Menu ===\n"
                f"Dataset: {self.dataset.row_count} rows, {self.dataset.column_count} columns"
            )
            choice = self._menu(MAIN_MENU)
            if choice == str(len(MAIN_MENU)):
                return
            self._dispatch(handlers, choice)

    def _menu(self, options: tuple[str, ...]) -> str:
        for i, label in enumerate(options, start=1):
            self.write(f"{i}. {label}")
        return self.prompt.ask(f"Selection (1-{len(options)}): ")

    def _submenu(
        self, title: str, options: tuple[str, ...], handlers: dict[str, Callable[[], None]]
    ) -> None:
        while True:
            self.write(f"\n=== {title} ===")
            choice = self._menu(options)
            if choice == str(len(options)):
                return
            self._dispatch(handlers, choice)

    def _dispatch(self, handlers: dict[str, Callable[[], None]], choice: str) -> None:
        action = handlers.get(choice)
        if action is None:
            self.write("Invalid choice. Please try again.")
            return
        self._run_action(action)

    def _run_action(self, action: Callable[[], None]) -> None:
        try:
            action()
        except TabstatError as e:
            logger.debug(f"{action.__name__} failed: {e.kind.value}")
            self.write(f"Error: {e.message}")
        except ValueError as e:
            self.write(f"Invalid input: {e}")

    def _numeric_headers(self, minimum: int = 1) -> list[str] | None:
        headers = self.dataset.numeric_headers()
        if len(headers) < minimum:
            if minimum == 1:
                self.write("No column contains numeric data.")
            else:
                self.write(f"At least {minimum} numeric columns are required.")
            return None
        return headers

    def _save_plot(self, plot: PlotResult) -> None:
        path = plot.save(self.settings.result_dir)
        self.write(f"{plot.title} saved to {path}")

    def _output_path(self, derived: Dataset) -> Path:
        source = self.dataset.source_label
        suffix = derived.source_label[len(source):]
        return self.settings.result_dir / f"{sanitize_filename(Path(source).stem + suffix)}.csv"

    def _save_derived(self, derived: Dataset) -> None:
        path = save_dataset_to_csv(derived, self._output_path(derived))
        self.write(f"Saved {derived.row_count} rows x {derived.column_count} columns to {path}")

    # ------------------------------------------------------------------
    # Descriptive statistics and frequencies
    # ------------------------------------------------------------------

    def descriptive_statistics(self) -> None:
        headers = self._numeric_headers()
        if headers is None:
            return
        columns = self.prompt.choose_columns(
            headers, "Select columns for descriptive statistics:", allow_multiple=True
        )
        for column in columns:
            self.write("")
            self.write(analyze_column(self.dataset, column).format_for_display(column))

    def frequency_analysis(self) -> None:
        columns = self.prompt.choose_columns(
            list(self.dataset.headers),
            "Select columns for frequency analysis:",
            allow_multiple=True,
        )
        for column in columns:
            self.write("")
            coercion = self.dataset.try_numeric_column(column)
            if coercion.is_numeric:
                binned = binned_frequency(coercion.values, bins=self.settings.frequency_bins)
                self.write(binned.format_for_display(column))
            else:
                table = analyze_column_frequency(self.dataset, column)
                self.write(
                    table.format_for_display(column, limit=self.settings.frequency_display_limit)
                )

    # ------------------------------------------------------------------
    # Charts
    # ------------------------------------------------------------------

    def charts_menu(self) -> None:
        self._submenu(
            "Charts",
            CHART_MENU,
            {
                "1": self.bar_chart,
                "2": self.pie_chart,
                "3": self.histogram,
                "4": self.box_plot,
                "5": self.stem_and_leaf,
                "6": self.dot_plot,
                "7": self.qq_plot,
            },
        )

    def _choose_numeric(self, message: str) -> list[str]:
        headers = self._numeric_headers()
        if headers is None:
            return []
        return self.prompt.choose_columns(headers, message, allow_multiple=True)

    def bar_chart(self) -> None:
        column = self.prompt.choose_column(
            list(self.dataset.headers), "Select a column for the bar chart:"
        )
        table = analyze_column_frequency(self.dataset, column)
        self._save_plot(create_bar_chart(table, column))

    def pie_chart(self) -> None:
        column = self.prompt.choose_column(
            list(self.dataset.headers), "Select a column for the pie chart:"
        )
        table = analyze_column_frequency(self.dataset, column)
        self._save_plot(create_pie_chart(table, column))

    def histogram(self) -> None:
        for column in self._choose_numeric("Select columns for histograms:"):
            values = self.dataset.get_numeric_column(column)
            self._save_plot(create_histogram(values, column, bins=self.settings.histogram_bins))

    def box_plot(self) -> None:
        for column in self._choose_numeric("Select columns for box plots:"):
            self._save_plot(create_box_plot(analyze_column(self.dataset, column), column))

    def stem_and_leaf(self) -> None:
        for column in self._choose_numeric("Select columns for stem-and-leaf plots:"):
            self.write("")
            self.write(render_stem_and_leaf(self.dataset.get_numeric_column(column), column))

    def dot_plot(self) -> None:
        headers = self._numeric_headers()
        if headers is None:
            return
        column = self.prompt.choose_column(headers, "Select a column for the dot plot:")
        values = self.dataset.get_numeric_column(column)
        self._save_plot(create_dot_plot(values, column))
        self.write(render_dot_plot(values, column))

    def qq_plot(self) -> None:
        for column in self._choose_numeric("Select columns for Q-Q plots:"):
            self._save_plot(create_qq_plot(self.dataset.get_numeric_column(column), column))

    # ------------------------------------------------------------------
    # t-tests
    # ------------------------------------------------------------------

    def t_test_menu(self) -> None:
        self._submenu(
            "t-tests",
            T_TEST_MENU,
            {
                "1": self.one_sample_t_test,
                "2": self.independent_samples_t_test,
                "3": self.paired_samples_t_test,
            },
        )

    def _choose_pair(self, first: str, second: str) -> tuple[str, str] | None:
        headers = self._numeric_headers(minimum=2)
        if headers is None:
            return None
        column1 = self.prompt.choose_column(headers, first)
        remaining = [h for h in headers if h != column1]
        column2 = self.prompt.choose_column(remaining, second)
        return column1, column2

    def one_sample_t_test(self) -> None:
        headers = self._numeric_headers()
        if headers is None:
            return
        column = self.prompt.choose_column(headers, "Select the column to test:")
        mu0 = self.prompt.ask_float("Hypothesized population mean (μ₀): ")
        alpha = self.prompt.ask_alpha(self.settings.default_alpha)
        alternative = self.prompt.ask_alternative("μ", f"{mu0:g}")
        params = TTestParams(alpha=alpha, alternative=alternative)

        result = one_sample_t_test(
            self.dataset.get_numeric_column(column), mu0, params, name=column
        )
        self.write("")
        self.write(result.format_for_display())

    def independent_samples_t_test(self) -> None:
        pair = self._choose_pair(
            "Select the column for the first group:",
            "Select the column for the second group:",
        )
        if pair is None:
            return
        alpha = self.prompt.ask_alpha(self.settings.default_alpha)
        alternative = self.prompt.ask_alternative("μ₁", "μ₂")
        equal_variance = self.prompt.ask_yes_no("Assume equal variances? (y/n, default y): ")
        params = TTestParams(alpha=alpha, alternative=alternative, equal_variance=equal_variance)

        result = independent_samples_t_test(
            self.dataset.get_numeric_column(pair[0]),
            self.dataset.get_numeric_column(pair[1]),
            params,
            names=pair,
        )
        self.write("")
        self.write(result.format_for_display())

    def paired_samples_t_test(self) -> None:
        pair = self._choose_pair(
            "Select the column for the first measurement:",
            "Select the column for the second measurement:",
        )
        if pair is None:
            return
        alpha = self.prompt.ask_alpha(self.settings.default_alpha)
        alternative = self.prompt.ask_alternative("μd", "0")
        params = TTestParams(alpha=alpha, alternative=alternative)

        result = paired_samples_t_test(
            self.dataset.get_numeric_column(pair[0]),
            self.dataset.get_numeric_column(pair[1]),
            params,
            names=pair,
        )
        self.write("")
        self.write(result.format_for_display())

    # ------------------------------------------------------------------
    # Extraction and sampling
    # ------------------------------------------------------------------

    def extract_subset(self) -> None:
        columns = self.prompt.choose_columns(
            list(self.dataset.headers),
            "Select columns to extract:",
            allow_multiple=True,
        )
        rows = parse_row_selection(
            self.prompt.ask(
                f"Rows to extract (e.g. 1,3,10-20; blank for all {self.dataset.row_count}): "
            ),
            self.dataset.row_count,
        )
        subset = self.dataset.extract_subset(row_indices=rows, column_names=columns)
        self._save_derived(subset)

    def sampling_menu(self) -> None:
        self._submenu(
            "Sampling",
            SAMPLING_MENU,
            {"1": self.random_sample, "2": self.stratified_sample},
        )

    def random_sample(self) -> None:
        size = self.prompt.ask_int(f"Sample size (at most {self.dataset.row_count}): ")
        self._save_derived(random_sample(self.dataset, size))

    def stratified_sample(self) -> None:
        column = self.prompt.choose_column(list(self.dataset.headers), "Select the strata column:")
        size = self.prompt.ask_int("Total sample size: ")
        sample = stratified_sample(self.dataset, column, size)
        if sample.row_count < size:
            self.write(f"Strata quotas yielded {sample.row_count} of {size} requested rows.")
        self._save_derived(sample)
