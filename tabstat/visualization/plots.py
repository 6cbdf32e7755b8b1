"""Chart builders for column analyses.

This module provides interactive Plotly charts for:
- Categorical distributions (bar and pie charts of relative frequency)
- Numeric distributions (histogram, box plot, dot plot)
- Normality checks (normal Q-Q plot)

Every builder returns a PlotResult that can be rendered to HTML or JSON, or
saved under a result directory as ``<kind>_<column>.html``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import numpy as np
import plotly.graph_objects as go

from tabstat.analysis.descriptive import BasicStats, FrequencyTable, histogram_counts
from tabstat.analysis.distributions import normal_quantiles
from tabstat.core.errors import EmptyInputError
from tabstat.visualization.text import dot_plot_counts

logger = logging.getLogger(__name__)


def sanitize_filename(name: str) -> str:
    """Replace path separators and whitespace so ``name`` is a safe file stem."""
    return re.sub(r"[\s/\\]", "_", name)


@dataclass
class PlotResult:
    """Result from a plot generation function.

    Attributes:
        figure: Plotly figure object
        title: Plot title
        description: Description of what the plot shows
        data_summary: Summary of data used
        kind: Chart type ("bar", "pie", "histogram", ...)
        column: Column the chart was drawn from
    """

    figure: go.Figure
    title: str
    description: str
    data_summary: dict[str, Any]
    kind: str
    column: str

    def to_html(self, include_plotlyjs: bool = True) -> str:
        """Convert figure to HTML string.

        Args:
            include_plotlyjs: Include Plotly.js library in HTML

        Returns:
            HTML string
        """
        return self.figure.to_html(
            include_plotlyjs="cdn" if include_plotlyjs else False,
            full_html=False,
        )

    def to_json(self) -> str:
        """Convert figure to JSON for frontend rendering."""
        return self.figure.to_json()

    @property
    def filename(self) -> str:
        return f"{self.kind}_{sanitize_filename(self.column)}.html"

    def save(self, directory: str | Path) -> Path:
        """Write the chart as a standalone HTML file.

        Args:
            directory: Output directory (created if missing)

        Returns:
            Path of the written file
        """
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        self.figure.write_html(str(path), include_plotlyjs="cdn", full_html=True)
        logger.info(f"Saved {self.kind} chart to {path}")
        return path


def _values(values: Sequence[float], what: str) -> np.ndarray:
    data = np.asarray(list(values), dtype=float)
    if data.size == 0:
        raise EmptyInputError(what)
    return data


def _layout(fig: go.Figure, title: str, xaxis: str | None, yaxis: str | None) -> None:
    fig.update_layout(
        title=dict(text=title, x=0.5),
        xaxis_title=xaxis,
        yaxis_title=yaxis,
        template="plotly_white",
    )


def create_bar_chart(table: FrequencyTable, column: str) -> PlotResult:
    """Create a bar chart of relative frequencies, tallest bar first.

    Args:
        table: Frequency table of the column
        column: Column name

    Returns:
        PlotResult with bar chart

    Raises:
        EmptyInputError: If the table is empty
    """
    if table.total_count == 0:
        raise EmptyInputError("bar chart")

    ordered = table.most_common()
    labels = [value for value, _ in ordered]
    relative = [count / table.total_count for _, count in ordered]
    title = f"Bar Chart of {column}"

    fig = go.Figure(go.Bar(
        x=labels,
        y=relative,
        text=[f"{r:.1%}" for r in relative],
        textposition="outside",
        name=column,
    ))
    _layout(fig, title, column, "Relative Frequency")
    fig.update_yaxes(range=[0, max(relative) * 1.15])

    return PlotResult(
        figure=fig,
        title=title,
        description=f"Relative frequency of each value of {column}.",
        data_summary={"column": column, "categories": len(labels), **table.to_dict()},
        kind="bar",
        column=column,
    )


def create_pie_chart(table: FrequencyTable, column: str) -> PlotResult:
    """Create a pie chart of relative frequencies.

    Raises:
        EmptyInputError: If the table is empty
    """
    if table.total_count == 0:
        raise EmptyInputError("pie chart")

    ordered = table.most_common()
    title = f"Pie Chart of {column}"

    fig = go.Figure(go.Pie(
        labels=[value for value, _ in ordered],
        values=[count for _, count in ordered],
        sort=False,
        textinfo="label+percent",
    ))
    fig.update_layout(title=dict(text=title, x=0.5), template="plotly_white")

    return PlotResult(
        figure=fig,
        title=title,
        description=f"Share of each value of {column}.",
        data_summary={"column": column, "categories": len(ordered), **table.to_dict()},
        kind="pie",
        column=column,
    )


def create_histogram(
    values: Sequence[float],
    column: str,
    bins: int = 20,
) -> PlotResult:
    """Create a histogram with equal-width bins between min and max.

    Args:
        values: Numeric values
        column: Column name
        bins: Number of bins

    Returns:
        PlotResult with histogram figure

    Raises:
        EmptyInputError: If ``values`` is empty
        ValueError: If ``bins`` is less than 1
    """
    data = _values(values, "histogram")
    counts, edges = histogram_counts(data, bins)
    title = f"Histogram of {column}"

    fig = go.Figure(go.Histogram(
        x=data,
        xbins=dict(start=edges[0], end=edges[-1], size=edges[1] - edges[0]),
        name=column,
    ))
    _layout(fig, title, column, "Frequency")
    fig.update_layout(bargap=0.05)

    summary = {
        "column": column,
        "count": int(data.size),
        "bins": bins,
        "bin_edges": edges,
        "bin_counts": counts,
        "mean": float(data.mean()),
        "min": float(data.min()),
        "max": float(data.max()),
    }

    return PlotResult(
        figure=fig,
        title=title,
        description=f"Histogram of {column} distribution.",
        data_summary=summary,
        kind="histogram",
        column=column,
    )


def create_box_plot(stats: BasicStats, column: str) -> PlotResult:
    """Create a box plot from precomputed statistics.

    The box spans Q1 to Q3 with a line at the median; whiskers reach the
    minimum and maximum.

    Args:
        stats: Statistics of the column
        column: Column name

    Returns:
        PlotResult with box plot
    """
    title = f"Box Plot of {column}"

    fig = go.Figure(go.Box(
        x=[column],
        q1=[stats.q1],
        median=[stats.median],
        q3=[stats.q3],
        lowerfence=[stats.min],
        upperfence=[stats.max],
        mean=[stats.mean],
        name=column,
        boxpoints=False,
    ))
    _layout(fig, title, None, column)

    return PlotResult(
        figure=fig,
        title=title,
        description=f"Five-number summary of {column}.",
        data_summary={"column": column, **stats.to_dict()},
        kind="box",
        column=column,
    )


def create_dot_plot(values: Sequence[float], column: str) -> PlotResult:
    """Create a dot plot stacking one dot per value at its rounded position.

    Values are rounded half away from zero before stacking.

    Raises:
        EmptyInputError: If ``values`` is empty
    """
    data = _values(values, "dot plot")
    counts = dot_plot_counts(data)

    xs: list[int] = []
    ys: list[int] = []
    for value, count in counts.items():
        xs.extend([value] * count)
        ys.extend(range(1, count + 1))

    title = f"Dot Plot of {column}"
    fig = go.Figure(go.Scatter(
        x=xs,
        y=ys,
        mode="markers",
        marker=dict(size=10, opacity=0.8),
        name=column,
    ))
    _layout(fig, title, column, "Count")

    return PlotResult(
        figure=fig,
        title=title,
        description=f"Dot plot of {column} rounded to whole numbers.",
        data_summary={
            "column": column,
            "count": int(data.size),
            "distinct_values": len(counts),
            "max_stack": max(counts.values()),
        },
        kind="dot",
        column=column,
    )


def create_qq_plot(values: Sequence[float], column: str) -> PlotResult:
    """Create a normal Q-Q plot.

    Sorted data are plotted against standard normal quantiles at plotting
    positions (i - 0.5) / n, with the reference line y = x.

    Raises:
        EmptyInputError: If ``values`` is empty
    """
    data = np.sort(_values(values, "Q-Q plot"))
    theoretical = normal_quantiles(data.size)

    lo = float(min(theoretical.min(), data.min()))
    hi = float(max(theoretical.max(), data.max()))
    title = f"Normal Q-Q Plot of {column}"

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=theoretical,
        y=data,
        mode="markers",
        marker=dict(size=6, opacity=0.7),
        name=column,
    ))
    fig.add_trace(go.Scatter(
        x=[lo, hi],
        y=[lo, hi],
        mode="lines",
        line=dict(color="red", dash="dash"),
        name="y = x",
    ))
    _layout(fig, title, "Theoretical Quantiles", "Sample Quantiles")

    return PlotResult(
        figure=fig,
        title=title,
        description=f"Sample quantiles of {column} against a standard normal.",
        data_summary={
            "column": column,
            "count": int(data.size),
            "theoretical_range": [float(theoretical.min()), float(theoretical.max())],
        },
        kind="qq",
        column=column,
    )
