"""Visualization tools for tabstat.

This module contains:
- Bar and pie charts of categorical frequencies
- Histograms, box plots, dot plots and normal Q-Q plots
- Text stem-and-leaf and dot plot renderings
"""

from tabstat.visualization.plots import (
    PlotResult,
    create_bar_chart,
    create_box_plot,
    create_dot_plot,
    create_histogram,
    create_pie_chart,
    create_qq_plot,
)
from tabstat.visualization.text import (
    dot_plot_counts,
    render_dot_plot,
    render_stem_and_leaf,
    stem_and_leaf,
)

__all__ = [
    "PlotResult",
    "create_bar_chart",
    "create_pie_chart",
    "create_histogram",
    "create_box_plot",
    "create_dot_plot",
    "create_qq_plot",
    "stem_and_leaf",
    "render_stem_and_leaf",
    "dot_plot_counts",
    "render_dot_plot",
]
