"""Console renderings of numeric distributions.

Stem-and-leaf displays work at one decimal place: each value is scaled by 10
and rounded, the stem is the scaled value divided by 10 (truncated toward
zero) and the leaf is the last digit. Negative values between -1 and 0 get
the stem "-0" so they stay apart from small positive values.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

import numpy as np


def round_half_away_from_zero(values: Iterable[float]) -> np.ndarray:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    data = np.asarray(list(values), dtype=float)
    return np.sign(data) * np.floor(np.abs(data) + 0.5)


def stem_and_leaf(values: Iterable[float]) -> dict[str, list[int]]:
    """Group values into stems and sorted leaves.

    Args:
        values: Numeric values

    Returns:
        Mapping of stem label to its leaves, stems in ascending numeric order

    Example:
        >>> stem_and_leaf([1.2, 1.5, 2.3, -0.4])
        {'-0': [4], '1': [2, 5], '2': [3]}
    """
    scaled = round_half_away_from_zero(np.asarray(list(values), dtype=float) * 10)

    groups: dict[tuple[int, int], list[int]] = {}
    for v in scaled.astype(int):
        stem = int(v / 10)
        leaf = abs(v) % 10
        negative = 1 if v < 0 else 0
        groups.setdefault((stem, negative), []).append(leaf)

    # "-0" sorts below "0"
    ordered = sorted(groups, key=lambda key: (key[0], -key[1]))
    result = {}
    for stem, negative in ordered:
        label = f"-{abs(stem)}" if negative else str(stem)
        result[label] = sorted(groups[(stem, negative)])
    return result


def render_stem_and_leaf(values: Iterable[float], column: str = "") -> str:
    """Render a stem-and-leaf display as text."""
    stems = stem_and_leaf(values)
    title = f"Stem-and-Leaf Plot for '{column}'" if column else "Stem-and-Leaf Plot"
    width = max((len(s) for s in stems), default=1)

    lines = [title, "Stem | Leaf"]
    for stem, leaves in stems.items():
        lines.append(f"{stem:>{max(width, 4)}} | {' '.join(str(leaf) for leaf in leaves)}")
    lines.append("Key: 1 | 2 = 1.2")
    return "\n".join(lines)


def dot_plot_counts(values: Iterable[float]) -> dict[int, int]:
    """Count values per integer after rounding half away from zero.

    Returns:
        Mapping of rounded value to count, in ascending order
    """
    rounded = round_half_away_from_zero(values).astype(int)
    counts = Counter(int(v) for v in rounded)
    return dict(sorted(counts.items()))


def render_dot_plot(values: Iterable[float], column: str = "") -> str:
    """Render a dot plot as text, one row of dots per rounded value."""
    counts = dot_plot_counts(values)
    title = f"Dot Plot for '{column}'" if column else "Dot Plot"
    width = max((len(str(v)) for v in counts), default=1)

    lines = [title]
    for value, count in counts.items():
        lines.append(f"{value:>{width}} | {' '.join('●' * count)}")
    return "\n".join(lines)
