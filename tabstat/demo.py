"""Synthetic sample data for trying out the analyses."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

SAMPLE_COLUMNS = ["name", "age", "score", "grade", "city"]

NAMES = ["Alice", "Bruno", "Chloe", "Daniel", "Elena", "Farid", "Grace", "Hiro"]
GRADES = ["A", "B", "C", "D"]
CITIES = ["Seoul", "Busan", "Daegu", "Incheon", "Gwangju"]


def generate_sample_frame(
    rows: int = 100, rng: np.random.Generator | None = None
) -> pd.DataFrame:
    """Build a table of people with ages, scores, grades and cities.

    Args:
        rows: Number of records
        rng: Random generator (default: a new unseeded generator)

    Returns:
        DataFrame with columns name, age (20-64), score (60.0-99.9, one
        decimal), grade (A-D) and city
    """
    rng = rng or np.random.default_rng()
    return pd.DataFrame({
        "name": [f"{NAMES[i % len(NAMES)]}_{i + 1}" for i in range(rows)],
        "age": rng.integers(20, 65, size=rows),
        "score": np.round(rng.uniform(60.0, 100.0, size=rows), 1).clip(max=99.9),
        "grade": rng.choice(GRADES, size=rows),
        "city": rng.choice(CITIES, size=rows),
    }, columns=SAMPLE_COLUMNS)


def next_sample_path(directory: str | Path) -> Path:
    """First unused path among sample_data.csv, sample_data_1.csv, ..."""
    directory = Path(directory)
    path = directory / "sample_data.csv"
    counter = 1
    while path.exists():
        path = directory / f"sample_data_{counter}.csv"
        counter += 1
    return path


def create_sample_data(
    directory: str | Path,
    rows: int = 100,
    rng: np.random.Generator | None = None,
) -> Path:
    """Write a fresh sample CSV without overwriting earlier ones.

    Args:
        directory: Target directory (created if missing)
        rows: Number of records
        rng: Random generator

    Returns:
        Path of the new file
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = next_sample_path(directory)
    generate_sample_frame(rows, rng).to_csv(path, index=False, float_format="%.1f")
    logger.info(f"Wrote {rows} sample rows to {path}")
    return path
