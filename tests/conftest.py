"""Pytest configuration and fixtures for tabstat tests."""

from pathlib import Path

import numpy as np
import pytest

from tabstat.config import Settings
from tabstat.core.dataset import Dataset


@pytest.fixture
def students_dataset() -> Dataset:
    """Return a small mixed-type dataset of students."""
    return Dataset(
        headers=("name", "age", "score", "grade", "city"),
        rows=(
            ("Alice", "23", "88.5", "A", "Seoul"),
            ("Bruno", "31", "72.0", "C", "Busan"),
            ("Chloe", "27", "91.2", "A", "Seoul"),
            ("Daniel", "45", "65.3", "D", "Daegu"),
            ("Elena", "38", "80.1", "B", "Busan"),
            ("Farid", "29", "n/a", "B", "Seoul"),
        ),
        source_label="students.csv",
    )


@pytest.fixture
def paired_dataset() -> Dataset:
    """Return before/after measurements for eight subjects."""
    before = [72, 75, 68, 80, 77, 70, 74, 69]
    after = [75, 79, 70, 83, 78, 74, 78, 70]
    return Dataset(
        headers=("before", "after"),
        rows=tuple((str(b), str(a)) for b, a in zip(before, after)),
        source_label="paired.csv",
    )


@pytest.fixture
def rng() -> np.random.Generator:
    """Return a seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Return settings that write results and samples under tmp_path."""
    return Settings(
        result_dir=tmp_path / "result",
        sample_dir=tmp_path / "sample",
    )


@pytest.fixture
def scripted_input():
    """Return a factory for line readers that replay answers, then hit EOF."""

    def factory(*answers: str):
        remaining = iter(answers)

        def read_line(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return read_line

    return factory
