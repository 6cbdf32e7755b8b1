"""Loading datasets from CSV/Excel files and writing them back to CSV.

All cells are read as strings; numeric interpretation happens later through
``Dataset.try_numeric_column``. Blank cells become empty strings.

Example:
    >>> from tabstat.core.loader import read_file, save_dataset_to_csv
    >>> dataset = read_file("data.csv")
    >>> save_dataset_to_csv(dataset.extract_subset(column_names=["score"]), "out.csv")
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import pandas as pd

from tabstat.core.dataset import Dataset
from tabstat.core.errors import UnsupportedFormatError

logger = logging.getLogger(__name__)

CSV_EXTENSIONS = frozenset({"csv"})
EXCEL_EXTENSIONS = frozenset({"xlsx", "xlsm"})


def _frame_to_dataset(raw: pd.DataFrame, source_label: str) -> Dataset:
    """Convert a header-less string DataFrame into a Dataset.

    The first row supplies the headers. Header names are kept verbatim, so
    repeated names stay repeated and resolve to their first occurrence.
    """
    raw = raw.fillna("")
    if len(raw) == 0:
        logger.warning(f"No rows found in {source_label}")
        return Dataset(headers=(), rows=(), source_label=source_label)

    headers = tuple(str(h) for h in raw.iloc[0].tolist())
    rows = tuple(
        tuple(str(cell) for cell in record)
        for record in raw.iloc[1:].itertuples(index=False)
    )
    dataset = Dataset(headers=headers, rows=rows, source_label=source_label)

    if dataset.duplicate_headers:
        logger.warning(
            f"Duplicate headers in {source_label}: {list(dataset.duplicate_headers)}; "
            "lookups use the first occurrence"
        )
    return dataset


def read_csv_file(path: str | Path) -> Dataset:
    """Read a CSV file whose first row is the header.

    Args:
        path: Path to the CSV file

    Returns:
        Dataset labelled with the file path
    """
    path = Path(path)
    start_time = datetime.now()

    raw = pd.read_csv(path, header=None, dtype=str, keep_default_na=False)
    dataset = _frame_to_dataset(raw, str(path))

    elapsed = (datetime.now() - start_time).total_seconds()
    logger.info(
        f"Loaded {dataset.row_count} rows x {dataset.column_count} columns "
        f"from {path} in {elapsed:.2f}s"
    )
    return dataset


def read_excel_file(path: str | Path) -> Dataset:
    """Read the first worksheet of an Excel workbook.

    The first row of the sheet is used as the header.

    Args:
        path: Path to the workbook

    Returns:
        Dataset labelled with the file path
    """
    path = Path(path)

    raw = pd.read_excel(
        path,
        sheet_name=0,
        header=None,
        dtype=str,
        keep_default_na=False,
    )
    dataset = _frame_to_dataset(raw, str(path))

    logger.info(
        f"Loaded {dataset.row_count} rows x {dataset.column_count} columns from {path}"
    )
    return dataset


def read_file(path: str | Path) -> Dataset:
    """Read a dataset, choosing the parser from the file extension.

    Args:
        path: Path to a ``.csv``, ``.xlsx`` or ``.xlsm`` file

    Returns:
        Loaded Dataset

    Raises:
        UnsupportedFormatError: If the extension is not supported
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    extension = path.suffix.lstrip(".").lower()

    if extension in CSV_EXTENSIONS:
        return read_csv_file(path)
    if extension in EXCEL_EXTENSIONS:
        return read_excel_file(path)

    raise UnsupportedFormatError(str(path), extension)


def save_dataset_to_csv(dataset: Dataset, path: str | Path) -> Path:
    """Write a dataset as CSV: a header row then one line per record.

    Parent directories are created when missing.

    Args:
        dataset: Dataset to write
        path: Output file path

    Returns:
        The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    dataset.to_frame().to_csv(path, index=False)

    logger.info(f"Saved {dataset.row_count} rows to {path}")
    return path
