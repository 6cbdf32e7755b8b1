"""Tabular data model for tabstat.

A ``Dataset`` is an immutable table of raw string cells with named columns.
Statistics never read cells directly; they go through the column accessors
here, which own the numeric coercion contract:

- ``try_numeric_column`` is lenient: it parses what it can and reports the
  cells it rejected.
- ``get_numeric_column`` returns only the parsed values and fails when the
  column has nothing numeric in it.

Example:
    >>> ds = Dataset(headers=["name", "score"], rows=[["a", "1.5"], ["b", "n/a"]])
    >>> ds.get_numeric_column("score")
    (1.5,)
    >>> ds.try_numeric_column("score").rejected
    ((1, 'n/a'),)
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from tabstat.core.errors import ColumnNotFoundError, NoNumericDataError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumericCoercion:
    """Outcome of parsing a column as numbers.

    Attributes:
        column: Column name
        values: Successfully parsed values, in row order
        rejected: (row index, raw cell) pairs that did not parse
    """

    column: str
    values: tuple[float, ...]
    rejected: tuple[tuple[int, str], ...] = ()

    @property
    def accepted_count(self) -> int:
        return len(self.values)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)

    @property
    def is_numeric(self) -> bool:
        """A column is numeric when at least one cell parses."""
        return len(self.values) > 0

    @property
    def is_complete(self) -> bool:
        return len(self.rejected) == 0


@dataclass(frozen=True)
class DatasetSummary:
    """Shape and preview of a dataset for display.

    Attributes:
        source_label: Where the dataset came from
        row_count: Number of records
        column_count: Number of headers
        headers: Column names
        numeric_headers: Columns with at least one numeric cell
        preview: First rows as a DataFrame
    """

    source_label: str
    row_count: int
    column_count: int
    headers: tuple[str, ...]
    numeric_headers: tuple[str, ...]
    preview: pd.DataFrame

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        lines = [
            "=== Dataset Summary ===",
            f"File: {self.source_label}",
            f"Rows: {self.row_count}",
            f"Columns: {self.column_count}",
            f"Headers: {', '.join(self.headers)}",
            f"Numeric columns: {', '.join(self.numeric_headers) or '(none)'}",
        ]
        if len(self.preview) > 0:
            lines.append("")
            lines.append(self.preview.to_markdown(index=False))
        return "\n".join(lines)


@dataclass(frozen=True)
class Dataset:
    """Immutable table of string cells.

    Rows are aligned to headers by position. Short rows are tolerated and
    their missing cells read as the empty string. When headers repeat, lookups
    by name resolve to the first matching position.

    Attributes:
        headers: Ordered column names
        rows: Ordered records of raw string cells
        source_label: Provenance (file path or derived label)
    """

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()
    source_label: str = "<memory>"
    _positions: dict[str, int] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        headers = tuple(str(h) for h in self.headers)
        rows = tuple(tuple(str(cell) for cell in row) for row in self.rows)
        positions: dict[str, int] = {}
        for index, name in enumerate(headers):
            positions.setdefault(name, index)
        object.__setattr__(self, "headers", headers)
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "_positions", positions)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @property
    def duplicate_headers(self) -> tuple[str, ...]:
        """Header names that appear more than once (later copies are shadowed)."""
        counts = Counter(self.headers)
        return tuple(name for name, count in counts.items() if count > 1)

    def column_index(self, name: str) -> int:
        """Get the position of the first header equal to ``name``.

        Raises:
            ColumnNotFoundError: If no header matches
        """
        try:
            return self._positions[name]
        except KeyError:
            raise ColumnNotFoundError(name) from None

    def _cell(self, row: Sequence[str], index: int) -> str:
        return row[index] if index < len(row) else ""

    def get_column(self, name: str) -> tuple[str, ...]:
        """Get every cell of a column as raw strings.

        Args:
            name: Column name

        Returns:
            Tuple of cells in row order

        Raises:
            ColumnNotFoundError: If the column does not exist
        """
        index = self.column_index(name)
        return tuple(self._cell(row, index) for row in self.rows)

    def try_numeric_column(self, name: str) -> NumericCoercion:
        """Parse a column as numbers, keeping track of rejected cells.

        Parsing is locale independent. Cells that fail to parse, carry leading
        or trailing whitespace, or parse to NaN or an infinite value are
        rejected rather than zero-filled.

        Args:
            name: Column name

        Returns:
            NumericCoercion with accepted values and rejected cells

        Raises:
            ColumnNotFoundError: If the column does not exist
        """
        cells = self.get_column(name)
        parsed = pd.to_numeric(pd.Series(list(cells), dtype=object), errors="coerce")
        unpadded = np.array([cell == cell.strip() for cell in cells], dtype=bool)
        finite = np.isfinite(parsed.to_numpy(dtype=float, na_value=np.nan))
        mask = finite & unpadded
        values = tuple(float(v) for v in parsed[mask])
        rejected = tuple(
            (i, cell) for i, (cell, ok) in enumerate(zip(cells, mask)) if not ok
        )
        if values and rejected:
            logger.debug(
                f"Column '{name}': {len(rejected)} of {len(cells)} cells are not numeric"
            )
        return NumericCoercion(column=name, values=values, rejected=rejected)

    def get_numeric_column(self, name: str) -> tuple[float, ...]:
        """Get the numeric values of a column, dropping unparseable cells.

        Args:
            name: Column name

        Returns:
            Parsed values in row order

        Raises:
            ColumnNotFoundError: If the column does not exist
            NoNumericDataError: If no cell parses as a number
        """
        coercion = self.try_numeric_column(name)
        if not coercion.is_numeric:
            raise NoNumericDataError(name)
        return coercion.values

    def is_numeric(self, name: str) -> bool:
        """Check whether a column has at least one numeric cell."""
        return self.try_numeric_column(name).is_numeric

    def numeric_headers(self) -> list[str]:
        """Get the headers whose columns contain numeric data."""
        return [h for h in dict.fromkeys(self.headers) if self.is_numeric(h)]

    def get_row(self, index: int) -> tuple[str, ...] | None:
        """Get a record by position, or None when out of range."""
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def extract_subset(
        self,
        row_indices: Iterable[int] | None = None,
        column_names: Iterable[str] | None = None,
    ) -> Dataset:
        """Select rows and columns into a new dataset.

        Args:
            row_indices: Rows to keep, in the order given (None = all rows).
                Out-of-range indices are skipped.
            column_names: Columns to keep, in the order given (None = all)

        Returns:
            New Dataset labelled ``"<source>_subset"``

        Raises:
            ColumnNotFoundError: If any requested column is absent
        """
        if column_names is None:
            new_headers = self.headers
            indices = list(range(len(self.headers)))
        else:
            new_headers = tuple(column_names)
            indices = [self.column_index(name) for name in new_headers]

        selected = range(len(self.rows)) if row_indices is None else row_indices

        new_rows = []
        for row_index in selected:
            row = self.get_row(row_index)
            if row is None:
                continue
            new_rows.append(tuple(self._cell(row, i) for i in indices))

        return Dataset(
            headers=new_headers,
            rows=tuple(new_rows),
            source_label=f"{self.source_label}_subset",
        )

    def with_rows(self, row_indices: Iterable[int], source_label: str) -> Dataset:
        """Build a dataset from selected rows with all headers and a new label."""
        rows = [row for row in (self.get_row(i) for i in row_indices) if row is not None]
        return Dataset(headers=self.headers, rows=tuple(rows), source_label=source_label)

    def to_frame(self) -> pd.DataFrame:
        """Get the cells as a DataFrame of strings, padding short rows."""
        width = len(self.headers)
        records = [
            [self._cell(row, i) for i in range(width)] for row in self.rows
        ]
        return pd.DataFrame(records, columns=list(self.headers), dtype=object)

    def summary(self, preview_rows: int = 5) -> DatasetSummary:
        """Get the dataset shape and a preview of the first rows."""
        return DatasetSummary(
            source_label=self.source_label,
            row_count=self.row_count,
            column_count=self.column_count,
            headers=self.headers,
            numeric_headers=tuple(self.numeric_headers()),
            preview=self.to_frame().head(preview_rows),
        )
