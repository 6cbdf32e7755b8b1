"""Simple random and stratified sampling of dataset rows.

Both samplers return a new Dataset with every header and a derived source
label; the input is never modified. Randomness comes from a
``numpy.random.Generator``: pass one in for reproducible draws, otherwise a
fresh unseeded generator is used.
"""

from __future__ import annotations

import logging

import numpy as np

from tabstat.core.dataset import Dataset
from tabstat.core.errors import SampleSizeTooLargeError

logger = logging.getLogger(__name__)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"Sample size must be non-negative, got {size}")


def random_sample(
    dataset: Dataset,
    size: int,
    rng: np.random.Generator | None = None,
) -> Dataset:
    """Draw ``size`` distinct rows uniformly without replacement.

    Args:
        dataset: Source dataset
        size: Number of rows to draw
        rng: Random generator (default: a new unseeded generator)

    Returns:
        Dataset labelled ``"<source>_sample_<size>"``

    Raises:
        ValueError: If ``size`` is negative
        SampleSizeTooLargeError: If ``size`` exceeds the row count
    """
    _check_size(size)
    if size > dataset.row_count:
        raise SampleSizeTooLargeError(size, dataset.row_count)

    rng = rng or np.random.default_rng()
    indices = rng.permutation(dataset.row_count)[:size]

    logger.info(f"Drew random sample of {size} from {dataset.row_count} rows")
    return dataset.with_rows(
        (int(i) for i in indices), f"{dataset.source_label}_sample_{size}"
    )


def stratified_sample(
    dataset: Dataset,
    strata_column: str,
    size: int,
    rng: np.random.Generator | None = None,
) -> Dataset:
    """Draw an equal quota of rows from each stratum.

    Each distinct value of ``strata_column`` is a stratum. Every stratum
    contributes floor(size / number of strata) rows, or all of its rows when
    it is smaller, so the result can hold fewer than ``size`` rows.

    Args:
        dataset: Source dataset
        strata_column: Column whose values define the strata
        size: Target total number of rows
        rng: Random generator (default: a new unseeded generator)

    Returns:
        Dataset labelled ``"<source>_stratified_sample_<size>"``

    Raises:
        ValueError: If ``size`` is negative
        ColumnNotFoundError: If ``strata_column`` does not exist
    """
    _check_size(size)
    values = dataset.get_column(strata_column)
    label = f"{dataset.source_label}_stratified_sample_{size}"

    strata: dict[str, list[int]] = {}
    for index, value in enumerate(values):
        strata.setdefault(value, []).append(index)

    if not strata:
        return dataset.with_rows([], label)

    rng = rng or np.random.default_rng()
    quota = size // len(strata)

    selected: list[int] = []
    for value, members in strata.items():
        take = min(quota, len(members))
        chosen = rng.permutation(members)[:take]
        selected.extend(int(i) for i in chosen)
        logger.debug(f"Stratum '{value}': took {take} of {len(members)} rows")

    logger.info(
        f"Drew stratified sample of {len(selected)} rows from {len(strata)} strata "
        f"of '{strata_column}'"
    )
    return dataset.with_rows(selected, label)
