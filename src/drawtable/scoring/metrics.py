"""
Compare empirical draw frequencies with a table's weights.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np
import pandas as pd

FREQUENCY_COLUMNS = ["value", "weight", "expected", "count", "observed", "abs_error"]


def expected_probabilities(table) -> list[float]:
    total = table.total_weight
    if total <= 0:
        return [0.0] * len(table)
    return [weight / total for weight in table.weights()]


def count_draws(table, draws: Iterable[Any]) -> np.ndarray:
    """Count draws per table slot.

    Draws are matched by equality, so unhashable values work. A draw that is
    not in the table raises ``ValueError``.
    """

    indices = []
    for draw in draws:
        index = table.index_of(draw)
        if index is None:
            raise ValueError(f"Draw {draw!r} is not a value of the table")
        indices.append(index)
    return np.bincount(np.asarray(indices, dtype=np.int64), minlength=len(table))


def frequency_frame(table, draws: Iterable[Any]) -> pd.DataFrame:
    counts = count_draws(table, draws)
    n_draws = int(counts.sum())
    expected = np.asarray(expected_probabilities(table), dtype=float)
    if n_draws > 0:
        observed = counts / n_draws
    else:
        observed = np.zeros(len(table), dtype=float)

    return pd.DataFrame(
        {
            "value": table.values(),
            "weight": table.weights(),
            "expected": expected,
            "count": counts.astype(int),
            "observed": observed,
            "abs_error": np.abs(observed - expected),
        },
        columns=FREQUENCY_COLUMNS,
    )


def max_abs_error(frame: pd.DataFrame) -> float:
    if frame.empty:
        return 0.0
    return float(frame["abs_error"].max())
