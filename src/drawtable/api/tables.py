"""
Build tables from config and report on repeated draws.
"""

from __future__ import annotations

import logging
from typing import Any

from ..runtime.rng import RNG
from ..schema.defaults import DEFAULT_TABLE_NAME, DEFAULT_TOLERANCE
from ..schema.samples import load_config
from ..schema.validation import parse_table_config
from ..scoring.metrics import frequency_frame, max_abs_error
from ..table.weighted import WeightedTable
from .models import SampleReport, TableConfig

_LOGGER = logging.getLogger(__name__)


def _resolve_config(config: Any) -> TableConfig:
    if isinstance(config, TableConfig):
        return config
    return parse_table_config(load_config(config))


def build_table(config, logger=None) -> WeightedTable:
    """Create a table from a ``TableConfig``, config mapping or YAML text."""

    logger = logger or _LOGGER
    resolved = _resolve_config(config)
    for message in resolved.warnings:
        logger.warning(f"[{resolved.name}] {message}")

    table = WeightedTable.from_sequence(resolved.entries)
    logger.debug(
        f"Built table '{resolved.name}' with {len(table)} entries, "
        f"total weight {table.total_weight}"
    )
    return table


def table_from_yaml(text: str, logger=None) -> WeightedTable:
    return build_table(load_config(text), logger=logger)


def sample_table(
    table: WeightedTable,
    n_draws: int,
    seed=None,
    tolerance=DEFAULT_TOLERANCE,
    name=DEFAULT_TABLE_NAME,
    logger=None,
) -> SampleReport:
    """Draw ``n_draws`` weighted values and compare frequencies with weights."""

    n_draws = int(n_draws)
    if n_draws < 0:
        raise ValueError("n_draws must be >= 0")
    if table.total_weight != sum(table.weights()):
        raise ValueError(
            f"Table total weight {table.total_weight} is stale after handle edits; "
            "call resync_total_weight() before sampling"
        )

    notes = []
    rng = RNG(None if seed is None else RNG.derive_seed(seed, "sample", name))
    draws = []
    if table.total_weight == 0:
        notes.append("table has zero total weight; no draws were made")
    else:
        for _ in range(n_draws):
            draws.append(table.weighted_random(rng=rng))

    frame = frequency_frame(table, draws)
    report = SampleReport(
        name=name,
        seed=seed,
        n_draws=len(draws),
        frequencies=frame,
        max_error=max_abs_error(frame),
        tolerance=float(tolerance),
        runtime_notes=notes,
    )

    if logger is not None:
        status = "OK" if report.success else "DRIFT"
        logger.info(
            f"[{name}] draws={report.n_draws} max_error={report.max_error:.4f} "
            f"status={status}"
        )
        for note in notes:
            logger.warning(f"[{name}] {note}")
    return report
