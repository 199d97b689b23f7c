"""Public runtime models for the import-first API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from ..schema.defaults import DEFAULT_TABLE_NAME, DEFAULT_TOLERANCE


@dataclass(frozen=True)
class TableConfig:
    """Parsed table definition ready to be turned into a ``WeightedTable``."""

    name: str = DEFAULT_TABLE_NAME
    seed: int | None = None
    entries: tuple[tuple[Any, int], ...] = ()
    warnings: tuple[str, ...] = ()


@dataclass
class SampleReport:
    """Result payload of drawing repeatedly from a table."""

    name: str
    seed: int | None
    n_draws: int
    frequencies: pd.DataFrame
    max_error: float
    tolerance: float = DEFAULT_TOLERANCE
    runtime_notes: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.max_error <= self.tolerance

    def objective(self) -> float:
        """Return the largest absolute gap between observed and expected."""

        return float(self.max_error)
