"""Public package interface for drawtable."""

from importlib.metadata import PackageNotFoundError, version

from .api.models import SampleReport, TableConfig
from .api.tables import build_table, sample_table, table_from_yaml
from .engine.selection import (
    random_element,
    random_index,
    random_range,
    shuffle,
    shuffled,
    weighted_choice,
)
from .runtime.rng import RNG, get_rng, seed
from .schema.samples import (
    available_sample_configs,
    get_sample_config,
    load_config,
)
from .table import EntryHandle, WeightedTable, WeightHandle

try:
    __version__ = version("drawtable")
except PackageNotFoundError:
    __version__ = "0.1.0"


__all__ = [
    "EntryHandle",
    "RNG",
    "SampleReport",
    "TableConfig",
    "WeightHandle",
    "WeightedTable",
    "available_sample_configs",
    "build_table",
    "get_rng",
    "get_sample_config",
    "load_config",
    "random_element",
    "random_index",
    "random_range",
    "sample_table",
    "seed",
    "shuffle",
    "shuffled",
    "table_from_yaml",
    "weighted_choice",
]
