"""Weighted table and its iteration machinery."""

from .iterators import EntryHandle, WeightHandle
from .weighted import WeightedTable, check_weight

__all__ = ["EntryHandle", "WeightHandle", "WeightedTable", "check_weight"]
