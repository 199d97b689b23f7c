"""
Weighted random-selection table.

Entries are kept in two parallel lists in insertion order and looked up by
equality with a linear scan, so values do not need to be hashable.

Example::

    table = WeightedTable()
    table.insert("Bob", 10)
    table.insert("Alice", 20)
    table.remove("Bob")
    table.weighted_random()   # "Alice"

Inserting a value that already exists replaces its weight (last wins);
``combine`` instead adds the weights of shared values.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..engine.selection import bucket_search, check_weight, checked_index
from ..runtime.rng import get_rng
from .iterators import (
    EntryHandle,
    EntryIter,
    EntryIterMut,
    ValuesIntoIter,
    ValuesIter,
    WeightHandle,
)

_LOGGER = logging.getLogger(__name__)


def _iter_pairs(pairs):
    if isinstance(pairs, Mapping):
        return iter(pairs.items())
    return iter(pairs)


class WeightedTable:
    """Values paired with integer weights, selectable uniformly or by weight.

    ``total_weight`` caches the sum of all weights. Every method keeps it in
    step except writes made through ``get_weight_mut``, ``get_entry_mut`` and
    ``iter_mut`` handles, which leave it stale until ``resync_total_weight``
    is called.

    Selection methods return ``None`` when nothing can be selected. They take
    an optional ``rng`` (see ``drawtable.runtime.rng.RNG``) and otherwise use
    the process-wide source; the table itself holds no random state.
    """

    def __init__(self, pairs: Iterable[tuple[Any, int]] | None = None):
        self._values: list[Any] = []
        self._weights: list[int] = []
        self._total_weight = 0
        self._mutations = 0
        if pairs is not None:
            for value, weight in _iter_pairs(pairs):
                self.insert(value, weight)

    @classmethod
    def from_sequence(cls, pairs: Iterable[tuple[Any, int]]) -> WeightedTable:
        """Build a table by inserting each ``(value, weight)`` pair in order."""

        return cls(pairs)

    @property
    def total_weight(self) -> int:
        return self._total_weight

    def values(self) -> list[Any]:
        return list(self._values)

    def weights(self) -> list[int]:
        return list(self._weights)

    def index_of(self, value) -> int | None:
        for index, existing in enumerate(self._values):
            if existing == value:
                return index
        return None

    # Mutation

    def insert(self, value, weight) -> None:
        weight = check_weight(weight)
        index = self.index_of(value)
        if index is not None:
            self._total_weight += weight - self._weights[index]
            self._weights[index] = weight
            return

        self._values.append(value)
        self._weights.append(weight)
        self._total_weight += weight
        self._mutations += 1

    def remove(self, value) -> int | None:
        """Remove ``value`` and return its weight, or ``None`` if absent."""

        index = self.index_of(value)
        if index is None:
            return None
        weight = self._weights.pop(index)
        del self._values[index]
        self._total_weight -= weight
        self._mutations += 1
        return weight

    def clear(self) -> None:
        self._values.clear()
        self._weights.clear()
        self._total_weight = 0
        self._mutations += 1

    def set_weight(self, value, weight) -> bool:
        """Replace the weight of an existing value, keeping the total in step.

        Returns ``False`` and leaves the table untouched when ``value`` is
        absent.
        """

        weight = check_weight(weight)
        index = self.index_of(value)
        if index is None:
            return False
        self._total_weight += weight - self._weights[index]
        self._weights[index] = weight
        return True

    def resync_total_weight(self) -> int:
        self._total_weight = sum(self._weights)
        return self._total_weight

    def combine(self, other: WeightedTable) -> None:
        """Merge ``other`` into this table, consuming it.

        Weights of values present in both tables are added together; values
        only in ``other`` are appended in ``other``'s order. ``other`` is left
        empty.
        """

        if other is self:
            raise ValueError("Cannot combine a table with itself")

        self._total_weight += other._total_weight
        for value, weight in zip(other._values, other._weights):
            index = self.index_of(value)
            if index is not None:
                self._weights[index] += weight
            else:
                self._values.append(value)
                self._weights.append(weight)
        self._mutations += 1
        _LOGGER.debug(
            "Combined %d entries; table now holds %d entries, total weight %d",
            len(other._values),
            len(self._values),
            self._total_weight,
        )
        other.clear()

    # Lookup

    def get_weight(self, value) -> int | None:
        index = self.index_of(value)
        if index is None:
            return None
        return self._weights[index]

    def get_weight_mut(self, value) -> WeightHandle | None:
        """Return a write-through handle to the weight of ``value``.

        Writing ``handle.value`` does not update ``total_weight``; use
        ``set_weight`` for a consistent update or call
        ``resync_total_weight`` afterwards.
        """

        index = self.index_of(value)
        if index is None:
            return None
        return WeightHandle(self, index)

    def get_entry(self, index) -> tuple[Any, int] | None:
        """Return an independent copy of the entry at ``index``."""

        index = checked_index(index, len(self._values))
        if index is None:
            return None
        return copy.deepcopy(self._values[index]), self._weights[index]

    def get_entry_ref(self, index) -> tuple[Any, int] | None:
        """Return the entry at ``index`` sharing the stored value object."""

        index = checked_index(index, len(self._values))
        if index is None:
            return None
        return self._values[index], self._weights[index]

    def get_entry_mut(self, index) -> EntryHandle | None:
        index = checked_index(index, len(self._values))
        if index is None:
            return None
        return EntryHandle(self, index)

    # Selection

    def random(self, rng=None) -> Any:
        """Pick an entry uniformly, ignoring weights."""

        if not self._values:
            return None
        return self._values[get_rng(rng).uniform_index(len(self._values))]

    def random_weight(self, rng=None) -> int | None:
        """Draw an integer from ``[0, total_weight]``."""

        if self._total_weight == 0:
            return None
        return get_rng(rng).uniform_int_inclusive(0, self._total_weight)

    def weighted_random_with_weight(self, n) -> Any:
        if not self._values or self._total_weight == 0 or n > self._total_weight:
            return None
        index = bucket_search(self._weights, n)
        if index is None:
            return None
        return self._values[index]

    def weighted_random(self, rng=None) -> Any:
        n = self.random_weight(rng=rng)
        if n is None:
            return None
        return self.weighted_random_with_weight(n)

    def random_with(self, n) -> tuple[Any, int]:
        """Resolve the draw ``n`` to its ``(value, weight)`` entry.

        ``n`` must lie in ``[0, total_weight]`` on a table with a positive
        total; anything else is a caller bug and raises ``ValueError``.
        """

        index = None
        if 0 <= n <= self._total_weight:
            index = bucket_search(self._weights, n)
        if index is None:
            raise ValueError(
                f"Draw {n} is outside [0, {self._total_weight}] for this table"
            )
        return self._values[index], self._weights[index]

    # Iteration

    def iter(self) -> EntryIter:
        return EntryIter(self)

    def iter_mut(self) -> EntryIterMut:
        return EntryIterMut(self)

    def into_iter(self) -> ValuesIntoIter:
        """Move every value out of the table, leaving it empty."""

        values = self._values
        self._values = []
        self._weights = []
        self._total_weight = 0
        self._mutations += 1
        return ValuesIntoIter(values)

    def __iter__(self):
        return ValuesIter(self)

    # Protocol

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, value) -> bool:
        return self.index_of(value) is not None

    def __eq__(self, other):
        if not isinstance(other, WeightedTable):
            return NotImplemented
        return self._values == other._values and self._weights == other._weights

    __hash__ = None

    def copy(self) -> WeightedTable:
        clone = type(self)()
        clone._values = list(self._values)
        clone._weights = list(self._weights)
        clone._total_weight = self._total_weight
        return clone

    __copy__ = copy

    def __repr__(self):
        entries = ", ".join(
            f"{value!r}: {weight}" for value, weight in zip(self._values, self._weights)
        )
        return f"WeightedTable({{{entries}}}, total_weight={self._total_weight})"
