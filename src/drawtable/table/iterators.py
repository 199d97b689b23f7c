"""
Iterators and write-through handles for ``WeightedTable``.

Three iteration modes exist, all in insertion order:

- owned (``ValuesIntoIter``): takes the table's storage and yields values;
- borrowed (``EntryIter``): yields ``(value, weight)`` tuples;
- mutable (``EntryIterMut``): yields ``EntryHandle`` objects whose setters
  write back into the table.

Borrowed and mutable iterators raise ``RuntimeError`` when the table gains or
loses entries mid-iteration. Writes through handles never touch the cached
total weight; call ``WeightedTable.resync_total_weight`` afterwards.
"""

from __future__ import annotations

from typing import Any

from ..engine.selection import check_weight


def _check_unchanged(table, expected_mutations):
    if table._mutations != expected_mutations:
        raise RuntimeError("WeightedTable changed size during iteration")


class _TableIterator:
    def __init__(self, table):
        self._table = table
        self._index = 0
        self._mutations = table._mutations

    def __iter__(self):
        return self

    def _advance(self) -> int:
        _check_unchanged(self._table, self._mutations)
        index = self._index
        if index >= len(self._table._values):
            raise StopIteration
        self._index += 1
        return index


class ValuesIter(_TableIterator):
    """Non-consuming iterator over values."""

    def __next__(self):
        return self._table._values[self._advance()]


class EntryIter(_TableIterator):
    def __next__(self) -> tuple[Any, int]:
        index = self._advance()
        return self._table._values[index], self._table._weights[index]


class EntryIterMut(_TableIterator):
    def __next__(self) -> EntryHandle:
        return EntryHandle(self._table, self._advance())


class ValuesIntoIter:
    """Owned iterator over values detached from a table."""

    def __init__(self, values: list[Any]):
        self._values = values
        self._index = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self._index >= len(self._values):
            raise StopIteration
        value = self._values[self._index]
        self._index += 1
        return value

    def __length_hint__(self) -> int:
        return len(self._values) - self._index


class _SlotHandle:
    __slots__ = ("_table", "_index", "_mutations")

    def __init__(self, table, index: int):
        self._table = table
        self._index = index
        self._mutations = table._mutations

    @property
    def index(self) -> int:
        return self._index

    def _slot(self) -> int:
        if self._table._mutations != self._mutations:
            raise RuntimeError("WeightedTable changed size since handle was taken")
        return self._index

    def _read_weight(self) -> int:
        return self._table._weights[self._slot()]

    def _write_weight(self, weight) -> None:
        self._table._weights[self._slot()] = check_weight(weight)


class WeightHandle(_SlotHandle):
    """Write-through reference to one stored weight.

    Assigning ``handle.value`` changes the stored weight but leaves the
    table's ``total_weight`` stale.
    """

    __slots__ = ()

    @property
    def value(self) -> int:
        return self._read_weight()

    @value.setter
    def value(self, weight) -> None:
        self._write_weight(weight)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __eq__(self, other):
        if isinstance(other, WeightHandle):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"WeightHandle(index={self._index}, value={self.value})"


class EntryHandle(_SlotHandle):
    """Write-through reference to one ``(value, weight)`` slot.

    Unpacks like a pair: ``value, weight = handle``. Assigning ``value`` may
    introduce a duplicate value; keeping values distinct is up to the caller.
    """

    __slots__ = ()

    @property
    def value(self) -> Any:
        return self._table._values[self._slot()]

    @value.setter
    def value(self, new_value) -> None:
        self._table._values[self._slot()] = new_value

    @property
    def weight(self) -> int:
        return self._read_weight()

    @weight.setter
    def weight(self, weight) -> None:
        self._write_weight(weight)

    def as_tuple(self) -> tuple[Any, int]:
        slot = self._slot()
        return self._table._values[slot], self._table._weights[slot]

    def __iter__(self):
        return iter(self.as_tuple())

    def __eq__(self, other):
        if isinstance(other, EntryHandle):
            return self.as_tuple() == other.as_tuple()
        if isinstance(other, tuple):
            return self.as_tuple() == other
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        value, weight = self.as_tuple()
        return f"EntryHandle(index={self._index}, value={value!r}, weight={weight})"
