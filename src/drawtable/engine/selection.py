"""
Selection and shuffle helpers that work on any sequence.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any

from ..runtime.rng import get_rng
from ..schema.defaults import WEIGHT_MAX, WEIGHT_MIN


def _is_integral(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_weight(weight) -> int:
    if not _is_integral(weight):
        raise TypeError(f"Weight must be an int, got {type(weight).__name__}")
    if weight < WEIGHT_MIN or weight > WEIGHT_MAX:
        raise ValueError(
            f"Weight must be within [{WEIGHT_MIN}, {WEIGHT_MAX}], got {weight}"
        )
    return int(weight)


def checked_index(index, size: int) -> int | None:
    """Return ``index`` as an int when it addresses one of ``size`` slots."""

    if not _is_integral(index) or not 0 <= index < size:
        return None
    return int(index)


def bucket_search(weights: Sequence[int], n: int) -> int | None:
    """Resolve a draw to an index by walking cumulative weights.

    Boundaries are inclusive: with weights ``[10, 10]`` a draw of 10 lands on
    index 0 and a draw of 11 or 20 on index 1. Zero-weight slots are skipped,
    so they are never selected. Returns ``None`` when ``n`` is negative or
    falls past the last bucket.
    """

    if n < 0:
        return None
    remaining = n
    for index, weight in enumerate(weights):
        if weight == 0:
            continue
        if remaining <= weight:
            return index
        remaining -= weight
    return None


def random_index(seq: Sequence[Any], rng=None) -> int | None:
    size = len(seq)
    if size == 0:
        return None
    return get_rng(rng).uniform_index(size)


def random_element(seq: Sequence[Any], rng=None) -> Any:
    index = random_index(seq, rng=rng)
    if index is None:
        return None
    return seq[index]


def shuffle(seq: MutableSequence[Any], rng=None) -> None:
    get_rng(rng).shuffle(seq)


def shuffled(items: Iterable[Any], rng=None) -> list[Any]:
    out = list(items)
    get_rng(rng).shuffle(out)
    return out


def random_range(low, high, rng=None):
    """Integers are drawn from ``[low, high]``, floats from ``[low, high)``."""

    source = get_rng(rng)
    if isinstance(low, int) and isinstance(high, int):
        return source.uniform_int_inclusive(low, high)
    return source.uniform_float_in_range(float(low), float(high))


def weighted_choice(pairs: Iterable[tuple[Any, int]], rng=None) -> Any:
    """Pick one value from ``(value, weight)`` pairs proportionally to weight."""

    values = []
    weights = []
    for value, weight in pairs:
        weight = check_weight(weight)
        values.append(value)
        weights.append(weight)
    total = sum(weights)
    if total <= 0:
        return None
    index = bucket_search(weights, get_rng(rng).uniform_int_inclusive(0, total))
    if index is None:
        return None
    return values[index]
