"""Partition algorithms — split the distinct union of two sequences by side.

Both algorithms return identical results for the same inputs:

    >>> optimized([1, 2, 2], [2, 3])
    PartitionResult[3](left=[1, 2, None], right=[None, 2, 3])
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Sequence

from symdiff.core.errors import UnknownAlgorithmError
from symdiff.core.types import (
    NONE,
    Comparator,
    PartitionFn,
    PartitionResult,
    Presence,
    natural_order,
)


def _sort_key(comparator: Comparator | None):
    return cmp_to_key(comparator if comparator is not None else natural_order)


# ---------------------------------------------------------------------------
# naive — set union + linear membership checks
# ---------------------------------------------------------------------------

def naive(
    a: Sequence[Any],
    b: Sequence[Any],
    comparator: Comparator | None = None,
) -> PartitionResult:
    """Baseline: every distinct value is looked up in both input lists.

    Membership is tested against the inputs as given, so each lookup is a
    linear scan and the whole pass is quadratic.
    """
    keys = sorted(set(a) | set(b), key=_sort_key(comparator))
    left = [x if x in a else None for x in keys]
    right = [x if x in b else None for x in keys]
    return PartitionResult(left=left, right=right)


# ---------------------------------------------------------------------------
# optimized — one presence map, one sort
# ---------------------------------------------------------------------------

def optimized(
    a: Sequence[Any],
    b: Sequence[Any],
    comparator: Comparator | None = None,
) -> PartitionResult:
    """Map-based partition in O(|a| + |b| + n log n)."""
    flags: dict[Any, Presence] = {}
    for x in a:
        flags[x] = Presence.FIRST
    for y in b:
        flags[y] = flags.get(y, NONE) | Presence.SECOND

    keys = sorted(flags, key=_sort_key(comparator))
    size = len(keys)
    left: list[Any] = [None] * size
    right: list[Any] = [None] * size
    for i, key in enumerate(keys):
        flag = flags.get(key, NONE)
        if flag & Presence.FIRST:
            left[i] = key
        if flag & Presence.SECOND:
            right[i] = key
    return PartitionResult(left=left, right=right)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

ALGORITHMS: dict[str, PartitionFn] = {
    "naive": naive,
    "optimized": optimized,
}


def get_algorithm(name: str) -> PartitionFn:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise UnknownAlgorithmError(
            f"Unknown algorithm: {name!r}. Must be one of {sorted(ALGORITHMS)}"
        ) from None
