"""symdiff data model — presence flags, partition results, comparators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Flag
from typing import Any, Callable, Protocol, Sequence

Comparator = Callable[[Any, Any], int]


# ---------------------------------------------------------------------------
# Comparators
# ---------------------------------------------------------------------------

def natural_order(a: Any, b: Any) -> int:
    """Natural ascending order of the element type (the default strategy)."""
    return (a > b) - (a < b)


def numeric_ascending(a: Any, b: Any) -> int:
    return a - b


def reverse(comparator: Comparator) -> Comparator:
    """Wrap *comparator* so that it sorts in the opposite direction."""

    def _reversed(a: Any, b: Any) -> int:
        return comparator(b, a)

    _reversed.__name__ = f"reverse({getattr(comparator, '__name__', 'comparator')})"
    return _reversed


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------

class Presence(Flag):
    """Which of the two input sequences contain a value."""

    FIRST = 1
    SECOND = 2
    BOTH = FIRST | SECOND

    @property
    def in_first(self) -> bool:
        return bool(self & Presence.FIRST)

    @property
    def in_second(self) -> bool:
        return bool(self & Presence.SECOND)


NONE = Presence(0)


# ---------------------------------------------------------------------------
# PartitionResult
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PartitionResult:
    """Two aligned sequences over the sorted distinct union of two inputs.

    ``left[i]`` holds the i-th value if the first input contains it, else
    ``None``; ``right[i]`` likewise for the second input.
    """

    left: list[Any] = field(default_factory=list)
    right: list[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.left)

    def values(self) -> list[Any]:
        """The value at each index, taken from ``left`` when present there."""
        return [l if l is not None else r for l, r in zip(self.left, self.right)]

    def presence(self, index: int) -> Presence:
        flag = NONE
        if self.left[index] is not None:
            flag |= Presence.FIRST
        if self.right[index] is not None:
            flag |= Presence.SECOND
        return flag

    def as_dict(self) -> dict[str, list[Any]]:
        return {"left": list(self.left), "right": list(self.right)}

    def __hash__(self) -> int:
        return hash((tuple(self.left), tuple(self.right)))

    def __repr__(self) -> str:
        return f"PartitionResult[{len(self)}](left={self.left}, right={self.right})"


class PartitionFn(Protocol):
    def __call__(
        self,
        a: Sequence[Any],
        b: Sequence[Any],
        comparator: Comparator | None = None,
    ) -> PartitionResult: ...
