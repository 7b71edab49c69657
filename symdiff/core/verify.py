"""Self-verification — check partition invariants and compare two results."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Sequence

from symdiff.core.types import Comparator, PartitionResult, natural_order


@dataclass
class CheckResult:
    """Result for a single named check."""

    name: str
    passed: bool
    message: str = ""


@dataclass
class VerifyResult:
    """Aggregate verification result."""

    passed: bool = True
    checks: list[CheckResult] = field(default_factory=list)

    def add(self, name: str, passed: bool, message: str = "") -> None:
        self.checks.append(CheckResult(name=name, passed=passed, message=message))
        if not passed:
            self.passed = False

    def failed(self) -> list[CheckResult]:
        return [c for c in self.checks if not c.passed]

    def summary(self) -> str:
        lines: list[str] = []
        status = "PASS" if self.passed else "FAIL"
        lines.append(f"Verification: {status}")

        for c in self.checks:
            mark = "OK" if c.passed else "FAIL"
            lines.append(f"  [{mark}] {c.name}")
            if c.message:
                lines.append(f"        {c.message}")

        return "\n".join(lines)


def _first(indices: list[int], limit: int = 5) -> str:
    shown = ", ".join(str(i) for i in indices[:limit])
    more = f" (+{len(indices) - limit} more)" if len(indices) > limit else ""
    return f"indices [{shown}]{more}"


def check_partition(
    result: PartitionResult,
    a: Sequence[Any],
    b: Sequence[Any],
    comparator: Comparator | None = None,
) -> VerifyResult:
    """Check that *result* is a valid partition of *a* and *b*.

    Args:
        result: The partition to check.
        a: First input sequence.
        b: Second input sequence.
        comparator: Ordering the result is expected to follow.
    """
    out = VerifyResult()
    cmp = comparator if comparator is not None else natural_order

    if len(result.left) != len(result.right):
        out.add(
            "aligned",
            False,
            f"left has {len(result.left)} entries, right has {len(result.right)}",
        )
        return out
    out.add("aligned", True)

    empty = [i for i, (l, r) in enumerate(zip(result.left, result.right)) if l is None and r is None]
    out.add("no empty index", not empty, f"both sides absent at {_first(empty)}" if empty else "")

    split = [
        i for i, (l, r) in enumerate(zip(result.left, result.right))
        if l is not None and r is not None and l != r
    ]
    out.add("same value per index", not split, f"left != right at {_first(split)}" if split else "")

    values = result.values()
    expected = set(a) | set(b)
    missing = expected.difference(values)
    extra = set(values).difference(expected)
    duplicated = len(values) != len(set(values))
    messages = []
    if missing:
        messages.append(f"missing {sorted(missing, key=cmp_to_key(cmp))[:5]}")
    if extra:
        messages.append(f"unexpected {sorted(extra, key=cmp_to_key(cmp))[:5]}")
    if duplicated:
        messages.append("duplicate values")
    out.add("complete", not messages, "; ".join(messages))

    unsorted = [i for i in range(1, len(values)) if cmp(values[i - 1], values[i]) > 0]
    out.add("sorted", not unsorted, f"out of order at {_first(unsorted)}" if unsorted else "")

    set_a, set_b = set(a), set(b)
    wrong = [
        i for i, v in enumerate(values)
        if (result.left[i] is not None) != (v in set_a)
        or (result.right[i] is not None) != (v in set_b)
    ]
    out.add("presence", not wrong, f"wrong side at {_first(wrong)}" if wrong else "")

    return out


def compare_partitions(expected: PartitionResult, actual: PartitionResult) -> VerifyResult:
    """Compare two partitions index by index."""
    out = VerifyResult()

    if (
        len(expected.left) != len(expected.right)
        or len(actual.left) != len(actual.right)
        or len(expected) != len(actual)
    ):
        out.add(
            "length",
            False,
            f"expected {len(expected.left)}/{len(expected.right)} entries, "
            f"got {len(actual.left)}/{len(actual.right)}",
        )
        return out
    out.add("length", True)

    for side in ("left", "right"):
        e = getattr(expected, side)
        a = getattr(actual, side)
        diff = [i for i, (x, y) in enumerate(zip(e, a)) if x != y]
        out.add(side, not diff, f"mismatch at {_first(diff)}" if diff else "")

    return out
