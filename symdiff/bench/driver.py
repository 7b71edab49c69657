"""Benchmark driver — time partition algorithms over a steps × steps matrix.

Usage:
    from symdiff.bench.config import BenchConfig
    from symdiff.bench.driver import run

    result = run(BenchConfig(steps=(10, 100)))
    result.comparison.factor      # naive / optimized, [count_index, size_index]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from symdiff.bench.config import BenchConfig
from symdiff.bench.timing import measure
from symdiff.core.errors import BenchmarkError
from symdiff.core.generate import random_list
from symdiff.core.partition import get_algorithm
from symdiff.core.types import Comparator, PartitionFn, numeric_ascending

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Input pool
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InputPool:
    """The two base sequences shared by every cell of a run."""

    first: tuple[int, ...]
    second: tuple[int, ...]

    @classmethod
    def build(
        cls,
        length: int,
        first_max: int,
        second_max: int,
        rng: np.random.Generator | None = None,
    ) -> InputPool:
        return cls(
            first=tuple(random_list(length, first_max, rng)),
            second=tuple(random_list(length, second_max, rng)),
        )

    def __len__(self) -> int:
        return min(len(self.first), len(self.second))

    def slice(self, size: int) -> tuple[list[int], list[int]]:
        """Fresh list prefixes of both sequences; the pool itself is untouched."""
        return list(self.first[:size]), list(self.second[:size])


# ---------------------------------------------------------------------------
# Timing tables
# ---------------------------------------------------------------------------

def benchmark(
    steps: Sequence[int],
    name: str,
    fn: PartitionFn,
    pool: InputPool,
    comparator: Comparator = numeric_ascending,
) -> np.ndarray:
    """Time *fn* for every (count, size) pair in steps × steps.

    Returns elapsed milliseconds indexed ``[count_index, size_index]``.
    """
    if not steps:
        raise BenchmarkError("steps must not be empty")
    if max(steps) > len(pool):
        raise BenchmarkError(f"largest step {max(steps)} exceeds pool length {len(pool)}")

    logger.info("benchmarking %s over %d cells", name, len(steps) ** 2)
    table = np.zeros((len(steps), len(steps)), dtype=np.float64)
    for ci, count in enumerate(steps):
        for si, size in enumerate(steps):
            a, b = pool.slice(size)
            table[ci, si] = measure(fn, count, a, b, comparator)
            logger.debug("%s count=%d size=%d elapsed=%.3fms", name, count, size, table[ci, si])
    return table


@dataclass
class Comparison:
    """Baseline vs candidate timings over the same steps."""

    steps: tuple[int, ...]
    baseline: str
    candidate: str
    baseline_elapsed: np.ndarray
    candidate_elapsed: np.ndarray
    baseline_per_iteration: np.ndarray
    candidate_per_iteration: np.ndarray
    factor: np.ndarray  # baseline / candidate


def compare(
    steps: Sequence[int],
    baseline: np.ndarray,
    candidate: np.ndarray,
    baseline_name: str = "naive",
    candidate_name: str = "optimized",
) -> Comparison:
    """Per-iteration costs and speedup factor for two timing tables."""
    shape = (len(steps), len(steps))
    if baseline.shape != shape or candidate.shape != shape:
        raise BenchmarkError(
            f"tables must have shape {shape}, got {baseline.shape} and {candidate.shape}"
        )
    counts = np.asarray(steps, dtype=np.float64)[:, np.newaxis]
    with np.errstate(divide="ignore", invalid="ignore"):
        baseline_per_iteration = baseline / counts
        candidate_per_iteration = candidate / counts
        factor = baseline / candidate
    return Comparison(
        steps=tuple(steps),
        baseline=baseline_name,
        candidate=candidate_name,
        baseline_elapsed=baseline,
        candidate_elapsed=candidate,
        baseline_per_iteration=baseline_per_iteration,
        candidate_per_iteration=candidate_per_iteration,
        factor=factor,
    )


# ---------------------------------------------------------------------------
# Full run
# ---------------------------------------------------------------------------

@dataclass
class BenchmarkRun:
    config: BenchConfig
    tables: dict[str, np.ndarray] = field(default_factory=dict)
    comparison: Comparison | None = None


def run(
    config: BenchConfig | None = None,
    pool: InputPool | None = None,
    rng: np.random.Generator | None = None,
) -> BenchmarkRun:
    """Build the input pool once, then time every configured algorithm on it."""
    if config is None:
        config = BenchConfig()
    if pool is None:
        pool = InputPool.build(config.base_length, config.first_max, config.second_max, rng)

    result = BenchmarkRun(config=config)
    for name in config.algorithms:
        result.tables[name] = benchmark(config.steps, name, get_algorithm(name), pool)

    result.comparison = compare(
        config.steps,
        result.tables[config.baseline],
        result.tables[config.candidate],
        baseline_name=config.baseline,
        candidate_name=config.candidate,
    )
    return result
