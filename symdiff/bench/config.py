"""Benchmark configuration with compiled-in defaults."""

from __future__ import annotations

from dataclasses import dataclass

from symdiff.core.errors import BenchmarkError
from symdiff.core.partition import get_algorithm

DEFAULT_STEPS = (10, 100, 1000, 10000)


@dataclass(frozen=True)
class BenchConfig:
    """Parameters of one benchmark run.

    ``steps`` serve both as repeat counts and as input sizes, so every step
    must fit inside the base input pool.
    """

    steps: tuple[int, ...] = DEFAULT_STEPS
    base_length: int = 10000
    first_max: int = 100
    second_max: int = 200
    baseline: str = "naive"
    candidate: str = "optimized"

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))
        if not self.steps:
            raise BenchmarkError("steps must not be empty")
        if any(s <= 0 for s in self.steps):
            raise BenchmarkError(f"steps must be positive, got {list(self.steps)}")
        if max(self.steps) > self.base_length:
            raise BenchmarkError(
                f"largest step {max(self.steps)} exceeds base_length {self.base_length}"
            )
        if self.first_max < 1 or self.second_max < 1:
            raise BenchmarkError("first_max and second_max must be >= 1")
        # raises UnknownAlgorithmError for bad names
        get_algorithm(self.baseline)
        get_algorithm(self.candidate)

    @property
    def algorithms(self) -> tuple[str, ...]:
        if self.baseline == self.candidate:
            return (self.baseline,)
        return (self.baseline, self.candidate)
