"""Wall-clock timing of repeated calls."""

from __future__ import annotations

import time
from typing import Any, Callable

from symdiff.core.errors import BenchmarkError


def measure(fn: Callable[..., Any], count: int, *args: Any) -> float:
    """Call ``fn(*args)`` *count* times and return the total elapsed milliseconds.

    The same argument tuple is passed on every call. Nothing is done to
    isolate warm-up, garbage collection or scheduling noise.
    """
    if count < 0:
        raise BenchmarkError(f"count must be >= 0, got {count}")
    start = time.perf_counter()
    for _ in range(count):
        fn(*args)
    return (time.perf_counter() - start) * 1000.0
