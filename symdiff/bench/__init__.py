"""symdiff bench: timing harness, benchmark driver, reports."""

from symdiff.bench.config import BenchConfig, DEFAULT_STEPS
from symdiff.bench.timing import measure
from symdiff.bench.driver import InputPool, Comparison, BenchmarkRun, benchmark, compare, run
from symdiff.bench.report import (
    format_algorithm_report,
    format_comparison,
    format_run,
    to_dict,
    to_json,
)

__all__ = [
    "BenchConfig", "DEFAULT_STEPS",
    "measure",
    "InputPool", "Comparison", "BenchmarkRun", "benchmark", "compare", "run",
    "format_algorithm_report", "format_comparison", "format_run", "to_dict", "to_json",
]
