"""symdiff — symmetric set-partition of two sequences, with a timing benchmark."""

from symdiff.core import (
    PartitionResult,
    Presence,
    naive,
    optimized,
    random_list,
    natural_order,
    numeric_ascending,
    reverse,
    SymdiffError,
)
from symdiff.bench import BenchConfig, measure, run

__version__ = "0.1.0"

__all__ = [
    "PartitionResult", "Presence",
    "naive", "optimized",
    "random_list",
    "natural_order", "numeric_ascending", "reverse",
    "SymdiffError",
    "BenchConfig", "measure", "run",
]
