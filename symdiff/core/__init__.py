"""symdiff core: data model, partition algorithms, input generation, verification."""

from symdiff.core.errors import (
    SymdiffError,
    GeneratorError,
    BenchmarkError,
    UnknownAlgorithmError,
)
from symdiff.core.types import (
    Comparator,
    Presence,
    PartitionResult,
    natural_order,
    numeric_ascending,
    reverse,
)
from symdiff.core.partition import naive, optimized, ALGORITHMS, get_algorithm
from symdiff.core.generate import random_list
from symdiff.core.verify import check_partition, compare_partitions, VerifyResult

__all__ = [
    "SymdiffError", "GeneratorError", "BenchmarkError", "UnknownAlgorithmError",
    "Comparator", "Presence", "PartitionResult",
    "natural_order", "numeric_ascending", "reverse",
    "naive", "optimized", "ALGORITHMS", "get_algorithm",
    "random_list",
    "check_partition", "compare_partitions", "VerifyResult",
]
