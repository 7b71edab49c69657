"""symdiff exception hierarchy."""

from __future__ import annotations


class SymdiffError(Exception):
    """Base exception for all symdiff errors."""


class GeneratorError(SymdiffError, ValueError):
    """Invalid parameters for random input generation."""


class BenchmarkError(SymdiffError, ValueError):
    """Invalid timing or driver parameters."""


class UnknownAlgorithmError(SymdiffError, KeyError):
    """No partition algorithm registered under the requested name."""
