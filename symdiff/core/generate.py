"""Random integer input lists for the benchmark."""

from __future__ import annotations

import numpy as np

from symdiff.core.errors import GeneratorError

MAX_VALUE_LIMIT = 2**53

_rng = np.random.default_rng()


def random_list(
    length: int,
    max_value: int,
    rng: np.random.Generator | None = None,
) -> list[int]:
    """Return *length* integers drawn uniformly from ``[1, max_value]``.

    Each element is ``ceil(u * max_value)`` for a uniform draw ``u`` in
    ``[0, 1)``; a draw of exactly zero is clipped up to 1.
    """
    if max_value < 1:
        raise GeneratorError(f"max_value must be >= 1, got {max_value}")
    # float64 draws stay exact integers only up to 2**53
    if max_value > MAX_VALUE_LIMIT:
        raise GeneratorError(f"max_value must be <= 2**53, got {max_value}")
    if length < 0:
        raise GeneratorError(f"length must be >= 0, got {length}")
    if rng is None:
        rng = _rng
    draws = np.ceil(rng.random(length) * max_value)
    return np.clip(draws, 1, max_value).astype(np.int64).tolist()
