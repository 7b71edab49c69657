"""Tests for symdiff.core.partition — naive and map-based algorithms."""

import numpy as np
import pytest

from symdiff.core.errors import UnknownAlgorithmError
from symdiff.core.partition import ALGORITHMS, get_algorithm, naive, optimized
from symdiff.core.types import PartitionResult, natural_order, numeric_ascending, reverse
from symdiff.core.verify import check_partition

BOTH_ALGORITHMS = pytest.mark.parametrize("fn", [naive, optimized], ids=["naive", "optimized"])


# ═══════════════════════════════════════════════════════════════════════════
# 1. Fixed cases
# ═══════════════════════════════════════════════════════════════════════════

class TestFixedCases:
    @BOTH_ALGORITHMS
    def test_empty(self, fn):
        r = fn([], [], numeric_ascending)
        assert r.as_dict() == {"left": [], "right": []}

    @BOTH_ALGORITHMS
    def test_disjoint(self, fn):
        r = fn([1, 2], [3, 4], numeric_ascending)
        assert r.left == [1, 2, None, None]
        assert r.right == [None, None, 3, 4]

    @BOTH_ALGORITHMS
    def test_full_overlap_collapses_duplicates(self, fn):
        r = fn([5, 5, 5], [5], numeric_ascending)
        assert r.left == [5]
        assert r.right == [5]

    @BOTH_ALGORITHMS
    def test_mixed(self, fn):
        r = fn([3, 1, 2, 2], [4, 2, 4], numeric_ascending)
        assert r.left == [1, 2, 3, None]
        assert r.right == [None, 2, None, 4]

    @BOTH_ALGORITHMS
    def test_one_side_empty(self, fn):
        r = fn([2, 1], [])
        assert r.left == [1, 2]
        assert r.right == [None, None]
        r = fn([], [2, 1])
        assert r.left == [None, None]
        assert r.right == [1, 2]

    @BOTH_ALGORITHMS
    def test_default_comparator_is_ascending(self, fn):
        assert fn([10, 2], [7]) == fn([10, 2], [7], numeric_ascending)
        assert fn([10, 2], [7]).values() == [2, 7, 10]

    @BOTH_ALGORITHMS
    def test_reverse_comparator(self, fn):
        r = fn([1, 2], [2, 3], reverse(numeric_ascending))
        assert r.left == [None, 2, 1]
        assert r.right == [3, 2, None]

    @BOTH_ALGORITHMS
    def test_strings_natural_order(self, fn):
        r = fn(["b", "a"], ["c", "b"], natural_order)
        assert r.left == ["a", "b", None]
        assert r.right == [None, "b", "c"]

    @BOTH_ALGORITHMS
    def test_returns_partition_result(self, fn):
        assert isinstance(fn([1], [2]), PartitionResult)

    @BOTH_ALGORITHMS
    def test_inputs_not_mutated(self, fn):
        a, b = [3, 1, 3], [2, 1]
        fn(a, b, numeric_ascending)
        assert a == [3, 1, 3]
        assert b == [2, 1]

    @BOTH_ALGORITHMS
    def test_tuple_inputs(self, fn):
        r = fn((1, 2), (2, 3))
        assert r.left == [1, 2, None]
        assert r.right == [None, 2, 3]


# ═══════════════════════════════════════════════════════════════════════════
# 2. Non-total comparators
# ═══════════════════════════════════════════════════════════════════════════

class TestNonTotalComparator:
    @BOTH_ALGORITHMS
    def test_inconsistent_comparator_does_not_raise(self, fn):
        r = fn([4, 1, 3], [2, 3, 5], lambda a, b: 1)
        assert len(r) == 5
        assert sorted(r.values()) == [1, 2, 3, 4, 5]

    @BOTH_ALGORITHMS
    def test_everything_equal_comparator(self, fn):
        r = fn([1, 2], [2, 3], lambda a, b: 0)
        assert sorted(r.values()) == [1, 2, 3]


# ═══════════════════════════════════════════════════════════════════════════
# 3. Equivalence on random inputs
# ═══════════════════════════════════════════════════════════════════════════

class TestEquivalence:
    def test_random_inputs_agree(self):
        rng = np.random.default_rng(7)
        for _ in range(50):
            a = rng.integers(1, 30, size=int(rng.integers(0, 40))).tolist()
            b = rng.integers(1, 60, size=int(rng.integers(0, 40))).tolist()
            expected = naive(a, b, numeric_ascending)
            actual = optimized(a, b, numeric_ascending)
            assert expected == actual, f"a={a}, b={b}"
            assert check_partition(actual, a, b, numeric_ascending).passed

    def test_random_inputs_agree_descending(self):
        rng = np.random.default_rng(11)
        desc = reverse(numeric_ascending)
        for _ in range(20):
            a = rng.integers(1, 20, size=25).tolist()
            b = rng.integers(1, 20, size=25).tolist()
            assert naive(a, b, desc) == optimized(a, b, desc)

    def test_benchmark_sized_inputs(self):
        rng = np.random.default_rng(3)
        a = np.ceil(rng.random(1000) * 100).tolist()
        b = np.ceil(rng.random(1000) * 200).tolist()
        assert naive(a, b, numeric_ascending) == optimized(a, b, numeric_ascending)


# ═══════════════════════════════════════════════════════════════════════════
# 4. Registry
# ═══════════════════════════════════════════════════════════════════════════

class TestRegistry:
    def test_registered_names(self):
        assert set(ALGORITHMS) == {"naive", "optimized"}

    def test_get_algorithm(self):
        assert get_algorithm("naive") is naive
        assert get_algorithm("optimized") is optimized

    def test_unknown_algorithm(self):
        with pytest.raises(UnknownAlgorithmError, match="Unknown algorithm"):
            get_algorithm("bogus")

    def test_unknown_algorithm_is_key_error(self):
        with pytest.raises(KeyError):
            get_algorithm("bogus")
