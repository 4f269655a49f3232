"""Tests for the disjoint-set forest."""

import pytest

from grid_percolation.errors import InvalidSizeError, OutOfRangeError
from grid_percolation.percolation.forest import DisjointSetForest


class TestConstruction:
    """Tests for forest construction."""

    def test_singletons(self):
        """Every element starts as its own root."""
        forest = DisjointSetForest(4)

        assert len(forest) == 4
        assert forest.count == 4
        assert [forest.find(i) for i in range(4)] == [0, 1, 2, 3]
        assert all(forest.size_of(i) == 1 for i in range(4))

    @pytest.mark.parametrize("n", [0, -1])
    def test_invalid_size(self, n):
        with pytest.raises(InvalidSizeError):
            DisjointSetForest(n)


class TestUnion:
    """Tests for union and connectivity queries."""

    def test_union_chain(self):
        """Unions compose transitively."""
        forest = DisjointSetForest(5)
        forest.union(0, 1)
        forest.union(1, 2)

        assert forest.connected(0, 2)
        assert not forest.connected(0, 3)

        forest.union(3, 4)
        forest.union(2, 3)

        for a in range(5):
            for b in range(5):
                assert forest.connected(a, b)
        assert forest.count == 1
        assert forest.size_of(4) == 5

    def test_union_is_idempotent(self):
        forest = DisjointSetForest(3)

        assert forest.union(0, 1) is True
        parent = forest.parent.copy()
        size = forest.size.copy()

        assert forest.union(1, 0) is False
        assert (forest.parent == parent).all()
        assert (forest.size == size).all()
        assert forest.count == 2

    def test_smaller_root_goes_under_larger(self):
        """The root of the bigger set survives a merge."""
        forest = DisjointSetForest(4)
        forest.union(1, 2)
        forest.union(1, 3)
        big_root = forest.find(1)

        forest.union(0, 1)

        assert forest.find(0) == big_root

    def test_tie_keeps_first_root(self):
        forest = DisjointSetForest(2)
        forest.union(0, 1)

        assert forest.find(1) == 0

    def test_count_only_decreases(self):
        forest = DisjointSetForest(6)
        counts = [forest.count]
        for a, b in [(0, 1), (2, 3), (0, 1), (1, 3), (4, 5), (0, 5)]:
            forest.union(a, b)
            counts.append(forest.count)

        assert counts == sorted(counts, reverse=True)
        assert counts[-1] == 1

    def test_tree_depth_is_logarithmic(self):
        """Union by size keeps parent chains short without relying on find."""
        n = 1024
        forest = DisjointSetForest(n)
        for step in [1, 2, 4, 8, 16, 32, 64, 128, 256, 512]:
            for i in range(0, n, 2 * step):
                forest.union(i, i + step)

        def depth(i):
            d = 0
            while forest.parent[i] != i:
                i = forest.parent[i]
                d += 1
            return d

        assert max(depth(i) for i in range(n)) <= 10


class TestBounds:
    """Tests for identifier range checks."""

    @pytest.mark.parametrize("i", [-1, 5])
    def test_find_out_of_range(self, i):
        forest = DisjointSetForest(5)

        with pytest.raises(OutOfRangeError):
            forest.find(i)

    def test_union_out_of_range_leaves_state(self):
        forest = DisjointSetForest(5)

        with pytest.raises(OutOfRangeError):
            forest.union(0, 5)
        assert forest.count == 5

    def test_error_is_index_error(self):
        forest = DisjointSetForest(2)

        with pytest.raises(IndexError):
            forest.connected(0, 2)
