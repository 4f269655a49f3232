"""
Weighted disjoint-set forest (union-find) over a fixed universe of integers.

Sets are merged by size: the root of the smaller set is attached under the
root of the larger one, which keeps every tree O(log N) deep. ``find`` also
halves paths as it walks them; this only shortens trees and never changes
which root an element reports.
"""

import numpy as np

from ..errors import InvalidSizeError, OutOfRangeError


class DisjointSetForest:
    """
    Incremental connectivity over the elements ``0..N-1``.

    Example:
        forest = DisjointSetForest(5)
        forest.union(0, 1)
        forest.connected(0, 1)  # True
    """

    def __init__(self, n: int):
        """
        Create ``n`` singleton sets.

        Args:
            n: Number of elements in the universe

        Raises:
            InvalidSizeError: If n is not positive
        """
        if n <= 0:
            raise InvalidSizeError(n)

        self.N = int(n)
        self.parent = np.arange(self.N, dtype=np.int64)
        self.size = np.ones(self.N, dtype=np.int64)
        self._count = self.N

    def __len__(self) -> int:
        return self.N

    @property
    def count(self) -> int:
        """Number of disjoint sets currently in the forest."""
        return self._count

    def _validate(self, i: int) -> None:
        if not 0 <= i < self.N:
            raise OutOfRangeError("element", i, self.N)

    def find(self, i: int) -> int:
        """
        Return the root identifier of the set containing ``i``.

        Raises:
            OutOfRangeError: If i is outside [0, N)
        """
        self._validate(i)
        parent = self.parent
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return int(i)

    def union(self, a: int, b: int) -> bool:
        """
        Merge the sets containing ``a`` and ``b``.

        Returns:
            True if two sets were merged, False if they were already one set
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        # Ties keep a's root as the survivor
        if self.size[root_a] < self.size[root_b]:
            root_a, root_b = root_b, root_a

        self.parent[root_b] = root_a
        self.size[root_a] += self.size[root_b]
        self._count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        """True if ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)

    def size_of(self, i: int) -> int:
        """Number of elements in the set containing ``i``."""
        return int(self.size[self.find(i)])
