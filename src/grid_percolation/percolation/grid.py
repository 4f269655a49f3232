"""
Site percolation on an n x n grid.

Each site maps to one element of a disjoint-set forest. Two extra elements,
a virtual top and a virtual bottom, are joined to every open site in the first
and last row, so the grid percolates exactly when those two elements share a
root.
"""

import numpy as np

from ..errors import InvalidSizeError, OutOfRangeError
from .forest import DisjointSetForest


class PercolationGrid:
    """
    An n x n grid of sites that can only go from closed to open.

    Example:
        grid = PercolationGrid(3)
        for row in range(3):
            grid.open(row, 0)
        grid.percolates()  # True
    """

    def __init__(self, n: int):
        """
        Create a grid with every site closed.

        Args:
            n: Side length of the grid

        Raises:
            InvalidSizeError: If n is not positive
        """
        if n <= 0:
            raise InvalidSizeError(n)

        self.n = int(n)
        self.n_sites = self.n * self.n
        self.virtual_top = self.n_sites
        self.virtual_bottom = self.n_sites + 1
        self.reset()

    def reset(self) -> None:
        """Close every site and discard all connections."""
        self.sites = np.zeros(self.n_sites, dtype=bool)
        self.forest = DisjointSetForest(self.n_sites + 2)
        self._n_open = 0

    def site_index(self, row: int, col: int) -> int:
        """
        Map a site to its forest element, ``row * n + col``.

        Raises:
            OutOfRangeError: If row or col is outside [0, n)
        """
        if not 0 <= row < self.n:
            raise OutOfRangeError("row", row, self.n)
        if not 0 <= col < self.n:
            raise OutOfRangeError("col", col, self.n)
        return row * self.n + col

    def is_open(self, row: int, col: int) -> bool:
        return bool(self.sites[self.site_index(row, col)])

    def open(self, row: int, col: int) -> None:
        """
        Open a site and connect it to its open neighbours.

        Opening an already open site does nothing.
        """
        index = self.site_index(row, col)
        if self.sites[index]:
            return

        self.sites[index] = True
        self._n_open += 1

        if row == 0:
            self.forest.union(self.virtual_top, index)
        if row == self.n - 1:
            self.forest.union(index, self.virtual_bottom)

        # Left, right, up, down
        if col > 0 and self.sites[index - 1]:
            self.forest.union(index, index - 1)
        if col < self.n - 1 and self.sites[index + 1]:
            self.forest.union(index, index + 1)
        if row > 0 and self.sites[index - self.n]:
            self.forest.union(index, index - self.n)
        if row < self.n - 1 and self.sites[index + self.n]:
            self.forest.union(index, index + self.n)

    def percolates(self) -> bool:
        """True if an open path links the top row to the bottom row."""
        return self.forest.connected(self.virtual_top, self.virtual_bottom)

    def number_of_open_sites(self) -> int:
        return self._n_open

    def open_fraction(self, probability: float, random_source) -> None:
        """
        Open each site with the given probability.

        Sites are visited in row-major order and each consumes exactly one
        draw from ``random_source``; a site opens when its draw is below
        ``probability``.

        Args:
            probability: Opening probability in [0, 1]
            random_source: Object with a ``uniform()`` method returning [0, 1)
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be in [0, 1], got {probability}")

        for row in range(self.n):
            for col in range(self.n):
                if random_source.uniform() < probability:
                    self.open(row, col)

    def snapshot(self) -> np.ndarray:
        """
        Return a read-only (n, n) boolean copy of the site states.
        """
        state = self.sites.reshape(self.n, self.n).copy()
        state.setflags(write=False)
        return state
