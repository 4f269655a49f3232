"""
Seeded percolation trials.

A trial builds a fresh grid, opens each site with a fixed probability using
a seeded random source, and reports the final site states together with
whether the grid percolates.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Protocol

import numpy as np

from .grid import PercolationGrid


SEED_MASK = 0xFFFFFFFFFFFFFFFF


class RandomSource(Protocol):
    """Seedable source of uniform draws in [0, 1)."""

    def uniform(self) -> float:
        ...

    def set_seed(self, seed: int) -> None:
        ...


class NumpyRandomSource:
    """RandomSource backed by a numpy Generator."""

    def __init__(self, seed: Optional[int] = None):
        self.set_seed(seed)

    def set_seed(self, seed: Optional[int]) -> None:
        self.seed = seed
        # numpy only takes non-negative seeds; wrap to 64 bits
        self._rng = np.random.default_rng(None if seed is None else seed & SEED_MASK)

    def uniform(self) -> float:
        return float(self._rng.random())


@dataclass
class TrialResult:
    """Outcome of a single trial. Unpacks as ``(grid_state, percolates)``."""
    grid_state: np.ndarray
    percolates: bool
    n: int
    probability: float
    seed: int
    open_sites: int

    def __iter__(self) -> Iterator:
        yield self.grid_state
        yield self.percolates

    @property
    def open_fraction(self) -> float:
        return self.open_sites / (self.n * self.n)


def run_trial(
    n: int,
    probability: float,
    seed: int,
    random_source: Optional[RandomSource] = None,
) -> TrialResult:
    """
    Run one percolation trial on a fresh n x n grid.

    Args:
        n: Grid side length
        probability: Probability that each site is opened
        seed: Seed passed to the random source before any draw
        random_source: Source of uniform draws (default: NumpyRandomSource)

    Returns:
        TrialResult with the final grid state and percolation outcome
    """
    if random_source is None:
        random_source = NumpyRandomSource()
    random_source.set_seed(seed)

    grid = PercolationGrid(n)
    grid.open_fraction(probability, random_source)

    return TrialResult(
        grid_state=grid.snapshot(),
        percolates=grid.percolates(),
        n=grid.n,
        probability=probability,
        seed=seed,
        open_sites=grid.number_of_open_sites(),
    )


def run_problems(
    n: int,
    probability: float,
    n_problems: int,
    base_seed: int,
    random_source: Optional[RandomSource] = None,
) -> Iterator[TrialResult]:
    """
    Run a numbered series of trials with seeds ``base_seed + 1 .. base_seed + n_problems``.

    Every problem gets its own grid. Results are yielded one at a time, so a
    caller can display each problem before the next one runs.
    """
    for i in range(1, n_problems + 1):
        yield run_trial(n, probability, base_seed + i, random_source)
