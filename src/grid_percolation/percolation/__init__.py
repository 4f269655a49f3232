"""Site percolation on square grids."""

from .forest import DisjointSetForest
from .grid import PercolationGrid
from .trial import NumpyRandomSource, RandomSource, TrialResult, run_problems, run_trial
from .analysis import estimate_threshold, percolation_curve, save_sweep, sweep
from .render import render_grid

__all__ = [
    'DisjointSetForest', 'PercolationGrid',
    'NumpyRandomSource', 'RandomSource', 'TrialResult', 'run_problems', 'run_trial',
    'estimate_threshold', 'percolation_curve', 'save_sweep', 'sweep',
    'render_grid',
]
