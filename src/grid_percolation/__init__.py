"""
Grid Percolation - Site percolation on square grids.

This package provides tools for:
- Incremental connectivity with a weighted disjoint-set forest
- Opening sites on an n x n grid and testing top-to-bottom percolation
- Seeded single trials and Monte-Carlo probability sweeps
- A small command-line driver for running and displaying trials
"""

__version__ = "1.0.0"
