"""
Plain-text rendering of grid snapshots.
"""

from typing import Optional

import numpy as np


def render_grid(
    state: np.ndarray,
    percolates: Optional[bool] = None,
    open_char: str = '#',
    closed_char: str = '.',
    title: Optional[str] = None,
) -> str:
    """
    Render an (n, n) boolean site array as text, top row first.

    Args:
        state: Boolean array of open (True) / closed (False) sites
        percolates: If given, a status line is appended
        open_char: Character for open sites
        closed_char: Character for closed sites
        title: Optional label prefixed to the status line

    Returns:
        Multi-line string
    """
    state = np.asarray(state, dtype=bool)
    if state.ndim != 2 or state.shape[0] != state.shape[1]:
        raise ValueError(f"Expected a square 2-D array, got shape {state.shape}")

    lines = [' '.join(open_char if s else closed_char for s in row) for row in state]

    if percolates is not None:
        status = f"Percolates - {str(bool(percolates)).lower()}"
        lines.append(f"{title}: {status}" if title else status)

    return '\n'.join(lines)
