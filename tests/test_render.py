"""Tests for text rendering."""

import numpy as np
import pytest

from grid_percolation.percolation.render import render_grid


def test_render_rows_top_first():
    state = np.array([[True, False], [False, False]])

    assert render_grid(state) == "# .\n. ."


def test_render_status_line():
    state = np.ones((1, 1), dtype=bool)

    text = render_grid(state, percolates=True, title="Problem 3")

    assert text.splitlines()[-1] == "Problem 3: Percolates - true"


def test_render_custom_chars():
    state = np.array([[False, True]] * 2)

    assert render_grid(state, open_char='O', closed_char='X') == "X O\nX O"


def test_render_rejects_non_square():
    with pytest.raises(ValueError):
        render_grid(np.zeros((2, 3), dtype=bool))
