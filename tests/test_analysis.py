"""Tests for Monte-Carlo analysis."""

import pandas as pd
import pytest

from grid_percolation.percolation.analysis import (
    SWEEP_COLUMNS, estimate_threshold, get_probability_values,
    percolation_curve, save_sweep, sweep
)


class TestProbabilityValues:
    """Tests for probability generation."""

    def test_default(self):
        values = get_probability_values()

        assert len(values) == 101
        assert values[0] == 0.0
        assert values[-1] == 1.0

    @pytest.mark.parametrize("p_min,p_max", [(-0.1, 0.5), (0.2, 1.2), (0.7, 0.3)])
    def test_invalid_range(self, p_min, p_max):
        with pytest.raises(ValueError):
            get_probability_values(p_min, p_max, 5)


class TestSweep:
    """Tests for probability sweeps."""

    def test_shape_and_columns(self):
        df = sweep(4, [0.2, 0.8], n_trials=3, base_seed=10)

        assert list(df.columns) == SWEEP_COLUMNS
        assert len(df) == 6
        assert sorted(df['seed']) == list(range(10, 16))

    def test_reproducible(self):
        a = sweep(5, [0.5, 0.6], n_trials=4, base_seed=1)
        b = sweep(5, [0.5, 0.6], n_trials=4, base_seed=1)

        pd.testing.assert_frame_equal(a, b)

    def test_extremes(self):
        df = sweep(5, [0.0, 1.0], n_trials=2)
        curve = percolation_curve(df)

        assert curve['percolation_rate'].tolist() == [0.0, 1.0]
        assert curve['mean_open_fraction'].tolist() == [0.0, 1.0]

    def test_invalid_trials(self):
        with pytest.raises(ValueError):
            sweep(5, [0.5], n_trials=0)

    def test_verbose_prints_progress(self, capsys):
        sweep(3, [0.5], n_trials=2, verbose=True)

        assert "p=0.5000" in capsys.readouterr().out


class TestThreshold:
    """Tests for threshold estimation."""

    def test_interpolates(self):
        curve = pd.DataFrame({
            'probability': [0.4, 0.5, 0.6, 0.7],
            'percolation_rate': [0.0, 0.25, 0.75, 1.0],
        })

        assert estimate_threshold(curve) == pytest.approx(0.55)

    def test_never_reached(self):
        curve = pd.DataFrame({'probability': [0.1, 0.2], 'percolation_rate': [0.0, 0.1]})

        assert estimate_threshold(curve) is None

    def test_first_point_above(self):
        curve = pd.DataFrame({'probability': [0.8, 0.9], 'percolation_rate': [0.9, 1.0]})

        assert estimate_threshold(curve) == 0.8

    def test_empty(self):
        assert estimate_threshold(percolation_curve(pd.DataFrame(columns=SWEEP_COLUMNS))) is None

    def test_near_known_threshold(self):
        """Site percolation on the square lattice has p_c close to 0.593."""
        df = sweep(20, get_probability_values(0.45, 0.75, 11), n_trials=40, base_seed=2024)

        threshold = estimate_threshold(percolation_curve(df))

        assert threshold is not None
        assert 0.5 < threshold < 0.68


class TestSaveSweep:
    """Tests for CSV output."""

    def test_creates_parents(self, tmp_path):
        df = sweep(3, [0.5], n_trials=2)
        output = tmp_path / "nested" / "sweep.csv"

        path = save_sweep(df, output)

        assert path == output
        loaded = pd.read_csv(path)
        assert len(loaded) == 2
        assert list(loaded.columns) == SWEEP_COLUMNS
