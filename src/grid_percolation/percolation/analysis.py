"""
Monte-Carlo analysis of site percolation.

Runs many seeded trials over a range of opening probabilities, aggregates the
outcomes into a percolation curve and estimates the percolation threshold.
"""

import time
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd

from .trial import RandomSource, run_trial


SWEEP_COLUMNS = ['n', 'probability', 'trial', 'seed', 'percolates', 'open_sites', 'open_fraction']


def get_probability_values(
    p_min: float = 0.0,
    p_max: float = 1.0,
    n_probabilities: int = 101,
) -> np.ndarray:
    """
    Generate evenly spaced opening probabilities.

    Args:
        p_min: Smallest probability
        p_max: Largest probability
        n_probabilities: Number of values

    Returns:
        Array of probabilities in [p_min, p_max]
    """
    if not 0.0 <= p_min <= p_max <= 1.0:
        raise ValueError(f"Need 0 <= p_min <= p_max <= 1, got p_min={p_min}, p_max={p_max}")
    if n_probabilities < 1:
        raise ValueError(f"n_probabilities must be positive, got {n_probabilities}")
    return np.linspace(p_min, p_max, n_probabilities)


def sweep(
    n: int,
    probabilities: Sequence[float],
    n_trials: int,
    base_seed: int = 0,
    random_source: Optional[RandomSource] = None,
    verbose: bool = False,
) -> pd.DataFrame:
    """
    Run ``n_trials`` trials at every probability.

    Trial ``t`` at probability index ``k`` uses seed
    ``base_seed + k * n_trials + t``, so a sweep is fully determined by its
    arguments.

    Args:
        n: Grid side length
        probabilities: Opening probabilities to evaluate
        n_trials: Trials per probability
        base_seed: Seed offset
        random_source: Source of uniform draws (default: NumpyRandomSource)
        verbose: Print progress per probability

    Returns:
        DataFrame with one row per trial (see SWEEP_COLUMNS)
    """
    if n_trials < 1:
        raise ValueError(f"n_trials must be positive, got {n_trials}")

    start_time = time.time()
    rows = []

    for k, probability in enumerate(probabilities):
        probability = float(probability)
        n_percolating = 0
        for t in range(n_trials):
            seed = base_seed + k * n_trials + t
            result = run_trial(n, probability, seed, random_source)
            n_percolating += result.percolates
            rows.append({
                'n': result.n,
                'probability': probability,
                'trial': t,
                'seed': seed,
                'percolates': result.percolates,
                'open_sites': result.open_sites,
                'open_fraction': result.open_fraction,
            })
        if verbose:
            print(f"  p={probability:.4f}: {n_percolating}/{n_trials} percolated")

    if verbose:
        print(f"Completed {len(rows)} trials in {time.time() - start_time:.1f}s")

    return pd.DataFrame(rows, columns=SWEEP_COLUMNS)


def percolation_curve(df: pd.DataFrame) -> pd.DataFrame:
    """
    Aggregate sweep results to one row per probability.

    Returns:
        DataFrame with columns probability, n_trials, percolation_rate,
        mean_open_fraction, sorted by probability
    """
    if df.empty:
        return pd.DataFrame(columns=['probability', 'n_trials', 'percolation_rate', 'mean_open_fraction'])

    curve = (
        df.groupby('probability')
        .agg(
            n_trials=('percolates', 'size'),
            percolation_rate=('percolates', 'mean'),
            mean_open_fraction=('open_fraction', 'mean'),
        )
        .reset_index()
        .sort_values('probability')
        .reset_index(drop=True)
    )
    return curve


def estimate_threshold(curve: pd.DataFrame, level: float = 0.5) -> Optional[float]:
    """
    Estimate the probability at which the percolation rate first reaches ``level``.

    Linear interpolation between the two bracketing probabilities.

    Returns:
        Threshold estimate, or None if the rate never reaches ``level``
    """
    if curve.empty:
        return None

    p = curve['probability'].to_numpy(dtype=float)
    rate = curve['percolation_rate'].to_numpy(dtype=float)

    above = np.nonzero(rate >= level)[0]
    if len(above) == 0:
        return None

    i = above[0]
    if i == 0:
        return float(p[0])

    p0, p1 = p[i - 1], p[i]
    r0, r1 = rate[i - 1], rate[i]
    return float(p0 + (level - r0) * (p1 - p0) / (r1 - r0))


def save_sweep(df: pd.DataFrame, output_file: Union[str, Path]) -> Path:
    """
    Save sweep results to CSV.

    Args:
        df: Sweep DataFrame
        output_file: Output CSV path (parent directories are created)

    Returns:
        Path to the written file
    """
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_file, index=False)
    return output_file
