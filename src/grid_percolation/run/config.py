"""
Sweep configuration.

The SweepConfig loads a YAML sweep definition: grid size, the probability
range, trials per probability, the base seed and where to write results.
"""

from pathlib import Path
from typing import Any, Dict

import numpy as np
import yaml

from ..percolation.analysis import get_probability_values


class SweepConfig:
    """
    Loads and validates a sweep configuration YAML.

    Example:
        config = SweepConfig.from_yaml('config/sweep.yaml')
        print(config.grid_size, config.n_trials)
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'SweepConfig':
        """Load sweep config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Sweep config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Sweep config must be a mapping: {path}")

        return cls(data)

    def _validate(self):
        """Validate required config sections and value ranges."""
        required_sections = ['run_name', 'grid', 'sweep']
        for section in required_sections:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")

        for section in ['grid', 'sweep', 'output']:
            if section in self._data and not isinstance(self._data[section], dict):
                raise ValueError(f"Config section '{section}' must be a mapping, "
                                 f"got {type(self._data[section]).__name__}")

        if 'n' not in self._data['grid']:
            raise ValueError("Missing required key 'grid.n'")
        if self.grid_size <= 0:
            raise ValueError(f"grid.n must be positive, got {self.grid_size}")
        if self.n_trials <= 0:
            raise ValueError(f"sweep.n_trials must be positive, got {self.n_trials}")

        get_probability_values(self.p_min, self.p_max, self.n_probabilities)

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    @property
    def grid_size(self) -> int:
        return int(self._data['grid']['n'])

    @property
    def p_min(self) -> float:
        return float(self._data['sweep'].get('p_min', 0.0))

    @property
    def p_max(self) -> float:
        return float(self._data['sweep'].get('p_max', 1.0))

    @property
    def n_probabilities(self) -> int:
        return int(self._data['sweep'].get('n_probabilities', 101))

    @property
    def probabilities(self) -> np.ndarray:
        return get_probability_values(self.p_min, self.p_max, self.n_probabilities)

    @property
    def n_trials(self) -> int:
        return int(self._data['sweep'].get('n_trials', 100))

    @property
    def base_seed(self) -> int:
        return int(self._data['sweep'].get('base_seed', 0))

    # --- Output paths ---

    @property
    def base_dir(self) -> Path:
        return Path(self._data.get('output', {}).get('base_dir', '.'))

    @property
    def sweep_csv(self) -> Path:
        return self.base_dir / self._data.get('output', {}).get('sweep_csv', 'sweep.csv')

    def summary(self) -> str:
        """One-line description for progress output."""
        return (f"{self.run_name}: n={self.grid_size}, "
                f"p=[{self.p_min}, {self.p_max}] x {self.n_probabilities}, "
                f"{self.n_trials} trials each, base_seed={self.base_seed}")
