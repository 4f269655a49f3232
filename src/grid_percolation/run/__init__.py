"""Sweep configuration."""

from .config import SweepConfig

__all__ = ['SweepConfig']
