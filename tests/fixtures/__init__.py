"""Fixtures package for test data.

Re-exports convenience constructors for tests.
Import-safe: no side effects.
"""

from .params import param_grid, offsets, gaussian_samples

__all__ = ["param_grid", "offsets", "gaussian_samples"]
