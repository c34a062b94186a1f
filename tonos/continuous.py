"""Continuous temperament comparison.

Treats the number of divisions ``x`` as a real number: the step ratio is
t = base^(1/x), and each resonant ratio is scored by how far log_t(ratio)
lies from the nearest whole number of steps. Sweeping x over a dense grid
shows where good equal temperaments (12, 19, 31, ...) sit as dips in the
error curve.
"""

from typing import Sequence

import numpy as np


def _sweep_errors(
    ratios: Sequence[tuple[float, float]],
    base: int,
    xs: np.ndarray,
) -> np.ndarray:
    """Score every x in ``xs`` against the weighted ratio set.

    Rows are x samples, columns are ratios.
    """
    if base <= 1:
        raise ValueError(f"Base must be greater than 1, got {base}")
    if np.any(xs <= 0):
        raise ValueError("Division counts must be positive")
    if len(ratios) == 0:
        return np.zeros(len(xs))

    points = np.asarray(ratios, dtype=np.float64)
    values = points[:, 0]
    weights = points[:, 1]

    steps = np.power(float(base), 1.0 / xs)
    offsets = np.log(values)[np.newaxis, :] / np.log(steps)[:, np.newaxis]
    errors = np.abs(offsets - np.round(offsets))

    weighted_sum = errors @ weights
    total_weight = weights.sum()
    # 2x to normalize the error to [0, 1]
    return 2.0 * weighted_sum / total_weight


def continuous_score(
    ratios: Sequence[tuple[float, float]],
    base: int,
    x: float,
) -> float:
    """Calculate the weighted rounding error of ``x`` equal divisions of ``base``.

    Args:
        ratios: (value, weight) pairs from generate_continuous_ratios
        base: Base interval (must be > 1)
        x: Number of divisions (may be fractional, must be > 0)

    Returns:
        Error in [0, 1]; 0.0 for an empty ratio set
    """
    return float(_sweep_errors(ratios, base, np.array([x], dtype=np.float64))[0])


def sweep_points(limit: int, density: int) -> np.ndarray:
    """Get the x samples of a sweep: 1, 1 + 1/density, ..., limit.

    Args:
        limit: Last division count (inclusive)
        density: Samples per unit of x

    Returns:
        Ascending array of x values; empty if limit < 1
    """
    if density < 1:
        raise ValueError(f"Density must be positive, got {density}")
    return np.arange(density, density * limit + 1, dtype=np.float64) / density


def continuous_sweep(
    ratios: Sequence[tuple[float, float]],
    base: int,
    limit: int,
    density: int,
) -> list[tuple[float, float]]:
    """Score every sample of a sweep over x.

    Args:
        ratios: (value, weight) pairs from generate_continuous_ratios
        base: Base interval (must be > 1)
        limit: Last division count (inclusive)
        density: Samples per unit of x

    Returns:
        List of (x, score) in ascending x order
    """
    xs = sweep_points(limit, density)
    if len(xs) == 0:
        return []
    scores = _sweep_errors(ratios, base, xs)
    return list(zip(xs.tolist(), scores.tolist()))
