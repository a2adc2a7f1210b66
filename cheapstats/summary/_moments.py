"""
Raw, central and standardized moments of arbitrary real order.

All moments are population moments (divisor n). The order k may be
fractional or negative; no domain checking is done on it, so e.g. a
fractional order over negative samples yields NaN exactly as
numpy.power does.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

PEARSON_EPSILON = 1e-15


def raw_moment(x: NDArray, k: float) -> float:
    """E[X^k] = (1/n) * sum(x_i^k)."""
    return float(np.sum(np.power(x, k)) / len(x))


def central_moment(x: NDArray, k: float, mean: float) -> float:
    """E[(X - mu)^k] = (1/n) * sum((x_i - mu)^k)."""
    return float(np.sum(np.power(x - mean, k)) / len(x))


def standardized_moment(x: NDArray, k: float, mean: float, std: float) -> float:
    """Central moment of order k divided by std^k. Caller guarantees std > 0."""
    return central_moment(x, k, mean) / std ** k


def skewness(x: NDArray, mean: float, std: float) -> float:
    """
    Population skewness (biased, g1).

    Matches scipy.stats.skew(x, bias=True). Caller guarantees std > 0.
    """
    return standardized_moment(x, 3.0, mean, std)


def pearson_skewness(mean: float, median: float, std: float) -> float:
    """
    Pearson's second (median) skewness coefficient, 3 * (mean - median) / std.

    A small epsilon is added to std so constant samples give 0 rather than
    dividing by zero.
    """
    return 3.0 * (mean - median) / (std + PEARSON_EPSILON)
