"""
Parametric and nonparametric density estimates.

normal_pdf: Gaussian density at the sample mean/std, scaled by 1/total.
gaussian_kde: kernel density estimate with a Silverman-style bandwidth,
    h = 0.9 * min(std, IQR) * n^(-1/5).

The IQR here is the plain q3 - q1 of the floor-index quartiles; unlike
Silverman's rule it is not divided by 1.34.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import stats

SILVERMAN_FACTOR = 0.9


def normal_pdf(v: float, mean: float, std: float, total: float) -> float:
    """
    Normal density N(mean, std^2) at v, divided by the sample total.

    The division by total is kept for backward compatibility. The result is
    only a density when total == 1, so this is most likely a defect.
    """
    return float(stats.norm.pdf(v, loc=mean, scale=std)) / total


def robust_spread(std: float, q1: float, q3: float) -> float:
    """min(std, q3 - q1)."""
    return min(std, q3 - q1)


def kde_bandwidth(n: int, spread: float) -> float:
    """h = 0.9 * spread * n^(-1/5)."""
    return SILVERMAN_FACTOR * spread / n ** 0.2


def gaussian_kde(x: NDArray, v: float, h: float) -> float:
    """Mean of the standard normal kernel at (v - x_i) / h, divided by h."""
    return float(np.sum(stats.norm.pdf((v - x) / h)) / (len(x) * h))
