"""
Rank lookup over the sorted samples (empirical CDF).

Tie convention: with side='right' the rank of v is the number of samples
at or below v (the position just past the highest matching index); with
side='left' it is the number of samples strictly below v (the lowest
matching index). Both are exact for duplicates.
"""

from __future__ import annotations

from typing import Literal
import numpy as np
from numpy.typing import NDArray


RankSide = Literal['right', 'left']
RANK_SIDES: tuple[str, ...] = ('right', 'left')


def rank(sorted_values: NDArray[np.float64], v: float, side: RankSide = 'right') -> int:
    """
    Binary search for the rank of v in a non-decreasing array.

    Parameters
    ----------
    sorted_values : NDArray
        1D array in non-decreasing order.
    v : float
        Query value.
    side : str
        'right' counts samples <= v, 'left' counts samples < v.

    Returns
    -------
    int
        Rank in [0, n].
    """
    n = len(sorted_values)
    if v > sorted_values[n - 1]:
        return n

    lo = 0
    hi = n
    while lo < hi:
        mid = (lo + hi) // 2
        x = sorted_values[mid]
        if x < v or (side == 'right' and x == v):
            lo = mid + 1
        else:
            hi = mid

    return lo


def empirical_cdf(sorted_values: NDArray[np.float64], v: float, side: RankSide = 'right') -> float:
    """Fraction of samples at (side='right') or strictly below (side='left') v."""
    return rank(sorted_values, v, side) / len(sorted_values)
