"""
Comb sort with the "combsort11" gap rule.

Comb sort is bubble sort over a shrinking gap. Starting the gap at n and
shrinking it by 10/13 each pass moves small values near the end of the
array ("turtles") forward quickly. Gaps of 9 and 10 are snapped to 11,
which avoids the slow gap sequences 9,6,4,3,2,1 and 10,7,5,3,2,1.

Reference:
    Lacey, S. and Box, R. (1991) "A Fast, Easy Sort", Byte, 16(4), 315-320.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def _shrink(gap: int) -> int:
    gap = (gap * 10) // 13
    if gap in (9, 10):
        return 11
    return gap


def combsort11(a: NDArray[np.float64]) -> int:
    """
    Sort a 1D float array into non-decreasing order, in place.

    Not stable: equal values may be reordered relative to each other.

    Parameters
    ----------
    a : NDArray
        1D writeable float64 array. Overwritten with its sorted values.

    Returns
    -------
    int
        Number of passes performed.
    """
    # Element access on a list is much cheaper than on an ndarray.
    values = a.tolist()
    n = len(values)

    gap = n
    swapped = True
    passes = 0

    while gap > 1 or swapped:
        swapped = False
        gap = max(_shrink(gap), 1)

        for i in range(n - gap):
            j = i + gap
            if values[i] > values[j]:
                values[i], values[j] = values[j], values[i]
                swapped = True

        passes += 1

    a[:] = values
    return passes
