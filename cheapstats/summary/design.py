"""
SampleDesign: validated input wrapper for the summary statistics engine.

Holds the caller's samples as a private float64 copy after validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from cheapstats.core.exceptions import OutOfMemoryError
from cheapstats.core.validation import (
    check_array, check_1d, check_finite, check_min_samples,
)

MIN_SAMPLES = 10


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for summary statistics.

    Wraps a 1D sample vector of at least MIN_SAMPLES finite values.
    Immutable after construction.

    Construction:
        SampleDesign.from_array(samples)
    """
    _data: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_array(cls, samples: ArrayLike) -> SampleDesign:
        """
        Build SampleDesign from array-like samples.

        Parameters
        ----------
        samples : array-like
            1D sequence of real numbers. Can be a list, tuple, numpy array,
            or pandas Series.
        """
        if hasattr(samples, 'values') and not callable(samples.values):
            samples = samples.values

        data = check_array(samples, "samples")
        if data.ndim == 0:
            data = data.reshape(1)
        check_1d(data, "samples")
        check_min_samples(data, MIN_SAMPLES, "samples")
        check_finite(data, "samples")

        try:
            data = np.array(data, dtype=np.float64, copy=True)
        except MemoryError as e:
            raise OutOfMemoryError(
                f"samples: cannot allocate copy of {data.shape[0]} values",
                n_samples=data.shape[0],
            ) from e
        data.flags.writeable = False

        return cls(_data=data, _n=data.shape[0])

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only sample vector in caller order."""
        return self._data

    @property
    def n(self) -> int:
        """Number of samples."""
        return self._n

    def __repr__(self) -> str:
        return f"SampleDesign(n={self._n})"
