"""
CPU backend for the sample context.

Copies the samples, sorts the copy with combsort11 and precomputes the
summary scalars exactly once.
"""

from __future__ import annotations

import math
import warnings

import numpy as np
from numpy.typing import NDArray

from cheapstats.core.compute.timing import Timer
from cheapstats.core.exceptions import InvalidArgumentError, OutOfMemoryError
from cheapstats.core.result import Result
from cheapstats.summary._sort import combsort11
from cheapstats.summary.design import SampleDesign
from cheapstats.summary.solution import SummaryParams


class CPUSummaryBackend:
    """CPU reference backend for summary statistics."""

    @property
    def name(self) -> str:
        return 'cpu_summary'

    def solve(self, design: SampleDesign) -> Result[SummaryParams]:
        """
        Build the summary payload for a validated sample set.

        Raises
        ------
        OutOfMemoryError
            If the sorted copy cannot be allocated.
        """
        timer = Timer()
        timer.start()

        raw = design.data
        n = design.n
        warnings_list: list[str] = []

        with timer.section('copy'):
            try:
                values = np.array(raw, dtype=np.float64, copy=True)
            except MemoryError as e:
                raise OutOfMemoryError(
                    f"samples: cannot allocate sorted copy of {n} values",
                    n_samples=n,
                ) from e

        with timer.section('sort'):
            passes = combsort11(values)
            values.flags.writeable = False

        with timer.section('summary'), np.errstate(over='ignore', invalid='ignore'):
            total = self._compute_total(raw)
            mean = total / n
            variance = self._compute_variance(raw, mean)
            std = math.sqrt(variance)

        if not (math.isfinite(total) and math.isfinite(variance)):
            raise InvalidArgumentError(
                f"samples: sum overflows double precision "
                f"(total={total}, variance={variance})"
            )

        if std == 0.0:
            message = (
                "samples are constant (std == 0): z_score, std_moment, skewness, "
                "normal_pdf and estimated_pdf are undefined"
            )
            warnings_list.append(message)
            warnings.warn(message, RuntimeWarning, stacklevel=3)

        # Informational; recorded on the result, not emitted.
        if total != 1.0:
            warnings_list.append(
                f"normal_pdf is scaled by 1/total (total={total:.6g}); "
                f"it is not a probability density unless total == 1"
            )

        timer.stop()

        params = SummaryParams(
            raw=raw,
            sorted=values,
            n=n,
            total=total,
            mean=mean,
            min=float(values[0]),
            max=float(values[n - 1]),
            q1=float(values[n // 4]),
            q3=float(values[(3 * n) // 4]),
            median=float(values[n // 2]),
            variance=variance,
            std=std,
        )

        return Result(
            params=params,
            info={'n': n, 'sort_passes': passes, 'sort_algorithm': 'combsort11'},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _compute_total(self, data: NDArray) -> float:
        """Sum of the samples in caller order."""
        return float(np.sum(data))

    def _compute_variance(self, data: NDArray, mean: float) -> float:
        """Population variance: mean squared deviation from mean (divisor n)."""
        diffs = data - mean
        return float(np.sum(diffs * diffs) / len(data))
