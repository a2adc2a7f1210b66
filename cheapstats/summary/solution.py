"""
Summary statistics solution types.

Contains the parameter payload and the user-facing SampleContext.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from cheapstats.core.exceptions import DegenerateSampleError, InvalidArgumentError
from cheapstats.core.result import Result
from cheapstats.core.validation import check_choice, check_scalar
from cheapstats.summary import _density, _moments
from cheapstats.summary._rank import RANK_SIDES, RankSide, empirical_cdf

if TYPE_CHECKING:
    from cheapstats.summary.design import SampleDesign


@dataclass(frozen=True)
class SummaryParams:
    """
    Parameter payload for a sample context.

    Both arrays are read-only. Every scalar is computed once by the
    backend and is consistent with the arrays.
    """
    raw: NDArray[np.floating[Any]]
    sorted: NDArray[np.floating[Any]]
    n: int

    total: float
    mean: float
    min: float
    max: float
    q1: float
    q3: float
    median: float
    variance: float
    std: float


@dataclass(eq=False)
class SampleContext:
    """
    Immutable statistics context over a fixed sample set.

    Wraps Result[SummaryParams] and answers read-only queries. Safe to share
    between threads once built; release() must not overlap with queries.

    Usage:
        with create(samples) as ctx:
            ctx.mean, ctx.cdf(3.0), ctx.estimated_pdf(ctx.mean)
    """
    _result: Result[SummaryParams] | None
    _design: 'SampleDesign | None'

    # --- Lifecycle ---

    @property
    def released(self) -> bool:
        """Whether release() has been called."""
        return self._result is None

    def release(self) -> None:
        """
        Drop the sample arrays and summary payload.

        Raises InvalidArgumentError if the context was already released.
        """
        if self._result is None:
            raise InvalidArgumentError("context: already released")
        self._result = None
        self._design = None

    def __enter__(self) -> SampleContext:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.released:
            self.release()

    @property
    def _params(self) -> SummaryParams:
        if self._result is None:
            raise InvalidArgumentError("context: used after release")
        return self._result.params

    # --- Precomputed statistics ---

    @property
    def count(self) -> int:
        """Number of samples."""
        return self._params.n

    @property
    def total(self) -> float:
        """Sum of the samples."""
        return self._params.total

    @property
    def mean(self) -> float:
        """Arithmetic mean, total / count."""
        return self._params.mean

    @property
    def min(self) -> float:
        return self._params.min

    @property
    def max(self) -> float:
        return self._params.max

    @property
    def q1(self) -> float:
        """First quartile, sorted[count // 4]."""
        return self._params.q1

    @property
    def q3(self) -> float:
        """Third quartile, sorted[3 * count // 4]."""
        return self._params.q3

    @property
    def median(self) -> float:
        """Median, sorted[count // 2] (upper median for even counts)."""
        return self._params.median

    @property
    def average(self) -> float:
        """Alias of mean."""
        return self._params.mean

    @property
    def variance(self) -> float:
        """Population variance (divisor count)."""
        return self._params.variance

    @property
    def std(self) -> float:
        """Population standard deviation."""
        return self._params.std

    @property
    def sigma(self) -> float:
        """Alias of std."""
        return self._params.std

    @property
    def raw(self) -> NDArray[np.floating[Any]]:
        """Copy of the samples in caller order."""
        return self._params.raw.copy()

    @property
    def sorted(self) -> NDArray[np.floating[Any]]:
        """Copy of the samples in non-decreasing order."""
        return self._params.sorted.copy()

    # --- Queries ---

    def cdf(self, v: float, *, side: RankSide = 'right') -> float:
        """
        Empirical CDF at v.

        Parameters
        ----------
        v : float
            Query value.
        side : str
            'right' (default): fraction of samples <= v.
            'left': fraction of samples < v.
        """
        v = check_scalar(v, "v")
        check_choice(side, RANK_SIDES, "side")
        return empirical_cdf(self._params.sorted, v, side)

    def normal_pdf(self, v: float) -> float:
        """
        Normal density with the sample mean and std at v, divided by total.

        Note: the division by total makes this a density only when the
        samples sum to 1, and is probably a defect. It is kept for backward
        compatibility; multiply by total for the textbook density.
        """
        v = check_scalar(v, "v")
        p = self._params
        self._require_spread('normal_pdf')
        if p.total == 0.0:
            raise DegenerateSampleError(
                "normal_pdf: samples sum to zero, density scaling by 1/total is undefined",
                statistic='normal_pdf',
                quantity='total',
            )
        return _density.normal_pdf(v, p.mean, p.std, p.total)

    def bandwidth(self) -> float:
        """Kernel bandwidth used by estimated_pdf()."""
        p = self._params
        spread = _density.robust_spread(p.std, p.q1, p.q3)
        return _density.kde_bandwidth(p.n, spread)

    def estimated_pdf(self, v: float) -> float:
        """Gaussian kernel density estimate at v."""
        v = check_scalar(v, "v")
        h = self.bandwidth()
        if h == 0.0:
            raise DegenerateSampleError(
                "estimated_pdf: bandwidth is zero (std or q3 - q1 is zero)",
                statistic='estimated_pdf',
                quantity='bandwidth',
            )
        return _density.gaussian_kde(self._params.sorted, v, h)

    def moment(self, k: float) -> float:
        """Raw moment of order k."""
        k = check_scalar(k, "k")
        return _moments.raw_moment(self._params.sorted, k)

    def central_moment(self, k: float) -> float:
        """Central moment of order k about the sample mean."""
        k = check_scalar(k, "k")
        p = self._params
        return _moments.central_moment(p.sorted, k, p.mean)

    def std_moment(self, k: float) -> float:
        """Standardized moment of order k, central_moment(k) / std^k."""
        k = check_scalar(k, "k")
        p = self._params
        self._require_spread('std_moment')
        return _moments.standardized_moment(p.sorted, k, p.mean, p.std)

    def skewness(self) -> float:
        """Population skewness, the standardized moment of order 3."""
        p = self._params
        self._require_spread('skewness')
        return _moments.skewness(p.sorted, p.mean, p.std)

    def pearson_skewness(self) -> float:
        """Pearson median skewness, 3 * (mean - median) / std."""
        p = self._params
        return _moments.pearson_skewness(p.mean, p.median, p.std)

    def z_score(self, v: float) -> float:
        """(v - mean) / std."""
        v = check_scalar(v, "v")
        p = self._params
        self._require_spread('z_score')
        return (v - p.mean) / p.std

    def _require_spread(self, statistic: str) -> None:
        if self._params.std == 0.0:
            raise DegenerateSampleError(
                f"{statistic}: samples are constant (std == 0)",
                statistic=statistic,
                quantity='std',
            )

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._checked_result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._checked_result.timing

    @property
    def backend_name(self) -> str:
        return self._checked_result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._checked_result.warnings

    @property
    def _checked_result(self) -> Result[SummaryParams]:
        if self._result is None:
            raise InvalidArgumentError("context: used after release")
        return self._result

    def summary(self) -> str:
        """Two-column table of the precomputed statistics."""
        p = self._params
        rows = [
            ("n", str(p.n)),
            ("Total", f"{p.total:.6f}"),
            ("Min.", f"{p.min:.6f}"),
            ("1st Qu.", f"{p.q1:.6f}"),
            ("Median", f"{p.median:.6f}"),
            ("Mean", f"{p.mean:.6f}"),
            ("3rd Qu.", f"{p.q3:.6f}"),
            ("Max.", f"{p.max:.6f}"),
            ("Variance", f"{p.variance:.6f}"),
            ("Std", f"{p.std:.6f}"),
        ]

        label_width = max(len(label) for label, _ in rows)
        value_width = max(len(value) for _, value in rows)

        lines = [
            label.ljust(label_width) + "  " + value.rjust(value_width)
            for label, value in rows
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        if self.released:
            return "SampleContext(released)"
        p = self._params
        return f"SampleContext(n={p.n}, mean={p.mean:.6g}, std={p.std:.6g})"
