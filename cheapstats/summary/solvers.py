"""
Functional entry points for the summary statistics engine.

create() builds a SampleContext; the remaining functions are thin,
validated wrappers around its query methods for callers that prefer a
flat function surface (e.g. foreign-language bindings).
"""

from __future__ import annotations

from typing import Any
from numpy.typing import ArrayLike

from cheapstats.core.exceptions import InvalidArgumentError
from cheapstats.summary.design import SampleDesign
from cheapstats.summary.solution import SampleContext
from cheapstats.summary.backends.cpu import CPUSummaryBackend
from cheapstats.summary._rank import RankSide


def _ensure_design(samples: ArrayLike | SampleDesign) -> SampleDesign:
    """Convert raw samples to SampleDesign if needed."""
    if isinstance(samples, SampleDesign):
        return samples
    return SampleDesign.from_array(samples)


def _ensure_context(context: Any) -> SampleContext:
    if context is None:
        raise InvalidArgumentError("context: required, got None")
    if not isinstance(context, SampleContext):
        raise InvalidArgumentError(
            f"context: expected SampleContext, got {type(context).__name__}"
        )
    if context.released:
        raise InvalidArgumentError("context: used after release")
    return context


def create(samples: ArrayLike | SampleDesign) -> SampleContext:
    """
    Build a sample context.

    Parameters
    ----------
    samples : array-like or SampleDesign
        1D sequence of at least 10 finite real numbers. The values are
        copied; later changes to the caller's sequence do not affect the
        context.

    Returns
    -------
    SampleContext

    Raises
    ------
    InvalidArgumentError
        If samples is None, non-numeric, not 1D, or contains NaN/Inf.
    TooFewSamplesError
        If fewer than 10 samples are given.
    OutOfMemoryError
        If the internal copies cannot be allocated.
    """
    design = _ensure_design(samples)
    result = CPUSummaryBackend().solve(design)
    return SampleContext(_result=result, _design=design)


def destroy(context: SampleContext) -> None:
    """
    Release a context. Must be called at most once.

    Raises
    ------
    InvalidArgumentError
        If context is missing or already released.
    """
    if context is None:
        raise InvalidArgumentError("context: required, got None")
    if not isinstance(context, SampleContext):
        raise InvalidArgumentError(
            f"context: expected SampleContext, got {type(context).__name__}"
        )
    context.release()


def cdf(context: SampleContext, v: float, *, side: RankSide = 'right') -> float:
    """Empirical CDF at v. See SampleContext.cdf."""
    return _ensure_context(context).cdf(v, side=side)


def normal_pdf(context: SampleContext, v: float) -> float:
    """Normal density at v, scaled by 1/total. See SampleContext.normal_pdf."""
    return _ensure_context(context).normal_pdf(v)


def estimated_pdf(context: SampleContext, v: float) -> float:
    """Gaussian kernel density estimate at v."""
    return _ensure_context(context).estimated_pdf(v)


def moment(context: SampleContext, k: float) -> float:
    """Raw moment of order k."""
    return _ensure_context(context).moment(k)


def central_moment(context: SampleContext, k: float) -> float:
    """Central moment of order k."""
    return _ensure_context(context).central_moment(k)


def std_moment(context: SampleContext, k: float) -> float:
    """Standardized moment of order k."""
    return _ensure_context(context).std_moment(k)


def skewness(context: SampleContext) -> float:
    """Population skewness."""
    return _ensure_context(context).skewness()


def pearson_skewness(context: SampleContext) -> float:
    """Pearson median skewness."""
    return _ensure_context(context).pearson_skewness()


def z_score(context: SampleContext, v: float) -> float:
    """(v - mean) / std."""
    return _ensure_context(context).z_score(v)
