"""
Summary statistics module.

Builds an immutable sample context once and answers cheap, read-only
queries against it.

Public API:
    create(samples)            - Build a SampleContext (>= 10 samples)
    destroy(context)           - Release a context
    cdf(context, v)            - Empirical CDF
    normal_pdf(context, v)     - Normal density scaled by 1/total
    estimated_pdf(context, v)  - Gaussian kernel density estimate
    moment / central_moment / std_moment(context, k)
    skewness / pearson_skewness(context)
    z_score(context, v)
"""

from cheapstats.summary.design import MIN_SAMPLES, SampleDesign
from cheapstats.summary.solution import SampleContext, SummaryParams
from cheapstats.summary.solvers import (
    create,
    destroy,
    cdf,
    normal_pdf,
    estimated_pdf,
    moment,
    central_moment,
    std_moment,
    skewness,
    pearson_skewness,
    z_score,
)

__all__ = [
    "create",
    "destroy",
    "cdf",
    "normal_pdf",
    "estimated_pdf",
    "moment",
    "central_moment",
    "std_moment",
    "skewness",
    "pearson_skewness",
    "z_score",
    "MIN_SAMPLES",
    "SampleDesign",
    "SampleContext",
    "SummaryParams",
]
