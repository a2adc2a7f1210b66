"""
cheapstats: cheap descriptive statistics over a fixed sample set.

Build a context once, then query central tendency, dispersion, quantiles,
empirical and parametric distribution estimates, and moments.

Submodules:
    summary: Sample context and query functions
    core: Result envelope, exceptions, validation
"""

__version__ = "0.1.0"

from cheapstats.core.exceptions import (
    ErrorKind,
    CheapStatsError,
    ValidationError,
    InvalidArgumentError,
    TooFewSamplesError,
    OutOfMemoryError,
    NumericalError,
    DegenerateSampleError,
)
from cheapstats.summary import (
    MIN_SAMPLES,
    SampleContext,
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
    "__version__",
    "MIN_SAMPLES",
    "SampleContext",
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
    "ErrorKind",
    "CheapStatsError",
    "ValidationError",
    "InvalidArgumentError",
    "TooFewSamplesError",
    "OutOfMemoryError",
    "NumericalError",
    "DegenerateSampleError",
]
