"""
Exception hierarchy for cheapstats.

All exceptions inherit from CheapStatsError to allow catching any
library-specific error. Every exception carries an ErrorKind so callers
that marshal errors across a language boundary can read a small, stable
integer code instead of parsing messages.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from enum import IntEnum


class ErrorKind(IntEnum):
    """Closed set of error kinds, with stable integer codes."""
    INVALID_ARGUMENT = 1
    TOO_FEW_SAMPLES = 2
    OUT_OF_MEMORY = 3
    DEGENERATE_SAMPLE = 4


class CheapStatsError(Exception):
    """Base exception for all cheapstats errors."""
    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    @property
    def code(self) -> int:
        """Integer error code for this exception's kind."""
        return int(self.kind)


class ValidationError(CheapStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    kind = ErrorKind.INVALID_ARGUMENT


class InvalidArgumentError(ValidationError):
    """
    A required argument is missing, malformed, or refers to a released context.
    """
    kind = ErrorKind.INVALID_ARGUMENT


class TooFewSamplesError(ValidationError):
    """
    Sample set is below the statistical validity floor.

    Attributes:
        n_samples: Number of samples supplied
        min_samples: Minimum number of samples required
    """
    kind = ErrorKind.TOO_FEW_SAMPLES

    def __init__(
        self,
        message: str,
        n_samples: int | None = None,
        min_samples: int | None = None
    ):
        super().__init__(message)
        self.n_samples = n_samples
        self.min_samples = min_samples


class OutOfMemoryError(CheapStatsError):
    """
    Allocation of the context's internal arrays failed.

    Attributes:
        n_samples: Number of samples the allocation was sized for
    """
    kind = ErrorKind.OUT_OF_MEMORY

    def __init__(self, message: str, n_samples: int | None = None):
        super().__init__(message)
        self.n_samples = n_samples


class NumericalError(CheapStatsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    kind = ErrorKind.DEGENERATE_SAMPLE


class DegenerateSampleError(NumericalError):
    """
    Statistic is undefined for this sample set.

    Raised when a query would divide by a zero spread or total, e.g. a
    z-score over constant samples.

    Attributes:
        statistic: Name of the statistic that could not be computed
        quantity: Name of the zero-valued quantity (e.g. 'std', 'total')
    """
    kind = ErrorKind.DEGENERATE_SAMPLE

    def __init__(
        self,
        message: str,
        statistic: str | None = None,
        quantity: str | None = None
    ):
        super().__init__(message)
        self.statistic = statistic
        self.quantity = quantity
