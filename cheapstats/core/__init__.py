"""
Core infrastructure for cheapstats.

Shared abstractions used by the summary statistics engine.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy and ErrorKind codes
    validation: Input validators
    compute: Timing utilities
"""

from cheapstats.core.result import Result
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

__all__ = [
    # Result
    "Result",
    # Exceptions
    "ErrorKind",
    "CheapStatsError",
    "ValidationError",
    "InvalidArgumentError",
    "TooFewSamplesError",
    "OutOfMemoryError",
    "NumericalError",
    "DegenerateSampleError",
]
