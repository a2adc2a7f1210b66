"""
Generic result container for cheapstats computations.

The Result class is the envelope a backend hands back after building a
statistics payload. It carries timing, diagnostics and provenance next to
the domain-specific parameters, so tooling can inspect how a context was
built without knowing its payload type.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (sample count, sort passes)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library versions in effect when the result was produced."""
    from cheapstats import __version__

    return {
        'cheapstats_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (summary scalars, sorted samples)
        info: Structured metadata (sample count, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used to produce the result

    Examples:
        >>> Result(
        ...     params=SummaryParams(...),
        ...     info={'n': 10, 'sort_passes': 6},
        ...     timing={'total_seconds': 0.001, 'sort': 0.0004},
        ...     backend_name='cpu_summary'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
