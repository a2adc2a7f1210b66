"""
Compute utilities shared by backends.
"""

from cheapstats.core.compute.timing import Timer

__all__ = [
    "Timer",
]
