"""Summary statistics backends."""

from cheapstats.summary.backends.cpu import CPUSummaryBackend

__all__ = [
    "CPUSummaryBackend",
]
