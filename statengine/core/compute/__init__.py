"""
Shared compute infrastructure for statengine.

This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    ranks: Average ranks and tie corrections
    linalg: Linear algebra kernels (QR)
"""

from statengine.core.compute.timing import Timer
from statengine.core.compute.ranks import average_ranks, tie_term, has_ties

__all__ = [
    "Timer",
    "average_ranks",
    "tie_term",
    "has_ties",
]
