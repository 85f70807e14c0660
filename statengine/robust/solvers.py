"""
Public entry point for robust summaries.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from statengine.robust._common import DEFAULT_TRIM
from statengine.robust.design import RobustDesign
from statengine.robust.solution import RobustSolution
from statengine.robust.backends.cpu import CPURobustStatisticsBackend


def robust_statistics(sample: ArrayLike, *, trim: float = DEFAULT_TRIM) -> RobustSolution:
    """
    Outlier-resistant location and scale of one sample.

    Args:
        sample: Observations; missing entries are dropped
        trim: Fraction cut from each end for the trimmed and winsorized means

    Raises:
        InsufficientDataError: no valid observations
        InvalidParameterError: trim outside [0, 0.5)

    Example:
        >>> r = robust_statistics([1, 2, 3, 4, 5, 100])
        >>> r.median, r.mad
        (3.5, 1.5)
    """
    design = RobustDesign.for_sample(sample, trim=trim)
    result = CPURobustStatisticsBackend().solve(design)
    return RobustSolution(_result=result, _design=design)
