"""
Common types for robust location and scale estimates.
"""

from __future__ import annotations

from dataclasses import dataclass

MAD_SCALE_FACTOR = 1.4826
DEFAULT_TRIM = 0.1


@dataclass(frozen=True)
class RobustParams:
    """
    Classical and robust summaries of one sample.

    mad is the raw median absolute deviation; scaled_mad multiplies it by
    1.4826 so it estimates the standard deviation for normal data.
    """
    n: int
    mean: float
    standard_deviation: float
    median: float
    mad: float
    scaled_mad: float
    trimmed_mean: float
    winsorized_mean: float
    iqr: float
    trim: float
