"""
Parameter payloads for descriptive statistics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

OUTLIER_METHODS = ('iqr', 'zscore', 'modified_zscore')

# Default cut-offs per outlier method (IQR multiplier, |z|, |modified z|)
DEFAULT_THRESHOLDS = {
    'iqr': 1.5,
    'zscore': 3.0,
    'modified_zscore': 3.5,
}

# Scales the MAD-based score so it is comparable to a z-score under normality
MODIFIED_Z_CONSTANT = 0.6745


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Summary of one numeric sample.

    Every ratio statistic is NaN when count is 0. variance and
    standard_deviation are 0 for a single observation.
    """
    count: int
    null_count: int
    mean: float
    median: float
    modes: tuple[float, ...]
    standard_deviation: float
    variance: float
    minimum: float
    maximum: float
    range: float
    quartiles: tuple[float, float, float]
    iqr: float
    skewness: float
    kurtosis: float
    quantile_type: int


@dataclass(frozen=True)
class OutlierParams:
    """
    Outliers of one sample.

    indices refer to positions in the original (unfiltered) sequence.
    lower_fence/upper_fence are value cut-offs; for the score-based methods
    they are the values at which the score reaches the threshold.
    """
    method: str
    threshold: float
    lower_fence: float
    upper_fence: float
    indices: tuple[int, ...]
    values: tuple[float, ...]
    scores: NDArray[np.floating[Any]] | None
    n: int


@dataclass(frozen=True)
class HistogramBin:
    """
    One equal-width bin. The last bin is closed on the right.

    label is "lower-upper" with as many significant digits as it takes to
    keep every bin of one histogram distinct.
    """
    lower: float
    upper: float
    count: int
    relative_frequency: float
    label: str


@dataclass(frozen=True)
class FrequencyParams:
    """
    Frequency table.

    Keys are category labels (first-seen order) or histogram bin labels.
    """
    frequencies: dict[str, int]
    relative_frequencies: dict[str, float]
    cumulative_frequencies: dict[str, int]
    histogram: tuple[HistogramBin, ...]
    total: int
    null_count: int
