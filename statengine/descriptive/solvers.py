"""
Public entry points for descriptive statistics.

describe(), percentiles(), quantile(), detect_outliers() and
frequency_analysis().
"""

from __future__ import annotations

from typing import Literal, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statengine.core.exceptions import InvalidParameterError
from statengine.core.validation import clean_sample
from statengine.descriptive.design import DescriptiveDesign
from statengine.descriptive.solution import (
    DescriptiveSolution,
    OutlierSolution,
    FrequencySolution,
)
from statengine.descriptive.backends.cpu import CPUDescriptiveBackend
from statengine.descriptive._quantile_types import sample_quantile

OutlierMethod = Literal['iqr', 'zscore', 'modified_zscore']


def _get_backend() -> CPUDescriptiveBackend:
    return CPUDescriptiveBackend()


def describe(
    sample: ArrayLike | DescriptiveDesign,
    *,
    quantile_type: int = 2,
) -> DescriptiveSolution:
    """
    Summary statistics of a numeric sample.

    Missing entries (None, NaN) are counted in null_count and excluded.
    Never raises for an empty or all-missing sample: count is 0 and the
    ratio statistics are NaN.

    Parameters
    ----------
    sample : array-like or DescriptiveDesign
        Nullable numeric sequence.
    quantile_type : int
        Hyndman-Fan type for the quartiles. Default 2 (closest ranks,
        averaged at discontinuities), giving quartiles 3, 5.5, 8 for 1..10.

    Returns
    -------
    DescriptiveSolution
    """
    if isinstance(sample, DescriptiveDesign):
        design = sample
    else:
        design = DescriptiveDesign.for_describe(sample, quantile_type=quantile_type)
    result = _get_backend().solve(design)
    return DescriptiveSolution(_result=result, _design=design)


def quantile(
    sample: ArrayLike,
    probs: float | Sequence[float] = (0.0, 0.25, 0.5, 0.75, 1.0),
    *,
    type: int = 7,
) -> NDArray[np.floating]:
    """
    Sample quantiles using one of the nine Hyndman-Fan definitions.

    Default type 7 interpolates linearly between order statistics.
    Returns NaN for every probability when the sample has no valid values.
    """
    x, _ = clean_sample(sample, 'sample')
    p = np.atleast_1d(np.asarray(probs, dtype=np.float64))
    if np.any((p < 0) | (p > 1)) or np.any(np.isnan(p)):
        raise InvalidParameterError(
            f"probs must lie in [0, 1], got {p.tolist()}", name='probs', value=probs
        )
    return sample_quantile(np.sort(x), p, type)


def percentiles(
    sample: ArrayLike,
    points: Sequence[float] = (25, 50, 75),
    *,
    type: int = 7,
) -> dict[float, float]:
    """
    Percentiles keyed by the requested point (0-100).

    percentiles(range(1, 101), [25, 90]) -> {25: 25.75, 90: 90.1}
    """
    pts = list(points)
    arr = np.asarray(pts, dtype=np.float64)
    if np.any((arr < 0) | (arr > 100)) or np.any(np.isnan(arr)):
        raise InvalidParameterError(
            f"percentile points must lie in [0, 100], got {pts}", name='points', value=points
        )
    values = quantile(sample, arr / 100.0, type=type)
    return {pt: float(v) for pt, v in zip(pts, values)}


def detect_outliers(
    sample: ArrayLike | DescriptiveDesign,
    *,
    method: OutlierMethod = 'iqr',
    threshold: float | None = None,
) -> OutlierSolution:
    """
    Flag outlying values.

    Parameters
    ----------
    method : str
        'iqr': outside [Q1 - t*IQR, Q3 + t*IQR], t defaults to 1.5.
        'zscore': |x - mean| / sd > t, t defaults to 3.
        'modified_zscore': 0.6745 |x - median| / MAD > t, t defaults to 3.5.
    threshold : float, optional
        Overrides the method's default cut-off.

    Returns
    -------
    OutlierSolution
        indices refer to positions in the input sequence, missing entries included.
    """
    if isinstance(sample, DescriptiveDesign):
        design = sample
    else:
        design = DescriptiveDesign.for_outliers(sample, method=method, threshold=threshold)
    result = _get_backend().solve(design)
    return OutlierSolution(_result=result, _design=design)


def frequency_analysis(
    values: ArrayLike | DescriptiveDesign,
    *,
    bin_count: int | None = None,
) -> FrequencySolution:
    """
    Frequency, relative frequency and cumulative frequency table.

    Without bin_count each distinct label is counted (first-seen order).
    With bin_count numeric values are grouped into that many equal-width
    bins spanning [min, max]; the histogram is also returned.
    """
    if isinstance(values, DescriptiveDesign):
        design = values
    else:
        design = DescriptiveDesign.for_frequency(values, bin_count=bin_count)
    result = _get_backend().solve(design)
    return FrequencySolution(_result=result, _design=design)
