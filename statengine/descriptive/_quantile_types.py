"""
The nine Hyndman & Fan (1996) sample quantile definitions.

Types 1-3 are discontinuous (step functions); types 4-9 interpolate
linearly between order statistics with different plotting positions.
Type 7 (linear interpolation between closest ranks) is the default for
quantile() and percentiles(); describe() reports type-2 quartiles, so
that 1..10 has quartiles 3, 5.5 and 8.

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray

from statengine.core.exceptions import InvalidParameterError

# (a, b) plotting-position constants: m = a + p * (n + 1 - a - b)
_CONTINUOUS_AB = {
    4: (0.0, 1.0),
    5: (0.5, 0.5),
    6: (0.0, 0.0),
    7: (1.0, 1.0),
    8: (1.0 / 3.0, 1.0 / 3.0),
    9: (3.0 / 8.0, 3.0 / 8.0),
}

_FUZZ = 4.0 * np.finfo(np.float64).eps


def sample_quantile(x_sorted: NDArray, probs: NDArray, qtype: int = 7) -> NDArray:
    """
    Quantiles of a sorted sample.

    Parameters
    ----------
    x_sorted : NDArray
        1D sorted array with no NaN values.
    probs : NDArray
        1D array of probabilities in [0, 1].
    qtype : int
        Hyndman-Fan type 1-9.

    Returns
    -------
    NDArray
        One quantile per probability; NaN for an empty sample.
    """
    if qtype not in range(1, 10):
        raise InvalidParameterError(
            f"quantile type must be 1-9, got {qtype}", name='type', value=qtype
        )

    probs = np.asarray(probs, dtype=np.float64)
    n = len(x_sorted)
    if n == 0:
        return np.full(len(probs), np.nan)
    if n == 1:
        return np.full(len(probs), float(x_sorted[0]))

    if qtype in _CONTINUOUS_AB:
        return _continuous(x_sorted, probs, *_CONTINUOUS_AB[qtype])
    return np.array([_discontinuous(x_sorted, p, qtype) for p in probs])


def _continuous(x: NDArray, probs: NDArray, a: float, b: float) -> NDArray:
    n = len(x)
    m = a + probs * (n + 1.0 - a - b)
    j = np.floor(m + _FUZZ).astype(np.int64)
    h = m - j
    h = np.where(np.abs(h) < _FUZZ, 0.0, h)
    h = np.where(np.abs(h - 1.0) < _FUZZ, 1.0, h)

    # m is a 1-based position: j indexes x[j-1], j+1 indexes x[j]
    lo = np.clip(j - 1, 0, n - 1)
    hi = np.clip(j, 0, n - 1)
    out = (1.0 - h) * x[lo] + h * x[hi]
    out = np.where(j < 1, x[0], out)
    out = np.where(j >= n, x[n - 1], out)
    return out


def _discontinuous(x: NDArray, p: float, qtype: int) -> float:
    n = len(x)
    m = n * p - 0.5 if qtype == 3 else n * p
    j = int(math.floor(m + _FUZZ))
    on_point = abs(m - j) < _FUZZ

    if qtype == 1:
        h = 0.0 if on_point or m <= j else 1.0
    elif qtype == 2:
        h = 0.5 if on_point else (1.0 if m > j else 0.0)
    else:
        # round half to even
        h = 0.0 if on_point and j % 2 == 0 else 1.0

    lo = max(0, min(j - 1, n - 1))
    hi = max(0, min(j, n - 1))
    return float((1.0 - h) * x[lo] + h * x[hi])
