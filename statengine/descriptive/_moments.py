"""
Moment-based shape statistics and the sample mode.

Skewness and kurtosis are the bias-adjusted sample estimators
(G1 and G2, as in SAS/SPSS and e1071 type 2).
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


def sample_skewness(x: NDArray[np.floating[Any]]) -> float:
    """
    Bias-adjusted skewness.

        g1 = m3 / m2^1.5
        G1 = g1 * sqrt(n(n-1)) / (n-2)

    NaN when n < 3 or the data are constant.
    """
    n = len(x)
    if n < 3:
        return np.nan
    d = x - np.mean(x)
    m2 = np.sum(d ** 2) / n
    if m2 == 0:
        return np.nan
    m3 = np.sum(d ** 3) / n
    g1 = m3 / m2 ** 1.5
    return float(g1 * np.sqrt(n * (n - 1)) / (n - 2))


def sample_kurtosis(x: NDArray[np.floating[Any]]) -> float:
    """
    Bias-adjusted excess kurtosis.

        g2 = m4 / m2^2 - 3
        G2 = ((n-1) / ((n-2)(n-3))) * ((n+1) g2 + 6)

    NaN when n < 4 or the data are constant.
    """
    n = len(x)
    if n < 4:
        return np.nan
    d = x - np.mean(x)
    m2 = np.sum(d ** 2) / n
    if m2 == 0:
        return np.nan
    m4 = np.sum(d ** 4) / n
    g2 = m4 / m2 ** 2 - 3.0
    return float(((n - 1) / ((n - 2) * (n - 3))) * ((n + 1) * g2 + 6.0))


def sample_modes(x: NDArray[np.floating[Any]]) -> tuple[float, ...]:
    """
    All values tied for the highest frequency, ascending.

    Empty when every distinct value occurs equally often (including the
    empty sample), since then no value is more typical than another.
    """
    if len(x) == 0:
        return ()
    values, counts = np.unique(x, return_counts=True)
    top = counts.max()
    if np.all(counts == top):
        return ()
    return tuple(float(v) for v in values[counts == top])
