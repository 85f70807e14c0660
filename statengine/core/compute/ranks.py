"""
Ranking utilities shared by the rank-based tests and Spearman correlation.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats


def average_ranks(x: ArrayLike) -> NDArray[np.floating[Any]]:
    """1-based ranks; tied values receive the average of their positions."""
    return sp_stats.rankdata(np.asarray(x, dtype=np.float64), method='average')


def tie_term(x: ArrayLike) -> float:
    """
    Sum of (t^3 - t) over groups of tied values.

    Zero when all values are distinct. Used to shrink the variance of
    rank statistics in the presence of ties.
    """
    _, counts = np.unique(np.asarray(x), return_counts=True)
    counts = counts.astype(np.float64)
    return float(np.sum(counts ** 3 - counts))


def has_ties(x: ArrayLike) -> bool:
    x = np.asarray(x)
    return len(np.unique(x)) < len(x)
