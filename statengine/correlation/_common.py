"""
Common types for correlation analysis.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

CORRELATION_METHODS = ('pearson', 'spearman')


@dataclass(frozen=True)
class CorrelationParams:
    """
    Correlation of two variables.

    p_value comes from t = r sqrt((n - 2) / (1 - r^2)) with n - 2 df;
    confidence_interval from the Fisher z transform (NaN for n <= 3).
    """
    method: str
    r: float
    t_statistic: float
    df: int
    p_value: float
    n: int
    confidence_interval: tuple[float, float]
    confidence_level: float
    alpha: float
    n_excluded: int

    @property
    def significant(self) -> bool:
        return bool(self.p_value < self.alpha)


@dataclass(frozen=True)
class CorrelationMatrixParams:
    """
    Pairwise correlation matrix.

    matrix is symmetric with unit diagonal; entries with fewer than two
    shared complete rows are NaN. p_values has NaN on the diagonal.
    """
    method: str
    variables: tuple[str, ...]
    matrix: NDArray[np.floating[Any]]
    p_values: NDArray[np.floating[Any]]
    pairwise_n: NDArray[np.integer[Any]]
