"""
Public entry points for correlation analysis.
"""

from __future__ import annotations

from typing import Literal, Mapping
from numpy.typing import ArrayLike

from statengine.correlation.design import CorrelationDesign
from statengine.correlation.solution import CorrelationSolution, CorrelationMatrixSolution
from statengine.correlation.backends.cpu import CPUCorrelationBackend

CorrelationMethod = Literal['pearson', 'spearman']


def correlation(
    x: ArrayLike | CorrelationDesign,
    y: ArrayLike | None = None,
    *,
    method: CorrelationMethod = 'pearson',
    alpha: float = 0.05,
) -> CorrelationSolution:
    """
    Correlation of two paired variables with a t-based p-value.

    Rows with a missing value on either side are dropped; at least 3
    complete pairs are required. Symmetric in x and y.
    """
    if isinstance(x, CorrelationDesign):
        design = x
    else:
        design = CorrelationDesign.for_pair(x, y, method=method, alpha=alpha)
    result = CPUCorrelationBackend().solve(design)
    return CorrelationSolution(_result=result, _design=design)


def pearson(x: ArrayLike, y: ArrayLike, *, alpha: float = 0.05) -> CorrelationSolution:
    """Pearson's product-moment correlation."""
    return correlation(x, y, method='pearson', alpha=alpha)


def spearman(x: ArrayLike, y: ArrayLike, *, alpha: float = 0.05) -> CorrelationSolution:
    """Spearman's rank correlation (Pearson on average ranks)."""
    return correlation(x, y, method='spearman', alpha=alpha)


def correlation_matrix(
    variables: Mapping[str, ArrayLike] | CorrelationDesign,
    *,
    method: CorrelationMethod = 'pearson',
) -> CorrelationMatrixSolution:
    """
    Pairwise correlation matrix.

    Each pair uses the rows where both variables are present. Accepts a
    mapping name -> column or a pandas DataFrame.
    """
    if isinstance(variables, CorrelationDesign):
        design = variables
    else:
        design = CorrelationDesign.for_matrix(variables, method=method)
    result = CPUCorrelationBackend().solve(design)
    return CorrelationMatrixSolution(_result=result, _design=design)
