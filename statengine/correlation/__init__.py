"""
Correlation analysis.

Public API:
    pearson(x, y)                 - Pearson r with t-test and Fisher interval
    spearman(x, y)                - Spearman rho
    correlation(x, y, method)
    correlation_matrix(variables) - pairwise-deletion correlation matrix
"""

from statengine.correlation.solvers import (
    correlation,
    pearson,
    spearman,
    correlation_matrix,
)
from statengine.correlation.design import CorrelationDesign
from statengine.correlation._common import CorrelationParams, CorrelationMatrixParams
from statengine.correlation.solution import CorrelationSolution, CorrelationMatrixSolution

__all__ = [
    "correlation",
    "pearson",
    "spearman",
    "correlation_matrix",
    "CorrelationDesign",
    "CorrelationParams",
    "CorrelationMatrixParams",
    "CorrelationSolution",
    "CorrelationMatrixSolution",
]
