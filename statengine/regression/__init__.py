"""
Linear and robust regression.

Public API:
    fit(X, y, names=None)            -> RegressionSolution
    linear_regression(x, y)          -> RegressionSolution
    regression_diagnostics(X, y)     -> DiagnosticsSolution
    robust_fit(x, y, method=...)     -> RobustRegressionSolution

Example:
    >>> from statengine.regression import fit
    >>> result = fit(X, y)
    >>> print(result.summary())
"""

from statengine.regression.design import RegressionDesign
from statengine.regression._common import (
    Coefficient,
    DiagnosticsParams,
    RegressionParams,
    RobustRegressionParams,
)
from statengine.regression.solution import (
    RegressionSolution,
    DiagnosticsSolution,
    RobustRegressionSolution,
)
from statengine.regression.solvers import (
    fit,
    linear_regression,
    regression_diagnostics,
    robust_fit,
)

__all__ = [
    "fit",
    "linear_regression",
    "regression_diagnostics",
    "robust_fit",
    "RegressionDesign",
    "Coefficient",
    "DiagnosticsParams",
    "RegressionParams",
    "RobustRegressionParams",
    "RegressionSolution",
    "DiagnosticsSolution",
    "RobustRegressionSolution",
]
