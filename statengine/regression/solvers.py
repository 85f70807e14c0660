"""
Public entry points for regression.
"""

from __future__ import annotations

import warnings
from typing import Literal, Mapping, Sequence
from numpy.typing import ArrayLike

from statengine.regression.design import RegressionDesign
from statengine.regression.solution import (
    RegressionSolution,
    DiagnosticsSolution,
    RobustRegressionSolution,
)
from statengine.regression.backends.cpu import CPUQRBackend
from statengine.regression.backends.cpu_robust import CPURobustBackend

RobustMethod = Literal['theil_sen', 'huber']


def fit(
    X: ArrayLike | Mapping[str, ArrayLike] | RegressionDesign,
    y: ArrayLike | None = None,
    *,
    names: Sequence[str] | None = None,
    alpha: float = 0.05,
) -> RegressionSolution:
    """
    Ordinary least squares with an intercept.

    An intercept column is always added; X holds predictors only. Rows
    with a missing value in X or y are dropped.

    Args:
        X: Predictors: 1D sample, 2D array, mapping name -> column or DataFrame
        y: Response
        names: Predictor names (default 'X' for one predictor, 'X1'.. otherwise)
        alpha: Level for coefficient confidence intervals and assumption checks

    Returns:
        RegressionSolution with coefficient table, fit statistics,
        assumption checks and diagnostics

    Raises:
        InsufficientDataError: fewer than p + 2 complete rows
        MismatchedLengthsError: X and y differ in length
        SingularMatrixError: predictors are perfectly collinear

    Example:
        >>> result = fit([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
        >>> round(result.slope, 6)
        2.0
    """
    if isinstance(X, RegressionDesign):
        design = X
    else:
        design = RegressionDesign.for_fit(X, y, names=names, alpha=alpha)
    result = CPUQRBackend().solve(design)
    return RegressionSolution(_result=result, _design=design)


def linear_regression(
    x: ArrayLike,
    y: ArrayLike,
    *,
    alpha: float = 0.05,
) -> RegressionSolution:
    """Simple linear regression of y on one predictor; coefficients 'Intercept' and 'X'."""
    return fit(x, y, names=('X',), alpha=alpha)


def regression_diagnostics(
    X: ArrayLike | Mapping[str, ArrayLike] | None = None,
    y: ArrayLike | None = None,
    *,
    fit_result: RegressionSolution | None = None,
) -> DiagnosticsSolution:
    """
    Residual and influence diagnostics.

    Reuses fit_result when given; otherwise fits X, y first.
    """
    if fit_result is None:
        fit_result = fit(X, y)
    return DiagnosticsSolution(_result=fit_result._result, _design=fit_result._design)


def robust_fit(
    x: ArrayLike,
    y: ArrayLike,
    *,
    method: RobustMethod = 'theil_sen',
    max_iter: int = 50,
    tol: float = 1e-8,
) -> RobustRegressionSolution:
    """
    Outlier-resistant straight-line fit.

    'theil_sen' takes the median of pairwise slopes; 'huber' runs IRLS
    with Huber weights (c = 1.345) and a MAD scale, starting from OLS.

    Raises:
        InvalidParameterError: unknown method
        InsufficientDataError: fewer than 3 complete pairs
    """
    design = RegressionDesign.for_robust(x, y, method=method)
    result = CPURobustBackend().solve(design, tol=tol, max_iter=max_iter)

    if not result.params.converged:
        warnings.warn(
            f"Huber IRLS did not converge after {result.params.iterations} iterations",
            RuntimeWarning,
            stacklevel=2,
        )

    return RobustRegressionSolution(_result=result, _design=design)
