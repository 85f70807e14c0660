"""
Common types for regression.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from statengine.core.assumptions import AssumptionCheck

ROBUST_METHODS = ('theil_sen', 'huber')

HUBER_TUNING = 1.345
HUBER_MAX_ITER = 50
MAD_NORMAL_CONSTANT = 0.6745


@dataclass(frozen=True)
class Coefficient:
    """One row of the coefficient table."""
    name: str
    estimate: float
    standard_error: float
    t_statistic: float
    p_value: float
    confidence_interval: tuple[float, float]


@dataclass(frozen=True)
class DiagnosticsParams:
    """
    Residual and influence diagnostics of an OLS fit.

    standardized_residuals are internally studentized: e_i / (s sqrt(1 - h_i)).
    vif is None for a single predictor.
    """
    standardized_residuals: NDArray[np.floating[Any]]
    leverage: NDArray[np.floating[Any]]
    cooks_distance: NDArray[np.floating[Any]]
    durbin_watson: float
    jarque_bera: float
    jarque_bera_p_value: float
    breusch_pagan: float
    breusch_pagan_p_value: float
    vif: dict[str, float] | None


@dataclass(frozen=True)
class RegressionParams:
    """
    Ordinary least squares fit with an intercept.

    df_model counts predictors (excluding the intercept);
    df_residual = n - df_model - 1.
    """
    test_kind: str
    coefficients: tuple[Coefficient, ...]
    r_squared: float
    adjusted_r_squared: float
    residual_std_error: float
    f_statistic: float
    f_p_value: float
    df_model: int
    df_residual: int
    rss: float
    tss: float
    n: int
    n_excluded: int
    alpha: float
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    assumptions: tuple[AssumptionCheck, ...]
    diagnostics: DiagnosticsParams


@dataclass(frozen=True)
class RobustRegressionParams:
    """
    Outlier-resistant straight-line fit.

    weights are the final IRLS weights for 'huber' and None for 'theil_sen';
    slope_interval is only available for 'theil_sen'.
    """
    method: str
    slope: float
    intercept: float
    n: int
    iterations: int
    converged: bool
    scale: float
    weights: NDArray[np.floating[Any]] | None
    slope_interval: tuple[float, float] | None
