"""
Residual diagnostics for OLS fits.

All functions take the full design matrix X (with intercept column) and
the residual vector of a fit on it.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from statengine.core.compute.linalg.qr import QRResult, qr_solve_cpu, hat_diagonal
from statengine.regression._common import DiagnosticsParams


def durbin_watson(residuals: NDArray[np.floating[Any]]) -> float:
    """sum (e_t - e_{t-1})^2 / sum e_t^2; near 2 means no first-order autocorrelation."""
    rss = float(residuals @ residuals)
    if rss == 0:
        return np.nan
    return float(np.sum(np.diff(residuals) ** 2) / rss)


def jarque_bera(residuals: NDArray[np.floating[Any]]) -> tuple[float, float]:
    """Jarque-Bera normality statistic and chi-square(2) p-value."""
    if np.ptp(residuals) == 0:
        return np.nan, np.nan
    res = sp_stats.jarque_bera(residuals)
    return float(res.statistic), float(np.clip(res.pvalue, 0.0, 1.0))


def breusch_pagan(
    X: NDArray[np.floating[Any]],
    residuals: NDArray[np.floating[Any]],
) -> tuple[float, float]:
    """
    Studentized (Koenker) Breusch-Pagan test.

    Regress e^2 on X; LM = n R^2 of that auxiliary regression, chi-square
    with p degrees of freedom (predictors excluding the intercept).
    """
    n, k = X.shape
    e2 = residuals ** 2
    tss = float(np.sum((e2 - e2.mean()) ** 2))
    if tss == 0:
        return np.nan, np.nan
    gamma, _ = qr_solve_cpu(X, e2, check_rank=False)
    aux_resid = e2 - X @ gamma
    r2 = 1.0 - float(aux_resid @ aux_resid) / tss
    lm = n * r2
    return float(lm), float(sp_stats.chi2.sf(lm, k - 1))


def variance_inflation(
    X: NDArray[np.floating[Any]],
    names: tuple[str, ...],
) -> dict[str, float] | None:
    """VIF_j = 1 / (1 - R_j^2) from regressing predictor j on the others."""
    p = X.shape[1] - 1
    if p < 2:
        return None
    vif: dict[str, float] = {}
    for j in range(1, p + 1):
        target = X[:, j]
        others = np.delete(X, j, axis=1)
        coef, _ = qr_solve_cpu(others, target, check_rank=False)
        resid = target - others @ coef
        tss = float(np.sum((target - target.mean()) ** 2))
        r2 = 1.0 - float(resid @ resid) / tss if tss > 0 else 1.0
        vif[names[j - 1]] = np.inf if r2 >= 1.0 else float(1.0 / (1.0 - r2))
    return vif


def compute_diagnostics(
    X: NDArray[np.floating[Any]],
    residuals: NDArray[np.floating[Any]],
    qr_result: QRResult,
    names: tuple[str, ...],
) -> DiagnosticsParams:
    """Influence and residual diagnostics from an existing QR factorization."""
    n, k = X.shape
    rss = float(residuals @ residuals)
    s2 = rss / (n - k)

    h = hat_diagonal(qr_result)
    with np.errstate(divide='ignore', invalid='ignore'):
        std_resid = residuals / np.sqrt(s2 * (1.0 - h))
        cooks = std_resid ** 2 * h / (k * (1.0 - h))
    if s2 == 0:
        std_resid = np.zeros(n)
        cooks = np.zeros(n)

    jb, jb_p = jarque_bera(residuals)
    bp, bp_p = breusch_pagan(X, residuals)

    return DiagnosticsParams(
        standardized_residuals=std_resid,
        leverage=h,
        cooks_distance=cooks,
        durbin_watson=durbin_watson(residuals),
        jarque_bera=jb,
        jarque_bera_p_value=jb_p,
        breusch_pagan=bp,
        breusch_pagan_p_value=bp_p,
        vif=variance_inflation(X, names),
    )
