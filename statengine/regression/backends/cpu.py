"""
CPU backend for ordinary least squares.

Solves via QR decomposition of the design matrix, then derives the
coefficient table, goodness of fit, assumption checks and diagnostics
from the same factorization.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.core.compute.linalg.qr import qr_solve_cpu, xtx_inverse
from statengine.core.assumptions import (
    AssumptionCheck,
    normality_check,
    variance_ratio_check,
)
from statengine.regression._common import Coefficient, RegressionParams
from statengine.regression._diagnostics import compute_diagnostics
from statengine.regression.design import RegressionDesign

LINEARITY_MIN_R = 0.3


class CPUQRBackend:
    """
    CPU backend using QR decomposition.

    Raises SingularMatrixError for rank-deficient designs.
    """

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, design: RegressionDesign) -> Result[RegressionParams]:
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        X, y = design.X, design.y
        n, p = design.n, design.p
        df_resid = n - p - 1

        with timer.section('solve'):
            beta, qr_result = qr_solve_cpu(X, y, check_rank=True)

        with timer.section('residuals'):
            fitted = X @ beta
            residuals = y - fitted
            rss = float(residuals @ residuals)
            tss = float(np.sum((y - np.mean(y)) ** 2))

        with timer.section('inference'):
            sigma2 = rss / df_resid
            se = np.sqrt(sigma2 * np.diag(xtx_inverse(qr_result)))
            coefficients = _coefficient_table(
                ('Intercept',) + design.names, beta, se, df_resid, design.alpha,
            )

            if tss == 0:
                warnings_list.append("response is constant; R-squared is undefined")
                r2 = np.nan
                adj_r2 = np.nan
            else:
                r2 = 1.0 - rss / tss
                adj_r2 = 1.0 - (1.0 - r2) * (n - 1) / df_resid

            f_stat, f_p = _overall_f(tss, rss, p, df_resid)
            if tss > 0 and sigma2 < (np.mean(fitted) ** 2 + np.var(fitted, ddof=1)) * 1e-30:
                warnings_list.append("essentially perfect fit: summary may be unreliable")

        with timer.section('assumptions'):
            assumptions = _regression_assumptions(y, fitted, residuals, design.alpha)

        with timer.section('diagnostics'):
            diagnostics = compute_diagnostics(X, residuals, qr_result, design.names)

        timer.stop()

        params = RegressionParams(
            test_kind='linear_regression' if p == 1 else 'multiple_regression',
            coefficients=coefficients,
            r_squared=float(r2),
            adjusted_r_squared=float(adj_r2),
            residual_std_error=float(np.sqrt(sigma2)),
            f_statistic=f_stat,
            f_p_value=f_p,
            df_model=p,
            df_residual=df_resid,
            rss=rss,
            tss=tss,
            n=n,
            n_excluded=design.n_excluded,
            alpha=design.alpha,
            residuals=residuals,
            fitted_values=fitted,
            assumptions=assumptions,
            diagnostics=diagnostics,
        )

        info: dict[str, Any] = {
            'method': 'qr',
            'rank': qr_result.rank,
            'n': n,
            'p': p,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


def _coefficient_table(
    names: tuple[str, ...],
    beta: NDArray[np.floating[Any]],
    se: NDArray[np.floating[Any]],
    df: int,
    alpha: float,
) -> tuple[Coefficient, ...]:
    t_crit = sp_stats.t.ppf(1.0 - alpha / 2.0, df)
    rows = []
    for name, b, s in zip(names, beta, se):
        if s == 0:
            t = np.inf if b != 0 else np.nan
            p = 0.0 if b != 0 else np.nan
        else:
            t = b / s
            p = float(np.clip(2.0 * sp_stats.t.sf(abs(t), df), 0.0, 1.0))
        rows.append(Coefficient(
            name=name,
            estimate=float(b),
            standard_error=float(s),
            t_statistic=float(t),
            p_value=float(p),
            confidence_interval=(float(b - t_crit * s), float(b + t_crit * s)),
        ))
    return tuple(rows)


def _overall_f(tss: float, rss: float, df_model: int, df_resid: int) -> tuple[float, float]:
    """F = (SSR / p) / (RSS / df_resid) against F(p, df_resid)."""
    ssr = tss - rss
    if tss == 0:
        return np.nan, np.nan
    if rss == 0:
        return np.inf, 0.0
    f_stat = (ssr / df_model) / (rss / df_resid)
    return float(f_stat), float(sp_stats.f.sf(f_stat, df_model, df_resid))


def _regression_assumptions(
    y: NDArray[np.floating[Any]],
    fitted: NDArray[np.floating[Any]],
    residuals: NDArray[np.floating[Any]],
    alpha: float,
) -> tuple[AssumptionCheck, ...]:
    """
    Linearity via |corr(fitted, y)|, residual normality via Shapiro-Wilk,
    homoscedasticity via the variance ratio of residuals split at the
    median fitted value.
    """
    if np.ptp(y) == 0 or np.ptp(fitted) == 0:
        linearity = AssumptionCheck(
            name="Linearity",
            test_used="correlation",
            verdict='warning',
            message="response or fitted values are constant; linearity not assessed",
        )
    else:
        r = float(np.corrcoef(fitted, y)[0, 1])
        strong = abs(r) > LINEARITY_MIN_R
        linearity = AssumptionCheck(
            name="Linearity",
            test_used="correlation",
            verdict='passed' if strong else 'warning',
            statistic=r,
            message=(
                "linear relationship appears reasonable" if strong
                else "weak linear relationship; consider a non-linear model"
            ),
        )

    if len(residuals) < 4:
        homoscedasticity = AssumptionCheck(
            name="Homoscedasticity",
            test_used="variance ratio",
            verdict='warning',
            message="fewer than 4 residuals; homoscedasticity not assessed",
        )
    else:
        order = np.argsort(fitted, kind='stable')
        half = len(order) // 2
        homoscedasticity = variance_ratio_check(
            residuals[order[:half]], residuals[order[half:]], "Homoscedasticity",
        )

    return (
        linearity,
        normality_check(residuals, alpha, label="residuals"),
        homoscedasticity,
    )
