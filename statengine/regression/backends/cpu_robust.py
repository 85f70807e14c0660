"""
CPU backend for outlier-resistant straight-line fits.

Theil-Sen:
    slope = median of pairwise slopes (y_j - y_i) / (x_j - x_i)
    intercept = median(y) - slope * median(x)

Huber M-estimation via IRLS, starting from OLS:
    For iteration 1..max_iter:
        r = y - X b
        s = MAD(r) / 0.6745                  # robust scale
        u = r / s
        w = 1 if |u| <= c else c / |u|       # c = 1.345
        Solve WLS: min_b || sqrt(w) (y - X b) ||^2 via QR
        Check: max |b_new - b| <= tol * (max |b| + tol)
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.core.compute.linalg.qr import qr_solve_cpu
from statengine.regression._common import (
    RobustRegressionParams,
    HUBER_TUNING,
    HUBER_MAX_ITER,
    MAD_NORMAL_CONSTANT,
)
from statengine.regression.design import RegressionDesign


class CPURobustBackend:
    """CPU backend for Theil-Sen and Huber regression."""

    @property
    def name(self) -> str:
        return 'cpu_robust'

    def solve(
        self,
        design: RegressionDesign,
        tol: float = 1e-8,
        max_iter: int = HUBER_MAX_ITER,
    ) -> Result[RobustRegressionParams]:
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section(design.method):
            if design.method == 'theil_sen':
                params = self._theil_sen(design, warnings_list)
            else:
                params = self._huber(design, tol, max_iter, warnings_list)

        timer.stop()

        return Result(
            params=params,
            info={'method': design.method, 'n': design.n, 'iterations': params.iterations},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _theil_sen(
        self,
        design: RegressionDesign,
        warnings_list: list[str],
    ) -> RobustRegressionParams:
        x, y = design.x, design.y
        if np.ptp(x) == 0:
            warnings_list.append("all x values are identical; slope is undefined")
            return RobustRegressionParams(
                method='theil_sen', slope=np.nan, intercept=np.nan, n=design.n,
                iterations=0, converged=True, scale=np.nan, weights=None,
                slope_interval=(np.nan, np.nan),
            )

        res = sp_stats.theilslopes(y, x, alpha=0.95)
        resid = y - (res.intercept + res.slope * x)
        return RobustRegressionParams(
            method='theil_sen',
            slope=float(res.slope),
            intercept=float(res.intercept),
            n=design.n,
            iterations=0,
            converged=True,
            scale=_mad_scale(resid),
            weights=None,
            slope_interval=(float(res.low_slope), float(res.high_slope)),
        )

    def _huber(
        self,
        design: RegressionDesign,
        tol: float,
        max_iter: int,
        warnings_list: list[str],
    ) -> RobustRegressionParams:
        X, y = design.X, design.y
        n = design.n
        c = HUBER_TUNING

        beta, _ = qr_solve_cpu(X, y, check_rank=True)
        w = np.ones(n)
        scale = np.nan
        converged = False
        iteration = 0

        for iteration in range(1, max_iter + 1):
            resid = y - X @ beta
            scale = _mad_scale(resid)
            if scale == 0:
                # At least half the points lie exactly on the current line.
                converged = True
                break

            u = np.abs(resid / scale)
            w = np.where(u <= c, 1.0, c / np.maximum(u, c))

            sqrt_w = np.sqrt(w)
            beta_new, _ = qr_solve_cpu(X * sqrt_w[:, np.newaxis], y * sqrt_w, check_rank=False)

            change = float(np.max(np.abs(beta_new - beta)))
            beta = beta_new
            if change <= tol * (float(np.max(np.abs(beta))) + tol):
                converged = True
                break

        if not converged:
            warnings_list.append(
                f"Huber IRLS did not converge in {max_iter} iterations"
            )

        return RobustRegressionParams(
            method='huber',
            slope=float(beta[1]),
            intercept=float(beta[0]),
            n=n,
            iterations=iteration,
            converged=converged,
            scale=float(scale),
            weights=w,
            slope_interval=None,
        )


def _mad_scale(resid: NDArray[np.floating[Any]]) -> float:
    """Normalized median absolute deviation of residuals."""
    return float(np.median(np.abs(resid - np.median(resid))) / MAD_NORMAL_CONSTANT)
