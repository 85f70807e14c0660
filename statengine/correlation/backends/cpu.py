"""
CPU backend for correlation analysis.

Spearman's rho is Pearson's r on average ranks, so both methods share
one code path after ranking.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.core.compute.ranks import average_ranks
from statengine.correlation._common import CorrelationParams, CorrelationMatrixParams
from statengine.correlation.design import CorrelationDesign


def pearson_r(x: NDArray[np.floating[Any]], y: NDArray[np.floating[Any]]) -> float:
    """Pearson product-moment correlation; NaN if either variable is constant."""
    dx = x - np.mean(x)
    dy = y - np.mean(y)
    denom = np.sqrt(np.sum(dx ** 2) * np.sum(dy ** 2))
    if denom == 0:
        return np.nan
    r = float(np.sum(dx * dy) / denom)
    return float(np.clip(r, -1.0, 1.0))


def r_significance(r: float, n: int) -> tuple[float, float]:
    """t statistic and two-sided p-value for H0: rho = 0, df = n - 2."""
    df = n - 2
    if np.isnan(r) or df <= 0:
        return np.nan, np.nan
    if abs(r) >= 1.0:
        return float(np.copysign(np.inf, r)), 0.0
    t = r * np.sqrt(df / (1.0 - r ** 2))
    p = 2.0 * sp_stats.t.sf(abs(t), df)
    return float(t), float(np.clip(p, 0.0, 1.0))


def fisher_interval(r: float, n: int, conf_level: float) -> tuple[float, float]:
    """Confidence interval for rho via z = atanh(r), se = 1 / sqrt(n - 3)."""
    if np.isnan(r) or n <= 3:
        return (np.nan, np.nan)
    if abs(r) >= 1.0:
        return (r, r)
    z = np.arctanh(r)
    half = sp_stats.norm.ppf(0.5 + conf_level / 2.0) / np.sqrt(n - 3)
    return (float(np.tanh(z - half)), float(np.tanh(z + half)))


class CPUCorrelationBackend:
    """CPU backend for correlation."""

    @property
    def name(self) -> str:
        return 'cpu_correlation'

    def solve(self, design: CorrelationDesign) -> Result:
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section(design.kind):
            if design.kind == 'pair':
                params = self._pair(design, warnings_list)
            elif design.kind == 'matrix':
                params = self._matrix(design, warnings_list)
            else:
                raise ValueError(f"Unknown design kind: {design.kind!r}")

        timer.stop()

        return Result(
            params=params,
            info={'method': design.method, 'kind': design.kind},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _transform(self, x: NDArray, method: str) -> NDArray:
        return average_ranks(x) if method == 'spearman' else x

    def _pair(self, design: CorrelationDesign, warnings_list: list[str]) -> CorrelationParams:
        x = self._transform(design.x, design.method)
        y = self._transform(design.y, design.method)
        n = len(x)

        r = pearson_r(x, y)
        if np.isnan(r):
            warnings_list.append("standard deviation is zero; correlation is undefined")
        t, p = r_significance(r, n)
        conf_level = 1.0 - design.alpha

        return CorrelationParams(
            method=design.method,
            r=r,
            t_statistic=t,
            df=n - 2,
            p_value=p,
            n=n,
            confidence_interval=fisher_interval(r, n, conf_level),
            confidence_level=conf_level,
            alpha=design.alpha,
            n_excluded=design.n_excluded,
        )

    def _matrix(self, design: CorrelationDesign, warnings_list: list[str]) -> CorrelationMatrixParams:
        data = design.data
        p = data.shape[1]
        matrix = np.eye(p)
        p_values = np.full((p, p), np.nan)
        pairwise_n = np.zeros((p, p), dtype=np.int64)
        valid = ~np.isnan(data)

        for i in range(p):
            pairwise_n[i, i] = int(np.sum(valid[:, i]))
            for j in range(i + 1, p):
                mask = valid[:, i] & valid[:, j]
                n_ij = int(np.sum(mask))
                pairwise_n[i, j] = pairwise_n[j, i] = n_ij

                if n_ij < 2:
                    r = np.nan
                    warnings_list.append(
                        f"{design.variables[i]} / {design.variables[j]}: "
                        f"fewer than 2 complete pairs"
                    )
                else:
                    xi = self._transform(data[mask, i], design.method)
                    xj = self._transform(data[mask, j], design.method)
                    r = pearson_r(xi, xj)
                _, p_ij = r_significance(r, n_ij)
                matrix[i, j] = matrix[j, i] = r
                p_values[i, j] = p_values[j, i] = p_ij

        return CorrelationMatrixParams(
            method=design.method,
            variables=design.variables,
            matrix=matrix,
            p_values=p_values,
            pairwise_n=pairwise_n,
        )
