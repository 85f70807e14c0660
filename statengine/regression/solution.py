"""
Regression solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from statengine.core.assumptions import AssumptionCheck
from statengine.core.result import Result
from statengine.core.solution import ResultAccessors, format_pvalue, significance_stars
from statengine.regression._common import (
    Coefficient,
    DiagnosticsParams,
    RegressionParams,
    RobustRegressionParams,
)

if TYPE_CHECKING:
    from statengine.regression.design import RegressionDesign


@dataclass
class RegressionSolution(ResultAccessors):
    """
    User-facing OLS results.

    test_kind is 'linear_regression' for one predictor and
    'multiple_regression' otherwise.
    """
    _result: Result[RegressionParams]
    _design: 'RegressionDesign | None' = None

    @property
    def test_kind(self) -> str:
        return self._result.params.test_kind

    @property
    def coefficient_table(self) -> tuple[Coefficient, ...]:
        return self._result.params.coefficients

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(c.name for c in self._result.params.coefficients)

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Estimates, intercept first."""
        return np.array([c.estimate for c in self._result.params.coefficients])

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        return np.array([c.standard_error for c in self._result.params.coefficients])

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        return np.array([c.t_statistic for c in self._result.params.coefficients])

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        return np.array([c.p_value for c in self._result.params.coefficients])

    @property
    def intercept(self) -> float:
        return self._result.params.coefficients[0].estimate

    @property
    def slope(self) -> float:
        """Coefficient of the first predictor."""
        return self._result.params.coefficients[1].estimate

    def coefficient(self, name: str) -> Coefficient:
        """Coefficient row by name."""
        for c in self._result.params.coefficients:
            if c.name == name:
                return c
        raise KeyError(name)

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def adjusted_r_squared(self) -> float:
        return self._result.params.adjusted_r_squared

    @property
    def residual_std_error(self) -> float:
        return self._result.params.residual_std_error

    @property
    def f_statistic(self) -> float:
        return self._result.params.f_statistic

    @property
    def statistic(self) -> float:
        """Overall F statistic."""
        return self._result.params.f_statistic

    @property
    def p_value(self) -> float:
        """p-value of the overall F test."""
        return self._result.params.f_p_value

    @property
    def df(self) -> tuple[int, int]:
        return (self._result.params.df_model, self._result.params.df_residual)

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def assumptions(self) -> tuple[AssumptionCheck, ...]:
        return self._result.params.assumptions

    @property
    def diagnostics(self) -> DiagnosticsParams:
        return self._result.params.diagnostics

    def predict(self, X: Any) -> NDArray[np.floating[Any]]:
        """Predicted response for new predictor values (no intercept column)."""
        X_new = np.asarray(X, dtype=np.float64)
        if X_new.ndim == 1:
            X_new = X_new.reshape(-1, 1) if self._result.params.df_model == 1 else X_new.reshape(1, -1)
        return self.coefficients[0] + X_new @ self.coefficients[1:]

    def summary(self) -> str:
        """R lm-style summary."""
        p = self._result.params
        lines = [
            "Linear Regression Results",
            "=" * 70,
            f"Observations: {p.n}" + (f" ({p.n_excluded} excluded)" if p.n_excluded else ""),
            "",
            "Coefficients:",
            f"{'':<14} {'Estimate':>12} {'Std. Error':>12} {'t value':>9} {'Pr(>|t|)':>12}",
        ]
        for c in p.coefficients:
            lines.append(
                f"{c.name:<14} {c.estimate:>12.6g} {c.standard_error:>12.6g} "
                f"{c.t_statistic:>9.3f} {format_pvalue(c.p_value):>12} "
                f"{significance_stars(c.p_value)}"
            )
        lines.extend([
            "---",
            "Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 '.' 0.1 ' ' 1",
            "",
            f"Residual standard error: {p.residual_std_error:.4g} on {p.df_residual} degrees of freedom",
            f"Multiple R-squared:  {p.r_squared:.4g},\tAdjusted R-squared:  {p.adjusted_r_squared:.4g}",
            f"F-statistic: {p.f_statistic:.4g} on {p.df_model} and {p.df_residual} DF,  "
            f"p-value: {format_pvalue(p.f_p_value)}",
        ])
        if p.assumptions:
            lines.append("")
            lines.append("Assumptions:")
            lines.extend(f"  {a}" for a in p.assumptions)
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"RegressionSolution(n={p.n}, p={p.df_model}, "
            f"r_squared={p.r_squared:.4f})"
        )


@dataclass
class DiagnosticsSolution(ResultAccessors):
    """Residual, influence and collinearity diagnostics of an OLS fit."""
    _result: Result[RegressionParams]
    _design: 'RegressionDesign | None' = None

    @property
    def _diag(self) -> DiagnosticsParams:
        return self._result.params.diagnostics

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def standardized_residuals(self) -> NDArray[np.floating[Any]]:
        return self._diag.standardized_residuals

    @property
    def leverage(self) -> NDArray[np.floating[Any]]:
        return self._diag.leverage

    @property
    def cooks_distance(self) -> NDArray[np.floating[Any]]:
        return self._diag.cooks_distance

    @property
    def durbin_watson(self) -> float:
        return self._diag.durbin_watson

    @property
    def jarque_bera(self) -> float:
        return self._diag.jarque_bera

    @property
    def jarque_bera_p_value(self) -> float:
        return self._diag.jarque_bera_p_value

    @property
    def breusch_pagan(self) -> float:
        return self._diag.breusch_pagan

    @property
    def breusch_pagan_p_value(self) -> float:
        return self._diag.breusch_pagan_p_value

    @property
    def vif(self) -> dict[str, float] | None:
        return self._diag.vif

    def influential(self, threshold: float | None = None) -> NDArray[np.intp]:
        """Indices with Cook's distance above threshold (default 4 / n)."""
        d = self._diag.cooks_distance
        if threshold is None:
            threshold = 4.0 / len(d)
        return np.flatnonzero(d > threshold)

    def summary(self) -> str:
        d = self._diag
        lines = [
            "Regression Diagnostics",
            "=" * 50,
            f"Durbin-Watson:   {d.durbin_watson:.4f}",
            f"Jarque-Bera:     {d.jarque_bera:.4f}  (p = {format_pvalue(d.jarque_bera_p_value)})",
            f"Breusch-Pagan:   {d.breusch_pagan:.4f}  (p = {format_pvalue(d.breusch_pagan_p_value)})",
            f"Max leverage:    {np.max(d.leverage):.4f}",
            f"Max Cook's D:    {np.nanmax(d.cooks_distance):.4f}",
        ]
        if d.vif is not None:
            lines.append("VIF:")
            lines.extend(f"  {name:<12} {v:.3f}" for name, v in d.vif.items())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DiagnosticsSolution(n={len(self.residuals)}, durbin_watson={self.durbin_watson:.4f})"


@dataclass
class RobustRegressionSolution(ResultAccessors):
    """Theil-Sen or Huber straight-line fit."""
    _result: Result[RobustRegressionParams]
    _design: 'RegressionDesign | None' = None

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def scale(self) -> float:
        """MAD-based residual scale."""
        return self._result.params.scale

    @property
    def weights(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.weights

    @property
    def slope_interval(self) -> tuple[float, float] | None:
        return self._result.params.slope_interval

    def predict(self, x: Any) -> NDArray[np.floating[Any]]:
        return self.intercept + self.slope * np.asarray(x, dtype=np.float64)

    def summary(self) -> str:
        p = self._result.params
        title = "Theil-Sen regression" if p.method == 'theil_sen' else "Huber M-estimation (IRLS)"
        lines = [
            title,
            f"n = {p.n}",
            f"intercept = {p.intercept:.6g}",
            f"slope     = {p.slope:.6g}",
        ]
        if p.slope_interval is not None:
            lo, hi = p.slope_interval
            lines.append(f"95% slope interval: {lo:.6g}  {hi:.6g}")
        if p.method == 'huber':
            lines.append(f"iterations = {p.iterations} ({'converged' if p.converged else 'not converged'})")
            lines.append(f"downweighted points = {int(np.sum(p.weights < 1.0))}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"RobustRegressionSolution(method={p.method!r}, "
            f"slope={p.slope:.4g}, intercept={p.intercept:.4g})"
        )
