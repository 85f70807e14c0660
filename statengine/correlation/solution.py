"""
Correlation solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from statengine.core.result import Result
from statengine.core.solution import ResultAccessors, format_pvalue
from statengine.correlation._common import CorrelationParams, CorrelationMatrixParams

if TYPE_CHECKING:
    from statengine.correlation.design import CorrelationDesign

_METHOD_TITLES = {
    'pearson': "Pearson's product-moment correlation",
    'spearman': "Spearman's rank correlation rho",
}


@dataclass
class CorrelationSolution(ResultAccessors):
    """Correlation between two variables."""
    _result: Result[CorrelationParams]
    _design: 'CorrelationDesign | None' = None

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def r(self) -> float:
        return self._result.params.r

    @property
    def coefficient(self) -> float:
        return self._result.params.r

    @property
    def t_statistic(self) -> float:
        return self._result.params.t_statistic

    @property
    def df(self) -> int:
        return self._result.params.df

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def confidence_interval(self) -> tuple[float, float]:
        return self._result.params.confidence_interval

    @property
    def significant(self) -> bool:
        return self._result.params.significant

    def summary(self) -> str:
        p = self._result.params
        lo, hi = p.confidence_interval
        return "\n".join([
            f"\t{_METHOD_TITLES[p.method]}",
            "",
            f"n = {p.n} complete pairs ({p.n_excluded} excluded)",
            f"t = {p.t_statistic:.5g}, df = {p.df}, p-value = {format_pvalue(p.p_value)}",
            f"{p.confidence_level:.0%} confidence interval: {lo:.6g}  {hi:.6g}",
            f"r = {p.r:.6g}",
            "",
        ])

    def __repr__(self) -> str:
        p = self._result.params
        return f"CorrelationSolution(method={p.method!r}, r={p.r:.4g}, n={p.n}, p_value={p.p_value:.4g})"


@dataclass
class CorrelationMatrixSolution(ResultAccessors):
    """Symmetric pairwise correlation matrix with p-values."""
    _result: Result[CorrelationMatrixParams]
    _design: 'CorrelationDesign | None' = None

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def variables(self) -> tuple[str, ...]:
        return self._result.params.variables

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        return self._result.params.matrix

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.p_values

    @property
    def pairwise_n(self) -> NDArray[np.integer[Any]]:
        return self._result.params.pairwise_n

    def get(self, a: str, b: str) -> float:
        """Correlation between two named variables."""
        names = self._result.params.variables
        return float(self._result.params.matrix[names.index(a), names.index(b)])

    def summary(self) -> str:
        p = self._result.params
        width = max(8, max(len(v) for v in p.variables))
        lines = [f"{p.method.capitalize()} correlation matrix (pairwise complete)"]
        lines.append(" " * width + "".join(v.rjust(width + 2) for v in p.variables))
        for i, v in enumerate(p.variables):
            lines.append(v.ljust(width) + "".join(f"{r:>{width + 2}.4f}" for r in p.matrix[i]))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"CorrelationMatrixSolution(method={self.method!r}, variables={list(self.variables)})"
