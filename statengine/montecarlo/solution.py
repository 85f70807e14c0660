"""
Solution wrappers for resampling results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from statengine.core.result import Result
from statengine.core.solution import ResultAccessors, format_pvalue
from statengine.montecarlo._common import BootstrapParams, PermutationParams

if TYPE_CHECKING:
    from statengine.montecarlo.design import BootstrapDesign, PermutationDesign


@dataclass
class BootstrapSolution(ResultAccessors):
    """
    User-facing bootstrap interval.

    lower <= upper always holds; replicates keep resample order.
    """
    _result: Result[BootstrapParams]
    _design: 'BootstrapDesign | None' = None

    @property
    def observed(self) -> float:
        """Statistic on the original sample."""
        return self._result.params.observed

    @property
    def replicates(self) -> NDArray[np.floating[Any]]:
        return self._result.params.replicates

    @property
    def lower(self) -> float:
        return self._result.params.lower

    @property
    def upper(self) -> float:
        return self._result.params.upper

    @property
    def confidence_interval(self) -> tuple[float, float]:
        return (self._result.params.lower, self._result.params.upper)

    @property
    def bias(self) -> float:
        return self._result.params.bias

    @property
    def standard_error(self) -> float:
        return self._result.params.standard_error

    @property
    def confidence_level(self) -> float:
        return self._result.params.confidence_level

    @property
    def n_resamples(self) -> int:
        return self._result.params.n_resamples

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def seed(self) -> int | None:
        return self._design.seed if self._design is not None else None

    def summary(self) -> str:
        p = self._result.params
        return "\n".join([
            "ORDINARY NONPARAMETRIC BOOTSTRAP",
            "",
            f"{'original':>14s} {'bias':>14s} {'std. error':>14s}",
            f"{p.observed:14.5f} {p.bias:14.5f} {p.standard_error:14.5f}",
            "",
            f"{p.confidence_level:.0%} {p.method} interval from {p.n_resamples} resamples:",
            f"  ({p.lower:.5f}, {p.upper:.5f})",
        ])

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"BootstrapSolution(observed={p.observed:.4g}, "
            f"ci=({p.lower:.4g}, {p.upper:.4g}), n_resamples={p.n_resamples})"
        )


@dataclass
class PermutationSolution(ResultAccessors):
    """User-facing permutation test results."""
    _result: Result[PermutationParams]
    _design: 'PermutationDesign | None' = None

    @property
    def observed(self) -> float:
        """Observed statistic (mean difference by default)."""
        return self._result.params.observed

    @property
    def observed_difference(self) -> float:
        return self._result.params.observed

    @property
    def permuted(self) -> NDArray[np.floating[Any]]:
        return self._result.params.permuted

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def n_permutations(self) -> int:
        return self._result.params.n_permutations

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    def summary(self) -> str:
        p = self._result.params
        return "\n".join([
            "\tTwo-sample permutation test",
            "",
            f"observed statistic = {p.observed:.6g}",
            f"permutations = {p.n_permutations}, p-value = {format_pvalue(p.p_value)}",
            f"alternative hypothesis: {p.alternative}",
        ])

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"PermutationSolution(observed={p.observed:.4g}, "
            f"p_value={p.p_value:.4g}, n_permutations={p.n_permutations})"
        )
