"""
Robust statistics solution type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from statengine.core.result import Result
from statengine.core.solution import ResultAccessors
from statengine.robust._common import RobustParams

if TYPE_CHECKING:
    from statengine.robust.design import RobustDesign


@dataclass
class RobustSolution(ResultAccessors):
    """Classical mean/sd side by side with median, MAD and trimmed means."""
    _result: Result[RobustParams]
    _design: 'RobustDesign | None' = None

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def standard_deviation(self) -> float:
        return self._result.params.standard_deviation

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def mad(self) -> float:
        """Raw median absolute deviation."""
        return self._result.params.mad

    @property
    def scaled_mad(self) -> float:
        """MAD x 1.4826, a consistent estimate of sigma for normal data."""
        return self._result.params.scaled_mad

    @property
    def trimmed_mean(self) -> float:
        return self._result.params.trimmed_mean

    @property
    def winsorized_mean(self) -> float:
        return self._result.params.winsorized_mean

    @property
    def iqr(self) -> float:
        return self._result.params.iqr

    @property
    def trim(self) -> float:
        return self._result.params.trim

    def to_dict(self) -> dict[str, Any]:
        p = self._result.params
        return {
            'n': p.n,
            'mean': p.mean,
            'standard_deviation': p.standard_deviation,
            'median': p.median,
            'mad': p.mad,
            'scaled_mad': p.scaled_mad,
            'trimmed_mean': p.trimmed_mean,
            'winsorized_mean': p.winsorized_mean,
            'iqr': p.iqr,
        }

    def summary(self) -> str:
        p = self._result.params
        return "\n".join([
            f"Robust statistics (n = {p.n}, trim = {p.trim:g})",
            f"  {'location':<10} mean = {p.mean:.6g}   median = {p.median:.6g}",
            f"  {'':<10} trimmed = {p.trimmed_mean:.6g}   winsorized = {p.winsorized_mean:.6g}",
            f"  {'scale':<10} sd = {p.standard_deviation:.6g}   MAD = {p.mad:.6g} "
            f"(scaled {p.scaled_mad:.6g})   IQR = {p.iqr:.6g}",
        ])

    def __repr__(self) -> str:
        p = self._result.params
        return f"RobustSolution(n={p.n}, median={p.median:.4g}, mad={p.mad:.4g})"
