"""
Normality test solution type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from statengine.core.result import Result
from statengine.core.solution import ResultAccessors, format_pvalue
from statengine.normality._common import NormalityParams

if TYPE_CHECKING:
    from statengine.normality.design import NormalityDesign


@dataclass
class NormalitySolution(ResultAccessors):
    """
    Result of a normality test.

    is_normal is True when the p-value exceeds alpha, i.e. normality is
    not rejected.
    """
    _result: Result[NormalityParams]
    _design: 'NormalityDesign | None' = None

    @property
    def test_kind(self) -> str:
        """'shapiro_wilk', 'kolmogorov_smirnov' or 'anderson_darling'."""
        return self._result.params.test_kind

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def statistic(self) -> float:
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        return self._result.params.statistic_name

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def is_normal(self) -> bool:
        return self._result.params.is_normal

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def critical_values(self) -> dict[float, float] | None:
        """Significance level (%) -> critical value (Anderson-Darling only)."""
        return self._result.params.critical_values

    def summary(self) -> str:
        p = self._result.params
        lines = [
            f"\t{p.method}",
            "",
            f"{p.statistic_name} = {p.statistic:.5g}, n = {p.n}, p-value = {format_pvalue(p.p_value)}",
        ]
        if p.critical_values:
            lines.append("critical values:")
            for level, cv in p.critical_values.items():
                lines.append(f"  {level:>5g}%  {cv:.4f}")
        verdict = "not rejected" if p.is_normal else "rejected"
        lines.append(f"normality {verdict} at alpha = {p.alpha:g}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"NormalitySolution(test_kind={p.test_kind!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, p_value={p.p_value:.4g})"
        )
