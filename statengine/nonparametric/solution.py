"""
Rank-test solution type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from statengine.core.assumptions import AssumptionCheck
from statengine.core.result import Result
from statengine.core.solution import ResultAccessors, format_pvalue
from statengine.nonparametric._common import NonParametricParams

if TYPE_CHECKING:
    from statengine.nonparametric.design import NonParametricDesign


@dataclass
class NonParametricSolution(ResultAccessors):
    """
    User-facing rank test results.

    test_kind is 'mann_whitney', 'wilcoxon' or 'kruskal_wallis'.
    """
    _result: Result[NonParametricParams]
    _design: 'NonParametricDesign | None' = None

    @property
    def test_kind(self) -> str:
        return self._result.params.test_kind

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def statistic(self) -> float:
        return self._result.params.statistic

    @property
    def z_statistic(self) -> float | None:
        return self._result.params.z_statistic

    @property
    def df(self) -> int | None:
        return self._result.params.df

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def effect_size(self) -> float:
        return self._result.params.effect_size

    @property
    def medians(self) -> dict[str, float]:
        return self._result.params.medians

    @property
    def rank_sums(self) -> dict[str, float]:
        return self._result.params.rank_sums

    @property
    def mean_ranks(self) -> dict[str, float]:
        return self._result.params.mean_ranks

    @property
    def sizes(self) -> dict[str, int]:
        return self._result.params.sizes

    @property
    def significant(self) -> bool:
        return self._result.params.significant

    @property
    def assumptions(self) -> tuple[AssumptionCheck, ...]:
        return self._result.params.assumptions

    def summary(self) -> str:
        p = self._result.params
        stat = f"{p.statistic_name} = {p.statistic:.6g}"
        if p.z_statistic is not None:
            stat += f", z = {p.z_statistic:.4f}"
        if p.df is not None:
            stat += f", df = {p.df}"
        lines = [
            f"\t{p.method}",
            "",
            f"{stat}, p-value = {format_pvalue(p.p_value)}",
            f"alternative hypothesis: {p.alternative}",
            f"effect size ({p.effect_size_name}) = {p.effect_size:.4f}",
            "medians:",
        ]
        lines.extend(f"  {label:<12} {m:.6g}" for label, m in p.medians.items())
        if self._result.warnings:
            lines.append("")
            lines.extend(f"Warning: {w}" for w in self._result.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"NonParametricSolution(test_kind={p.test_kind!r}, "
            f"statistic={p.statistic:.4g}, p_value={p.p_value:.4g})"
        )
