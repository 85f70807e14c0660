"""
ANOVA solution types.

AnovaSolution wraps Result[AnovaParams]; LeveneSolution and PostHocSolution
wrap the stand-alone Levene and Tukey HSD results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from statengine.core.assumptions import AssumptionCheck
from statengine.core.result import Result
from statengine.core.solution import ResultAccessors, format_pvalue, significance_stars
from statengine.anova._common import (
    AnovaParams,
    GroupStats,
    LeveneParams,
    PostHocComparison,
    PostHocParams,
)

if TYPE_CHECKING:
    from statengine.anova.design import AnovaDesign


def _format_posthoc(ph: PostHocParams) -> list[str]:
    lines = [
        f"Tukey HSD ({ph.conf_level:.0%} family-wise confidence level)",
        f"{'Comparison':<25} {'diff':>10} {'lwr':>12} {'upr':>12} {'p adj':>12}",
        "-" * 72,
    ]
    for c in ph.comparisons:
        lines.append(
            f"{c.comparison:<25} {c.diff:>10.4f} {c.ci_lower:>12.4f} "
            f"{c.ci_upper:>12.4f} {c.p_value:>12.4e} {significance_stars(c.p_value)}"
        )
    lines.append("-" * 72)
    return lines


@dataclass
class AnovaSolution(ResultAccessors):
    """
    User-facing one-way ANOVA results.

    test_kind is 'one_way_anova'.
    """
    _result: Result[AnovaParams]
    _design: 'AnovaDesign | None' = None

    @property
    def test_kind(self) -> str:
        return self._result.params.test_kind

    @property
    def f_statistic(self) -> float:
        return self._result.params.f_statistic

    @property
    def statistic(self) -> float:
        return self._result.params.f_statistic

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def df_between(self) -> int:
        return self._result.params.df_between

    @property
    def df_within(self) -> int:
        return self._result.params.df_within

    @property
    def df(self) -> tuple[int, int]:
        return (self._result.params.df_between, self._result.params.df_within)

    @property
    def ss_between(self) -> float:
        return self._result.params.ss_between

    @property
    def ss_within(self) -> float:
        return self._result.params.ss_within

    @property
    def ss_total(self) -> float:
        return self._result.params.ss_total

    @property
    def ms_between(self) -> float:
        return self._result.params.ms_between

    @property
    def ms_within(self) -> float:
        return self._result.params.ms_within

    @property
    def eta_squared(self) -> float:
        return self._result.params.eta_squared

    @property
    def effect_size(self) -> float:
        """Eta squared."""
        return self._result.params.eta_squared

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def significant(self) -> bool:
        return self._result.params.significant

    @property
    def group_stats(self) -> tuple[GroupStats, ...]:
        return self._result.params.group_stats

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def post_hoc(self) -> tuple[PostHocComparison, ...] | None:
        """Tukey HSD comparisons, or None when not run."""
        ph = self._result.params.post_hoc
        return ph.comparisons if ph is not None else None

    @property
    def assumptions(self) -> tuple[AssumptionCheck, ...]:
        return self._result.params.assumptions

    def summary(self) -> str:
        """Generate an ANOVA table with group statistics and post-hoc results."""
        p = self._result.params
        lines = [
            "One-way Analysis of Variance",
            "=" * 72,
            f"Observations: {p.n_obs}, groups: {len(p.group_stats)}",
            "",
            f"{'Source':<20} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} {'F value':>10} {'Pr(>F)':>12}",
            "-" * 72,
            f"{'Between groups':<20} {p.df_between:>6} {p.ss_between:>14.4f} "
            f"{p.ms_between:>14.4f} {p.f_statistic:>10.4f} "
            f"{format_pvalue(p.p_value):>12} {significance_stars(p.p_value)}",
            f"{'Within groups':<20} {p.df_within:>6} {p.ss_within:>14.4f} {p.ms_within:>14.4f}",
            "-" * 72,
            "Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 '.' 0.1 ' ' 1",
            "",
            f"eta^2 = {p.eta_squared:.4f}",
            "",
            f"{'Group':<20} {'n':>6} {'mean':>12} {'sd':>12} {'se':>12}",
        ]
        for g in p.group_stats:
            lines.append(f"{g.group:<20} {g.n:>6} {g.mean:>12.4f} {g.sd:>12.4f} {g.se:>12.4f}")

        if p.post_hoc is not None:
            lines.append("")
            lines.extend(_format_posthoc(p.post_hoc))

        lines.append("")
        lines.append("Assumptions:")
        for check in p.assumptions:
            lines.append(f"  {check}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"AnovaSolution(k={len(p.group_stats)}, F={p.f_statistic:.4g}, "
            f"df=({p.df_between}, {p.df_within}), p_value={p.p_value:.4g})"
        )


@dataclass
class LeveneSolution(ResultAccessors):
    """Levene / Brown-Forsythe test result."""
    _result: Result[LeveneParams]

    @property
    def f_value(self) -> float:
        return self._result.params.f_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def df_between(self) -> int:
        return self._result.params.df_between

    @property
    def df_within(self) -> int:
        return self._result.params.df_within

    @property
    def center(self) -> str:
        return self._result.params.center

    @property
    def group_vars(self) -> dict[str, float]:
        return self._result.params.group_vars

    def summary(self) -> str:
        name = "Brown-Forsythe" if self.center == 'median' else "Levene"
        return (
            f"{name} test for homogeneity of variance (center = {self.center})\n"
            f"F({self.df_between}, {self.df_within}) = {self.f_value:.4f}, "
            f"p-value = {format_pvalue(self.p_value)}"
        )

    def __repr__(self) -> str:
        return f"LeveneSolution(F={self.f_value:.4g}, p_value={self.p_value:.4g})"


@dataclass
class PostHocSolution(ResultAccessors):
    """Tukey HSD pairwise comparisons."""
    _result: Result[PostHocParams]

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def comparisons(self) -> tuple[PostHocComparison, ...]:
        return self._result.params.comparisons

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    def summary(self) -> str:
        return "\n".join(_format_posthoc(self._result.params))

    def __repr__(self) -> str:
        return (
            f"PostHocSolution(method={self.method!r}, "
            f"n_comparisons={len(self.comparisons)})"
        )
