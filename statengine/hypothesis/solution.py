"""
Hypothesis test solution types.

TTestSolution and ChiSquareSolution wrap Result[...Params] and print an
R htest-style report from summary(). ContingencyTableSolution carries the
cross-tabulation with an attached independence test.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from statengine.core.assumptions import AssumptionCheck
from statengine.core.result import Result
from statengine.core.solution import ResultAccessors, format_pvalue
from statengine.hypothesis._common import (
    TTestParams,
    ChiSquareParams,
    ContingencyTableParams,
    PowerParams,
)
from statengine.hypothesis._contingency import format_table

if TYPE_CHECKING:
    from statengine.hypothesis.design import HypothesisDesign


_NULL_LABELS = {
    'one_sample_t': "mean",
    'independent_t': "difference in means",
    'paired_t': "mean difference",
}


@dataclass
class TTestSolution(ResultAccessors):
    """
    User-facing t-test results.

    test_kind is 'one_sample_t', 'independent_t' or 'paired_t'.
    """
    _result: Result[TTestParams]
    _design: 'HypothesisDesign | None' = None

    @property
    def test_kind(self) -> str:
        return self._result.params.test_kind

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def statistic(self) -> float:
        """t statistic."""
        return self._result.params.t_statistic

    @property
    def t_statistic(self) -> float:
        return self._result.params.t_statistic

    @property
    def df(self) -> float:
        return self._result.params.df

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def confidence_interval(self) -> tuple[float, float]:
        return self._result.params.confidence_interval

    @property
    def confidence_level(self) -> float:
        return self._result.params.confidence_level

    @property
    def mean_difference(self) -> float:
        return self._result.params.mean_difference

    @property
    def standard_error(self) -> float:
        return self._result.params.standard_error

    @property
    def effect_size(self) -> float:
        """Cohen's d."""
        return self._result.params.effect_size

    @property
    def estimates(self) -> dict[str, float]:
        return self._result.params.estimates

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def significant(self) -> bool:
        return self._result.params.significant

    @property
    def sizes(self) -> dict[str, int]:
        return self._result.params.sizes

    @property
    def assumptions(self) -> tuple[AssumptionCheck, ...]:
        return self._result.params.assumptions

    def summary(self) -> str:
        p = self._result.params
        lines = [f"\t{p.method}", ""]
        data = ", ".join(f"{k} (n = {v})" for k, v in p.sizes.items())
        lines.append(f"data:  {data}")
        lines.append(
            f"t = {p.t_statistic:.5g}, df = {p.df:.5g}, p-value = {format_pvalue(p.p_value)}"
        )

        label = _NULL_LABELS[p.test_kind]
        relation = {
            "two.sided": "is not equal to",
            "less": "is less than",
            "greater": "is greater than",
        }[p.alternative]
        lines.append(f"alternative hypothesis: true {label} {relation} {p.null_value:g}")

        pct = round(p.confidence_level * 100, 4)
        lo, hi = p.confidence_interval
        lines.append(f"{pct:g} percent confidence interval:")
        lines.append(f" {lo:.7g}  {hi:.7g}")

        lines.append("sample estimates:")
        names = list(p.estimates.keys())
        vals = list(p.estimates.values())
        lines.append(" ".join(f"{n:>16s}" for n in names))
        lines.append(" ".join(f"{v:16.7g}" for v in vals))
        lines.append(f"Cohen's d = {p.effect_size:.4g}")

        lines.append("")
        lines.append("Assumptions:")
        for check in p.assumptions:
            lines.append(f"  {check}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TTestSolution(test_kind={p.test_kind!r}, t={p.t_statistic:.4g}, "
            f"df={p.df:.4g}, p_value={p.p_value:.4g})"
        )


@dataclass
class ChiSquareSolution(ResultAccessors):
    """
    User-facing chi-square test results.

    test_kind is 'chi_square_gof' or 'chi_square_independence'.
    effect_size is Cramer's V.
    """
    _result: Result[ChiSquareParams]
    _design: 'HypothesisDesign | None' = None

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
    def df(self) -> float:
        return self._result.params.df

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def significant(self) -> bool:
        return self._result.params.significant

    @property
    def effect_size(self) -> float:
        return self._result.params.effect_size

    @property
    def cramers_v(self) -> float:
        return self._result.params.effect_size

    @property
    def observed(self) -> NDArray[np.floating[Any]]:
        return self._result.params.observed

    @property
    def expected(self) -> NDArray[np.floating[Any]]:
        return self._result.params.expected

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """Pearson residuals (O - E) / sqrt(E)."""
        return self._result.params.residuals

    @property
    def stdres(self) -> NDArray[np.floating[Any]] | None:
        """Adjusted standardized residuals (independence test only)."""
        return self._result.params.stdres

    @property
    def assumptions(self) -> tuple[AssumptionCheck, ...]:
        return self._result.params.assumptions

    def summary(self) -> str:
        p = self._result.params
        lines = [
            f"\t{p.method}",
            "",
            f"X-squared = {p.statistic:.5g}, df = {p.df:g}, p-value = {format_pvalue(p.p_value)}",
            f"Cramer's V = {p.effect_size:.4g}",
            "",
            "Assumptions:",
        ]
        for check in p.assumptions:
            lines.append(f"  {check}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"ChiSquareSolution(test_kind={p.test_kind!r}, X2={p.statistic:.4g}, "
            f"df={p.df:g}, p_value={p.p_value:.4g})"
        )


@dataclass
class ContingencyTableSolution(ResultAccessors):
    """
    Cross-tabulation of two categorical variables.

    chi_square holds the independence test when the table is at least 2x2,
    otherwise None.
    """
    _result: Result[ContingencyTableParams]
    _chi_square: ChiSquareSolution | None = None

    @property
    def row_variable(self) -> str:
        return self._result.params.row_variable

    @property
    def column_variable(self) -> str:
        return self._result.params.column_variable

    @property
    def row_labels(self) -> tuple[str, ...]:
        return self._result.params.row_labels

    @property
    def column_labels(self) -> tuple[str, ...]:
        return self._result.params.column_labels

    @property
    def table(self) -> NDArray[np.int64]:
        return self._result.params.counts

    @property
    def row_totals(self) -> NDArray[np.int64]:
        return self._result.params.row_totals

    @property
    def column_totals(self) -> NDArray[np.int64]:
        return self._result.params.column_totals

    @property
    def grand_total(self) -> int:
        return self._result.params.grand_total

    @property
    def n_excluded(self) -> int:
        return self._result.params.n_excluded

    @property
    def chi_square(self) -> ChiSquareSolution | None:
        return self._chi_square

    def count(self, row_label: str, column_label: str) -> int:
        p = self._result.params
        return int(p.counts[p.row_labels.index(row_label), p.column_labels.index(column_label)])

    def summary(self) -> str:
        text = format_table(self._result.params)
        if self._chi_square is not None:
            text += "\n\n" + self._chi_square.summary()
        return text

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"ContingencyTableSolution({p.row_variable!r} x {p.column_variable!r}, "
            f"shape={p.counts.shape}, total={p.grand_total})"
        )


@dataclass
class PowerSolution(ResultAccessors):
    """Power of a t-test for given n, or the n reaching a target power."""
    _result: Result[PowerParams]

    @property
    def kind(self) -> str:
        return self._result.params.kind

    @property
    def effect_size(self) -> float:
        return self._result.params.effect_size

    @property
    def n(self) -> int:
        """Observations per group (two_sample) or in total (one_sample, paired)."""
        return self._result.params.n

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def power(self) -> float:
        return self._result.params.power

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    def summary(self) -> str:
        p = self._result.params
        per = " per group" if p.kind == 'two_sample' else ""
        return "\n".join([
            f"\t{p.kind.replace('_', '-')} t-test power calculation",
            "",
            f"n = {p.n}{per}",
            f"d = {p.effect_size:g}",
            f"sig.level = {p.alpha:g}",
            f"power = {p.power:.4f}",
            f"alternative = {p.alternative}",
            "",
        ])

    def __repr__(self) -> str:
        p = self._result.params
        return f"PowerSolution(kind={p.kind!r}, n={p.n}, d={p.effect_size:g}, power={p.power:.4f})"
