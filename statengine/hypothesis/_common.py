"""
Common types for hypothesis testing.

One frozen payload per family of tests. The `test_kind` field is the tag
of the result union: 'one_sample_t', 'independent_t', 'paired_t',
'chi_square_gof', 'chi_square_independence'.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
import numpy as np
from numpy.typing import NDArray

from statengine.core.assumptions import AssumptionCheck

VALID_ALTERNATIVES = ("two.sided", "less", "greater")
POWER_KINDS = ("two_sample", "one_sample", "paired")


@dataclass(frozen=True)
class TTestParams:
    """
    Parameter payload for the t-tests.

    Attributes
    ----------
    test_kind : str
        'one_sample_t', 'independent_t' or 'paired_t'.
    t_statistic, df, p_value : float
        Test statistic, degrees of freedom (fractional for Welch), p-value.
    confidence_interval : tuple
        Interval for mean (one-sample), mean difference (two-sample) or mean
        of the paired differences.
    mean_difference : float
        mean - mu, mean1 - mean2, or mean(after - before).
    effect_size : float
        Cohen's d.
    estimates : dict
        Group means, e.g. {"mean of group1": 5.1, "mean of group2": 3.2}.
    sizes : dict
        Valid observations per input.
    """
    test_kind: str
    method: str
    t_statistic: float
    df: float
    p_value: float
    confidence_interval: tuple[float, float]
    confidence_level: float
    mean_difference: float
    standard_error: float
    effect_size: float
    estimates: dict[str, float]
    null_value: float
    alternative: str
    alpha: float
    sizes: dict[str, int]
    assumptions: tuple[AssumptionCheck, ...] = field(default_factory=tuple)

    @property
    def significant(self) -> bool:
        return bool(self.p_value < self.alpha)


@dataclass(frozen=True)
class ChiSquareParams:
    """
    Parameter payload for chi-square tests.

    residuals are Pearson residuals (O - E) / sqrt(E); stdres (independence
    only) are the adjusted standardized residuals.
    """
    test_kind: str
    method: str
    statistic: float
    df: float
    p_value: float
    alpha: float
    effect_size: float
    observed: NDArray[np.floating[Any]]
    expected: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    stdres: NDArray[np.floating[Any]] | None = None
    assumptions: tuple[AssumptionCheck, ...] = field(default_factory=tuple)

    @property
    def significant(self) -> bool:
        return bool(self.p_value < self.alpha)


@dataclass(frozen=True)
class ContingencyTableParams:
    """
    Cross-tabulation of two categorical variables.

    counts[i, j] counts rows with row label i and column label j; labels are
    sorted as strings. Pairs with a missing value on either side are excluded
    and counted in n_excluded.
    """
    row_variable: str
    column_variable: str
    row_labels: tuple[str, ...]
    column_labels: tuple[str, ...]
    counts: NDArray[np.int64]
    row_totals: NDArray[np.int64]
    column_totals: NDArray[np.int64]
    grand_total: int
    n_excluded: int


@dataclass(frozen=True)
class PowerParams:
    """Power of a t-test, or the sample size needed to reach a target power."""
    kind: str
    effect_size: float
    n: int
    alpha: float
    power: float
    alternative: str
    df: float
    noncentrality: float
