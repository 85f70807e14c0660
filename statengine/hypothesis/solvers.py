"""
Public entry points for hypothesis tests.

t-tests, chi-square tests, contingency tables, Cohen's d and t-test power.
"""

from __future__ import annotations

from typing import Literal
import numpy as np
from numpy.typing import ArrayLike

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.core.exceptions import InvalidParameterError
from statengine.core.validation import (
    clean_sample,
    check_alpha,
    check_choice,
    check_min_samples,
    check_positive_int,
    check_probability,
)
from statengine.hypothesis._common import POWER_KINDS, VALID_ALTERNATIVES, PowerParams
from statengine.hypothesis._contingency import build_contingency_table
from statengine.hypothesis._power import t_power, required_n, _df_ncp
from statengine.hypothesis.design import HypothesisDesign
from statengine.hypothesis.solution import (
    TTestSolution,
    ChiSquareSolution,
    ContingencyTableSolution,
    PowerSolution,
)
from statengine.hypothesis.backends.cpu import CPUHypothesisBackend
from statengine.hypothesis.backends._t_test import cohens_d_from_moments

Alternative = Literal["two.sided", "less", "greater"]
PowerKind = Literal["two_sample", "one_sample", "paired"]


def _get_backend() -> CPUHypothesisBackend:
    return CPUHypothesisBackend()


def one_sample_t_test(
    sample: ArrayLike | HypothesisDesign,
    population_mean: float = 0.0,
    *,
    alpha: float = 0.05,
    alternative: Alternative = "two.sided",
) -> TTestSolution:
    """
    One-sample t-test of H0: mean = population_mean.

    t = (mean - mu) / (sd / sqrt(n)), df = n - 1. The confidence interval is
    for the mean at level 1 - alpha; effect size is Cohen's d = (mean - mu) / sd.

    Raises
    ------
    InsufficientDataError
        Fewer than 2 valid observations.
    """
    if isinstance(sample, HypothesisDesign):
        design = sample
    else:
        design = HypothesisDesign.for_one_sample_t(
            sample, population_mean=population_mean, alpha=alpha, alternative=alternative,
        )
    result = _get_backend().solve(design)
    return TTestSolution(_result=result, _design=design)


def independent_t_test(
    group1: ArrayLike | HypothesisDesign,
    group2: ArrayLike | None = None,
    *,
    equal_variances: bool = True,
    alpha: float = 0.05,
    alternative: Alternative = "two.sided",
) -> TTestSolution:
    """
    Two independent samples t-test of H0: mean1 = mean2.

    Parameters
    ----------
    equal_variances : bool
        True (default) pools the variances, df = n1 + n2 - 2. False uses
        Welch's test with Welch-Satterthwaite degrees of freedom.

    Notes
    -----
    Swapping the groups flips the sign of t, the mean difference and the
    interval; p-value and df are unchanged.
    """
    if isinstance(group1, HypothesisDesign):
        design = group1
    else:
        design = HypothesisDesign.for_independent_t(
            group1, group2,
            equal_variances=equal_variances, alpha=alpha, alternative=alternative,
        )
    result = _get_backend().solve(design)
    return TTestSolution(_result=result, _design=design)


def paired_t_test(
    before: ArrayLike | HypothesisDesign,
    after: ArrayLike | None = None,
    *,
    alpha: float = 0.05,
    alternative: Alternative = "two.sided",
) -> TTestSolution:
    """
    Paired t-test on the differences after - before.

    Raises
    ------
    MismatchedLengthsError
        before and after differ in length.
    InsufficientDataError
        Fewer than 2 complete pairs.
    """
    if isinstance(before, HypothesisDesign):
        design = before
    else:
        design = HypothesisDesign.for_paired_t(
            before, after, alpha=alpha, alternative=alternative,
        )
    result = _get_backend().solve(design)
    return TTestSolution(_result=result, _design=design)


def chisq_goodness_of_fit(
    observed: ArrayLike | HypothesisDesign,
    expected: ArrayLike | None = None,
    *,
    alpha: float = 0.05,
) -> ChiSquareSolution:
    """
    Chi-square goodness-of-fit test, df = k - 1.

    expected defaults to equal counts. Expected counts or proportions that
    do not sum to the observed total are rescaled to it.
    """
    if isinstance(observed, HypothesisDesign):
        design = observed
    else:
        design = HypothesisDesign.for_chisq_gof(observed, expected, alpha=alpha)
    result = _get_backend().solve(design)
    return ChiSquareSolution(_result=result, _design=design)


def chisq_independence(
    table: ArrayLike | HypothesisDesign,
    *,
    alpha: float = 0.05,
) -> ChiSquareSolution:
    """
    Chi-square test of independence for an r x c table of counts.

    df = (r - 1)(c - 1); effect size is Cramer's V.
    """
    if isinstance(table, HypothesisDesign):
        design = table
    else:
        design = HypothesisDesign.for_chisq_independence(table, alpha=alpha)
    result = _get_backend().solve(design)
    return ChiSquareSolution(_result=result, _design=design)


def contingency_table(
    row_data: ArrayLike,
    column_data: ArrayLike,
    *,
    row_variable: str = "row",
    column_variable: str = "column",
    alpha: float = 0.05,
) -> ContingencyTableSolution:
    """
    Cross-tabulate two categorical sequences and test their independence.

    Labels are sorted as strings. Pairs with a missing element are skipped.
    The chi-square test is attached when the table has at least 2 rows and
    2 columns.
    """
    alpha = check_alpha(alpha)
    timer = Timer()
    timer.start()
    with timer.section('tabulate'):
        params = build_contingency_table(
            row_data, column_data,
            row_variable=row_variable, column_variable=column_variable,
        )

    warnings_list: list[str] = []
    chi_square = None
    if params.counts.shape[0] >= 2 and params.counts.shape[1] >= 2:
        with timer.section('chi_square'):
            chi_square = chisq_independence(params.counts, alpha=alpha)
    else:
        warnings_list.append(
            f"table is {params.counts.shape[0]}x{params.counts.shape[1]}; "
            f"independence test needs at least 2x2"
        )
    if params.n_excluded:
        warnings_list.append(f"{params.n_excluded} pair(s) with missing values excluded")
    timer.stop()

    result = Result(
        params=params,
        info={'shape': params.counts.shape},
        timing=timer.result(),
        backend_name='cpu_hypothesis',
        warnings=tuple(warnings_list),
    )
    return ContingencyTableSolution(_result=result, _chi_square=chi_square)


def cohens_d(group1: ArrayLike, group2: ArrayLike) -> float:
    """
    Standardized mean difference (mean1 - mean2) / pooled sd.

    cohens_d([1, 2, 3, 4, 5], [3, 4, 5, 6, 7]) -> -1.265
    """
    x, _ = clean_sample(group1, 'group1')
    y, _ = clean_sample(group2, 'group2')
    check_min_samples(len(x), 2, 'group1')
    check_min_samples(len(y), 2, 'group2')
    return cohens_d_from_moments(
        float(np.mean(x)), float(np.mean(y)),
        float(np.var(x, ddof=1)), float(np.var(y, ddof=1)),
        len(x), len(y),
    )


def _check_power_inputs(effect_size: float, alpha: float, kind: str, alternative: str) -> float:
    check_alpha(alpha)
    check_choice(kind, POWER_KINDS, 'kind')
    check_choice(alternative, VALID_ALTERNATIVES, 'alternative')
    if isinstance(effect_size, bool) or not isinstance(effect_size, (int, float, np.floating)) \
            or not np.isfinite(effect_size):
        raise InvalidParameterError(
            f"effect_size must be a finite number, got {effect_size!r}",
            name='effect_size', value=effect_size,
        )
    return float(effect_size)


def _power_solution(effect_size, n, alpha, power, kind, alternative, timer) -> PowerSolution:
    df, ncp = _df_ncp(effect_size, n, kind)
    timer.stop()
    result = Result(
        params=PowerParams(
            kind=kind, effect_size=effect_size, n=n, alpha=alpha, power=power,
            alternative=alternative, df=df, noncentrality=float(ncp),
        ),
        info={'distribution': 'noncentral t'},
        timing=timer.result(),
        backend_name='cpu_hypothesis',
    )
    return PowerSolution(_result=result)


def power_t_test(
    effect_size: float,
    n: int,
    *,
    alpha: float = 0.05,
    kind: PowerKind = "two_sample",
    alternative: Alternative = "two.sided",
) -> PowerSolution:
    """
    Power of a t-test for standardized effect size d and sample size n.

    n counts observations per group for kind='two_sample' and pairs for
    'paired'.
    """
    effect_size = _check_power_inputs(effect_size, alpha, kind, alternative)
    n = check_positive_int(n, 'n')
    if n < 2:
        raise InvalidParameterError(f"n must be at least 2, got {n}", name='n', value=n)

    timer = Timer()
    timer.start()
    with timer.section('power'):
        power = t_power(effect_size, n, alpha, kind, alternative)
    return _power_solution(effect_size, n, alpha, power, kind, alternative, timer)


def sample_size_t_test(
    effect_size: float,
    power: float = 0.8,
    *,
    alpha: float = 0.05,
    kind: PowerKind = "two_sample",
    alternative: Alternative = "two.sided",
) -> PowerSolution:
    """
    Smallest n whose t-test power reaches the target.

    sample_size_t_test(0.8, 0.8).n -> 26 (per group)
    """
    effect_size = _check_power_inputs(effect_size, alpha, kind, alternative)
    power = check_probability(power, 'power')

    timer = Timer()
    timer.start()
    with timer.section('search'):
        n = required_n(effect_size, power, alpha, kind, alternative)
        achieved = t_power(abs(effect_size) if alternative == 'two.sided' else effect_size,
                           n, alpha, kind, alternative)
    return _power_solution(effect_size, n, alpha, achieved, kind, alternative, timer)
