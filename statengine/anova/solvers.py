"""
Public entry points for one-way ANOVA.

anova_oneway(), levene_test() and tukey_hsd().
"""

from __future__ import annotations

from typing import Literal, Mapping, Sequence
from numpy.typing import ArrayLike

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.core.validation import check_choice
from statengine.anova.design import AnovaDesign
from statengine.anova.solution import AnovaSolution, LeveneSolution, PostHocSolution
from statengine.anova.backends.cpu import CPUAnovaBackend
from statengine.anova._levene import levene_test_impl
from statengine.anova._posthoc import tukey_hsd_impl

Groups = Mapping[str, ArrayLike] | Sequence[ArrayLike]


def _ensure_design(groups: Groups | AnovaDesign, alpha: float) -> AnovaDesign:
    if isinstance(groups, AnovaDesign):
        return groups
    return AnovaDesign.from_groups(groups, alpha=alpha)


def anova_oneway(
    groups: Groups | AnovaDesign,
    *,
    alpha: float = 0.05,
) -> AnovaSolution:
    """
    One-way analysis of variance.

    Parameters
    ----------
    groups : mapping or sequence
        label -> sample. At least 2 groups, each with at least 2 valid values.
    alpha : float
        Significance level. When p < alpha and there are more than two
        groups, Tukey HSD comparisons are attached (post_hoc).

    Returns
    -------
    AnovaSolution
        F, p-value, df (k - 1, N - k), sums of squares, eta squared,
        per-group statistics, assumption checks.
    """
    design = _ensure_design(groups, alpha)
    result = CPUAnovaBackend().solve(design)
    return AnovaSolution(_result=result, _design=design)


def levene_test(
    groups: Groups | AnovaDesign,
    *,
    center: Literal['median', 'mean'] = 'median',
) -> LeveneSolution:
    """
    Levene's test for equal variances. center='median' (default) is the
    Brown-Forsythe variant.
    """
    check_choice(center, ('median', 'mean'), 'center')
    design = _ensure_design(groups, 0.05)
    timer = Timer()
    timer.start()
    with timer.section('levene'):
        params = levene_test_impl(design.groups, center=center)
    timer.stop()
    return LeveneSolution(_result=Result(
        params=params,
        info={'k': design.k, 'n': design.n},
        timing=timer.result(),
        backend_name='cpu_anova',
    ))


def tukey_hsd(
    groups: Groups | AnovaDesign,
    *,
    alpha: float = 0.05,
) -> PostHocSolution:
    """
    Tukey HSD for all pairs of groups, using the pooled within-group
    mean square as error variance.
    """
    design = _ensure_design(groups, alpha)
    timer = Timer()
    timer.start()
    with timer.section('tukey'):
        ss_within = sum(float(((y - y.mean()) ** 2).sum()) for y in design.groups.values())
        df_within = design.n - design.k
        params = tukey_hsd_impl(design.groups, ss_within / df_within, df_within, alpha=design.alpha)
    timer.stop()
    return PostHocSolution(_result=Result(
        params=params,
        info={'k': design.k, 'n': design.n},
        timing=timer.result(),
        backend_name='cpu_anova',
    ))
