"""
Public entry points for the rank tests.
"""

from __future__ import annotations

from typing import Literal, Mapping, Sequence
from numpy.typing import ArrayLike

from statengine.nonparametric.design import NonParametricDesign
from statengine.nonparametric.solution import NonParametricSolution
from statengine.nonparametric.backends.cpu import CPUNonParametricBackend

Alternative = Literal["two.sided", "less", "greater"]


def _solve(design: NonParametricDesign) -> NonParametricSolution:
    result = CPUNonParametricBackend().solve(design)
    return NonParametricSolution(_result=result, _design=design)


def mann_whitney_u(
    group1: ArrayLike,
    group2: ArrayLike,
    *,
    alpha: float = 0.05,
    alternative: Alternative = "two.sided",
) -> NonParametricSolution:
    """
    Mann-Whitney U test for a location shift between two independent groups.

    Statistic is U = min(U1, U2); the p-value comes from the normal
    approximation with tie-corrected variance. Effect size r = |z| / sqrt(N).

    Raises:
        InsufficientDataError: a group has no valid observations
    """
    return _solve(NonParametricDesign.for_mann_whitney(
        group1, group2, alpha=alpha, alternative=alternative,
    ))


def wilcoxon_signed_rank(
    before: ArrayLike,
    after: ArrayLike,
    *,
    alpha: float = 0.05,
    alternative: Alternative = "two.sided",
) -> NonParametricSolution:
    """
    Wilcoxon signed-rank test on the paired differences after - before.

    Raises:
        MismatchedLengthsError: before and after differ in length
        InsufficientDataError: every difference is zero or missing
    """
    return _solve(NonParametricDesign.for_wilcoxon(
        before, after, alpha=alpha, alternative=alternative,
    ))


def kruskal_wallis(
    groups: Mapping[str, ArrayLike] | Sequence[ArrayLike],
    *,
    alpha: float = 0.05,
) -> NonParametricSolution:
    """
    Kruskal-Wallis rank sum test across two or more groups.

    Raises:
        InsufficientDataError: fewer than 2 groups or an empty group
    """
    return _solve(NonParametricDesign.for_kruskal_wallis(groups, alpha=alpha))
