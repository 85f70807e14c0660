"""
Rank-based tests with normal / chi-square approximations.

Mann-Whitney U and the Wilcoxon signed-rank test use a tie-corrected
variance and a 0.5 continuity correction:

    rank sum:    var(U) = n1 n2 / 12 * (N + 1 - T / (N (N - 1)))
    signed rank: var(W) = n (n + 1)(2n + 1) / 24 - T / 48

with T = sum (t^3 - t) over tie groups. Kruskal-Wallis divides H by
1 - T / (N^3 - N).
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np
from scipy import stats as sp_stats

from statengine.core.assumptions import independence_note
from statengine.core.compute.ranks import average_ranks, tie_term, has_ties
from statengine.nonparametric._common import NonParametricParams

if TYPE_CHECKING:
    from statengine.nonparametric.design import NonParametricDesign


def _normal_p(
    stat: float, mean: float, var: float, alternative: str,
) -> tuple[float, float]:
    """Continuity-corrected z and p-value; (0, 1) when the variance vanishes."""
    if var <= 0:
        return 0.0, 1.0
    sd = np.sqrt(var)
    diff = stat - mean
    if alternative == "two.sided":
        z = np.sign(diff) * max(abs(diff) - 0.5, 0.0) / sd
        p = 2.0 * sp_stats.norm.sf(abs(z))
    elif alternative == "less":
        z = (diff + 0.5) / sd
        p = sp_stats.norm.cdf(z)
    else:
        z = (diff - 0.5) / sd
        p = sp_stats.norm.sf(z)
    return float(z), float(min(max(p, 0.0), 1.0))


def mann_whitney(design: NonParametricDesign) -> tuple[NonParametricParams, list[str]]:
    """Mann-Whitney U (Wilcoxon rank-sum) test."""
    warnings_list: list[str] = []
    (label1, g1), (label2, g2) = design.groups.items()
    n1, n2 = len(g1), len(g2)
    N = n1 + n2

    combined = np.concatenate([g1, g2])
    ranks = average_ranks(combined)
    r1 = float(np.sum(ranks[:n1]))
    r2 = float(np.sum(ranks[n1:]))

    u1 = r1 - n1 * (n1 + 1) / 2.0
    u2 = n1 * n2 - u1
    u = min(u1, u2)

    if has_ties(combined):
        warnings_list.append("cannot compute exact p-value with ties")
    var_u = n1 * n2 / 12.0 * (N + 1 - tie_term(combined) / (N * (N - 1)))
    if var_u <= 0:
        warnings_list.append("all observations are tied; no evidence of a location shift")
    z, p = _normal_p(u1, n1 * n2 / 2.0, var_u, design.alternative)

    return NonParametricParams(
        test_kind='mann_whitney',
        method="Mann-Whitney U test (normal approximation with continuity correction)",
        statistic=float(u),
        statistic_name="U",
        z_statistic=z,
        df=None,
        p_value=p,
        alpha=design.alpha,
        alternative=design.alternative,
        effect_size=abs(z) / np.sqrt(N),
        effect_size_name="r",
        medians={label1: float(np.median(g1)), label2: float(np.median(g2))},
        rank_sums={label1: r1, label2: r2},
        mean_ranks={label1: r1 / n1, label2: r2 / n2},
        sizes={label1: n1, label2: n2},
        n=N,
        assumptions=(independence_note(),),
    ), warnings_list


def wilcoxon_signed_rank(design: NonParametricDesign) -> tuple[NonParametricParams, list[str]]:
    """Wilcoxon signed-rank test on after - before."""
    warnings_list: list[str] = []
    before = design.groups['before']
    after = design.groups['after']
    d = design.differences
    n = len(d)

    n_zeros = len(before) - n
    if n_zeros:
        warnings_list.append(f"{n_zeros} zero difference(s) dropped")

    abs_d = np.abs(d)
    ranks = average_ranks(abs_d)
    w_plus = float(np.sum(ranks[d > 0]))
    w_minus = n * (n + 1) / 2.0 - w_plus
    w = min(w_plus, w_minus)

    if has_ties(abs_d):
        warnings_list.append("cannot compute exact p-value with ties")
    var_w = n * (n + 1) * (2 * n + 1) / 24.0 - tie_term(abs_d) / 48.0
    z, p = _normal_p(w_plus, n * (n + 1) / 4.0, var_w, design.alternative)

    n_pos = int(np.sum(d > 0))
    n_neg = n - n_pos

    return NonParametricParams(
        test_kind='wilcoxon',
        method="Wilcoxon signed rank test (normal approximation with continuity correction)",
        statistic=float(w),
        statistic_name="W",
        z_statistic=z,
        df=None,
        p_value=p,
        alpha=design.alpha,
        alternative=design.alternative,
        effect_size=abs(z) / np.sqrt(n),
        effect_size_name="r",
        medians={
            'before': float(np.median(before)),
            'after': float(np.median(after)),
            'difference': float(np.median(after - before)),
        },
        rank_sums={'W+': w_plus, 'W-': w_minus},
        mean_ranks={
            'W+': w_plus / n_pos if n_pos else np.nan,
            'W-': w_minus / n_neg if n_neg else np.nan,
        },
        sizes={'pairs': len(before), 'non_zero': n},
        n=n,
        assumptions=(independence_note(),),
    ), warnings_list


def kruskal_wallis(design: NonParametricDesign) -> tuple[NonParametricParams, list[str]]:
    """Kruskal-Wallis rank sum test."""
    warnings_list: list[str] = []
    groups = design.groups
    k = len(groups)

    combined = np.concatenate(list(groups.values()))
    N = len(combined)
    ranks = average_ranks(combined)

    rank_sums: dict[str, float] = {}
    start = 0
    for label, g in groups.items():
        rank_sums[label] = float(np.sum(ranks[start:start + len(g)]))
        start += len(g)

    h = 12.0 / (N * (N + 1)) * sum(
        rank_sums[label] ** 2 / len(g) for label, g in groups.items()
    ) - 3.0 * (N + 1)

    correction = 1.0 - tie_term(combined) / (N ** 3 - N)
    df = k - 1
    if correction <= 0:
        warnings_list.append("all observations are tied; no evidence of a location shift")
        h, p = 0.0, 1.0
    else:
        h = max(h / correction, 0.0)
        p = float(np.clip(sp_stats.chi2.sf(h, df), 0.0, 1.0))
    if has_ties(combined):
        warnings_list.append("ties present; H is tie-corrected")

    return NonParametricParams(
        test_kind='kruskal_wallis',
        method="Kruskal-Wallis rank sum test",
        statistic=float(h),
        statistic_name="H",
        z_statistic=None,
        df=df,
        p_value=p,
        alpha=design.alpha,
        alternative="two.sided",
        effect_size=float(h / (N - 1)),
        effect_size_name="epsilon-squared",
        medians={label: float(np.median(g)) for label, g in groups.items()},
        rank_sums=rank_sums,
        mean_ranks={label: rank_sums[label] / len(g) for label, g in groups.items()},
        sizes={label: len(g) for label, g in groups.items()},
        n=N,
        assumptions=(independence_note(),),
    ), warnings_list
