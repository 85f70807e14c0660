"""
Common types for rank-based tests.

test_kind is 'mann_whitney', 'wilcoxon' or 'kruskal_wallis'.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from statengine.core.assumptions import AssumptionCheck


@dataclass(frozen=True)
class NonParametricParams:
    """
    Parameter payload for the rank tests.

    Attributes
    ----------
    statistic : float
        U = min(U1, U2), W = min(W+, W-) or H.
    z_statistic : float or None
        Normal approximation score (Mann-Whitney, Wilcoxon).
    df : int or None
        Chi-square degrees of freedom (Kruskal-Wallis).
    effect_size : float
        r = |z| / sqrt(N) for the two-sample tests, epsilon^2 = H / (N - 1)
        for Kruskal-Wallis.
    medians, rank_sums, mean_ranks, sizes : dict
        Keyed by group label. For the signed-rank test rank_sums holds
        'W+' and 'W-' and medians the median difference.
    """
    test_kind: str
    method: str
    statistic: float
    statistic_name: str
    z_statistic: float | None
    df: int | None
    p_value: float
    alpha: float
    alternative: str
    effect_size: float
    effect_size_name: str
    medians: dict[str, float]
    rank_sums: dict[str, float]
    mean_ranks: dict[str, float]
    sizes: dict[str, int]
    n: int
    assumptions: tuple[AssumptionCheck, ...] = field(default_factory=tuple)

    @property
    def significant(self) -> bool:
        return bool(self.p_value < self.alpha)
