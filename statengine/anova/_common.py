"""
Common data types for one-way ANOVA.

Frozen parameter payloads that go inside Result[P] envelopes.
"""

from dataclasses import dataclass, field

from statengine.core.assumptions import AssumptionCheck


@dataclass(frozen=True)
class GroupStats:
    """Summary of one group."""
    group: str
    n: int
    mean: float
    sd: float
    se: float


@dataclass(frozen=True)
class LeveneParams:
    """Parameter payload for Levene / Brown-Forsythe test."""
    f_value: float
    p_value: float
    df_between: int
    df_within: int
    center: str                     # 'mean' or 'median'
    group_vars: dict[str, float]    # group -> variance


@dataclass(frozen=True)
class PostHocComparison:
    """
    One pairwise comparison.

    diff is mean(group1) - mean(group2). p_value is already adjusted for
    the family of comparisons.
    """
    group1: str
    group2: str
    diff: float
    se: float
    q_statistic: float
    ci_lower: float
    ci_upper: float
    p_value: float
    significant: bool

    @property
    def comparison(self) -> str:
        return f"{self.group1} vs {self.group2}"


@dataclass(frozen=True)
class PostHocParams:
    """Parameter payload for Tukey HSD."""
    method: str
    comparisons: tuple[PostHocComparison, ...]
    conf_level: float
    mse: float
    df_error: int


@dataclass(frozen=True)
class AnovaParams:
    """
    Parameter payload for one-way ANOVA.

    ss_total = ss_between + ss_within; eta_squared = ss_between / ss_total.
    post_hoc is populated when the F test is significant with more than
    two groups.
    """
    test_kind: str
    ss_between: float
    ss_within: float
    ss_total: float
    df_between: int
    df_within: int
    ms_between: float
    ms_within: float
    f_statistic: float
    p_value: float
    eta_squared: float
    alpha: float
    group_stats: tuple[GroupStats, ...]
    grand_mean: float
    n_obs: int
    post_hoc: PostHocParams | None = None
    assumptions: tuple[AssumptionCheck, ...] = field(default_factory=tuple)

    @property
    def significant(self) -> bool:
        return bool(self.p_value < self.alpha)
