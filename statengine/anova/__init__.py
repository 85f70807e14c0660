"""
One-way analysis of variance.

Public API:
    anova_oneway(groups)    - F test, eta squared, group stats, Tukey HSD
    levene_test(groups)     - Levene / Brown-Forsythe homogeneity of variance
    tukey_hsd(groups)       - all pairwise comparisons
"""

from statengine.anova.solvers import anova_oneway, levene_test, tukey_hsd
from statengine.anova.design import AnovaDesign
from statengine.anova._common import (
    AnovaParams,
    GroupStats,
    LeveneParams,
    PostHocComparison,
    PostHocParams,
)
from statengine.anova.solution import AnovaSolution, LeveneSolution, PostHocSolution

__all__ = [
    "anova_oneway",
    "levene_test",
    "tukey_hsd",
    "AnovaDesign",
    "AnovaParams",
    "GroupStats",
    "LeveneParams",
    "PostHocComparison",
    "PostHocParams",
    "AnovaSolution",
    "LeveneSolution",
    "PostHocSolution",
]
