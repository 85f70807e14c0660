"""
Rank-based alternatives to the parametric tests.

Public API:
    mann_whitney_u(group1, group2)       - two independent groups
    wilcoxon_signed_rank(before, after)  - paired samples
    kruskal_wallis(groups)               - k independent groups
"""

from statengine.nonparametric.solvers import (
    mann_whitney_u,
    wilcoxon_signed_rank,
    kruskal_wallis,
)
from statengine.nonparametric.design import NonParametricDesign
from statengine.nonparametric._common import NonParametricParams
from statengine.nonparametric.solution import NonParametricSolution

__all__ = [
    "mann_whitney_u",
    "wilcoxon_signed_rank",
    "kruskal_wallis",
    "NonParametricDesign",
    "NonParametricParams",
    "NonParametricSolution",
]
