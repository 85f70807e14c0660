"""
Robust location and scale.

Public API:
    robust_statistics(sample, trim=0.1) -> RobustSolution
"""

from statengine.robust.solvers import robust_statistics
from statengine.robust.design import RobustDesign
from statengine.robust._common import RobustParams
from statengine.robust.solution import RobustSolution

__all__ = [
    "robust_statistics",
    "RobustDesign",
    "RobustParams",
    "RobustSolution",
]
