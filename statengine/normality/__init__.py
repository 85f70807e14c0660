"""
Normality tests.

Public API:
    shapiro_wilk(sample)          - W statistic, Royston p-value
    kolmogorov_smirnov(sample)    - D against the fitted normal
    anderson_darling(sample)      - A^2, critical values, approximate p-value
    normality_test(sample, method)
"""

from statengine.normality.solvers import (
    normality_test,
    shapiro_wilk,
    kolmogorov_smirnov,
    anderson_darling,
)
from statengine.normality.design import NormalityDesign
from statengine.normality._common import NormalityParams
from statengine.normality.solution import NormalitySolution

__all__ = [
    "normality_test",
    "shapiro_wilk",
    "kolmogorov_smirnov",
    "anderson_darling",
    "NormalityDesign",
    "NormalityParams",
    "NormalitySolution",
]
