"""
Public entry points for normality tests.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from statengine.normality.design import NormalityDesign
from statengine.normality.solution import NormalitySolution
from statengine.normality.backends.cpu import CPUNormalityBackend

NormalityMethod = Literal['shapiro', 'ks', 'anderson']


def normality_test(
    sample: ArrayLike | NormalityDesign,
    *,
    method: NormalityMethod = 'shapiro',
    alpha: float = 0.05,
) -> NormalitySolution:
    """
    Test whether a sample could come from a normal distribution.

    Parameters
    ----------
    sample : array-like or NormalityDesign
        Nullable numeric sequence; missing entries are dropped.
    method : str
        'shapiro' (Shapiro-Wilk, 3 <= n <= 5000), 'ks' (Kolmogorov-Smirnov
        against the normal with the sample mean and sd) or 'anderson'
        (Anderson-Darling).
    alpha : float
        Significance level; is_normal = p_value > alpha.
    """
    if isinstance(sample, NormalityDesign):
        design = sample
    else:
        design = NormalityDesign.for_test(sample, method=method, alpha=alpha)
    result = CPUNormalityBackend().solve(design)
    return NormalitySolution(_result=result, _design=design)


def shapiro_wilk(sample: ArrayLike, *, alpha: float = 0.05) -> NormalitySolution:
    """Shapiro-Wilk test. Requires 3 to 5000 valid observations."""
    return normality_test(sample, method='shapiro', alpha=alpha)


def kolmogorov_smirnov(sample: ArrayLike, *, alpha: float = 0.05) -> NormalitySolution:
    """Kolmogorov-Smirnov test against the fitted normal distribution."""
    return normality_test(sample, method='ks', alpha=alpha)


def anderson_darling(sample: ArrayLike, *, alpha: float = 0.05) -> NormalitySolution:
    """Anderson-Darling test with critical values and approximate p-value."""
    return normality_test(sample, method='anderson', alpha=alpha)
