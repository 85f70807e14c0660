"""
Common types for normality tests.
"""

from __future__ import annotations

from dataclasses import dataclass

NORMALITY_METHODS = ('shapiro', 'ks', 'anderson')

TEST_KINDS = {
    'shapiro': 'shapiro_wilk',
    'ks': 'kolmogorov_smirnov',
    'anderson': 'anderson_darling',
}

METHOD_NAMES = {
    'shapiro': 'Shapiro-Wilk normality test',
    'ks': 'One-sample Kolmogorov-Smirnov test (normal, estimated parameters)',
    'anderson': 'Anderson-Darling normality test',
}

STATISTIC_NAMES = {
    'shapiro': 'W',
    'ks': 'D',
    'anderson': 'A',
}

MIN_N = 3
SHAPIRO_MAX_N = 5000


@dataclass(frozen=True)
class NormalityParams:
    """
    Parameter payload for a normality test.

    critical_values maps significance level (percent) to the critical value
    of the statistic; only the Anderson-Darling test populates it.
    """
    test_kind: str
    method: str
    statistic: float
    statistic_name: str
    p_value: float
    alpha: float
    is_normal: bool
    n: int
    critical_values: dict[float, float] | None = None


# Stephens (1974) case 3 critical values for A^2 (mean and sd estimated),
# divided by 1 + 4/n - 25/n^2 at sample size n
AD_SIGNIFICANCE_LEVELS = (15.0, 10.0, 5.0, 2.5, 1.0)
AD_CRITICAL_VALUES = (0.576, 0.656, 0.787, 0.918, 1.092)
