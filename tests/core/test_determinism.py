"""
Repeated calls on identical input.

Validates:
    - Every non-resampling entry point returns bit-identical values when
      called twice with the same data
"""

import numpy as np
import pytest

from statengine.anova import anova_oneway
from statengine.correlation import correlation_matrix, pearson, spearman
from statengine.descriptive import describe, detect_outliers, frequency_analysis, percentiles
from statengine.hypothesis import (
    chisq_goodness_of_fit,
    chisq_independence,
    independent_t_test,
    paired_t_test,
    power_t_test,
)
from statengine.nonparametric import kruskal_wallis, mann_whitney_u, wilcoxon_signed_rank
from statengine.normality import anderson_darling, kolmogorov_smirnov, shapiro_wilk
from statengine.regression import linear_regression, regression_diagnostics, robust_fit


_rng = np.random.default_rng(99)
X = _rng.normal(0, 1, 40)
Y = 1.5 * X + _rng.normal(0, 1, 40)
Z = _rng.exponential(2, 40)
Y[7] = 25.0


def _describe():
    return tuple(describe(Z).to_dict().values())


def _outliers():
    r = detect_outliers(Y, method='modified_zscore')
    return r.indices, r.outliers


def _frequency():
    r = frequency_analysis(Z, bin_count=6)
    return tuple(r.frequencies.items())


def _percentiles():
    return tuple(percentiles(Z, [5, 50, 95]).values())


def _stat_p(fn, *args, **kwargs):
    def call():
        r = fn(*args, **kwargs)
        return r.statistic, r.p_value
    return call


def _regression():
    r = linear_regression(X, Y)
    return r.coefficients, r.p_values, r.residuals, r.r_squared


def _diagnostics():
    r = regression_diagnostics(X, Y)
    return r.leverage, r.cooks_distance, r.durbin_watson


def _huber():
    r = robust_fit(X, Y, method='huber')
    return r.slope, r.intercept, r.iterations


def _matrix():
    r = correlation_matrix({'x': X, 'y': Y, 'z': Z}, method='spearman')
    return r.matrix, r.p_values


CALLS = {
    'describe': _describe,
    'detect_outliers': _outliers,
    'frequency_analysis': _frequency,
    'percentiles': _percentiles,
    'shapiro_wilk': _stat_p(shapiro_wilk, Z),
    'kolmogorov_smirnov': _stat_p(kolmogorov_smirnov, Z),
    'anderson_darling': _stat_p(anderson_darling, Z),
    'independent_t_test': _stat_p(independent_t_test, X, Y, equal_variances=False),
    'paired_t_test': _stat_p(paired_t_test, X, Y),
    'anova_oneway': _stat_p(anova_oneway, [X, Y, Z]),
    'chisq_goodness_of_fit': _stat_p(chisq_goodness_of_fit, [12, 30, 18]),
    'chisq_independence': _stat_p(chisq_independence, [[12, 5], [7, 14]]),
    'pearson': lambda: (pearson(X, Y).r, pearson(X, Y).p_value),
    'spearman': lambda: (spearman(X, Z).r, spearman(X, Z).p_value),
    'mann_whitney_u': _stat_p(mann_whitney_u, X, Z),
    'wilcoxon_signed_rank': _stat_p(wilcoxon_signed_rank, X, Y),
    'kruskal_wallis': _stat_p(kruskal_wallis, [X, Y, Z]),
    'power_t_test': lambda: power_t_test(0.5, 30).power,
    'linear_regression': _regression,
    'regression_diagnostics': _diagnostics,
    'robust_fit': _huber,
    'correlation_matrix': _matrix,
}


class TestRepeatedCalls:

    @pytest.mark.parametrize("name", sorted(CALLS))
    def test_bit_identical(self, name):
        first = CALLS[name]()
        second = CALLS[name]()
        if not isinstance(first, tuple):
            first, second = (first,), (second,)
        assert len(first) == len(second)
        for a, b in zip(first, second):
            np.testing.assert_array_equal(a, b)
