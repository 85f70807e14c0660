"""
Tests for correlation analysis.

Validates:
    - Pearson and Spearman coefficients and p-values against scipy.stats
    - Fisher z confidence interval
    - Symmetry and perfect correlation edge cases
    - Correlation matrix with pairwise deletion
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from statengine.correlation import correlation, correlation_matrix, pearson, spearman
from statengine.core.exceptions import (
    InsufficientDataError,
    InvalidParameterError,
    MismatchedLengthsError,
)


# ═══════════════════════════════════════════════════════════════════════
# Pairwise correlation
# ═══════════════════════════════════════════════════════════════════════


class TestPearson:

    def test_matches_scipy(self, linear_data):
        x, y = linear_data
        result = pearson(x, y)
        ref = sp_stats.pearsonr(x, y)
        assert result.method == 'pearson'
        assert result.r == pytest.approx(ref.statistic)
        assert result.p_value == pytest.approx(ref.pvalue, abs=1e-300)
        assert result.df == 48
        assert result.n == 50

    def test_fisher_interval(self, rng):
        x = rng.normal(size=30)
        y = 0.5 * x + rng.normal(size=30)
        result = pearson(x, y)
        z = np.arctanh(result.r)
        half = sp_stats.norm.ppf(0.975) / np.sqrt(27)
        np.testing.assert_allclose(result.confidence_interval, (np.tanh(z - half), np.tanh(z + half)))
        lo, hi = result.confidence_interval
        assert lo < result.r < hi

    def test_symmetric(self, rng):
        x, y = rng.normal(size=20), rng.normal(size=20)
        assert pearson(x, y).r == pytest.approx(pearson(y, x).r)

    def test_perfect_positive(self):
        result = pearson([1, 2, 3, 4], [2, 4, 6, 8])
        assert result.r == pytest.approx(1.0)
        assert result.p_value == 0.0
        assert math.isinf(result.t_statistic)

    def test_constant_variable(self):
        result = pearson([1, 2, 3, 4], [5, 5, 5, 5])
        assert math.isnan(result.r)
        assert result.has_warning('standard deviation is zero')

    def test_missing_pairs_dropped(self):
        result = pearson([1, 2, None, 4, 5], [2, 4, 6, None, 10])
        assert result.n == 3

    def test_too_few_pairs(self):
        with pytest.raises(InsufficientDataError):
            pearson([1, 2], [3, 4])

    def test_length_mismatch(self):
        with pytest.raises(MismatchedLengthsError):
            pearson([1, 2, 3], [1, 2])


class TestSpearman:

    def test_matches_scipy(self, rng):
        x = rng.normal(size=25)
        y = np.exp(x) + rng.normal(scale=0.1, size=25)
        result = spearman(x, y)
        ref = sp_stats.spearmanr(x, y)
        assert result.method == 'spearman'
        assert result.r == pytest.approx(ref.statistic)
        assert result.p_value == pytest.approx(ref.pvalue)

    def test_monotonic_is_one(self):
        result = spearman([1, 2, 3, 4, 5], [1, 4, 9, 16, 25])
        assert result.r == pytest.approx(1.0)

    def test_ties(self):
        x = [1, 2, 2, 3, 4, 4, 5]
        y = [2, 1, 3, 3, 5, 4, 6]
        assert spearman(x, y).r == pytest.approx(sp_stats.spearmanr(x, y).statistic)

    def test_unknown_method(self):
        with pytest.raises(InvalidParameterError):
            correlation([1, 2, 3], [1, 2, 3], method='kendall')


# ═══════════════════════════════════════════════════════════════════════
# Correlation matrix
# ═══════════════════════════════════════════════════════════════════════


class TestCorrelationMatrix:

    def test_perfect_relations(self):
        result = correlation_matrix({
            'x': [1, 2, 3, 4, 5],
            'y': [2, 4, 6, 8, 10],
            'z': [5, 4, 3, 2, 1],
        })
        assert result.variables == ('x', 'y', 'z')
        assert result.matrix[0, 0] == 1.0
        assert result.matrix[0, 1] == pytest.approx(1.0)
        assert result.matrix[0, 2] == pytest.approx(-1.0)
        assert result.get('z', 'x') == pytest.approx(-1.0)

    def test_symmetric_unit_diagonal(self, rng):
        data = {name: rng.normal(size=40) for name in 'abcd'}
        m = correlation_matrix(data).matrix
        np.testing.assert_allclose(m, m.T)
        np.testing.assert_array_equal(np.diag(m), np.ones(4))

    def test_matches_numpy(self, rng):
        data = {name: rng.normal(size=40) for name in 'abc'}
        m = correlation_matrix(data).matrix
        np.testing.assert_allclose(m, np.corrcoef(np.vstack(list(data.values()))))

    def test_pairwise_deletion(self):
        result = correlation_matrix({
            'x': [1, 2, 3, None, 5],
            'y': [2, 4, 6, 8, None],
        })
        assert result.pairwise_n[0, 1] == 3
        assert result.pairwise_n[0, 0] == 4
        assert result.matrix[0, 1] == pytest.approx(1.0)

    def test_spearman_matrix(self):
        result = correlation_matrix({'x': [1, 2, 3, 4, 5], 'y': [1, 8, 27, 64, 125]}, method='spearman')
        assert result.method == 'spearman'
        assert result.matrix[0, 1] == pytest.approx(1.0)

    def test_too_few_pairs_warns(self):
        result = correlation_matrix({'x': [1, None, 3], 'y': [None, 2, None]})
        assert math.isnan(result.matrix[0, 1])
        assert result.has_warning('fewer than 2 complete pairs')

    def test_single_variable(self):
        with pytest.raises(InsufficientDataError):
            correlation_matrix({'x': [1, 2, 3]})

    def test_dataframe_input(self):
        pd = pytest.importorskip('pandas')
        df = pd.DataFrame({'a': [1.0, 2.0, 3.0, 4.0], 'b': [4.0, 3.0, 2.0, 1.0]})
        result = correlation_matrix(df)
        assert result.variables == ('a', 'b')
        assert result.get('a', 'b') == pytest.approx(-1.0)
