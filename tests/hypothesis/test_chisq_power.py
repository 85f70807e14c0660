"""
Tests for chi-square tests, contingency tables and t-test power.

Validates:
    - Goodness of fit with equal and supplied expected counts
    - Independence test against scipy.stats.chi2_contingency
    - Cross-tabulation with missing values
    - Power and sample size for a two-sample t-test
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from statengine.hypothesis import (
    chisq_goodness_of_fit,
    chisq_independence,
    contingency_table,
    power_t_test,
    sample_size_t_test,
)
from statengine.core.exceptions import (
    InsufficientDataError,
    InvalidParameterError,
    MismatchedLengthsError,
)


# ═══════════════════════════════════════════════════════════════════════
# Goodness of fit
# ═══════════════════════════════════════════════════════════════════════


class TestGoodnessOfFit:

    def test_equal_expected(self):
        result = chisq_goodness_of_fit([10, 20, 30])
        assert result.test_kind == 'chi_square_gof'
        assert result.statistic == pytest.approx(10.0)
        assert result.df == 2
        assert result.p_value == pytest.approx(np.exp(-5.0))
        np.testing.assert_allclose(result.expected, [20.0, 20.0, 20.0])
        assert result.significant

    def test_proportions_rescaled(self):
        result = chisq_goodness_of_fit([25, 25, 50], [0.25, 0.25, 0.5])
        assert result.statistic == pytest.approx(0.0)
        assert result.p_value == pytest.approx(1.0)
        assert not result.warnings

    def test_counts_rescaled_with_warning(self):
        result = chisq_goodness_of_fit([10, 10], [1, 3])
        np.testing.assert_allclose(result.expected, [5.0, 15.0])
        assert result.has_warning('rescaled')

    def test_small_expected_warns(self):
        assert chisq_goodness_of_fit([1, 2, 3]).has_warning('approximation')

    def test_length_mismatch(self):
        with pytest.raises(MismatchedLengthsError):
            chisq_goodness_of_fit([1, 2, 3], [1, 2])

    def test_negative_counts(self):
        with pytest.raises(InvalidParameterError):
            chisq_goodness_of_fit([5, -1])

    def test_single_category(self):
        with pytest.raises(InsufficientDataError):
            chisq_goodness_of_fit([5])


# ═══════════════════════════════════════════════════════════════════════
# Independence
# ═══════════════════════════════════════════════════════════════════════


class TestIndependence:

    TABLE = [[20, 15, 10], [10, 20, 25], [15, 10, 30]]

    def test_matches_scipy(self):
        result = chisq_independence(self.TABLE)
        stat, p, dof, expected = sp_stats.chi2_contingency(self.TABLE, correction=False)
        assert result.statistic == pytest.approx(stat)
        assert result.p_value == pytest.approx(p)
        assert result.df == dof == 4
        np.testing.assert_allclose(result.expected, expected)

    def test_cramers_v(self):
        result = chisq_independence(self.TABLE)
        n = np.sum(self.TABLE)
        assert result.cramers_v == pytest.approx(np.sqrt(result.statistic / (n * 2)))
        assert 0.0 <= result.cramers_v <= 1.0

    def test_no_association(self):
        result = chisq_independence([[10, 20], [20, 40]])
        assert result.statistic == pytest.approx(0.0, abs=1e-12)
        assert not result.significant

    def test_table_too_small(self):
        with pytest.raises(InsufficientDataError):
            chisq_independence([[1, 2, 3]])


class TestContingencyTable:

    def test_counts_and_totals(self):
        rows = ['A', 'A', 'A', 'B', 'B', 'B']
        cols = ['X', 'X', 'Y', 'X', 'X', 'Y']
        result = contingency_table(rows, cols, row_variable='Category', column_variable='Group')
        assert result.row_variable == 'Category'
        assert result.column_variable == 'Group'
        assert result.row_labels == ('A', 'B')
        assert result.column_labels == ('X', 'Y')
        np.testing.assert_array_equal(result.table, [[2, 1], [2, 1]])
        np.testing.assert_array_equal(result.row_totals, [3, 3])
        np.testing.assert_array_equal(result.column_totals, [4, 2])
        assert result.grand_total == 6
        assert result.count('A', 'Y') == 1

    def test_chi_square_attached(self):
        result = contingency_table(['A', 'A', 'B', 'B'], ['X', 'Y', 'X', 'Y'])
        assert result.chi_square is not None
        assert result.chi_square.df == 1

    def test_missing_pairs_excluded(self):
        result = contingency_table(['A', 'B', None], ['Y', None, 'X'])
        assert result.grand_total == 1
        assert result.n_excluded == 2
        assert result.chi_square is None
        assert result.has_warning('2x2')

    def test_length_mismatch(self):
        with pytest.raises(MismatchedLengthsError):
            contingency_table(['A', 'B'], ['X'])


# ═══════════════════════════════════════════════════════════════════════
# Power
# ═══════════════════════════════════════════════════════════════════════


class TestPower:

    def test_two_sample_power(self):
        result = power_t_test(0.8, 20)
        assert result.kind == 'two_sample'
        assert result.power == pytest.approx(0.6934, abs=1e-3)

    def test_power_increases_with_n(self):
        assert power_t_test(0.5, 50).power > power_t_test(0.5, 20).power

    def test_sample_size(self):
        result = sample_size_t_test(0.8, 0.8)
        assert result.n == 26
        assert result.power >= 0.8

    def test_sample_size_paired(self):
        result = sample_size_t_test(0.5, 0.8, kind='paired')
        assert result.n == 34

    def test_zero_effect_rejected(self):
        with pytest.raises(InvalidParameterError):
            sample_size_t_test(0.0, 0.8)

    def test_bad_power(self):
        with pytest.raises(InvalidParameterError):
            sample_size_t_test(0.5, 1.5)

    def test_n_too_small(self):
        with pytest.raises(InvalidParameterError):
            power_t_test(0.5, 1)
