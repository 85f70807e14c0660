"""
Tests for one-way ANOVA, Levene's test and Tukey HSD.

Validates:
    - F statistic, p-value and degrees of freedom against scipy.stats
    - Sum-of-squares identity and eta squared
    - Tukey HSD attached only for significant tests with more than two groups
    - Tukey p-values against scipy.stats.tukey_hsd
    - Levene (mean and median centred) against scipy.stats.levene
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from statengine.anova import anova_oneway, levene_test, tukey_hsd
from statengine.core.exceptions import InsufficientDataError, InvalidParameterError


GROUPS = {
    'Group A': [1, 2, 3, 4, 5],
    'Group B': [2, 3, 4, 5, 6],
    'Group C': [6, 7, 8, 9, 10],
}


# ═══════════════════════════════════════════════════════════════════════
# One-way ANOVA
# ═══════════════════════════════════════════════════════════════════════


class TestAnovaOneway:

    def test_matches_scipy(self):
        result = anova_oneway(GROUPS)
        ref = sp_stats.f_oneway(*GROUPS.values())
        assert result.test_kind == 'one_way_anova'
        assert result.f_statistic == pytest.approx(ref.statistic)
        assert result.p_value == pytest.approx(ref.pvalue)
        assert result.df == (2, 12)

    def test_group_stats(self):
        result = anova_oneway(GROUPS)
        assert len(result.group_stats) == 3
        first = result.group_stats[0]
        assert first.group == 'Group A'
        assert first.mean == 3.0
        assert first.n == 5
        assert first.sd == pytest.approx(np.std([1, 2, 3, 4, 5], ddof=1))

    def test_sums_of_squares(self):
        result = anova_oneway(GROUPS)
        assert result.ss_between + result.ss_within == pytest.approx(result.ss_total)
        assert result.eta_squared == pytest.approx(result.ss_between / result.ss_total)
        assert result.grand_mean == pytest.approx(np.mean(np.concatenate(list(GROUPS.values()))))

    def test_post_hoc_when_significant(self):
        result = anova_oneway(GROUPS)
        assert result.significant
        assert result.post_hoc is not None
        assert len(result.post_hoc) == 3
        assert result.post_hoc[0].comparison == 'Group A vs Group B'

    def test_no_post_hoc_for_two_groups(self):
        result = anova_oneway([[1, 2, 3, 4], [10, 11, 12, 13]])
        assert result.significant
        assert result.post_hoc is None

    def test_no_post_hoc_when_not_significant(self):
        result = anova_oneway([[1, 2, 3], [2, 3, 1], [3, 1, 2]])
        assert result.f_statistic == pytest.approx(0.0)
        assert not result.significant
        assert result.post_hoc is None

    def test_sequence_labels(self):
        result = anova_oneway([[1, 2, 3], [4, 5, 6]])
        assert [g.group for g in result.group_stats] == ['group1', 'group2']

    def test_array_rows_as_groups(self):
        result = anova_oneway(np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]]))
        assert [g.group for g in result.group_stats] == ['group1', 'group2', 'group3']
        assert result.df == (2, 6)

    def test_shifted_groups(self):
        groups = {'A': [1, 2, 3, 4, 5], 'B': [3, 4, 5, 6, 7], 'C': [5, 6, 7, 8, 9]}
        result = anova_oneway(groups)
        assert result.df_between == 2
        assert result.df_within == 12
        assert result.f_statistic == pytest.approx(8.0)
        assert result.eta_squared == pytest.approx(40 / 70)
        assert result.significant

    def test_missing_values_dropped(self):
        result = anova_oneway({'a': [1, 2, None, 3], 'b': [4, 5, 6, float('nan')]})
        assert result.n_obs == 6
        assert result.df == (1, 4)

    def test_zero_within_variance(self):
        result = anova_oneway([[1, 1, 1], [2, 2, 2]])
        assert math.isinf(result.f_statistic) or math.isnan(result.f_statistic)
        assert result.has_warning('within-group variance is zero')

    def test_assumptions(self):
        names = [a.name for a in anova_oneway(GROUPS).assumptions]
        assert 'Equal variances' in names
        assert 'Independence' in names

    def test_one_group_rejected(self):
        with pytest.raises(InsufficientDataError):
            anova_oneway({'a': [1, 2, 3]})

    def test_tiny_group_rejected(self):
        with pytest.raises(InsufficientDataError):
            anova_oneway({'a': [1, 2, 3], 'b': [4]})

    def test_summary(self):
        text = anova_oneway(GROUPS).summary()
        assert 'Group A' in text


# ═══════════════════════════════════════════════════════════════════════
# Tukey HSD
# ═══════════════════════════════════════════════════════════════════════


class TestTukeyHSD:

    def test_matches_scipy(self):
        result = tukey_hsd(GROUPS)
        ref = sp_stats.tukey_hsd(*GROUPS.values())
        pairs = {(0, 1): 0, (0, 2): 1, (1, 2): 2}
        for (i, j), idx in pairs.items():
            comp = result.comparisons[idx]
            assert comp.p_value == pytest.approx(ref.pvalue[i, j], rel=1e-4, abs=1e-8)
            assert comp.diff == pytest.approx(ref.statistic[i, j])

    def test_interval_contains_diff(self):
        for comp in tukey_hsd(GROUPS).comparisons:
            assert comp.ci_lower < comp.diff < comp.ci_upper

    def test_significance_flags(self):
        comps = {c.comparison: c for c in tukey_hsd(GROUPS).comparisons}
        assert not comps['Group A vs Group B'].significant
        assert comps['Group A vs Group C'].significant

    def test_conf_level(self):
        assert tukey_hsd(GROUPS, alpha=0.01).conf_level == pytest.approx(0.99)


# ═══════════════════════════════════════════════════════════════════════
# Levene
# ═══════════════════════════════════════════════════════════════════════


class TestLevene:

    @pytest.mark.parametrize("center", ['median', 'mean'])
    def test_matches_scipy(self, center, rng):
        groups = [rng.normal(0, 1, 20), rng.normal(0, 3, 20), rng.normal(0, 1, 15)]
        result = levene_test(groups, center=center)
        ref = sp_stats.levene(*groups, center=center)
        assert result.f_value == pytest.approx(ref.statistic)
        assert result.p_value == pytest.approx(ref.pvalue)
        assert result.center == center

    def test_group_variances(self):
        result = levene_test(GROUPS)
        assert result.group_vars['Group A'] == pytest.approx(2.5)

    def test_bad_center(self):
        with pytest.raises(InvalidParameterError):
            levene_test(GROUPS, center='trimmed')
