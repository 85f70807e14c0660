"""
Tests for bootstrap intervals and permutation tests.

Validates:
    - Seeded runs are reproducible; different seeds differ
    - Percentile, basic and normal intervals relate to the replicates
      as defined
    - Bias and standard error of the replicates
    - Permutation p-values for null and clearly separated groups
    - Parameter validation
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from statengine.montecarlo import bootstrap_ci, permutation_test
from statengine.core.exceptions import InsufficientDataError, InvalidParameterError


# ═══════════════════════════════════════════════════════════════════════
# Bootstrap
# ═══════════════════════════════════════════════════════════════════════


class TestBootstrap:

    def test_reproducible(self, normal_sample):
        a = bootstrap_ci(normal_sample, seed=7)
        b = bootstrap_ci(normal_sample, seed=7)
        np.testing.assert_array_equal(a.replicates, b.replicates)
        assert a.confidence_interval == b.confidence_interval

    def test_seed_changes_replicates(self, normal_sample):
        a = bootstrap_ci(normal_sample, seed=1)
        b = bootstrap_ci(normal_sample, seed=2)
        assert not np.array_equal(a.replicates, b.replicates)

    def test_percentile_interval(self, normal_sample):
        result = bootstrap_ci(normal_sample, n_resamples=2000, seed=3)
        assert result.observed == pytest.approx(np.mean(normal_sample))
        assert result.lower <= result.observed <= result.upper
        assert result.lower == pytest.approx(np.quantile(result.replicates, 0.025))
        assert result.upper == pytest.approx(np.quantile(result.replicates, 0.975))
        assert len(result.replicates) == 2000

    def test_bias_and_se(self, normal_sample):
        result = bootstrap_ci(normal_sample, seed=4)
        assert result.bias == pytest.approx(np.mean(result.replicates) - result.observed)
        assert result.standard_error == pytest.approx(np.std(result.replicates, ddof=1))
        assert result.standard_error == pytest.approx(
            np.std(normal_sample, ddof=1) / np.sqrt(100), rel=0.2,
        )

    def test_basic_interval(self, normal_sample):
        pct = bootstrap_ci(normal_sample, seed=5)
        basic = bootstrap_ci(normal_sample, method='basic', seed=5)
        t0 = pct.observed
        assert basic.lower == pytest.approx(2 * t0 - pct.upper)
        assert basic.upper == pytest.approx(2 * t0 - pct.lower)

    def test_normal_interval(self, normal_sample):
        result = bootstrap_ci(normal_sample, method='normal', seed=6)
        z = sp_stats.norm.ppf(0.975)
        center = 2 * result.observed - np.mean(result.replicates)
        assert result.lower == pytest.approx(center - z * result.standard_error)
        assert result.upper == pytest.approx(center + z * result.standard_error)

    def test_wider_at_higher_level(self, normal_sample):
        narrow = bootstrap_ci(normal_sample, confidence_level=0.8, seed=8)
        wide = bootstrap_ci(normal_sample, confidence_level=0.99, seed=8)
        assert wide.upper - wide.lower > narrow.upper - narrow.lower

    def test_custom_statistic(self, skewed_sample):
        result = bootstrap_ci(skewed_sample, np.median, seed=9)
        assert result.observed == pytest.approx(np.median(skewed_sample))

    def test_single_observation_warns(self):
        result = bootstrap_ci([4.2], seed=0, n_resamples=50)
        assert result.lower == result.upper == 4.2
        assert result.has_warning('single observation')

    def test_missing_dropped(self):
        result = bootstrap_ci([1.0, None, 3.0], seed=0, n_resamples=10)
        assert result.observed == 2.0

    def test_empty(self):
        with pytest.raises(InsufficientDataError):
            bootstrap_ci([None, None])

    def test_invalid_parameters(self):
        with pytest.raises(InvalidParameterError):
            bootstrap_ci([1, 2, 3], confidence_level=1.0)
        with pytest.raises(InvalidParameterError):
            bootstrap_ci([1, 2, 3], n_resamples=0)
        with pytest.raises(InvalidParameterError):
            bootstrap_ci([1, 2, 3], method='bca')
        with pytest.raises(InvalidParameterError):
            bootstrap_ci([1, 2, 3], statistic="mean")


# ═══════════════════════════════════════════════════════════════════════
# Permutation test
# ═══════════════════════════════════════════════════════════════════════


class TestPermutation:

    def test_separated_groups(self):
        result = permutation_test(range(1, 11), range(101, 111), seed=1)
        assert result.observed == pytest.approx(-100.0)
        assert result.observed_difference == result.observed
        assert result.p_value < 0.01

    def test_identical_groups(self):
        result = permutation_test([1, 2, 3, 4], [1, 2, 3, 4], seed=1)
        assert result.p_value == 1.0

    def test_one_sided(self):
        g1, g2 = [8, 9, 10, 11, 12], [1, 2, 3, 4, 5]
        assert permutation_test(g1, g2, alternative='greater', seed=2).p_value < 0.05
        assert permutation_test(g1, g2, alternative='less', seed=2).p_value > 0.95

    def test_reproducible(self, rng):
        x, y = rng.normal(size=15), rng.normal(size=12)
        a = permutation_test(x, y, seed=11, n_permutations=200)
        b = permutation_test(x, y, seed=11, n_permutations=200)
        np.testing.assert_array_equal(a.permuted, b.permuted)
        assert a.p_value == b.p_value
        assert a.n_permutations == 200

    def test_custom_statistic(self):
        def median_diff(x, y):
            return float(np.median(x) - np.median(y))

        result = permutation_test([1, 2, 3], [4, 5, 6], median_diff, seed=3)
        assert result.observed == -3.0

    def test_bad_alternative(self):
        with pytest.raises(InvalidParameterError):
            permutation_test([1, 2], [3, 4], alternative='two-sided')

    def test_empty_group(self):
        with pytest.raises(InsufficientDataError):
            permutation_test([], [1, 2])
