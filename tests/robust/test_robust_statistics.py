"""
Tests for robust summaries.

Validates:
    - Median and MAD of a sample with one gross outlier
    - Robust measures move less than the mean and sd under contamination
    - Trimmed and winsorized means against scipy.stats
    - Trim validation and the zero-MAD warning
"""

import numpy as np
import pytest
from scipy import stats as sp_stats
from scipy.stats import mstats

from statengine.robust import robust_statistics
from statengine.core.exceptions import InsufficientDataError, InvalidParameterError


class TestRobustStatistics:

    def test_outlier_sample(self):
        result = robust_statistics([1, 2, 3, 4, 5, 100])
        assert result.median == 3.5
        assert result.mad == 1.5
        assert result.scaled_mad == pytest.approx(1.4826 * 1.5)
        assert result.mean == pytest.approx(115 / 6)

    def test_less_sensitive_than_mean(self, rng):
        clean = rng.normal(10, 1, 50)
        dirty = np.append(clean, [500.0, 600.0])
        a, b = robust_statistics(clean, trim=0.1), robust_statistics(dirty, trim=0.1)
        assert abs(b.median - a.median) < abs(b.mean - a.mean)
        assert abs(b.trimmed_mean - a.trimmed_mean) < abs(b.mean - a.mean)
        assert abs(b.scaled_mad - a.scaled_mad) < abs(b.standard_deviation - a.standard_deviation)

    def test_trimmed_mean(self, skewed_sample):
        result = robust_statistics(skewed_sample, trim=0.2)
        assert result.trimmed_mean == pytest.approx(sp_stats.trim_mean(skewed_sample, 0.2))

    def test_winsorized_mean(self, skewed_sample):
        result = robust_statistics(skewed_sample, trim=0.1)
        expected = float(np.mean(mstats.winsorize(skewed_sample, limits=(0.1, 0.1))))
        assert result.winsorized_mean == pytest.approx(expected)

    def test_small_trim(self):
        result = robust_statistics([1, 2, 3, 4, 5, 100], trim=0.2)
        assert result.trimmed_mean == pytest.approx(3.5)
        assert result.winsorized_mean == pytest.approx(3.5)

    def test_zero_trim_is_mean(self, normal_sample):
        result = robust_statistics(normal_sample, trim=0.0)
        assert result.trimmed_mean == pytest.approx(result.mean)
        assert result.winsorized_mean == pytest.approx(result.mean)

    def test_iqr(self, one_to_ten):
        assert robust_statistics(one_to_ten).iqr == pytest.approx(4.5)

    def test_zero_mad_warns(self):
        result = robust_statistics([5, 5, 5, 6])
        assert result.mad == 0.0
        assert result.has_warning('MAD is zero')

    def test_to_dict(self):
        d = robust_statistics([1, 2, 3, 4, 5, 100]).to_dict()
        assert d['median'] == 3.5
        assert d['mad'] == 1.5

    def test_missing_dropped(self):
        assert robust_statistics([1, None, 3]).n == 2

    @pytest.mark.parametrize("trim", [-0.1, 0.5, 0.7])
    def test_bad_trim(self, trim):
        with pytest.raises(InvalidParameterError):
            robust_statistics([1, 2, 3], trim=trim)

    def test_empty(self):
        with pytest.raises(InsufficientDataError):
            robust_statistics([])
