"""
Tests for frequency_analysis().

Validates:
    - Categorical counts in first-seen order with relative and
      cumulative frequencies
    - Equal-width histogram bins, last bin closed on the right
    - Missing values counted in null_count
    - Bin labels stay distinct for narrow ranges of large values
"""

import numpy as np
import pytest

from statengine.descriptive import frequency_analysis
from statengine.core.exceptions import InvalidParameterError, NonNumericDataError


class TestCategorical:

    def test_counts(self):
        result = frequency_analysis(['A', 'B', 'A', 'C', 'A', 'B'])
        assert result.frequencies == {'A': 3, 'B': 2, 'C': 1}
        assert result.relative_frequencies == pytest.approx({'A': 0.5, 'B': 1 / 3, 'C': 1 / 6})
        assert result.cumulative_frequencies == {'A': 3, 'B': 5, 'C': 6}
        assert result.total == 6
        assert result.histogram == ()

    def test_first_seen_order(self):
        result = frequency_analysis(['z', 'a', 'z'])
        assert list(result.frequencies) == ['z', 'a']

    def test_nulls_excluded(self):
        result = frequency_analysis(['A', None, 'B', 'A', None])
        assert result.frequencies == {'A': 2, 'B': 1}
        assert result.null_count == 2
        assert result.total == 3

    def test_numbers_as_labels(self):
        result = frequency_analysis([1, 2, 2])
        assert result.frequencies == {'1': 1, '2': 2}


class TestHistogram:

    def test_five_bins(self, one_to_ten):
        result = frequency_analysis(one_to_ten, bin_count=5)
        assert len(result.histogram) == 5
        assert [b.count for b in result.histogram] == [2, 2, 2, 2, 2]
        assert result.histogram[0].lower == 1.0
        assert result.histogram[-1].upper == 10.0
        assert sum(b.relative_frequency for b in result.histogram) == pytest.approx(1.0)

    def test_labels(self, one_to_ten):
        result = frequency_analysis(one_to_ten, bin_count=5)
        assert list(result.frequencies)[0] == "1-2.8"
        assert list(result.cumulative_frequencies.values())[-1] == 10

    def test_narrow_range_at_large_magnitude(self):
        values = 1_000_000 + np.arange(10) * 0.01
        result = frequency_analysis(values, bin_count=5)
        assert [b.count for b in result.histogram] == [2, 2, 2, 2, 2]
        assert len(result.frequencies) == 5
        assert sum(result.frequencies.values()) == result.total == 10
        assert list(result.cumulative_frequencies.values()) == [2, 4, 6, 8, 10]
        assert list(result.frequencies) == [b.label for b in result.histogram]

    def test_max_in_last_bin(self):
        result = frequency_analysis([0, 0, 0, 10], bin_count=2)
        assert [b.count for b in result.histogram] == [3, 1]

    def test_constant_values(self):
        result = frequency_analysis([3, 3, 3], bin_count=4)
        assert len(result.histogram) == 1
        assert result.histogram[0].count == 3
        assert result.has_warning('identical')

    def test_empty(self):
        result = frequency_analysis([None], bin_count=3)
        assert result.histogram == ()
        assert result.null_count == 1

    def test_non_numeric_rejected(self):
        with pytest.raises(NonNumericDataError):
            frequency_analysis(['a', 'b'], bin_count=2)

    def test_invalid_bin_count(self):
        with pytest.raises(InvalidParameterError):
            frequency_analysis([1, 2, 3], bin_count=0)
