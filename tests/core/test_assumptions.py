"""
Tests for the Result envelope and the shared assumption checks.

Validates:
    - Result immutability, default warnings and has_warning()
    - AssumptionCheck verdicts for normality, variance ratio and
      expected-count checks
    - Checks degrade to 'warning' instead of raising
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from statengine.core.assumptions import (
    AssumptionCheck,
    equal_variance_check,
    expected_count_check,
    independence_note,
    normality_check,
    variance_ratio_check,
)
from statengine.core.result import Result


# ═══════════════════════════════════════════════════════════════════════
# Result envelope
# ═══════════════════════════════════════════════════════════════════════


class TestResult:

    def test_default_warnings_empty(self):
        result = Result(params=1.0, info={}, timing=None, backend_name='cpu')
        assert result.warnings == ()
        assert not result.has_warning('anything')

    def test_has_warning_substring(self):
        result = Result(params=1.0, info={}, timing=None, backend_name='cpu',
                        warnings=("ties present; H is tie-corrected",))
        assert result.has_warning('ties')

    def test_frozen(self):
        result = Result(params=1.0, info={}, timing=None, backend_name='cpu')
        with pytest.raises(FrozenInstanceError):
            result.backend_name = 'other'


# ═══════════════════════════════════════════════════════════════════════
# Assumption checks
# ═══════════════════════════════════════════════════════════════════════


class TestNormalityCheck:

    def test_normal_data_passes(self, normal_sample):
        check = normality_check(normal_sample, 0.05)
        assert check.verdict == 'passed'
        assert check.passed
        assert check.test_used == 'Shapiro-Wilk'
        assert 0.05 < check.p_value <= 1.0

    def test_skewed_data_fails(self, skewed_sample):
        check = normality_check(skewed_sample, 0.05)
        assert check.verdict == 'failed'

    def test_too_small_is_warning(self):
        check = normality_check(np.array([1.0, 2.0]), 0.05)
        assert check.verdict == 'warning'
        assert check.p_value is None

    def test_constant_is_warning(self):
        check = normality_check(np.full(10, 3.0), 0.05)
        assert check.verdict == 'warning'


class TestVarianceChecks:

    def test_ratio_below_limit_passes(self):
        check = variance_ratio_check(np.array([1.0, 2, 3, 4]), np.array([1.5, 3, 4.5, 6]), "Equal variances")
        assert check.verdict == 'passed'
        assert check.statistic == pytest.approx(2.25)

    def test_ratio_above_limit_fails(self):
        check = variance_ratio_check(np.array([1.0, 2, 3]), np.array([10.0, 20, 30]), "Equal variances")
        assert check.verdict == 'failed'
        assert check.statistic == pytest.approx(100.0)

    def test_both_constant(self):
        check = variance_ratio_check(np.ones(3), np.ones(3), "Equal variances")
        assert check.statistic == 1.0

    def test_levene_homogeneous(self, rng):
        groups = {'a': rng.normal(0, 1, 30), 'b': rng.normal(1, 1, 30)}
        check = equal_variance_check(groups, 0.05)
        assert check.test_used.startswith('Levene')
        assert check.p_value is not None


class TestOtherChecks:

    def test_independence_note(self):
        check = independence_note()
        assert check.name == 'Independence'
        assert check.test_used == 'none'

    def test_expected_counts(self):
        assert expected_count_check(np.array([10.0, 12.0])).verdict == 'passed'
        small = expected_count_check(np.array([2.0, 12.0]))
        assert small.verdict == 'warning'
        assert small.statistic == 2.0

    def test_str(self):
        check = AssumptionCheck(name='N', test_used='T', verdict='passed', message='ok', p_value=0.5)
        assert str(check) == "[passed] N via T (p = 0.5): ok"
