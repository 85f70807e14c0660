"""
Tests for the test advisor.

Validates:
    - Column type inference (80% numeric threshold, missing values ignored)
    - Suggestions per variable layout, sorted by confidence
    - Small-sample penalty and rank-based alternatives
    - run_test dispatch by display name, tag or suggestion
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from statengine.advisor import (
    infer_data_type,
    suggest_tests,
    run_test,
    TestSuggestion,
    TEST_REGISTRY,
)
from statengine.core.exceptions import (
    InvalidParameterError,
    UnsupportedConfigurationError,
)


def _names(suggestions):
    return [s.test_name for s in suggestions]


# ═══════════════════════════════════════════════════════════════════════
# Type inference
# ═══════════════════════════════════════════════════════════════════════


class TestInferDataType:

    def test_numbers(self):
        assert infer_data_type([1, 2.5, 3]) == "numeric"

    def test_numeric_strings(self):
        assert infer_data_type(["1", " 2.5 ", "-3e2"]) == "numeric"

    def test_labels(self):
        assert infer_data_type(["a", "b", "a"]) == "categorical"

    def test_threshold_is_strict(self):
        # 4 of 5 parse: exactly 80% is not enough
        assert infer_data_type(["1", "2", "3", "4", "x"]) == "categorical"
        assert infer_data_type(["1", "2", "3", "4", "5", "6", "7", "8", "9", "x"]) == "numeric"

    def test_missing_ignored(self):
        assert infer_data_type([None, 1.0, float("nan"), 2.0]) == "numeric"

    def test_all_missing(self):
        assert infer_data_type([None, None]) == "categorical"
        assert infer_data_type([]) == "categorical"

    def test_booleans_are_not_numbers(self):
        assert infer_data_type([True, False, True]) == "categorical"


# ═══════════════════════════════════════════════════════════════════════
# Suggestions
# ═══════════════════════════════════════════════════════════════════════


class TestSuggestTests:

    def test_single_numeric(self):
        result = suggest_tests({'score': 'numeric'}, {'score': 50})
        assert _names(result) == ["Normality Tests", "One-Sample t-test"]
        assert result[0].confidence == pytest.approx(0.9)

    def test_two_numeric_unpaired(self):
        result = suggest_tests({'x': 'numeric', 'y': 'numeric'}, {'x': 40, 'y': 40})
        assert set(_names(result)) == {
            "Independent t-test", "Linear Regression", "Correlation Analysis",
        }
        assert result[-1].test_name == "Linear Regression"

    def test_two_numeric_paired(self):
        result = suggest_tests({'pre': 'numeric', 'post': 'numeric'},
                               {'pre': 40, 'post': 40}, paired=True)
        assert _names(result) == ["Paired t-test"]

    def test_many_groups(self):
        result = suggest_tests({'y': 'numeric', 'g': 'categorical'},
                               {'y': 60, 'g': 60}, n_groups=3)
        assert _names(result) == ["One-Way ANOVA"]

    def test_two_categorical(self):
        result = suggest_tests({'a': 'categorical', 'b': 'categorical'}, {'a': 100, 'b': 100})
        assert _names(result) == ["Chi-Square Test of Independence"]
        assert "Fisher's Exact Test" in result[0].alternatives

    def test_small_sample_unpaired(self):
        result = suggest_tests({'x': 'numeric', 'y': 'numeric'}, {'x': 12, 'y': 40})
        assert result[0].test_name == "Mann-Whitney U Test"
        assert result[0].confidence == pytest.approx(0.95)
        by_name = {s.test_name: s for s in result}
        assert by_name["Independent t-test"].confidence == pytest.approx(0.81)
        # no alternatives listed, so no penalty
        assert by_name["Linear Regression"].confidence == pytest.approx(0.8)

    def test_small_sample_paired(self):
        result = suggest_tests({'pre': 'numeric', 'post': 'numeric'},
                               {'pre': 10, 'post': 10}, paired=True)
        assert _names(result) == ["Wilcoxon Signed-Rank Test", "Paired t-test"]

    def test_small_sample_many_groups(self):
        result = suggest_tests({'y': 'numeric', 'g': 'categorical'},
                               {'y': 15, 'g': 15}, n_groups=4)
        assert _names(result) == ["Kruskal-Wallis Test", "One-Way ANOVA"]

    def test_sorted_descending(self):
        result = suggest_tests({'x': 'numeric', 'y': 'numeric'}, {'x': 5, 'y': 5})
        confidences = [s.confidence for s in result]
        assert confidences == sorted(confidences, reverse=True)

    def test_no_variables(self):
        with pytest.raises(InvalidParameterError):
            suggest_tests({}, {})

    def test_unknown_type(self):
        with pytest.raises(UnsupportedConfigurationError):
            suggest_tests({'x': 'ordinal'}, {'x': 10})

    def test_str(self):
        text = str(suggest_tests({'score': 'numeric'}, {'score': 50})[0])
        assert text.startswith("Normality Tests (diagnostic")


# ═══════════════════════════════════════════════════════════════════════
# Dispatch
# ═══════════════════════════════════════════════════════════════════════


class TestRunTest:

    def test_every_suggestion_is_runnable(self):
        layouts = [
            ({'x': 'numeric'}, {'x': 10}, {}),
            ({'x': 'numeric', 'y': 'numeric'}, {'x': 10, 'y': 10}, {}),
            ({'x': 'numeric', 'y': 'numeric'}, {'x': 10, 'y': 10}, {'paired': True}),
            ({'y': 'numeric', 'g': 'categorical'}, {'y': 10, 'g': 10}, {'n_groups': 3}),
            ({'a': 'categorical', 'b': 'categorical'}, {'a': 10, 'b': 10}, {}),
        ]
        for types, sizes, kwargs in layouts:
            for s in suggest_tests(types, sizes, **kwargs):
                assert s.test_name in TEST_REGISTRY
                for alt in s.alternatives:
                    if alt != "Fisher's Exact Test":
                        assert alt in TEST_REGISTRY

    def test_by_display_name(self, rng):
        g1, g2 = rng.normal(0, 1, 20), rng.normal(1, 1, 20)
        result = run_test("Independent t-test", g1, g2, equal_variances=False)
        expected = sp_stats.ttest_ind(g1, g2, equal_var=False)
        assert result.p_value == pytest.approx(expected.pvalue, rel=1e-6)

    def test_by_tag(self):
        result = run_test("one_sample_t", [1.0, 2.0, 3.0, 4.0], 2.5)
        assert result.t_statistic == pytest.approx(0.0)

    def test_by_suggestion(self, linear_data):
        x, y = linear_data
        suggestion = [s for s in suggest_tests({'x': 'numeric', 'y': 'numeric'}, {'x': 50, 'y': 50})
                      if s.test_name == "Correlation Analysis"][0]
        result = run_test(suggestion, x, y)
        assert result.r == pytest.approx(np.corrcoef(x, y)[0, 1])

    def test_chi_square_from_sequences(self):
        rows = ["a", "a", "b", "b", "a", "b"]
        cols = ["x", "y", "x", "y", "x", "y"]
        result = run_test("Chi-Square Test of Independence", rows, cols)
        assert result.grand_total == 6

    def test_chi_square_from_table(self):
        result = run_test("chi_square_independence", [[10, 20], [20, 10]])
        assert result.df == 1

    def test_unknown_name(self):
        with pytest.raises(UnsupportedConfigurationError):
            run_test("Fisher's Exact Test", [[1, 2], [3, 4]])

    def test_suggestion_type(self):
        assert isinstance(suggest_tests({'x': 'numeric'}, {'x': 5})[0], TestSuggestion)
