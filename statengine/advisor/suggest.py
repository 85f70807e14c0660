"""
Rule-based test recommendations.

Rules by variable layout:
    1 numeric                -> one-sample t (0.8), normality tests (0.9)
    2 numeric, paired        -> paired t (0.9)
    2 numeric, unpaired      -> independent t (0.9), regression (0.8), correlation (0.9)
    n_groups > 2             -> one-way ANOVA (0.9)
    2 categorical            -> chi-square independence (0.9)

With a smallest sample below SMALL_SAMPLE_THRESHOLD, suggestions that
list alternatives are scaled by SMALL_SAMPLE_PENALTY and rank-based
tests are added at 0.95.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Mapping

from statengine.core.exceptions import (
    InvalidParameterError,
    UnsupportedConfigurationError,
)
from statengine.advisor._common import (
    DATA_TYPES,
    SMALL_SAMPLE_THRESHOLD,
    SMALL_SAMPLE_PENALTY,
    TestSuggestion,
)

ONE_SAMPLE_T = TestSuggestion(
    test_name="One-Sample t-test",
    test_type="parametric",
    reason="Compare sample mean to known population mean",
    assumptions=("Normality", "Independence"),
    alternatives=("Wilcoxon Signed-Rank Test",),
    confidence=0.8,
)
NORMALITY = TestSuggestion(
    test_name="Normality Tests",
    test_type="diagnostic",
    reason="Test if data follows normal distribution",
    assumptions=("Independence",),
    confidence=0.9,
)
PAIRED_T = TestSuggestion(
    test_name="Paired t-test",
    test_type="parametric",
    reason="Compare means of paired observations",
    assumptions=("Normality of differences", "Independence"),
    alternatives=("Wilcoxon Signed-Rank Test",),
    confidence=0.9,
)
INDEPENDENT_T = TestSuggestion(
    test_name="Independent t-test",
    test_type="parametric",
    reason="Compare means of two independent groups",
    assumptions=("Normality", "Equal variances", "Independence"),
    alternatives=("Mann-Whitney U Test",),
    confidence=0.9,
)
LINEAR_REGRESSION = TestSuggestion(
    test_name="Linear Regression",
    test_type="regression",
    reason="Model relationship between variables",
    assumptions=("Linearity", "Normality of residuals", "Homoscedasticity"),
    confidence=0.8,
)
CORRELATION = TestSuggestion(
    test_name="Correlation Analysis",
    test_type="association",
    reason="Measure strength of linear relationship",
    assumptions=("Linearity", "Normality (for significance testing)"),
    alternatives=("Spearman Correlation",),
    confidence=0.9,
)
ONE_WAY_ANOVA = TestSuggestion(
    test_name="One-Way ANOVA",
    test_type="parametric",
    reason="Compare means across multiple groups",
    assumptions=("Normality", "Homogeneity of variances", "Independence"),
    alternatives=("Kruskal-Wallis Test",),
    confidence=0.9,
)
CHI_SQUARE = TestSuggestion(
    test_name="Chi-Square Test of Independence",
    test_type="non-parametric",
    reason="Test association between categorical variables",
    assumptions=("Expected frequencies >= 5", "Independence"),
    alternatives=("Fisher's Exact Test",),
    confidence=0.9,
)
MANN_WHITNEY = TestSuggestion(
    test_name="Mann-Whitney U Test",
    test_type="non-parametric",
    reason="Robust alternative for small samples or non-normal data",
    assumptions=("Independence", "Similar distribution shapes"),
    confidence=0.95,
)
WILCOXON = TestSuggestion(
    test_name="Wilcoxon Signed-Rank Test",
    test_type="non-parametric",
    reason="Robust alternative to the paired t-test for small samples",
    assumptions=("Independence of pairs", "Symmetric differences"),
    confidence=0.95,
)
KRUSKAL_WALLIS = TestSuggestion(
    test_name="Kruskal-Wallis Test",
    test_type="non-parametric",
    reason="Robust alternative to ANOVA for small samples or non-normal data",
    assumptions=("Independence", "Similar distribution shapes"),
    confidence=0.95,
)


def suggest_tests(
    data_types: Mapping[str, str],
    sample_sizes: Mapping[str, int],
    n_groups: int | None = None,
    paired: bool = False,
) -> tuple[TestSuggestion, ...]:
    """
    Recommend tests for a combination of variables.

    Parameters
    ----------
    data_types : mapping
        Variable name -> 'numeric' or 'categorical' (see infer_data_type).
    sample_sizes : mapping
        Variable name -> number of valid observations.
    n_groups : int or None
        Number of groups being compared, when known.
    paired : bool
        Whether two numeric variables are paired measurements.

    Returns
    -------
    tuple of TestSuggestion
        Sorted by descending confidence; equal confidences keep rule order.

    Raises
    ------
    InvalidParameterError
        No variables given.
    UnsupportedConfigurationError
        A data type label other than 'numeric' or 'categorical'.
    """
    if not data_types:
        raise InvalidParameterError(
            "data_types: at least one variable is required", name='data_types', value=data_types,
        )
    for name, dtype in data_types.items():
        if dtype not in DATA_TYPES:
            raise UnsupportedConfigurationError(
                f"variable {name!r}: unknown data type {dtype!r}; expected one of {DATA_TYPES}"
            )

    kinds = list(data_types.values())
    n_numeric = kinds.count("numeric")
    n_categorical = kinds.count("categorical")
    two_numeric = len(kinds) == 2 and n_numeric == 2
    many_groups = n_groups is not None and n_groups > 2

    suggestions: list[TestSuggestion] = []
    if len(kinds) == 1 and n_numeric == 1:
        suggestions += [ONE_SAMPLE_T, NORMALITY]
    if two_numeric:
        if paired:
            suggestions.append(PAIRED_T)
        else:
            suggestions += [INDEPENDENT_T, LINEAR_REGRESSION, CORRELATION]
    if many_groups:
        suggestions.append(ONE_WAY_ANOVA)
    if n_categorical == 2:
        suggestions.append(CHI_SQUARE)

    if sample_sizes and min(sample_sizes.values()) < SMALL_SAMPLE_THRESHOLD:
        suggestions = [
            replace(s, confidence=s.confidence * SMALL_SAMPLE_PENALTY) if s.alternatives else s
            for s in suggestions
        ]
        if two_numeric:
            suggestions.append(WILCOXON if paired else MANN_WHITNEY)
        if many_groups:
            suggestions.append(KRUSKAL_WALLIS)

    return tuple(sorted(suggestions, key=lambda s: -s.confidence))
