"""
Run a suggested test by name.

Accepts either a TestSuggestion.test_name ('Independent t-test') or the
matching result tag ('independent_t').
"""

from __future__ import annotations

from typing import Any, Callable

from statengine.core.exceptions import UnsupportedConfigurationError
from statengine.advisor._common import TestSuggestion
from statengine.anova import anova_oneway
from statengine.correlation import pearson, spearman
from statengine.hypothesis import (
    one_sample_t_test,
    independent_t_test,
    paired_t_test,
    chisq_independence,
    contingency_table,
)
from statengine.nonparametric import mann_whitney_u, wilcoxon_signed_rank, kruskal_wallis
from statengine.normality import normality_test
from statengine.regression import linear_regression


def _chi_square_independence(*args: Any, **kwargs: Any) -> Any:
    """A table of counts, or two categorical sequences to cross-tabulate."""
    if len(args) == 2:
        return contingency_table(*args, **kwargs)
    return chisq_independence(*args, **kwargs)


TEST_REGISTRY: dict[str, Callable[..., Any]] = {
    "One-Sample t-test": one_sample_t_test,
    "Normality Tests": normality_test,
    "Paired t-test": paired_t_test,
    "Independent t-test": independent_t_test,
    "Linear Regression": linear_regression,
    "Correlation Analysis": pearson,
    "Spearman Correlation": spearman,
    "One-Way ANOVA": anova_oneway,
    "Chi-Square Test of Independence": _chi_square_independence,
    "Mann-Whitney U Test": mann_whitney_u,
    "Wilcoxon Signed-Rank Test": wilcoxon_signed_rank,
    "Kruskal-Wallis Test": kruskal_wallis,
}

_ALIASES = {
    "one_sample_t": "One-Sample t-test",
    "normality": "Normality Tests",
    "paired_t": "Paired t-test",
    "independent_t": "Independent t-test",
    "linear_regression": "Linear Regression",
    "pearson": "Correlation Analysis",
    "correlation": "Correlation Analysis",
    "spearman": "Spearman Correlation",
    "one_way_anova": "One-Way ANOVA",
    "chi_square_independence": "Chi-Square Test of Independence",
    "mann_whitney": "Mann-Whitney U Test",
    "wilcoxon": "Wilcoxon Signed-Rank Test",
    "kruskal_wallis": "Kruskal-Wallis Test",
}


def run_test(test: str | TestSuggestion, *args: Any, **kwargs: Any) -> Any:
    """
    Dispatch to the engine function behind a suggestion.

    Positional and keyword arguments are passed through unchanged, e.g.
    run_test('Independent t-test', g1, g2, equal_variances=False).

    Raises:
        UnsupportedConfigurationError: the name has no runnable test
    """
    name = test.test_name if isinstance(test, TestSuggestion) else test
    fn = TEST_REGISTRY.get(_ALIASES.get(name, name))
    if fn is None:
        raise UnsupportedConfigurationError(
            f"no runnable test named {name!r}; known tests: {sorted(TEST_REGISTRY)}"
        )
    return fn(*args, **kwargs)
