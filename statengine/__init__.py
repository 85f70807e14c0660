"""
statengine: statistics computation engine.

Turns raw sample data into descriptive summaries, hypothesis-test
outcomes, correlation and regression models, and test recommendations.
Every computation validates its input up front and returns an immutable
solution object with summary() and timing metadata.

Submodules:
    descriptive: Summary statistics, quantiles, outliers, frequency tables
    normality: Shapiro-Wilk, Kolmogorov-Smirnov, Anderson-Darling
    hypothesis: t-tests, chi-square tests, contingency tables, power
    anova: One-way ANOVA, Levene, Tukey HSD
    correlation: Pearson, Spearman, correlation matrices
    regression: OLS, diagnostics, robust line fits
    nonparametric: Mann-Whitney, Wilcoxon signed-rank, Kruskal-Wallis
    montecarlo: Bootstrap intervals, permutation tests
    robust: Median, MAD, trimmed means
    advisor: Data type inference and test suggestions
"""

__version__ = "0.1.0"

from statengine import core
from statengine import descriptive
from statengine import normality
from statengine import hypothesis
from statengine import anova
from statengine import correlation
from statengine import regression
from statengine import nonparametric
from statengine import montecarlo
from statengine import robust
from statengine import advisor

__all__ = [
    "__version__",
    "core",
    "descriptive",
    "normality",
    "hypothesis",
    "anova",
    "correlation",
    "regression",
    "nonparametric",
    "montecarlo",
    "robust",
    "advisor",
]
