"""
Hypothesis testing.

Public API:
    one_sample_t_test(sample, mu)        - one-sample t-test
    independent_t_test(g1, g2)           - pooled or Welch two-sample t-test
    paired_t_test(before, after)         - t-test on after - before
    chisq_goodness_of_fit(observed)      - chi-square goodness of fit
    chisq_independence(table)            - chi-square test of independence
    contingency_table(rows, cols)        - cross-tabulation + independence test
    cohens_d(g1, g2)                     - standardized mean difference
    power_t_test(d, n)                   - power from the noncentral t
    sample_size_t_test(d, power)         - n reaching a target power
"""

from statengine.hypothesis.solvers import (
    one_sample_t_test,
    independent_t_test,
    paired_t_test,
    chisq_goodness_of_fit,
    chisq_independence,
    contingency_table,
    cohens_d,
    power_t_test,
    sample_size_t_test,
)
from statengine.hypothesis.design import HypothesisDesign
from statengine.hypothesis._common import (
    TTestParams,
    ChiSquareParams,
    ContingencyTableParams,
    PowerParams,
)
from statengine.hypothesis.solution import (
    TTestSolution,
    ChiSquareSolution,
    ContingencyTableSolution,
    PowerSolution,
)

__all__ = [
    "one_sample_t_test",
    "independent_t_test",
    "paired_t_test",
    "chisq_goodness_of_fit",
    "chisq_independence",
    "contingency_table",
    "cohens_d",
    "power_t_test",
    "sample_size_t_test",
    "HypothesisDesign",
    "TTestParams",
    "ChiSquareParams",
    "ContingencyTableParams",
    "PowerParams",
    "TTestSolution",
    "ChiSquareSolution",
    "ContingencyTableSolution",
    "PowerSolution",
]
