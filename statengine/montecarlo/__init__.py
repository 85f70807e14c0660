"""
Resampling methods.

Usage:
    from statengine.montecarlo import bootstrap_ci, permutation_test

    ci = bootstrap_ci(sample, np.median, n_resamples=2000, seed=42)
    test = permutation_test(x, y, n_permutations=5000, seed=42)
"""

from statengine.montecarlo.solvers import bootstrap_ci, permutation_test
from statengine.montecarlo.design import BootstrapDesign, PermutationDesign, mean_difference
from statengine.montecarlo._common import BootstrapParams, PermutationParams
from statengine.montecarlo.solution import BootstrapSolution, PermutationSolution

__all__ = [
    "bootstrap_ci",
    "permutation_test",
    "mean_difference",
    "BootstrapDesign",
    "PermutationDesign",
    "BootstrapParams",
    "PermutationParams",
    "BootstrapSolution",
    "PermutationSolution",
]
