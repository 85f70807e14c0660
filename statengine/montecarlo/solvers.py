"""
Public entry points for resampling.
"""

from __future__ import annotations

from typing import Callable, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statengine.montecarlo.design import BootstrapDesign, PermutationDesign, mean_difference
from statengine.montecarlo.solution import BootstrapSolution, PermutationSolution
from statengine.montecarlo.backends.cpu import CPUBootstrapBackend, CPUPermutationBackend


def bootstrap_ci(
    sample: ArrayLike,
    statistic: Callable[[NDArray], float] = np.mean,
    *,
    confidence_level: float = 0.95,
    n_resamples: int = 1000,
    method: Literal["percentile", "basic", "normal"] = "percentile",
    seed: int | None = None,
) -> BootstrapSolution:
    """
    Bootstrap confidence interval for a statistic of one sample.

    Draws n_resamples resamples of the same size with replacement and
    evaluates statistic on each. The default 'percentile' interval is the
    empirical [alpha/2, 1 - alpha/2] quantile range of the replicates.

    Args:
        sample: Observations; missing entries are dropped
        statistic: fn(sample) -> float
        confidence_level: Interval coverage in (0, 1)
        n_resamples: Number of resamples
        method: 'percentile', 'basic' or 'normal'
        seed: Seed for reproducible resampling

    Example:
        >>> res = bootstrap_ci([2.1, 3.4, 1.9, 5.6, 4.4], seed=1)
        >>> res.lower <= res.observed <= res.upper
        True
    """
    design = BootstrapDesign.for_bootstrap(
        sample, statistic,
        confidence_level=confidence_level,
        n_resamples=n_resamples,
        method=method,
        seed=seed,
    )
    result = CPUBootstrapBackend().solve(design)
    return BootstrapSolution(_result=result, _design=design)


def permutation_test(
    group1: ArrayLike,
    group2: ArrayLike,
    statistic: Callable[[NDArray, NDArray], float] = mean_difference,
    *,
    n_permutations: int = 1000,
    alternative: Literal["two.sided", "less", "greater"] = "two.sided",
    seed: int | None = None,
) -> PermutationSolution:
    """
    Two-sample permutation test.

    The pooled observations are shuffled n_permutations times; the
    p-value is the share of permuted statistics at least as extreme as
    the observed one (in absolute value for 'two.sided').
    """
    design = PermutationDesign.for_permutation_test(
        group1, group2, statistic,
        n_permutations=n_permutations,
        alternative=alternative,
        seed=seed,
    )
    result = CPUPermutationBackend().solve(design)
    return PermutationSolution(_result=result, _design=design)
