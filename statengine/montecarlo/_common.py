"""
Common data structures for resampling methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

CI_METHODS = ("percentile", "basic", "normal")
VALID_ALTERNATIVES = ("two.sided", "less", "greater")


@dataclass(frozen=True)
class BootstrapParams:
    """
    Parameter payload for a bootstrap confidence interval.

    - observed: statistic on the original sample
    - replicates: statistic on each resample, shape (n_resamples,)
    - bias: mean(replicates) - observed
    - standard_error: sd(replicates)
    """
    observed: float
    replicates: NDArray[np.floating[Any]]
    lower: float
    upper: float
    bias: float
    standard_error: float
    confidence_level: float
    n_resamples: int
    method: str


@dataclass(frozen=True)
class PermutationParams:
    """
    Parameter payload for a two-sample permutation test.

    p_value is the share of permuted statistics at least as extreme as
    the observed one: count / n_permutations.
    """
    observed: float
    permuted: NDArray[np.floating[Any]]
    p_value: float
    n_permutations: int
    alternative: str
