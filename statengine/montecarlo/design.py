"""
Design classes for resampling methods.

BootstrapDesign and PermutationDesign hold everything the backends need,
including the seed. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray, ArrayLike

from statengine.core.validation import (
    clean_sample,
    check_choice,
    check_min_samples,
    check_positive_int,
    check_probability,
)
from statengine.core.exceptions import InvalidParameterError
from statengine.montecarlo._common import CI_METHODS, VALID_ALTERNATIVES


def mean_difference(x: NDArray, y: NDArray) -> float:
    """Default permutation statistic: mean(x) - mean(y)."""
    return float(np.mean(x) - np.mean(y))


def _check_callable(fn: Any, name: str) -> None:
    if not callable(fn):
        raise InvalidParameterError(f"{name} must be callable, got {fn!r}", name=name, value=fn)


@dataclass(frozen=True)
class BootstrapDesign:
    """
    Frozen design for a bootstrap interval.

    Attributes:
        data: Valid observations (missing entries removed).
        statistic: fn(sample) -> float.
        n_resamples: Number of resamples.
        confidence_level: Interval coverage in (0, 1).
        method: 'percentile', 'basic' or 'normal'.
        seed: Seed for np.random.default_rng.
    """
    data: NDArray[np.floating[Any]]
    statistic: Callable[[NDArray], float]
    n_resamples: int
    confidence_level: float
    method: str
    seed: int | None

    @classmethod
    def for_bootstrap(
        cls,
        sample: ArrayLike,
        statistic: Callable[[NDArray], float] = np.mean,
        *,
        confidence_level: float = 0.95,
        n_resamples: int = 1000,
        method: str = "percentile",
        seed: int | None = None,
    ) -> BootstrapDesign:
        """
        Raises:
            InsufficientDataError: no valid observations
            InvalidParameterError: bad confidence level, count, method or statistic
        """
        data, _ = clean_sample(sample, 'sample')
        check_min_samples(len(data), 1, 'sample')
        _check_callable(statistic, 'statistic')
        return cls(
            data=data,
            statistic=statistic,
            n_resamples=check_positive_int(n_resamples, 'n_resamples'),
            confidence_level=check_probability(confidence_level, 'confidence_level'),
            method=check_choice(method, CI_METHODS, 'method'),
            seed=seed,
        )


@dataclass(frozen=True)
class PermutationDesign:
    """
    Frozen design for a two-sample permutation test.

    Attributes:
        x: Group 1 observations.
        y: Group 2 observations.
        statistic: fn(x, y) -> float, mean difference by default.
        n_permutations: Number of label shuffles.
        alternative: 'two.sided', 'less' or 'greater'.
        seed: Seed for np.random.default_rng.
    """
    x: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]
    statistic: Callable[[NDArray, NDArray], float]
    n_permutations: int
    alternative: str
    seed: int | None

    @classmethod
    def for_permutation_test(
        cls,
        group1: ArrayLike,
        group2: ArrayLike,
        statistic: Callable[[NDArray, NDArray], float] = mean_difference,
        *,
        n_permutations: int = 1000,
        alternative: str = "two.sided",
        seed: int | None = None,
    ) -> PermutationDesign:
        """
        Raises:
            InsufficientDataError: a group has no valid observations
            InvalidParameterError: bad count, alternative or statistic
        """
        x, _ = clean_sample(group1, 'group1')
        y, _ = clean_sample(group2, 'group2')
        check_min_samples(len(x), 1, 'group1')
        check_min_samples(len(y), 1, 'group2')
        _check_callable(statistic, 'statistic')
        return cls(
            x=x,
            y=y,
            statistic=statistic,
            n_permutations=check_positive_int(n_permutations, 'n_permutations'),
            alternative=check_choice(alternative, VALID_ALTERNATIVES, 'alternative'),
            seed=seed,
        )
