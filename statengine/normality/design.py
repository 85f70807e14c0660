"""
NormalityDesign: validated input for normality tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statengine.core.exceptions import InvalidParameterError
from statengine.core.validation import (
    clean_sample,
    check_alpha,
    check_choice,
    check_min_samples,
)
from statengine.normality._common import NORMALITY_METHODS, MIN_N, SHAPIRO_MAX_N


@dataclass(frozen=True)
class NormalityDesign:
    """
    Design for normality tests. Immutable after construction.

    Construction:
        NormalityDesign.for_test(sample, method='shapiro', alpha=0.05)
    """
    _x: NDArray[np.floating[Any]]
    _method: str
    _alpha: float
    _null_count: int

    @classmethod
    def for_test(
        cls,
        sample: ArrayLike,
        *,
        method: str = 'shapiro',
        alpha: float = 0.05,
    ) -> NormalityDesign:
        """
        Validate a sample for a normality test.

        Raises:
            InvalidParameterError: unknown method, alpha outside (0, 1), or
                more than 5000 observations for Shapiro-Wilk
            InsufficientDataError: fewer than 3 valid observations
        """
        check_choice(method, NORMALITY_METHODS, 'method')
        alpha = check_alpha(alpha)
        x, null_count = clean_sample(sample, 'sample')
        check_min_samples(len(x), MIN_N, 'sample')
        if method == 'shapiro' and len(x) > SHAPIRO_MAX_N:
            raise InvalidParameterError(
                f"Shapiro-Wilk supports at most {SHAPIRO_MAX_N} observations, got {len(x)}",
                name='sample', value=len(x),
            )
        return cls(_x=x, _method=method, _alpha=alpha, _null_count=null_count)

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def n(self) -> int:
        return len(self._x)

    @property
    def method(self) -> str:
        return self._method

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def null_count(self) -> int:
        return self._null_count
