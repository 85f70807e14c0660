"""
RobustDesign: one validated sample plus the trim fraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statengine.core.exceptions import InvalidParameterError
from statengine.core.validation import clean_sample, check_min_samples
from statengine.robust._common import DEFAULT_TRIM


@dataclass(frozen=True)
class RobustDesign:
    _x: NDArray[np.floating[Any]]
    _trim: float
    _null_count: int

    @classmethod
    def for_sample(cls, sample: ArrayLike, *, trim: float = DEFAULT_TRIM) -> RobustDesign:
        """
        Raises:
            InsufficientDataError: no valid observations
            InvalidParameterError: trim outside [0, 0.5)
        """
        if isinstance(trim, bool) or not isinstance(trim, (int, float, np.floating)) \
                or not (0.0 <= float(trim) < 0.5):
            raise InvalidParameterError(
                f"trim must be in [0, 0.5), got {trim!r}", name='trim', value=trim,
            )
        x, n_null = clean_sample(sample, 'sample')
        check_min_samples(len(x), 1, 'sample')
        return cls(_x=x, _trim=float(trim), _null_count=n_null)

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def n(self) -> int:
        return len(self._x)

    @property
    def trim(self) -> float:
        return self._trim

    @property
    def null_count(self) -> int:
        return self._null_count
