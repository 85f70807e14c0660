"""
DescriptiveDesign: validated input for the descriptive statistics pipeline.

One design type serves describe(), detect_outliers() and
frequency_analysis(); `kind` identifies which fields are populated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statengine.core.exceptions import InvalidParameterError
from statengine.core.validation import (
    to_float_array,
    to_labels,
    check_choice,
    check_positive_int,
)
from statengine.descriptive._common import OUTLIER_METHODS, DEFAULT_THRESHOLDS


def _unwrap(data):
    """Accept pandas Series by taking .values."""
    if hasattr(data, 'values') and hasattr(data, 'dtype'):
        return data.values
    return data


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Do not construct directly; use the for_* factory classmethods.
    """
    kind: str
    _values: NDArray[np.floating[Any]]
    _positions: NDArray[np.intp]
    _null_count: int
    _quantile_type: int = 2
    _method: str | None = None
    _threshold: float | None = None
    _labels: tuple[str, ...] | None = None
    _bin_count: int | None = None
    _n_infinite: int = 0

    @classmethod
    def for_describe(cls, sample: ArrayLike, *, quantile_type: int = 2) -> DescriptiveDesign:
        """
        Build design for describe(). Empty or all-missing samples are allowed.

        Infinite values are excluded like missing ones and counted in
        null_count.
        """
        arr = to_float_array(_unwrap(sample), 'sample', allow_infinite=True)
        mask = np.isfinite(arr)
        _check_quantile_type(quantile_type)
        return cls(
            kind='describe',
            _values=arr[mask],
            _positions=np.flatnonzero(mask),
            _null_count=int(np.sum(~mask)),
            _quantile_type=quantile_type,
            _n_infinite=int(np.sum(np.isinf(arr))),
        )

    @classmethod
    def for_outliers(
        cls,
        sample: ArrayLike,
        *,
        method: str = 'iqr',
        threshold: float | None = None,
        quantile_type: int = 2,
    ) -> DescriptiveDesign:
        """Build design for detect_outliers()."""
        check_choice(method, OUTLIER_METHODS, 'method')
        if threshold is None:
            threshold = DEFAULT_THRESHOLDS[method]
        elif isinstance(threshold, bool) or not np.isfinite(threshold) or threshold <= 0:
            raise InvalidParameterError(
                f"threshold must be a positive number, got {threshold!r}",
                name='threshold', value=threshold,
            )
        _check_quantile_type(quantile_type)

        arr = to_float_array(_unwrap(sample), 'sample')
        mask = ~np.isnan(arr)
        return cls(
            kind='outliers',
            _values=arr[mask],
            _positions=np.flatnonzero(mask),
            _null_count=int(np.sum(~mask)),
            _quantile_type=quantile_type,
            _method=method,
            _threshold=float(threshold),
        )

    @classmethod
    def for_frequency(cls, values: ArrayLike, *, bin_count: int | None = None) -> DescriptiveDesign:
        """
        Build design for frequency_analysis().

        With bin_count the values must be numeric and are binned into equal-width
        bins; without it every distinct label is counted.
        """
        values = _unwrap(values)
        if bin_count is not None:
            check_positive_int(bin_count, 'bin_count')
            arr = to_float_array(values, 'values')
            mask = ~np.isnan(arr)
            return cls(
                kind='histogram',
                _values=arr[mask],
                _positions=np.flatnonzero(mask),
                _null_count=int(np.sum(~mask)),
                _bin_count=int(bin_count),
            )

        labels = to_labels(values, 'values')
        present = [lab for lab in labels if lab is not None]
        return cls(
            kind='categorical',
            _values=np.empty(0, dtype=np.float64),
            _positions=np.array([i for i, lab in enumerate(labels) if lab is not None], dtype=np.intp),
            _null_count=len(labels) - len(present),
            _labels=tuple(present),
        )

    # --- Properties ---

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Non-missing numeric values, original order."""
        return self._values

    @property
    def positions(self) -> NDArray[np.intp]:
        """Index of each retained value in the original sequence."""
        return self._positions

    @property
    def n(self) -> int:
        return len(self._positions)

    @property
    def null_count(self) -> int:
        return self._null_count

    @property
    def quantile_type(self) -> int:
        return self._quantile_type

    @property
    def method(self) -> str | None:
        return self._method

    @property
    def threshold(self) -> float | None:
        return self._threshold

    @property
    def labels(self) -> tuple[str, ...] | None:
        return self._labels

    @property
    def bin_count(self) -> int | None:
        return self._bin_count

    @property
    def n_infinite(self) -> int:
        return self._n_infinite

    def __repr__(self) -> str:
        return f"DescriptiveDesign(kind={self.kind!r}, n={self.n}, null_count={self._null_count})"


def _check_quantile_type(qtype: int) -> None:
    if isinstance(qtype, bool) or qtype not in range(1, 10):
        raise InvalidParameterError(
            f"quantile_type must be an integer 1-9, got {qtype!r}",
            name='quantile_type', value=qtype,
        )
