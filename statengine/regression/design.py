"""
RegressionDesign: validated predictors and response.

The design matrix always carries a leading intercept column; predictor
names never include it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statengine.core.exceptions import DimensionError, InvalidParameterError
from statengine.core.validation import (
    to_float_array,
    clean_pairs,
    check_alpha,
    check_choice,
    check_consistent_length,
    check_min_samples,
)
from statengine.regression._common import ROBUST_METHODS


@dataclass(frozen=True)
class RegressionDesign:
    """
    Regression design specification.

    Construction:
        RegressionDesign.for_fit(X, y)                    # OLS, 1 or more predictors
        RegressionDesign.for_fit({'a': a, 'b': b}, y)     # named predictors
        RegressionDesign.for_robust(x, y, method='huber') # straight line
    """
    kind: str
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _names: tuple[str, ...]
    _alpha: float = 0.05
    _method: str = 'ols'
    _n_excluded: int = 0

    @classmethod
    def for_fit(
        cls,
        X: ArrayLike | Mapping[str, ArrayLike],
        y: ArrayLike,
        *,
        names: Sequence[str] | None = None,
        alpha: float = 0.05,
    ) -> RegressionDesign:
        """
        Build an OLS design.

        X may be a 1D sample (one predictor), a 2D array (columns are
        predictors), a mapping name -> column or a pandas DataFrame.
        Rows with a missing value anywhere are dropped.

        Raises:
            DimensionError: X is not 1D/2D
            MismatchedLengthsError: X and y differ in length
            InvalidParameterError: names do not match the predictor count
            InsufficientDataError: fewer than p + 2 complete rows
        """
        alpha = check_alpha(alpha)
        columns, default_names = _predictor_columns(X)
        if names is None:
            names = default_names
        names = tuple(str(nm) for nm in names)
        if len(names) != len(columns):
            raise InvalidParameterError(
                f"names: expected {len(columns)} predictor name(s), got {len(names)}",
                name='names', value=names,
            )

        y_arr = to_float_array(y, 'y')
        check_consistent_length(y_arr, *columns, names=('y',) + names)

        X_raw = np.column_stack(columns)
        mask = ~(np.isnan(y_arr) | np.any(np.isnan(X_raw), axis=1))
        p = len(columns)
        check_min_samples(int(np.sum(mask)), p + 2, 'X/y', what='complete rows')

        X_design = np.column_stack([np.ones(int(np.sum(mask))), X_raw[mask]])
        return cls(
            kind='ols',
            _X=X_design,
            _y=y_arr[mask],
            _names=names,
            _alpha=alpha,
            _n_excluded=int(np.sum(~mask)),
        )

    @classmethod
    def for_robust(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        method: str = 'theil_sen',
    ) -> RegressionDesign:
        """
        Raises:
            InvalidParameterError: unknown method
            MismatchedLengthsError: x and y differ in length
            InsufficientDataError: fewer than 3 complete pairs
        """
        check_choice(method, ROBUST_METHODS, 'method')
        x_arr, y_arr, n_dropped = clean_pairs(x, y, names=('x', 'y'))
        check_min_samples(len(x_arr), 3, 'x/y', what='complete pairs')
        return cls(
            kind='robust',
            _X=np.column_stack([np.ones(len(x_arr)), x_arr]),
            _y=y_arr,
            _names=('x',),
            _method=method,
            _n_excluded=n_dropped,
        )

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix including the intercept column (n x (p + 1))."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """First predictor column."""
        return self._X[:, 1]

    @property
    def n(self) -> int:
        return self._X.shape[0]

    @property
    def p(self) -> int:
        """Number of predictors, excluding the intercept."""
        return self._X.shape[1] - 1

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def method(self) -> str:
        return self._method

    @property
    def n_excluded(self) -> int:
        return self._n_excluded


def _predictor_columns(
    X: ArrayLike | Mapping[str, ArrayLike],
) -> tuple[list[NDArray[np.floating[Any]]], tuple[str, ...]]:
    """Split X into float columns and default names."""
    if hasattr(X, 'columns'):
        X = {str(c): X[c].values for c in X.columns}

    if isinstance(X, Mapping):
        if len(X) == 0:
            raise DimensionError("X: no predictor columns given")
        names = tuple(str(k) for k in X)
        return [to_float_array(v, str(k)) for k, v in X.items()], names

    if isinstance(X, (str, bytes)):
        raise DimensionError("X: expected numeric predictors, got a string")
    arr = np.asarray(X, dtype=object)
    if arr.ndim == 1:
        return [to_float_array(arr, 'X')], ('X',)
    if arr.ndim != 2:
        raise DimensionError(f"X: expected 1D or 2D predictors, got {arr.ndim}D")
    if arr.shape[1] == 0:
        raise DimensionError("X: no predictor columns given")
    names = tuple(f"X{j + 1}" for j in range(arr.shape[1]))
    return [to_float_array(arr[:, j], names[j]) for j in range(arr.shape[1])], names
