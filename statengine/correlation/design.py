"""
CorrelationDesign: validated input for correlation analysis.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statengine.core.exceptions import InsufficientDataError
from statengine.core.validation import (
    clean_pairs,
    to_float_array,
    check_alpha,
    check_choice,
    check_consistent_length,
    check_min_samples,
)
from statengine.correlation._common import CORRELATION_METHODS


@dataclass(frozen=True)
class CorrelationDesign:
    """
    Design for correlation analysis.

    kind 'pair' holds complete rows of x and y; kind 'matrix' holds the
    raw columns (NaN for missing) for pairwise deletion.

    Construction:
        CorrelationDesign.for_pair(x, y, method='pearson')
        CorrelationDesign.for_matrix({'a': [...], 'b': [...]}, method='spearman')
    """
    kind: str
    _method: str
    _alpha: float = 0.05
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None
    _n_excluded: int = 0
    _data: NDArray[np.floating[Any]] | None = None
    _variables: tuple[str, ...] = ()

    @classmethod
    def for_pair(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        method: str = 'pearson',
        alpha: float = 0.05,
    ) -> CorrelationDesign:
        """
        Rows with a missing value on either side are dropped.

        Raises:
            MismatchedLengthsError: x and y differ in length
            InsufficientDataError: fewer than 3 complete pairs
        """
        check_choice(method, CORRELATION_METHODS, 'method')
        alpha = check_alpha(alpha)
        x_arr, y_arr, n_dropped = clean_pairs(x, y, names=('x', 'y'))
        check_min_samples(len(x_arr), 3, 'x/y', what='complete pairs')
        return cls(
            kind='pair', _method=method, _alpha=alpha,
            _x=x_arr, _y=y_arr, _n_excluded=n_dropped,
        )

    @classmethod
    def for_matrix(
        cls,
        variables: Mapping[str, ArrayLike],
        *,
        method: str = 'pearson',
    ) -> CorrelationDesign:
        """
        Raises:
            InsufficientDataError: fewer than 2 variables
            MismatchedLengthsError: columns differ in length
        """
        check_choice(method, CORRELATION_METHODS, 'method')
        if hasattr(variables, 'columns'):
            variables = {str(c): variables[c].values for c in variables.columns}
        if len(variables) < 2:
            raise InsufficientDataError(
                f"variables: correlation matrix needs at least 2 variables, got {len(variables)}",
                required=2, actual=len(variables),
            )
        names = tuple(str(k) for k in variables)
        columns = [to_float_array(v, str(k)) for k, v in variables.items()]
        check_consistent_length(*columns, names=names)
        return cls(
            kind='matrix', _method=method,
            _data=np.column_stack(columns), _variables=names,
        )

    @property
    def method(self) -> str:
        return self._method

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def n_excluded(self) -> int:
        return self._n_excluded

    @property
    def data(self) -> NDArray[np.floating[Any]] | None:
        return self._data

    @property
    def variables(self) -> tuple[str, ...]:
        return self._variables
