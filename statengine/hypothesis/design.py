"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_kind` field identifies
which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statengine.core.exceptions import (
    InsufficientDataError,
    InvalidParameterError,
    MismatchedLengthsError,
)
from statengine.core.validation import (
    clean_sample,
    clean_pairs,
    check_alpha,
    check_choice,
    check_min_samples,
    to_float_array,
)
from statengine.hypothesis._common import VALID_ALTERNATIVES


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for t-tests and chi-square tests.

    Do not construct directly; use factory classmethods.
    """
    test_kind: str

    # Numeric vectors (for paired tests _x holds the differences)
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None

    # Test configuration
    _mu: float = 0.0
    _alternative: str = "two.sided"
    _alpha: float = 0.05
    _equal_variances: bool = True

    # Chi-square
    _table: NDArray[np.floating[Any]] | None = None
    _expected: NDArray[np.floating[Any]] | None = None

    # Bookkeeping
    _null_count: int = 0
    _names: tuple[str, ...] = ("x",)

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def alternative(self) -> str:
        return self._alternative

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def conf_level(self) -> float:
        return 1.0 - self._alpha

    @property
    def equal_variances(self) -> bool:
        return self._equal_variances

    @property
    def table(self) -> NDArray[np.floating[Any]] | None:
        return self._table

    @property
    def expected(self) -> NDArray[np.floating[Any]] | None:
        return self._expected

    @property
    def null_count(self) -> int:
        return self._null_count

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    # --- Factory classmethods ---

    @classmethod
    def for_one_sample_t(
        cls,
        sample: ArrayLike,
        *,
        population_mean: float = 0.0,
        alpha: float = 0.05,
        alternative: str = "two.sided",
    ) -> HypothesisDesign:
        """Build design for one_sample_t_test()."""
        alpha = check_alpha(alpha)
        check_choice(alternative, VALID_ALTERNATIVES, 'alternative')
        mu = _check_finite_number(population_mean, 'population_mean')

        x, null_count = clean_sample(sample, 'sample')
        check_min_samples(len(x), 2, 'sample')

        return cls(
            test_kind='one_sample_t',
            _x=x,
            _mu=mu,
            _alpha=alpha,
            _alternative=alternative,
            _null_count=null_count,
            _names=('sample',),
        )

    @classmethod
    def for_independent_t(
        cls,
        group1: ArrayLike,
        group2: ArrayLike,
        *,
        equal_variances: bool = True,
        alpha: float = 0.05,
        alternative: str = "two.sided",
    ) -> HypothesisDesign:
        """Build design for independent_t_test(). Each group needs 2 valid values."""
        alpha = check_alpha(alpha)
        check_choice(alternative, VALID_ALTERNATIVES, 'alternative')

        x, null1 = clean_sample(group1, 'group1')
        y, null2 = clean_sample(group2, 'group2')
        check_min_samples(len(x), 2, 'group1')
        check_min_samples(len(y), 2, 'group2')

        return cls(
            test_kind='independent_t',
            _x=x,
            _y=y,
            _alpha=alpha,
            _alternative=alternative,
            _equal_variances=bool(equal_variances),
            _null_count=null1 + null2,
            _names=('group1', 'group2'),
        )

    @classmethod
    def for_paired_t(
        cls,
        before: ArrayLike,
        after: ArrayLike,
        *,
        alpha: float = 0.05,
        alternative: str = "two.sided",
    ) -> HypothesisDesign:
        """
        Build design for paired_t_test().

        The raw sequences must have equal length; pairs with a missing
        element on either side are dropped. _x holds after - before.
        """
        alpha = check_alpha(alpha)
        check_choice(alternative, VALID_ALTERNATIVES, 'alternative')

        b, a, n_dropped = clean_pairs(before, after, names=('before', 'after'))
        check_min_samples(len(b), 2, 'before/after', what='complete pairs')

        return cls(
            test_kind='paired_t',
            _x=a - b,
            _alpha=alpha,
            _alternative=alternative,
            _null_count=n_dropped,
            _names=('before', 'after'),
        )

    @classmethod
    def for_chisq_gof(
        cls,
        observed: ArrayLike,
        expected: ArrayLike | None = None,
        *,
        alpha: float = 0.05,
    ) -> HypothesisDesign:
        """
        Build design for chisq_goodness_of_fit().

        expected may be counts or proportions; it is rescaled to the observed
        total. None means equal expected counts in every category.
        """
        alpha = check_alpha(alpha)
        obs = to_float_array(observed, 'observed')
        if np.any(np.isnan(obs)):
            raise InvalidParameterError("observed: counts must not be missing", name='observed')
        if len(obs) < 2:
            raise InsufficientDataError(
                f"observed: goodness-of-fit needs at least 2 categories, got {len(obs)}",
                required=2, actual=len(obs),
            )
        if np.any(obs < 0):
            raise InvalidParameterError(
                "observed: counts must be non-negative", name='observed', value=obs.tolist()
            )
        if obs.sum() == 0:
            raise InsufficientDataError(
                "observed: counts sum to zero", required=1, actual=0
            )

        exp = None
        if expected is not None:
            exp = to_float_array(expected, 'expected')
            if len(exp) != len(obs):
                raise MismatchedLengthsError(
                    f"Inconsistent lengths: observed={len(obs)}, expected={len(exp)}",
                    lengths={'observed': len(obs), 'expected': len(exp)},
                )
            if np.any(np.isnan(exp)) or np.any(exp <= 0):
                raise InvalidParameterError(
                    "expected: all expected values must be positive",
                    name='expected', value=exp.tolist(),
                )

        return cls(
            test_kind='chi_square_gof',
            _x=obs,
            _expected=exp,
            _alpha=alpha,
            _names=('observed',),
        )

    @classmethod
    def for_chisq_independence(
        cls,
        table: ArrayLike,
        *,
        alpha: float = 0.05,
    ) -> HypothesisDesign:
        """Build design for chisq_independence(). Needs at least a 2x2 table."""
        alpha = check_alpha(alpha)
        try:
            tab = np.asarray(table, dtype=np.float64)
        except (ValueError, TypeError) as e:
            raise InvalidParameterError(f"table: cannot convert to numeric array: {e}", name='table') from e

        if tab.ndim != 2 or tab.shape[0] < 2 or tab.shape[1] < 2:
            raise InsufficientDataError(
                f"table: contingency table must be at least 2x2, got shape {tab.shape}",
                required=2, actual=min(tab.shape) if tab.ndim == 2 else 0,
            )
        if np.any(np.isnan(tab)) or np.any(tab < 0):
            raise InvalidParameterError(
                "table: all entries must be non-negative counts", name='table'
            )
        if tab.sum() == 0:
            raise InsufficientDataError("table: counts sum to zero", required=1, actual=0)

        return cls(
            test_kind='chi_square_independence',
            _table=tab,
            _alpha=alpha,
            _names=('table',),
        )


def _check_finite_number(value: float, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)) \
            or not np.isfinite(value):
        raise InvalidParameterError(
            f"{name} must be a finite number, got {value!r}", name=name, value=value
        )
    return float(value)
