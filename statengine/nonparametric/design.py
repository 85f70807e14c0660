"""
NonParametricDesign: validated samples for the rank tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statengine.core.exceptions import InsufficientDataError
from statengine.core.validation import (
    as_group_mapping,
    clean_sample,
    clean_pairs,
    check_alpha,
    check_choice,
    check_min_samples,
)

VALID_ALTERNATIVES = ("two.sided", "less", "greater")


@dataclass(frozen=True)
class NonParametricDesign:
    """
    Design for a rank-based test.

    Construction:
        NonParametricDesign.for_mann_whitney(g1, g2)
        NonParametricDesign.for_wilcoxon(before, after)
        NonParametricDesign.for_kruskal_wallis({'a': [...], 'b': [...]})
    """
    test_kind: str
    _groups: dict[str, NDArray[np.floating[Any]]]
    _alpha: float = 0.05
    _alternative: str = "two.sided"
    _n_excluded: int = 0
    _differences: NDArray[np.floating[Any]] | None = field(default=None)

    @classmethod
    def for_mann_whitney(
        cls,
        group1: ArrayLike,
        group2: ArrayLike,
        *,
        alpha: float = 0.05,
        alternative: str = "two.sided",
        labels: tuple[str, str] = ("group1", "group2"),
    ) -> NonParametricDesign:
        """
        Raises:
            InsufficientDataError: a group has no valid observations
        """
        alpha = check_alpha(alpha)
        check_choice(alternative, VALID_ALTERNATIVES, 'alternative')
        g1, null1 = clean_sample(group1, labels[0])
        g2, null2 = clean_sample(group2, labels[1])
        check_min_samples(len(g1), 1, labels[0])
        check_min_samples(len(g2), 1, labels[1])
        return cls(
            test_kind='mann_whitney',
            _groups={labels[0]: g1, labels[1]: g2},
            _alpha=alpha,
            _alternative=alternative,
            _n_excluded=null1 + null2,
        )

    @classmethod
    def for_wilcoxon(
        cls,
        before: ArrayLike,
        after: ArrayLike,
        *,
        alpha: float = 0.05,
        alternative: str = "two.sided",
    ) -> NonParametricDesign:
        """
        Differences are after - before. Incomplete pairs and zero
        differences are dropped.

        Raises:
            MismatchedLengthsError: before and after differ in length
            InsufficientDataError: no non-zero difference remains
        """
        alpha = check_alpha(alpha)
        check_choice(alternative, VALID_ALTERNATIVES, 'alternative')
        b, a, n_dropped = clean_pairs(before, after, names=('before', 'after'))
        d = a - b
        nonzero = d[d != 0]
        if len(nonzero) < 1:
            raise InsufficientDataError(
                "before/after: Wilcoxon signed-rank test requires at least 1 "
                "non-zero difference",
                required=1, actual=0,
            )
        return cls(
            test_kind='wilcoxon',
            _groups={'before': b, 'after': a},
            _alpha=alpha,
            _alternative=alternative,
            _n_excluded=n_dropped,
            _differences=nonzero,
        )

    @classmethod
    def for_kruskal_wallis(
        cls,
        groups: Mapping[str, ArrayLike] | Sequence[ArrayLike],
        *,
        alpha: float = 0.05,
    ) -> NonParametricDesign:
        """
        Raises:
            InsufficientDataError: fewer than 2 groups or an empty group
        """
        alpha = check_alpha(alpha)
        raw = as_group_mapping(groups)
        if len(raw) < 2:
            raise InsufficientDataError(
                f"groups: Kruskal-Wallis test requires at least 2 groups, got {len(raw)}",
                required=2, actual=len(raw),
            )
        cleaned: dict[str, NDArray[np.floating[Any]]] = {}
        n_null = 0
        for label, sample in raw.items():
            x, nulls = clean_sample(sample, f"group {label!r}")
            check_min_samples(len(x), 1, f"group {label!r}")
            cleaned[label] = x
            n_null += nulls
        return cls(
            test_kind='kruskal_wallis',
            _groups=cleaned,
            _alpha=alpha,
            _n_excluded=n_null,
        )

    @property
    def groups(self) -> dict[str, NDArray[np.floating[Any]]]:
        return self._groups

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self._groups)

    @property
    def differences(self) -> NDArray[np.floating[Any]] | None:
        """Non-zero paired differences (Wilcoxon only)."""
        return self._differences

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def alternative(self) -> str:
        return self._alternative

    @property
    def n_excluded(self) -> int:
        return self._n_excluded
