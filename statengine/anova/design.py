"""
AnovaDesign: validated groups for one-way ANOVA, Levene and Tukey HSD.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statengine.core.exceptions import InsufficientDataError
from statengine.core.validation import (
    as_group_mapping,
    clean_sample,
    check_alpha,
    check_min_samples,
)


@dataclass(frozen=True)
class AnovaDesign:
    """
    Design for one-way ANOVA.

    Groups keep the order they were given in.

    Construction:
        AnovaDesign.from_groups({'A': [...], 'B': [...], 'C': [...]}, alpha=0.05)
    """
    _groups: dict[str, NDArray[np.floating[Any]]]
    _alpha: float
    _null_count: int

    @classmethod
    def from_groups(
        cls,
        groups: Mapping[str, ArrayLike] | Sequence[ArrayLike],
        *,
        alpha: float = 0.05,
    ) -> AnovaDesign:
        """
        Validate groups.

        Raises:
            InsufficientDataError: fewer than 2 groups, or a group with fewer
                than 2 valid observations
        """
        alpha = check_alpha(alpha)
        raw = as_group_mapping(groups)
        if len(raw) < 2:
            raise InsufficientDataError(
                f"groups: requires at least 2 groups, got {len(raw)}",
                required=2, actual=len(raw),
            )

        cleaned: dict[str, NDArray[np.floating[Any]]] = {}
        null_count = 0
        for label, sample in raw.items():
            x, n_null = clean_sample(sample, f"group {label!r}")
            check_min_samples(len(x), 2, f"group {label!r}")
            cleaned[label] = x
            null_count += n_null

        return cls(_groups=cleaned, _alpha=alpha, _null_count=null_count)

    @property
    def groups(self) -> dict[str, NDArray[np.floating[Any]]]:
        return self._groups

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self._groups)

    @property
    def k(self) -> int:
        return len(self._groups)

    @property
    def n(self) -> int:
        return int(sum(len(g) for g in self._groups.values()))

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def null_count(self) -> int:
        return self._null_count

    def __repr__(self) -> str:
        return f"AnovaDesign(k={self.k}, n={self.n})"
