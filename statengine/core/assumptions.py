"""
Assumption checks attached to test results.

Each check is a small immutable record: which assumption, which procedure
evaluated it, and a verdict. Checks never raise; a check that cannot be
carried out (too few observations, for example) is reported with the
'warning' verdict instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

VERDICTS = ('passed', 'failed', 'warning')

SHAPIRO_MIN_N = 3
SHAPIRO_MAX_N = 5000
VARIANCE_RATIO_LIMIT = 4.0
MIN_EXPECTED_COUNT = 5.0


@dataclass(frozen=True)
class AssumptionCheck:
    """
    Outcome of one assumption check.

    Attributes:
        name: Assumption being checked, e.g. 'Normality'
        test_used: Procedure used, e.g. 'Shapiro-Wilk'; 'none' when not tested
        verdict: 'passed', 'failed' or 'warning'
        p_value: p-value of the procedure, when it has one
        statistic: Statistic of the procedure, when it has one
        message: Human-readable explanation
    """
    name: str
    test_used: str
    verdict: str
    message: str
    p_value: float | None = None
    statistic: float | None = None

    @property
    def passed(self) -> bool:
        return self.verdict == 'passed'

    def __str__(self) -> str:
        detail = f" (p = {self.p_value:.4g})" if self.p_value is not None else ""
        return f"[{self.verdict}] {self.name} via {self.test_used}{detail}: {self.message}"


def normality_check(
    x: NDArray[np.floating[Any]],
    alpha: float,
    label: str = "data",
) -> AssumptionCheck:
    """Shapiro-Wilk normality check on one sample."""
    n = len(x)
    if n < SHAPIRO_MIN_N or n > SHAPIRO_MAX_N:
        return AssumptionCheck(
            name=f"Normality ({label})",
            test_used="Shapiro-Wilk",
            verdict='warning',
            message=(
                f"Shapiro-Wilk requires {SHAPIRO_MIN_N} to {SHAPIRO_MAX_N} "
                f"observations, got {n}; normality not assessed"
            ),
        )
    if np.ptp(x) == 0:
        return AssumptionCheck(
            name=f"Normality ({label})",
            test_used="Shapiro-Wilk",
            verdict='warning',
            message="all values are identical; normality not assessed",
        )

    w, p = sp_stats.shapiro(x)
    p = float(np.clip(p, 0.0, 1.0))
    ok = p > alpha
    return AssumptionCheck(
        name=f"Normality ({label})",
        test_used="Shapiro-Wilk",
        verdict='passed' if ok else 'failed',
        p_value=p,
        statistic=float(w),
        message=(
            "data are consistent with a normal distribution" if ok
            else "data deviate significantly from normality"
        ),
    )


def equal_variance_check(
    groups: Mapping[str, NDArray[np.floating[Any]]],
    alpha: float,
) -> AssumptionCheck:
    """Brown-Forsythe (median-centred Levene) check across groups."""
    from statengine.anova._levene import levene_test_impl

    variances = [float(np.var(g, ddof=1)) for g in groups.values()]
    min_var = min(variances)
    ratio = np.inf if min_var == 0 else max(variances) / min_var

    lev = levene_test_impl(groups, center='median')
    ok = lev.p_value > alpha
    return AssumptionCheck(
        name="Equal variances",
        test_used="Levene (Brown-Forsythe)",
        verdict='passed' if ok else 'failed',
        p_value=lev.p_value,
        statistic=lev.f_value,
        message=(
            f"largest/smallest variance ratio = {ratio:.3g}; "
            + ("variances are homogeneous" if ok else "variances differ significantly")
        ),
    )


def variance_ratio_check(a: NDArray, b: NDArray, label: str) -> AssumptionCheck:
    """
    Heuristic homoscedasticity check: ratio of the larger to the smaller
    variance below VARIANCE_RATIO_LIMIT.
    """
    va, vb = float(np.var(a, ddof=1)), float(np.var(b, ddof=1))
    lo, hi = min(va, vb), max(va, vb)
    if lo == 0:
        ratio = 1.0 if hi == 0 else np.inf
    else:
        ratio = hi / lo
    ok = ratio < VARIANCE_RATIO_LIMIT
    return AssumptionCheck(
        name=label,
        test_used="variance ratio",
        verdict='passed' if ok else 'failed',
        statistic=float(ratio),
        message=(
            f"variance ratio = {ratio:.3g} "
            + ("(below" if ok else "(not below") + f" {VARIANCE_RATIO_LIMIT:g})"
        ),
    )


def independence_note() -> AssumptionCheck:
    """Independence cannot be tested from the data alone."""
    return AssumptionCheck(
        name="Independence",
        test_used="none",
        verdict='passed',
        message="observations assumed independent by study design; not tested",
    )


def expected_count_check(expected: NDArray[np.floating[Any]]) -> AssumptionCheck:
    """Chi-square approximation: every expected count at least 5."""
    n_small = int(np.sum(expected < MIN_EXPECTED_COUNT))
    ok = n_small == 0
    return AssumptionCheck(
        name="Expected frequencies",
        test_used="minimum expected count",
        verdict='passed' if ok else 'warning',
        statistic=float(np.min(expected)),
        message=(
            f"all expected counts >= {MIN_EXPECTED_COUNT:g}" if ok
            else f"{n_small} cell(s) have expected count < {MIN_EXPECTED_COUNT:g}"
        ),
    )
