"""
CPU backends for bootstrap intervals and permutation tests.

Each call creates its own np.random.default_rng(seed); the same seed
reproduces the same replicates.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.montecarlo._common import BootstrapParams, PermutationParams
from statengine.montecarlo.design import BootstrapDesign, PermutationDesign


def _interval(
    observed: float,
    replicates: NDArray,
    alpha: float,
    method: str,
) -> tuple[float, float]:
    """
    percentile: [Q(alpha/2), Q(1 - alpha/2)]
    basic:      [2 t0 - Q(1 - alpha/2), 2 t0 - Q(alpha/2)]
    normal:     2 t0 - mean(t) -/+ z se
    """
    if method == "normal":
        center = 2.0 * observed - np.mean(replicates)
        se = np.std(replicates, ddof=1) if len(replicates) > 1 else 0.0
        z = sp_stats.norm.ppf(1.0 - alpha / 2.0)
        return float(center - z * se), float(center + z * se)

    q_lo = float(np.quantile(replicates, alpha / 2.0))
    q_hi = float(np.quantile(replicates, 1.0 - alpha / 2.0))
    if method == "basic":
        return 2.0 * observed - q_hi, 2.0 * observed - q_lo
    return q_lo, q_hi


class CPUBootstrapBackend:
    """CPU backend for the ordinary nonparametric bootstrap."""

    @property
    def name(self) -> str:
        return 'cpu_bootstrap'

    def solve(self, design: BootstrapDesign) -> Result[BootstrapParams]:
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        data = design.data
        statistic = design.statistic
        R = design.n_resamples
        n = len(data)
        rng = np.random.default_rng(design.seed)

        with timer.section('observed'):
            observed = float(statistic(data))

        with timer.section('bootstrap_replicates'):
            t = np.empty(R, dtype=np.float64)
            for b in range(R):
                indices = rng.choice(n, size=n, replace=True)
                t[b] = statistic(data[indices])

        n_bad = int(np.sum(~np.isfinite(t)))
        if n_bad:
            warnings_list.append(f"{n_bad} replicate(s) are not finite and were ignored")
            t_ok = t[np.isfinite(t)]
        else:
            t_ok = t
        if n < 2:
            warnings_list.append("sample has a single observation; every resample is identical")

        with timer.section('interval'):
            alpha = 1.0 - design.confidence_level
            if len(t_ok) == 0:
                lower = upper = bias = se = np.nan
            else:
                lower, upper = _interval(observed, t_ok, alpha, design.method)
                bias = float(np.mean(t_ok) - observed)
                se = float(np.std(t_ok, ddof=1)) if len(t_ok) > 1 else 0.0

        timer.stop()

        params = BootstrapParams(
            observed=observed,
            replicates=t,
            lower=float(min(lower, upper)),
            upper=float(max(lower, upper)),
            bias=bias,
            standard_error=se,
            confidence_level=design.confidence_level,
            n_resamples=R,
            method=design.method,
        )

        return Result(
            params=params,
            info={'n': n, 'method': design.method, 'seed': design.seed},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class CPUPermutationBackend:
    """
    CPU backend for permutation testing.

    Shuffles the pooled observations and recomputes the statistic
    n_permutations times.
    """

    @property
    def name(self) -> str:
        return 'cpu_permutation'

    def solve(self, design: PermutationDesign) -> Result[PermutationParams]:
        timer = Timer()
        timer.start()

        x, y = design.x, design.y
        statistic = design.statistic
        R = design.n_permutations
        alternative = design.alternative
        rng = np.random.default_rng(design.seed)

        with timer.section('observed_stat'):
            observed = float(statistic(x, y))

        with timer.section('permutation_replicates'):
            combined = np.concatenate([x, y])
            n1 = len(x)
            perm_stats = np.empty(R, dtype=np.float64)
            for b in range(R):
                shuffled = rng.permutation(combined)
                perm_stats[b] = statistic(shuffled[:n1], shuffled[n1:])

        with timer.section('p_value'):
            # Reshuffles that reproduce the observed split differ only by rounding.
            tol = 1e-12 * max(1.0, abs(observed))
            if alternative == "two.sided":
                count = np.sum(np.abs(perm_stats) >= abs(observed) - tol)
            elif alternative == "greater":
                count = np.sum(perm_stats >= observed - tol)
            else:
                count = np.sum(perm_stats <= observed + tol)
            p_value = float(count) / float(R)

        timer.stop()

        params = PermutationParams(
            observed=observed,
            permuted=perm_stats,
            p_value=p_value,
            n_permutations=R,
            alternative=alternative,
        )

        return Result(
            params=params,
            info={'n1': len(x), 'n2': len(y), 'alternative': alternative, 'seed': design.seed},
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
