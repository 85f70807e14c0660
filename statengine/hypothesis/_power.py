"""
Power and sample size for t-tests via the noncentral t distribution.

For a standardized effect size d and n observations per group:

    two_sample:         df = 2(n - 1), ncp = d * sqrt(n / 2)
    one_sample/paired:  df = n - 1,    ncp = d * sqrt(n)
"""

from __future__ import annotations

import numpy as np
from scipy import stats as sp_stats
from scipy.optimize import brentq

from statengine.core.exceptions import InvalidParameterError

MAX_SAMPLE_SIZE = 10_000_000


def _df_ncp(effect_size: float, n: float, kind: str) -> tuple[float, float]:
    if kind == 'two_sample':
        return 2.0 * (n - 1.0), effect_size * np.sqrt(n / 2.0)
    return n - 1.0, effect_size * np.sqrt(n)


def t_power(effect_size: float, n: float, alpha: float, kind: str, alternative: str) -> float:
    """Probability of rejecting H0 when the true standardized effect is effect_size."""
    df, ncp = _df_ncp(effect_size, n, kind)
    if alternative == 'two.sided':
        t_crit = sp_stats.t.ppf(1.0 - alpha / 2.0, df)
        power = sp_stats.nct.sf(t_crit, df, ncp) + sp_stats.nct.cdf(-t_crit, df, ncp)
    elif alternative == 'greater':
        t_crit = sp_stats.t.ppf(1.0 - alpha, df)
        power = sp_stats.nct.sf(t_crit, df, ncp)
    else:  # less
        t_crit = sp_stats.t.ppf(alpha, df)
        power = sp_stats.nct.cdf(t_crit, df, ncp)
    return float(np.clip(power, 0.0, 1.0))


def required_n(effect_size: float, power: float, alpha: float, kind: str, alternative: str) -> int:
    """
    Smallest integer n (per group for two_sample) with power >= target.

    Raises:
        InvalidParameterError: effect_size is 0 or the target is unreachable
            below MAX_SAMPLE_SIZE
    """
    if effect_size == 0:
        raise InvalidParameterError(
            "effect_size must be non-zero to compute a sample size",
            name='effect_size', value=effect_size,
        )
    if alternative == 'two.sided':
        effect_size = abs(effect_size)

    def gap(n: float) -> float:
        return t_power(effect_size, n, alpha, kind, alternative) - power

    if gap(2.0) >= 0:
        return 2
    if gap(MAX_SAMPLE_SIZE) < 0:
        raise InvalidParameterError(
            f"power {power} is not reachable with n <= {MAX_SAMPLE_SIZE} "
            f"for effect_size {effect_size}",
            name='power', value=power,
        )
    n = int(np.ceil(brentq(gap, 2.0, MAX_SAMPLE_SIZE, xtol=1e-6)))
    # Guard against the root landing a hair below the target
    while gap(n) < 0:
        n += 1
    return n
