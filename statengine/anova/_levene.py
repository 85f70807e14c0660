"""
Levene's test for homogeneity of variances.

Transform each observation to |y - center(group)| and run a one-way ANOVA
on the transformed values. center='median' is the Brown-Forsythe variant;
center='mean' is the original Levene test.
"""

from typing import Any, Mapping

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from statengine.anova._common import LeveneParams


def levene_test_impl(
    groups: Mapping[str, NDArray[np.floating[Any]]],
    *,
    center: str = 'median',
) -> LeveneParams:
    """
    Compute Levene's test (or Brown-Forsythe variant).

    Args:
        groups: label -> 1D array of valid observations
        center: 'median' (Brown-Forsythe, default) or 'mean'

    Returns:
        LeveneParams with F statistic, p-value, and degrees of freedom
    """
    if center not in ('mean', 'median'):
        raise ValueError(f"center must be 'mean' or 'median', got {center!r}")

    center_fn = np.mean if center == 'mean' else np.median
    deviations = {
        label: np.abs(y - center_fn(y)) for label, y in groups.items()
    }
    group_vars = {
        label: float(np.var(y, ddof=1)) if len(y) > 1 else 0.0
        for label, y in groups.items()
    }

    z_all = np.concatenate(list(deviations.values()))
    z_grand_mean = np.mean(z_all)
    ss_between = 0.0
    ss_within = 0.0
    for z in deviations.values():
        z_mean = np.mean(z)
        ss_between += len(z) * (z_mean - z_grand_mean) ** 2
        ss_within += np.sum((z - z_mean) ** 2)

    k = len(deviations)
    df_between = k - 1
    df_within = len(z_all) - k

    if df_between <= 0 or df_within <= 0 or ss_within == 0:
        f_val = 0.0
        p_val = 1.0
    else:
        f_val = float((ss_between / df_between) / (ss_within / df_within))
        p_val = float(sp_stats.f.sf(f_val, df_between, df_within))

    return LeveneParams(
        f_value=f_val,
        p_value=p_val,
        df_between=df_between,
        df_within=df_within,
        center=center,
        group_vars=group_vars,
    )
