"""
Tukey's Honestly Significant Difference test.

Uses the studentized range distribution (scipy.stats.studentized_range)
for simultaneous confidence intervals and family-wise adjusted p-values.
Unequal group sizes are handled with the Tukey-Kramer standard error.
"""

from typing import Any, Mapping

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from statengine.anova._common import PostHocComparison, PostHocParams


def tukey_hsd_impl(
    groups: Mapping[str, NDArray[np.floating[Any]]],
    mse: float,
    df_error: int,
    *,
    alpha: float = 0.05,
) -> PostHocParams:
    """
    All pairwise comparisons, in the order the groups were given.

    Args:
        groups: label -> 1D array of valid observations
        mse: Mean square error from the ANOVA
        df_error: Error degrees of freedom from the ANOVA
        alpha: Family-wise significance level; intervals are at 1 - alpha
    """
    labels = list(groups)
    k = len(labels)
    means = {lab: float(np.mean(groups[lab])) for lab in labels}
    sizes = {lab: len(groups[lab]) for lab in labels}
    conf_level = 1.0 - alpha
    q_crit = float(sp_stats.studentized_range.ppf(conf_level, k, df_error))

    comparisons: list[PostHocComparison] = []
    for i in range(k):
        for j in range(i + 1, k):
            g1, g2 = labels[i], labels[j]
            diff = means[g1] - means[g2]
            se = float(np.sqrt(mse * (1.0 / sizes[g1] + 1.0 / sizes[g2]) / 2.0))

            if se == 0.0:
                q_stat = np.inf if diff != 0 else 0.0
                p_val = 0.0 if diff != 0 else 1.0
            else:
                # q = |diff| / sqrt(MSE / 2 * (1/n1 + 1/n2))
                q_stat = abs(diff) / se
                p_val = float(sp_stats.studentized_range.sf(q_stat, k, df_error))
            p_val = float(np.clip(p_val, 0.0, 1.0))

            margin = q_crit * se
            comparisons.append(PostHocComparison(
                group1=g1,
                group2=g2,
                diff=diff,
                se=se,
                q_statistic=float(q_stat),
                ci_lower=diff - margin,
                ci_upper=diff + margin,
                p_value=p_val,
                significant=p_val < alpha,
            ))

    return PostHocParams(
        method='tukey',
        comparisons=tuple(comparisons),
        conf_level=conf_level,
        mse=mse,
        df_error=df_error,
    )
