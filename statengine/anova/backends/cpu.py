"""
CPU backend for one-way ANOVA.

Sums of squares:
    SS_between = sum_j n_j (mean_j - grand_mean)^2
    SS_within  = sum_j sum_i (y_ij - mean_j)^2
"""

from __future__ import annotations

import numpy as np
from scipy import stats as sp_stats

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.core.assumptions import (
    normality_check,
    equal_variance_check,
    independence_note,
)
from statengine.anova._common import AnovaParams, GroupStats
from statengine.anova._posthoc import tukey_hsd_impl
from statengine.anova.design import AnovaDesign


class CPUAnovaBackend:
    """CPU backend for one-way ANOVA."""

    @property
    def name(self) -> str:
        return 'cpu_anova'

    def solve(self, design: AnovaDesign) -> Result[AnovaParams]:
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []
        groups = design.groups
        alpha = design.alpha

        with timer.section('sums_of_squares'):
            all_y = np.concatenate(list(groups.values()))
            n = len(all_y)
            k = design.k
            grand_mean = float(np.mean(all_y))

            stats: list[GroupStats] = []
            ss_between = 0.0
            ss_within = 0.0
            for label, y in groups.items():
                n_j = len(y)
                mean_j = float(np.mean(y))
                sd_j = float(np.std(y, ddof=1))
                stats.append(GroupStats(
                    group=label, n=n_j, mean=mean_j, sd=sd_j, se=sd_j / np.sqrt(n_j),
                ))
                ss_between += n_j * (mean_j - grand_mean) ** 2
                ss_within += float(np.sum((y - mean_j) ** 2))

            ss_total = ss_between + ss_within
            df_between = k - 1
            df_within = n - k
            ms_between = ss_between / df_between
            ms_within = ss_within / df_within

        with timer.section('f_test'):
            if ms_within == 0.0:
                warnings_list.append("within-group variance is zero; F is undefined")
                f_stat = np.nan if ms_between == 0.0 else np.inf
                p_value = np.nan if ms_between == 0.0 else 0.0
            else:
                f_stat = float(ms_between / ms_within)
                p_value = float(np.clip(sp_stats.f.sf(f_stat, df_between, df_within), 0.0, 1.0))
            eta_sq = ss_between / ss_total if ss_total > 0 else np.nan

        with timer.section('assumptions'):
            checks = [normality_check(y, alpha, label=label) for label, y in groups.items()]
            checks.append(equal_variance_check(groups, alpha))
            checks.append(independence_note())

        post_hoc = None
        if k > 2 and p_value < alpha and ms_within > 0.0:
            with timer.section('post_hoc'):
                post_hoc = tukey_hsd_impl(groups, ms_within, df_within, alpha=alpha)

        timer.stop()

        params = AnovaParams(
            test_kind='one_way_anova',
            ss_between=float(ss_between),
            ss_within=float(ss_within),
            ss_total=float(ss_total),
            df_between=df_between,
            df_within=df_within,
            ms_between=float(ms_between),
            ms_within=float(ms_within),
            f_statistic=f_stat,
            p_value=p_value,
            eta_squared=float(eta_sq),
            alpha=alpha,
            group_stats=tuple(stats),
            grand_mean=grand_mean,
            n_obs=n,
            post_hoc=post_hoc,
            assumptions=tuple(checks),
        )

        return Result(
            params=params,
            info={'k': k, 'n': n, 'null_count': design.null_count, 'post_hoc': post_hoc is not None},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
