"""
CPU backend for robust summaries.

Trimmed mean drops floor(trim * n) observations from each end; the
winsorized mean clips the same number to the nearest retained value.
"""

from __future__ import annotations

import numpy as np
from scipy import stats as sp_stats

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.descriptive._quantile_types import sample_quantile
from statengine.robust._common import RobustParams, MAD_SCALE_FACTOR
from statengine.robust.design import RobustDesign


class CPURobustStatisticsBackend:

    @property
    def name(self) -> str:
        return 'cpu_robust_statistics'

    def solve(self, design: RobustDesign) -> Result[RobustParams]:
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        x = design.x
        n = design.n
        trim = design.trim

        with timer.section('classical'):
            mean = float(np.mean(x))
            sd = float(np.std(x, ddof=1)) if n > 1 else 0.0

        with timer.section('robust'):
            x_sorted = np.sort(x)
            median = float(np.median(x_sorted))
            mad = float(np.median(np.abs(x_sorted - median)))
            trimmed = float(sp_stats.trim_mean(x_sorted, trim))

            g = int(np.floor(trim * n))
            if g > 0:
                clipped = np.clip(x_sorted, x_sorted[g], x_sorted[n - g - 1])
            else:
                clipped = x_sorted
            winsorized = float(np.mean(clipped))

            q1, q3 = sample_quantile(x_sorted, np.array([0.25, 0.75]), qtype=7)
            iqr = float(q3 - q1)

        if mad == 0 and n > 1:
            warnings_list.append("MAD is zero: at least half the values are identical")

        timer.stop()

        params = RobustParams(
            n=n,
            mean=mean,
            standard_deviation=sd,
            median=median,
            mad=mad,
            scaled_mad=MAD_SCALE_FACTOR * mad,
            trimmed_mean=trimmed,
            winsorized_mean=winsorized,
            iqr=iqr,
            trim=trim,
        )

        return Result(
            params=params,
            info={'n': n, 'null_count': design.null_count, 'trimmed_each_end': g},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
