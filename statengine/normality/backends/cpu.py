"""
CPU backend for normality tests.
"""

from __future__ import annotations

import numpy as np

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.normality._common import (
    NormalityParams,
    TEST_KINDS,
    METHOD_NAMES,
    STATISTIC_NAMES,
)
from statengine.normality.design import NormalityDesign
from statengine.normality.backends import _normality_tests


class CPUNormalityBackend:
    """CPU backend for normality tests."""

    @property
    def name(self) -> str:
        return 'cpu_normality'

    def solve(self, design: NormalityDesign) -> Result[NormalityParams]:
        timer = Timer()
        timer.start()

        method = design.method
        with timer.section(method):
            if method == 'shapiro':
                stat, p, critical, warnings_list = _normality_tests.shapiro_wilk(design)
            elif method == 'ks':
                stat, p, critical, warnings_list = _normality_tests.kolmogorov_smirnov(design)
            elif method == 'anderson':
                stat, p, critical, warnings_list = _normality_tests.anderson_darling(design)
            else:
                raise ValueError(f"Unknown normality method: {method!r}")

        if not np.isnan(p):
            p = float(np.clip(p, 0.0, 1.0))

        params = NormalityParams(
            test_kind=TEST_KINDS[method],
            method=METHOD_NAMES[method],
            statistic=stat,
            statistic_name=STATISTIC_NAMES[method],
            p_value=p,
            alpha=design.alpha,
            is_normal=bool(p > design.alpha),
            n=design.n,
            critical_values=critical,
        )

        timer.stop()

        return Result(
            params=params,
            info={'method': method, 'n': design.n, 'null_count': design.null_count},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
