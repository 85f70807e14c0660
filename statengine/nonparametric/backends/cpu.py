"""
CPU backend for the rank tests.
"""

from __future__ import annotations

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.nonparametric._common import NonParametricParams
from statengine.nonparametric.design import NonParametricDesign
from statengine.nonparametric.backends._rank_tests import (
    mann_whitney,
    wilcoxon_signed_rank,
    kruskal_wallis,
)

_DISPATCH = {
    'mann_whitney': mann_whitney,
    'wilcoxon': wilcoxon_signed_rank,
    'kruskal_wallis': kruskal_wallis,
}


class CPUNonParametricBackend:
    """CPU backend for Mann-Whitney, Wilcoxon and Kruskal-Wallis."""

    @property
    def name(self) -> str:
        return 'cpu_nonparametric'

    def solve(self, design: NonParametricDesign) -> Result[NonParametricParams]:
        timer = Timer()
        timer.start()

        impl = _DISPATCH.get(design.test_kind)
        if impl is None:
            raise ValueError(f"Unknown test kind: {design.test_kind!r}")

        with timer.section(design.test_kind):
            params, warnings_list = impl(design)

        timer.stop()

        return Result(
            params=params,
            info={'test_kind': design.test_kind, 'n_excluded': design.n_excluded},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
