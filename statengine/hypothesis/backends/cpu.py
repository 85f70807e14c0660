"""
CPU backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_kind.
"""

from __future__ import annotations

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result:
        """Dispatch to test-specific implementation based on design.test_kind."""
        timer = Timer()
        timer.start()

        test_kind = design.test_kind

        with timer.section(test_kind):
            if test_kind == "one_sample_t":
                from statengine.hypothesis.backends._t_test import t_one_sample
                params, warnings_list = t_one_sample(design)
            elif test_kind == "independent_t":
                from statengine.hypothesis.backends._t_test import t_two_sample
                params, warnings_list = t_two_sample(design)
            elif test_kind == "paired_t":
                from statengine.hypothesis.backends._t_test import t_paired
                params, warnings_list = t_paired(design)
            elif test_kind == "chi_square_independence":
                from statengine.hypothesis.backends._chisq_test import chisq_independence
                params, warnings_list = chisq_independence(design)
            elif test_kind == "chi_square_gof":
                from statengine.hypothesis.backends._chisq_test import chisq_gof
                params, warnings_list = chisq_gof(design)
            else:
                raise ValueError(f"Unknown test_kind: {test_kind!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_kind': test_kind, 'null_count': design.null_count},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
