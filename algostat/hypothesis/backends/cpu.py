"""
CPU backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from algostat.core.result import Result
from algostat.core.compute.timing import Timer
from algostat.hypothesis._common import HTestParams
from algostat.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HTestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "t_two_sample":
                from algostat.hypothesis.backends._t_test import t_two_sample
                params, warnings_list = t_two_sample(design)
            elif test_type == "t_paired":
                from algostat.hypothesis.backends._t_test import t_paired
                params, warnings_list = t_paired(design)
            elif test_type == "wilcoxon_signed_rank":
                from algostat.hypothesis.backends._wilcox_test import wilcoxon_signed_rank
                params, warnings_list = wilcoxon_signed_rank(design)
            elif test_type == "mann_whitney":
                from algostat.hypothesis.backends._rank_tests import mann_whitney
                params, warnings_list = mann_whitney(design)
            elif test_type == "kruskal_wallis":
                from algostat.hypothesis.backends._rank_tests import kruskal_wallis
                params, warnings_list = kruskal_wallis(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
