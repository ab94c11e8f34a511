"""
Hypothesis testing module.

Public API:
    t_test(x, y)               - Student's t-test (paired or pooled two-sample)
    wilcoxon_test(x, y)        - Wilcoxon signed-rank test
    mann_whitney_test(x, y)    - Mann-Whitney rank-sum test
    kruskal_wallis_test(groups) - Kruskal-Wallis H test with post-hoc pairs
    p_adjust(p)                - Multiple testing correction (Holm, Bonferroni, BH)
    adjust_p_values(p, labels) - Labelled correction with significance flags
"""

from algostat.hypothesis.solvers import (
    t_test, wilcoxon_test, mann_whitney_test, kruskal_wallis_test,
)
from algostat.hypothesis._p_adjust import p_adjust, adjust_p_values
from algostat.hypothesis.design import HypothesisDesign
from algostat.hypothesis._common import HTestParams, CorrectionParams
from algostat.hypothesis.solution import HTestSolution, CorrectionSolution

__all__ = [
    "t_test",
    "wilcoxon_test",
    "mann_whitney_test",
    "kruskal_wallis_test",
    "p_adjust",
    "adjust_p_values",
    "HypothesisDesign",
    "HTestParams",
    "CorrectionParams",
    "HTestSolution",
    "CorrectionSolution",
]
