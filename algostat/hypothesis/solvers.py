"""
Solver dispatch for hypothesis tests.

Provides t_test(), wilcoxon_test(), mann_whitney_test() and
kruskal_wallis_test(). Also re-exports p_adjust() and adjust_p_values().
"""

from __future__ import annotations

from typing import Sequence
from numpy.typing import ArrayLike

from algostat.core.config import DEFAULT_CONFIG
from algostat.core.exceptions import ValidationError
from algostat.hypothesis.design import HypothesisDesign
from algostat.hypothesis.solution import HTestSolution
from algostat.hypothesis.backends.cpu import CPUHypothesisBackend
from algostat.hypothesis._p_adjust import p_adjust, adjust_p_values  # re-export


def _get_backend(backend: str = 'cpu'):
    """Select backend for hypothesis tests. All tests run on the CPU."""
    if backend in ('cpu', 'auto'):
        return CPUHypothesisBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Use 'cpu'.")


def _run(design: HypothesisDesign, backend: str) -> HTestSolution:
    be = _get_backend(backend)
    result = be.solve(design)
    return HTestSolution(_result=result, _design=design)


def t_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    paired: bool = False,
    alpha: float = DEFAULT_CONFIG.significance_level,
    backend: str = 'cpu',
) -> HTestSolution:
    """
    Student's t-test comparing two algorithms.

    Parameters
    ----------
    x, y : array-like or HypothesisDesign
        Samples of a metric for each algorithm, at least 5 values each.
        If x is a HypothesisDesign, y and the options are ignored.
    paired : bool
        If True, test the differences x - y (equal lengths required).
        Otherwise use the pooled-variance two-sample test.
    alpha : float
        Significance level. The confidence interval for the mean
        difference is at level 1 - alpha.
    backend : str
        'cpu' (default).

    Returns
    -------
    HTestSolution
        Statistic, p-value, interval, Cohen's d and the normality and
        equal-variance assumption flags.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_t_test(x, y, paired=paired, alpha=alpha)
    return _run(design, backend)


def wilcoxon_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    alpha: float = DEFAULT_CONFIG.significance_level,
    backend: str = 'cpu',
) -> HTestSolution:
    """
    Wilcoxon signed-rank test for paired samples.

    Uses the normal approximation with continuity correction. Zero
    differences are ranked with the rest and count toward W-; n is the
    full number of pairs.

    Returns
    -------
    HTestSolution
        W = max(W+, W-), p-value, effect size r = |z|/sqrt(n) and a
        confidence interval for the median difference.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_wilcoxon(x, y, alpha=alpha)
    return _run(design, backend)


def mann_whitney_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    alpha: float = DEFAULT_CONFIG.significance_level,
    backend: str = 'cpu',
) -> HTestSolution:
    """
    Mann-Whitney rank-sum test for two independent samples.

    This is the pairwise comparison kruskal_wallis_test() uses for its
    post-hoc analysis: U = max(U1, U2) referred to the normal
    approximation without continuity or tie correction.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_mann_whitney(x, y, alpha=alpha)
    return _run(design, backend)


def kruskal_wallis_test(
    samples: Sequence[ArrayLike] | HypothesisDesign,
    labels: Sequence[str] | None = None,
    *,
    alpha: float = DEFAULT_CONFIG.significance_level,
    backend: str = 'cpu',
) -> HTestSolution:
    """
    Kruskal-Wallis H test comparing three or more algorithms.

    Parameters
    ----------
    samples : sequence of array-like or HypothesisDesign
        One sample per algorithm; at least 3 non-empty samples.
    labels : sequence of str or None
        Unique group names. Default "group1", "group2", ...
    alpha : float
        Significance level.
    backend : str
        'cpu' (default).

    Returns
    -------
    HTestSolution
        H, df = k - 1, p-value, group medians and sizes. When significant,
        `post_hoc` maps "A vs B" to the pairwise rank-sum p-value.
    """
    if isinstance(samples, HypothesisDesign):
        design = samples
    else:
        design = HypothesisDesign.for_kruskal_wallis(samples, labels, alpha=alpha)
    return _run(design, backend)
