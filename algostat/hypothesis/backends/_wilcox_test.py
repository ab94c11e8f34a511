"""
Wilcoxon signed-rank test for paired samples.

All n differences are kept. |d| is ranked with the shared tie-averaged
rank transform, W+ sums the ranks of the positive differences and
W- = n(n+1)/2 - W+, so zero differences (which take the lowest ranks)
count toward W-. The statistic is W = max(W+, W-), referred to the
large-sample normal approximation

    mu    = n(n+1)/4
    sigma = sqrt(n(n+1)(2n+1)/24)

with a continuity correction for the p-value. No tie correction is
applied to sigma. The effect size is r = |z| / sqrt(n) with the
uncorrected z.
When every difference is zero the test reports W = 0, p = 1 and r = 0.

The confidence interval for the median difference is the pair of
order statistics of the sorted paired differences at
lo = ceil(n * alpha / 2) - 1 and hi = n - lo - 1.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING
import numpy as np
from scipy import stats as sp_stats

from algostat.descriptive._ranking import average_ranks
from algostat.hypothesis._common import HTestParams, is_significant

if TYPE_CHECKING:
    from algostat.hypothesis.design import HypothesisDesign


def wilcoxon_signed_rank(design: HypothesisDesign) -> tuple[HTestParams, list[str]]:
    """Wilcoxon signed-rank test on x - y."""
    x, y = design.x, design.y
    alpha = design.alpha
    warnings_list: list[str] = []

    d = x - y
    n = len(d)

    n_zeros = int(np.count_nonzero(d == 0.0))
    if n_zeros == n:
        warnings_list.append("all paired differences are zero")
        w_stat, z, p_value, effect = 0.0, 0.0, 1.0, 0.0
    else:
        if n_zeros > 0:
            warnings_list.append(f"{n_zeros} zero differences counted in W-")
        ranks = average_ranks(np.abs(d))
        w_plus = float(np.sum(ranks[d > 0]))
        w_minus = n * (n + 1) / 2.0 - w_plus
        w_stat = max(w_plus, w_minus)

        mu = n * (n + 1) / 4.0
        sigma = math.sqrt(n * (n + 1) * (2 * n + 1) / 24.0)
        z = (w_stat - mu) / sigma
        z_corrected = (abs(w_stat - mu) - 0.5) / sigma
        p_value = min(1.0, float(2.0 * sp_stats.norm.sf(z_corrected)))
        effect = abs(z) / math.sqrt(n)

    ci = _median_difference_ci(d, alpha)

    return HTestParams(
        statistic=float(w_stat),
        statistic_name="W",
        parameter=None,
        p_value=p_value,
        significant=is_significant(p_value, alpha),
        alpha=alpha,
        valid=True,
        conf_int=ci,
        conf_level=design.conf_level,
        estimate={"median of x": float(np.median(x)), "median of y": float(np.median(y))},
        sample_sizes={"x": len(x), "y": len(y)},
        method="Wilcoxon signed rank test",
        data_name=design.data_name,
        extras={
            "z": float(z),
            "effect_size": float(effect),
            "n_zeros": n_zeros,
        },
    ), warnings_list


def _median_difference_ci(d: np.ndarray, alpha: float) -> np.ndarray:
    """Order statistics of the sorted paired differences at the alpha/2 tails."""
    d_sorted = np.sort(d)
    n = len(d_sorted)
    lo = math.ceil(n * alpha / 2.0) - 1
    hi = n - lo - 1
    return np.array([d_sorted[lo], d_sorted[hi]])
