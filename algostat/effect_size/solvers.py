"""
Effect size entry points.

effect_sizes(x, y) computes every two-sample measure in one call; the
individual measures are also exposed for callers that only need one.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from algostat.core.result import Result
from algostat.core.compute.timing import Timer
from algostat.core.validation import as_sample
from algostat.effect_size._common import EffectSizeParams
from algostat.effect_size._measures import (
    cohens_d_kernel,
    eta_squared_kernel,
    glass_delta_kernel,
    hedges_correction,
    interpret,
    pooled_sd,
    superiority_kernel,
)
from algostat.effect_size.solution import EffectSizeSolution

MIN_EFFECT_SAMPLE = 2


def _pair(x: ArrayLike, y: ArrayLike):
    return (
        as_sample(x, "x", min_samples=MIN_EFFECT_SAMPLE),
        as_sample(y, "y", min_samples=MIN_EFFECT_SAMPLE),
    )


def effect_sizes(x: ArrayLike, y: ArrayLike) -> EffectSizeSolution:
    """
    Two-sample effect sizes.

    Parameters
    ----------
    x, y : array-like
        Finite samples, at least 2 observations each.

    Returns
    -------
    EffectSizeSolution
        Cohen's d, Hedges' g, Glass's delta, probability of superiority,
        and the interpretation band of |d|. If the pooled standard
        deviation is zero, d and g are NaN and the result is invalid.
    """
    x_arr, y_arr = _pair(x, y)
    warnings_list: list[str] = []

    timer = Timer()
    timer.start()

    with timer.section('parametric'):
        sp = pooled_sd(x_arr, y_arr)
        d = cohens_d_kernel(x_arr, y_arr)
        g = d * hedges_correction(len(x_arr), len(y_arr))
        delta = glass_delta_kernel(x_arr, y_arr)

    with timer.section('superiority'):
        ps = superiority_kernel(x_arr, y_arr)

    timer.stop()

    valid = not np.isnan(d)
    if not valid:
        warnings_list.append("pooled standard deviation is zero; Cohen's d undefined")
    if np.isnan(delta):
        warnings_list.append("second sample has zero spread; Glass's delta undefined")

    params = EffectSizeParams(
        cohens_d=d,
        hedges_g=g,
        glass_delta=delta,
        probability_of_superiority=ps,
        interpretation=interpret(d),
        valid=valid,
        n1=len(x_arr),
        n2=len(y_arr),
        mean1=float(np.mean(x_arr)),
        mean2=float(np.mean(y_arr)),
        sd1=float(np.std(x_arr, ddof=1)),
        sd2=float(np.std(y_arr, ddof=1)),
        pooled_sd=sp,
    )

    return EffectSizeSolution(_result=Result(
        params=params,
        info={'primary_measure': 'cohens_d'},
        timing=timer.result(),
        backend_name='cpu_effect_size',
        warnings=tuple(warnings_list),
    ))


def cohens_d(x: ArrayLike, y: ArrayLike) -> float:
    """(mean(x) - mean(y)) / pooled sd. NaN if the pooled sd is zero."""
    return cohens_d_kernel(*_pair(x, y))


def hedges_g(x: ArrayLike, y: ArrayLike) -> float:
    """Cohen's d * (1 - 3 / (4(n1 + n2) - 9))."""
    x_arr, y_arr = _pair(x, y)
    return cohens_d_kernel(x_arr, y_arr) * hedges_correction(len(x_arr), len(y_arr))


def glass_delta(x: ArrayLike, y: ArrayLike) -> float:
    """(mean(x) - mean(y)) / sd(y). Uses only the second sample's spread."""
    return glass_delta_kernel(*_pair(x, y))


def probability_of_superiority(x: ArrayLike, y: ArrayLike) -> float:
    """P(X > Y) estimated over all n1 * n2 cross pairs."""
    x_arr = as_sample(x, "x", min_samples=1)
    y_arr = as_sample(y, "y", min_samples=1)
    return superiority_kernel(x_arr, y_arr)


def eta_squared_from_f(f_value: float, df_between: float, df_within: float) -> float:
    """
    Eta-squared approximated from an F statistic.

        eta^2 = (F * dfB) / (F * dfB + dfW)

    Used in place of SS_between / SS_total so that it can be reported
    when only F is available.
    """
    return eta_squared_kernel(float(f_value), float(df_between), float(df_within))


def interpret_effect_size(value: float) -> str:
    """
    Interpretation band of a Cohen's-d-scale effect size.

    |value| < 0.2 -> "negligible", < 0.5 -> "small", < 0.8 -> "medium",
    otherwise "large". NaN -> "undefined".
    """
    return interpret(float(value))
