"""
Effect size formulas on validated float arrays.

These are the computational kernels shared by effect_sizes(), the
t-test (which reports Cohen's d) and one-way ANOVA (eta-squared).
Division by a zero spread (to within rounding of the data) returns
NaN rather than raising; callers translate NaN into an invalid result.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from algostat.core.compute.tolerances import data_scale, is_negligible
from algostat.effect_size._common import (
    INTERPRETATION_THRESHOLDS,
    INTERPRETATION_LABELS,
)


def pooled_sd(x: NDArray[np.floating[Any]], y: NDArray[np.floating[Any]]) -> float:
    """sqrt(((n1-1)s1^2 + (n2-1)s2^2) / (n1+n2-2))."""
    n1, n2 = len(x), len(y)
    var1, var2 = np.var(x, ddof=1), np.var(y, ddof=1)
    return float(np.sqrt(((n1 - 1) * var1 + (n2 - 1) * var2) / (n1 + n2 - 2)))


def cohens_d_kernel(x: NDArray[np.floating[Any]], y: NDArray[np.floating[Any]]) -> float:
    sp = pooled_sd(x, y)
    if is_negligible(sp, data_scale(x, y)):
        return np.nan
    return float((np.mean(x) - np.mean(y)) / sp)


def hedges_correction(n1: int, n2: int) -> float:
    """Small-sample bias correction factor 1 - 3/(4(n1+n2) - 9)."""
    return 1.0 - 3.0 / (4.0 * (n1 + n2) - 9.0)


def glass_delta_kernel(x: NDArray[np.floating[Any]], y: NDArray[np.floating[Any]]) -> float:
    sd2 = float(np.std(y, ddof=1))
    if is_negligible(sd2, data_scale(y)):
        return np.nan
    return float((np.mean(x) - np.mean(y)) / sd2)


def superiority_kernel(x: NDArray[np.floating[Any]], y: NDArray[np.floating[Any]]) -> float:
    """
    Fraction of all (v1, v2) cross pairs with v1 > v2.

    Evaluated over the full n1 x n2 cross product; ties count as
    not superior.
    """
    wins = np.count_nonzero(np.subtract.outer(x, y) > 0.0)
    return float(wins / (len(x) * len(y)))


def eta_squared_kernel(f_value: float, df_between: float, df_within: float) -> float:
    """(F * dfB) / (F * dfB + dfW), the F-based approximation to eta^2."""
    num = f_value * df_between
    denom = num + df_within
    if not np.isfinite(num) or denom == 0.0:
        return np.nan
    return float(num / denom)


def interpret(value: float) -> str:
    """Band |value| with the fixed Cohen thresholds."""
    if np.isnan(value):
        return "undefined"
    magnitude = abs(value)
    for threshold, label in zip(INTERPRETATION_THRESHOLDS, INTERPRETATION_LABELS):
        if magnitude < threshold:
            return label
    return INTERPRETATION_LABELS[-1]
