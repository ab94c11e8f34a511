"""
Sums of squares and F test for one-way ANOVA.

    SSB = sum n_i (mean_i - grand)^2         dfB = k - 1
    SSW = sum sum (x - mean_i)^2             dfW = N - k
    F   = (SSB / dfB) / (SSW / dfW)          p = P(F(dfB, dfW) > F)

A within-group sum of squares that is zero (to within rounding of the
data magnitude) leaves F undefined; the row then carries NaN and the
caller marks the result invalid.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from algostat.anova._common import AnovaTableRow
from algostat.core.compute.tolerances import data_scale, is_negligible


def oneway_table(
    groups: tuple[NDArray[np.floating[Any]], ...],
    term: str = "group",
) -> tuple[AnovaTableRow, AnovaTableRow]:
    """Return the (between, Residuals) rows for k groups."""
    k = len(groups)
    n_total = sum(len(g) for g in groups)
    grand = float(np.mean(np.concatenate(groups)))

    ss_between = float(sum(len(g) * (np.mean(g) - grand) ** 2 for g in groups))
    ss_within = float(sum(np.sum((g - np.mean(g)) ** 2) for g in groups))

    df_between = k - 1
    df_within = n_total - k
    ms_between = ss_between / df_between
    ms_within = ss_within / df_within

    if is_negligible(np.sqrt(ss_within / n_total), data_scale(*groups)):
        f_value = np.nan
        p_value = np.nan
    else:
        f_value = ms_between / ms_within
        p_value = float(sp_stats.f.sf(f_value, df_between, df_within))

    return (
        AnovaTableRow(
            term=term,
            df=df_between,
            sum_sq=ss_between,
            mean_sq=ms_between,
            f_value=f_value,
            p_value=p_value,
        ),
        AnovaTableRow(
            term="Residuals",
            df=df_within,
            sum_sq=ss_within,
            mean_sq=ms_within,
            f_value=None,
            p_value=None,
        ),
    )
