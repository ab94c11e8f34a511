"""
ANOVA solver dispatch.

Public API:
    anova_oneway(groups, labels, ...) -> AnovaSolution
"""

from typing import Any, Sequence

import numpy as np

from algostat.core.config import DEFAULT_CONFIG
from algostat.core.result import Result
from algostat.core.compute.timing import Timer
from algostat.anova._common import AnovaParams
from algostat.anova._oneway import oneway_table
from algostat.anova.design import AnovaDesign
from algostat.anova.solution import AnovaSolution
from algostat.effect_size._measures import eta_squared_kernel
from algostat.hypothesis._common import is_significant


def anova_oneway(
    groups: Sequence[Any] | AnovaDesign,
    labels: Sequence[str] | None = None,
    *,
    alpha: float = DEFAULT_CONFIG.significance_level,
) -> AnovaSolution:
    """
    One-way Analysis of Variance.

    Tests whether the mean performance of two or more algorithms is
    equal.

    Args:
        groups: One sample per algorithm, at least 2 observations each,
            or a prebuilt AnovaDesign
        labels: Unique group names. Default "group1", "group2", ...
        alpha: Significance level. Default 0.05.

    Returns:
        AnovaSolution with ANOVA table, F, p-value, group means and
        eta-squared approximated from F

    Examples:
        >>> result = anova_oneway([a, b, c], labels=["GA", "PSO", "DE"])
        >>> print(result.summary())
        >>> result.f_value
        >>> result.eta_squared
    """
    if isinstance(groups, AnovaDesign):
        design = groups
    else:
        design = AnovaDesign.for_oneway(groups, labels, alpha=alpha)

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('sums_of_squares'):
        between, residuals = oneway_table(design.groups)

    f_value = between.f_value
    p_value = between.p_value
    valid = not (np.isnan(f_value) or np.isnan(p_value))
    if not valid:
        warnings_list.append(
            "within-group sum of squares is zero; F statistic undefined"
        )

    timer.stop()

    params = AnovaParams(
        table=(between, residuals),
        f_value=f_value,
        p_value=p_value,
        significant=valid and is_significant(p_value, design.alpha),
        alpha=design.alpha,
        valid=valid,
        n_obs=design.n,
        grand_mean=float(np.mean(np.concatenate(design.groups))),
        group_means={
            label: float(np.mean(g)) for label, g in zip(design.labels, design.groups)
        },
        group_sizes={label: len(g) for label, g in zip(design.labels, design.groups)},
        eta_squared=eta_squared_kernel(f_value, between.df, residuals.df),
    )

    result = Result(
        params=params,
        info={'design_type': 'oneway', 'k': design.k},
        timing=timer.result(),
        backend_name='cpu_anova',
        warnings=tuple(warnings_list),
    )

    return AnovaSolution(_result=result)
