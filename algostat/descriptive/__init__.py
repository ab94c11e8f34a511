"""
Descriptive statistics module.

Public API:
    describe(x)        - All single-sample statistics at once
    rank(x)            - Tie-averaged ranks (shared by rank-based tests)
    quantile(x, probs) - Sample quantiles (Hyndman-Fan types 1-9)
    mean_conf_int(x)   - t-based confidence interval for the mean
"""

from algostat.descriptive.design import DescriptiveDesign
from algostat.descriptive.solution import (
    DescriptiveParams,
    DescriptiveSolution,
    MeanConfIntParams,
)
from algostat.descriptive.solvers import (
    describe,
    rank,
    quantile,
    mean_conf_int,
)

__all__ = [
    "describe",
    "rank",
    "quantile",
    "mean_conf_int",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
    "MeanConfIntParams",
]
