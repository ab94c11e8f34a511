"""
Solver dispatch for descriptive statistics.

Provides describe() as the comprehensive entry point, plus rank(),
quantile() and mean_conf_int().
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from algostat.core.result import Result
from algostat.core.compute.timing import Timer
from algostat.core.compute.tolerances import data_scale, is_negligible
from algostat.core.validation import as_sample, check_probability
from algostat.descriptive.design import DescriptiveDesign
from algostat.descriptive.solution import DescriptiveSolution, MeanConfIntParams
from algostat.descriptive.backends.cpu import CPUDescriptiveBackend
from algostat.descriptive._quantile_types import sample_quantile
from algostat.descriptive._ranking import average_ranks


def _ensure_design(data: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    """Convert raw array to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data)


def describe(
    data: ArrayLike | DescriptiveDesign,
    *,
    quantile_type: int = 7,
) -> DescriptiveSolution:
    """
    Compute comprehensive descriptive statistics for one sample.

    Computes: n, mean, variance, standard deviation, median, min, max,
    range, skewness, excess kurtosis, 25th/75th percentiles, IQR and
    coefficient of variation.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        1D finite sample.
    quantile_type : int
        Hyndman-Fan quantile type (1-9) for the percentiles. Default 7.
        Use 6 to reproduce Apache Commons Math percentiles.

    Returns
    -------
    DescriptiveSolution
    """
    design = _ensure_design(data)
    result = CPUDescriptiveBackend().solve(design, quantile_type=quantile_type)
    return DescriptiveSolution(_result=result, _design=design)


def rank(x: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Tie-averaged ranks of a sample, in input order.

    Ties receive the mean of the ranks they would occupy if they were
    infinitesimally perturbed apart: rank([5, 5, 1]) -> [2.5, 2.5, 1.0].

    Parameters
    ----------
    x : array-like
        1D finite sample. Not modified.

    Returns
    -------
    ndarray
        1-based float64 ranks. Their sum is n(n+1)/2.
    """
    return average_ranks(as_sample(x, "x", min_samples=0))


def quantile(
    x: ArrayLike,
    probs: ArrayLike = (0.0, 0.25, 0.5, 0.75, 1.0),
    *,
    type: int = 7,
) -> NDArray[np.floating[Any]]:
    """
    Sample quantiles.

    Parameters
    ----------
    x : array-like
        1D finite sample.
    probs : array-like
        Probabilities in [0, 1].
    type : int
        Hyndman-Fan quantile type 1-9. Default 7.

    Returns
    -------
    ndarray
        One value per probability.
    """
    arr = as_sample(x, "x", min_samples=1)
    return sample_quantile(np.sort(arr), np.asarray(probs, dtype=np.float64), type)


def mean_conf_int(
    x: ArrayLike,
    *,
    conf_level: float = 0.95,
) -> Result[MeanConfIntParams]:
    """
    Confidence interval for the mean based on the t distribution.

        mean +/- t_{1-(1-conf_level)/2, n-1} * sd / sqrt(n)

    Parameters
    ----------
    x : array-like
        1D finite sample with at least 2 observations.
    conf_level : float
        Confidence level in (0, 1). Default 0.95.

    Returns
    -------
    Result[MeanConfIntParams]
    """
    conf_level = check_probability(conf_level, "conf_level")
    arr = as_sample(x, "x", min_samples=2)

    timer = Timer()
    timer.start()

    n = len(arr)
    mean = float(np.mean(arr))
    se = float(np.std(arr, ddof=1) / np.sqrt(n))
    t_crit = float(sp_stats.t.ppf(1.0 - (1.0 - conf_level) / 2.0, n - 1))
    margin = t_crit * se

    timer.stop()

    warnings_list = []
    if is_negligible(se, data_scale(arr)):
        warnings_list.append("data are essentially constant")

    return Result(
        params=MeanConfIntParams(
            n=n,
            mean=mean,
            standard_error=se,
            margin_of_error=margin,
            lower=mean - margin,
            upper=mean + margin,
            conf_level=conf_level,
        ),
        info={'method': 't'},
        timing=timer.result(),
        backend_name='cpu_descriptive',
        warnings=tuple(warnings_list),
    )
