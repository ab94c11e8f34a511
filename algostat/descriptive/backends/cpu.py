"""
CPU backend for single-sample descriptive statistics.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from algostat.core.result import Result
from algostat.core.compute.timing import Timer
from algostat.core.compute.tolerances import data_scale, is_negligible
from algostat.descriptive.design import DescriptiveDesign
from algostat.descriptive.solution import DescriptiveParams
from algostat.descriptive._quantile_types import sample_quantile


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(
        self,
        design: DescriptiveDesign,
        *,
        quantile_type: int = 7,
    ) -> Result[DescriptiveParams]:
        """Compute the full descriptive profile of one sample."""
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        x = design.data
        n = design.n

        with timer.section('moments'):
            mean = float(np.mean(x))
            variance = float(np.var(x, ddof=1)) if n > 1 else np.nan
            sd = float(np.sqrt(variance)) if n > 1 else np.nan
            skewness = sample_skewness(x)
            kurtosis = sample_kurtosis(x)

        with timer.section('quantiles'):
            x_sorted = np.sort(x)
            q25, q75 = sample_quantile(
                x_sorted, np.array([0.25, 0.75]), quantile_type
            )

        if mean == 0.0:
            warnings_list.append("coefficient of variation undefined for zero mean")
            cv = np.nan
        else:
            cv = sd / mean * 100.0

        if n > 1 and is_negligible(sd, data_scale(x)):
            warnings_list.append("data are essentially constant")

        timer.stop()

        params = DescriptiveParams(
            n=n,
            mean=mean,
            variance=variance,
            sd=sd,
            median=float(np.median(x)),
            minimum=float(x_sorted[0]),
            maximum=float(x_sorted[-1]),
            range=float(x_sorted[-1] - x_sorted[0]),
            skewness=skewness,
            kurtosis=kurtosis,
            percentile_25=float(q25),
            percentile_75=float(q75),
            iqr=float(q75 - q25),
            coefficient_of_variation=float(cv),
            quantile_type=quantile_type,
        )

        return Result(
            params=params,
            info={'quantile_type': quantile_type},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


def sample_skewness(x: NDArray[np.floating[Any]]) -> float:
    """
    Bias-adjusted skewness (type 2).

    Formula:
        G1 = m3 / m2^1.5
        skewness = G1 * sqrt(n*(n-1)) / (n-2)

    where m2 = sum((x-mean)^2)/n, m3 = sum((x-mean)^3)/n.
    NaN for n < 3 or zero variance (to within rounding).
    """
    n = len(x)
    if n < 3:
        return np.nan

    diffs = x - np.mean(x)
    m2 = np.sum(diffs ** 2) / n
    m3 = np.sum(diffs ** 3) / n
    if is_negligible(np.sqrt(m2), data_scale(x)):
        return np.nan

    g1 = m3 / (m2 ** 1.5)
    return float(g1 * np.sqrt(n * (n - 1)) / (n - 2))


def sample_kurtosis(x: NDArray[np.floating[Any]]) -> float:
    """
    Bias-adjusted excess kurtosis (type 2).

    Formula:
        G2 = m4/m2^2 - 3
        kurtosis = ((n-1)/((n-2)*(n-3))) * ((n+1)*G2 + 6)

    NaN for n < 4 or zero variance (to within rounding).
    """
    n = len(x)
    if n < 4:
        return np.nan

    diffs = x - np.mean(x)
    m2 = np.sum(diffs ** 2) / n
    m4 = np.sum(diffs ** 4) / n
    if is_negligible(np.sqrt(m2), data_scale(x)):
        return np.nan

    g2 = m4 / (m2 ** 2) - 3.0
    return float(((n - 1.0) / ((n - 2.0) * (n - 3.0))) * ((n + 1.0) * g2 + 6.0))
