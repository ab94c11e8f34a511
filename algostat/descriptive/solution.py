"""
Descriptive statistics solution types.

Contains the parameter payloads and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from algostat.core.result import Result

if TYPE_CHECKING:
    from algostat.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for single-sample descriptive statistics.

    Moments that are undefined for the sample (skewness with n < 3,
    kurtosis with n < 4, anything scaled by a zero variance or zero mean)
    are NaN.
    """
    n: int
    mean: float
    variance: float
    sd: float
    median: float
    minimum: float
    maximum: float
    range: float
    skewness: float
    kurtosis: float
    percentile_25: float
    percentile_75: float
    iqr: float
    coefficient_of_variation: float
    quantile_type: int


@dataclass(frozen=True)
class MeanConfIntParams:
    """Parameter payload for a t-based confidence interval of the mean."""
    n: int
    mean: float
    standard_error: float
    margin_of_error: float
    lower: float
    upper: float
    conf_level: float


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def variance(self) -> float:
        """Sample variance (Bessel-corrected, n-1). NaN for n = 1."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        return self._result.params.sd

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def minimum(self) -> float:
        return self._result.params.minimum

    @property
    def maximum(self) -> float:
        return self._result.params.maximum

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def skewness(self) -> float:
        """Bias-adjusted skewness (type 2)."""
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float:
        """Bias-adjusted excess kurtosis (type 2)."""
        return self._result.params.kurtosis

    @property
    def percentile_25(self) -> float:
        return self._result.params.percentile_25

    @property
    def percentile_75(self) -> float:
        return self._result.params.percentile_75

    @property
    def iqr(self) -> float:
        return self._result.params.iqr

    @property
    def coefficient_of_variation(self) -> float:
        """sd / mean * 100. NaN when the mean is zero."""
        return self._result.params.coefficient_of_variation

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Tabular summary of all statistics."""
        p = self._result.params
        rows = [
            ("n", float(p.n)),
            ("Mean", p.mean),
            ("SD", p.sd),
            ("Variance", p.variance),
            ("Min.", p.minimum),
            ("1st Qu.", p.percentile_25),
            ("Median", p.median),
            ("3rd Qu.", p.percentile_75),
            ("Max.", p.maximum),
            ("Range", p.range),
            ("IQR", p.iqr),
            ("Skewness", p.skewness),
            ("Kurtosis", p.kurtosis),
            ("CV (%)", p.coefficient_of_variation),
        ]
        label_width = max(len(label) for label, _ in rows)
        lines = [f"Descriptive Statistics: {self._design.name}"]
        for label, value in rows:
            lines.append(f"  {label.ljust(label_width)}  {value:14.6g}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return f"DescriptiveSolution(n={p.n}, mean={p.mean:.4g}, sd={p.sd:.4g})"
