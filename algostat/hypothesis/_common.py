"""
Common types for hypothesis testing.

Defines HTestParams (one payload shape for every test kind; test-specific
outputs go in `extras`) and CorrectionParams for p-value adjustment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Every hypothesis test returns this same structure; test-specific
    extras go in the `extras` dict.

    Attributes
    ----------
    statistic : float
        Test statistic value ("t", "W", "H", "U"). NaN if invalid.
    statistic_name : str
        Name of the test statistic.
    parameter : dict or None
        Distribution parameters, e.g. {"df": 9}. None for tests
        referred to the normal distribution.
    p_value : float
        Two-sided p-value. NaN if invalid.
    significant : bool
        p_value < alpha. Always False for an invalid result.
    alpha : float
        Significance level the decision was made at.
    valid : bool
        False if the computation failed (e.g. undefined statistic). The
        reason is recorded in Result.warnings.
    conf_int : ndarray or None
        Confidence interval for the effect estimate, shape (2,).
    conf_level : float
        Confidence level of conf_int (1 - alpha).
    estimate : dict or None
        Location estimates per group, e.g. {"mean of x": 5.1}.
    sample_sizes : dict
        Observations per group, e.g. {"x": 10, "y": 10}.
    method : str
        Human-readable method name, e.g. "Paired t-test".
    data_name : str
        Description of the data, e.g. "x and y".
    extras : dict or None
        Test-specific additional outputs (assumption flags, effect size,
        post-hoc comparisons).
    """
    statistic: float
    statistic_name: str
    parameter: dict[str, float] | None
    p_value: float
    significant: bool
    alpha: float
    valid: bool
    conf_int: NDArray[np.floating[Any]] | None
    conf_level: float
    estimate: dict[str, float] | None
    sample_sizes: dict[str, int]
    method: str
    data_name: str
    extras: dict[str, Any] | None = None


@dataclass(frozen=True)
class CorrectionParams:
    """
    Parameter payload for multiple-comparison correction.

    All arrays are in the caller's original order.
    """
    method: str
    labels: tuple[str, ...]
    p_values: NDArray[np.floating[Any]]
    adjusted: NDArray[np.floating[Any]]
    significant: NDArray[np.bool_]
    alpha: float


def is_significant(p_value: float, alpha: float) -> bool:
    """p < alpha, treating NaN as not significant."""
    return bool(np.isfinite(p_value) and p_value < alpha)
