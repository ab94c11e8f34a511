"""
Multiple comparison correction.

Implements Bonferroni, Holm step-down and Benjamini-Hochberg step-up
adjustment. Method names are case-insensitive; "fdr" and
"benjamini-hochberg" are aliases for "bh".

Sorting is stable so tied p-values keep their input order.
"""

from __future__ import annotations

from typing import Sequence
import numpy as np
from numpy.typing import NDArray, ArrayLike

from algostat.core.config import DEFAULT_CONFIG
from algostat.core.exceptions import ValidationError
from algostat.core.result import Result
from algostat.core.compute.timing import Timer
from algostat.core.validation import check_array, check_1d
from algostat.hypothesis._common import CorrectionParams
from algostat.hypothesis.solution import CorrectionSolution

VALID_METHODS = ("bonferroni", "holm", "bh", "fdr", "benjamini-hochberg")

_CANONICAL = {
    "bonferroni": "bonferroni",
    "holm": "holm",
    "bh": "bh",
    "fdr": "bh",
    "benjamini-hochberg": "bh",
}


def p_adjust(
    p: ArrayLike,
    method: str = "holm",
) -> NDArray[np.floating]:
    """
    Adjust p-values for multiple comparisons.

    Parameters
    ----------
    p : array-like
        Vector of p-values, each in [0, 1].
    method : str
        "holm" (default), "bonferroni", or "bh" (aliases "fdr",
        "benjamini-hochberg"). Case-insensitive.

    Returns
    -------
    ndarray
        Adjusted p-values in the input order, clipped to [0, 1].
    """
    canonical = _resolve_method(method)
    pv = _check_p_values(p)

    if len(pv) == 0:
        return np.array([], dtype=np.float64)

    m = len(pv)
    if canonical == "bonferroni":
        adjusted = pv * m
    elif canonical == "holm":
        adjusted = _holm(pv)
    else:
        adjusted = _bh(pv)

    return np.clip(adjusted, 0.0, 1.0)


def adjust_p_values(
    p: ArrayLike,
    labels: Sequence[str] | None = None,
    method: str = "holm",
) -> CorrectionSolution:
    """
    Adjust p-values and flag which comparisons remain significant.

    Parameters
    ----------
    p : array-like
        Raw p-values.
    labels : sequence of str or None
        One label per p-value. Default "comparison1", "comparison2", ...
    method : str
        See p_adjust().

    Returns
    -------
    CorrectionSolution
        Adjusted p-values in input order; a comparison is significant
        when its adjusted p-value is below 0.05.
    """
    canonical = _resolve_method(method)
    pv = _check_p_values(p)
    m = len(pv)

    if labels is None:
        labels = tuple(f"comparison{i + 1}" for i in range(m))
    else:
        labels = tuple(str(label) for label in labels)
        if len(labels) != m:
            raise ValidationError(
                f"labels: expected {m} labels for {m} p-values, got {len(labels)}"
            )

    timer = Timer()
    timer.start()
    with timer.section(canonical):
        adjusted = p_adjust(pv, canonical)
    timer.stop()

    alpha = DEFAULT_CONFIG.correction_alpha
    params = CorrectionParams(
        method=canonical,
        labels=labels,
        p_values=pv,
        adjusted=adjusted,
        significant=adjusted < alpha,
        alpha=alpha,
    )
    result = Result(
        params=params,
        info={'method': canonical, 'n_comparisons': m},
        timing=timer.result(),
        backend_name='cpu_correction',
    )
    return CorrectionSolution(_result=result)


def _resolve_method(method: str) -> str:
    if not isinstance(method, str) or method.lower() not in _CANONICAL:
        raise ValidationError(
            f"method must be one of {VALID_METHODS}, got {method!r}"
        )
    return _CANONICAL[method.lower()]


def _check_p_values(p: ArrayLike) -> NDArray[np.floating]:
    pv = check_array(p, "p")
    if pv.ndim == 0:
        pv = pv.reshape(1)
    check_1d(pv, "p")
    if np.any(np.isnan(pv)):
        raise ValidationError("p: contains NaN")
    if np.any((pv < 0.0) | (pv > 1.0)):
        bad = pv[(pv < 0.0) | (pv > 1.0)]
        raise ValidationError(f"p: values must lie in [0, 1], got {bad.tolist()}")
    return pv


def _holm(pv: NDArray) -> NDArray:
    """Holm's step-down method (controls FWER)."""
    m = len(pv)
    order = np.argsort(pv, kind="stable")
    sorted_p = pv[order]

    # Multiply by (m - i) for 0-based rank i
    adjusted_sorted = np.minimum(sorted_p * np.arange(m, 0, -1, dtype=np.float64), 1.0)

    adjusted_sorted = np.maximum.accumulate(adjusted_sorted)

    result = np.empty(m, dtype=np.float64)
    result[order] = adjusted_sorted
    return result


def _bh(pv: NDArray) -> NDArray:
    """Benjamini-Hochberg step-up method (controls FDR)."""
    m = len(pv)
    order = np.argsort(pv, kind="stable")
    sorted_p = pv[order]

    ranks = np.arange(1, m + 1, dtype=np.float64)
    adjusted_sorted = np.minimum(sorted_p * m / ranks, 1.0)

    # Running minimum from the largest rank downward
    adjusted_sorted = np.minimum.accumulate(adjusted_sorted[::-1])[::-1]

    result = np.empty(m, dtype=np.float64)
    result[order] = adjusted_sorted
    return result
