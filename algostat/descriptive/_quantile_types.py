"""
Sample quantiles (Hyndman & Fan types 1-9).

Types 1-3 are step functions of the empirical distribution: the
quantile is an order statistic (type 2 averages two at the jumps).
Types 4-9 interpolate linearly between order statistics at the
plotting position

    h = a + p * (n + 1 - a - b)

with (a, b) fixed per type. Type 7 (a = b = 1) is the default of R,
numpy and most spreadsheet tools; type 6 (a = b = 0) is the estimator
used by Apache Commons Math DescriptiveStatistics.getPercentile().

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray

from algostat.core.exceptions import ValidationError

DISCONTINUOUS_TYPES = (1, 2, 3)

# type -> (a, b)
_PLOTTING_POSITIONS = {
    4: (0.0, 1.0),
    5: (0.5, 0.5),
    6: (0.0, 0.0),
    7: (1.0, 1.0),
    8: (1.0 / 3.0, 1.0 / 3.0),
    9: (3.0 / 8.0, 3.0 / 8.0),
}

VALID_TYPES = DISCONTINUOUS_TYPES + tuple(_PLOTTING_POSITIONS)

# Floating point fuzz so that exact order statistics are not interpolated
_FUZZ = 4.0 * np.finfo(np.float64).eps


def sample_quantile(x: NDArray, probs: NDArray, qtype: int = 7) -> NDArray:
    """
    Compute quantiles of a sorted sample.

    Parameters
    ----------
    x : NDArray
        1D sorted array with no NaN values.
    probs : NDArray
        1D array of probabilities in [0, 1].
    qtype : int
        Hyndman-Fan type, 1-9. Default 7.

    Returns
    -------
    NDArray
        Quantile values, one per probability.
    """
    if qtype not in VALID_TYPES:
        raise ValidationError(
            f"Quantile type must be one of {list(VALID_TYPES)}, got {qtype}"
        )

    probs = np.asarray(probs, dtype=np.float64).ravel()
    if np.any((probs < 0.0) | (probs > 1.0)) or np.any(np.isnan(probs)):
        raise ValidationError(f"probs must lie in [0, 1], got {probs.tolist()}")

    n = len(x)
    if n == 0:
        return np.full(len(probs), np.nan)
    if n == 1:
        return np.full(len(probs), x[0])

    if qtype in DISCONTINUOUS_TYPES:
        return np.array([_step_quantile(x, p, qtype) for p in probs])

    a, b = _PLOTTING_POSITIONS[qtype]
    result = np.empty(len(probs), dtype=np.float64)
    for i, p in enumerate(probs):
        pos = a + p * (n + 1.0 - a - b)
        j = int(math.floor(pos + _FUZZ))
        h = pos - j
        if abs(h) < _FUZZ:
            h = 0.0

        # pos is 1-based: order statistic j is x[j - 1]
        if j < 1:
            result[i] = x[0]
        elif j >= n:
            result[i] = x[n - 1]
        else:
            result[i] = (1.0 - h) * x[j - 1] + h * x[j]

    return result


def _step_quantile(x: NDArray, p: float, qtype: int) -> float:
    """
    Types 1-3 on a sorted sample of length n >= 2.

    With m = n*p (type 3: n*p - 1/2) and j = floor(m), the result lies
    between order statistics j and j + 1 (1-based, clamped to [1, n]):

        type 1  x_(j+1) unless m is an integer, then x_(j)
        type 2  as type 1, but the average of both when m is an integer
        type 3  x_(j+1) unless m is an integer and j is even, then x_(j)
    """
    n = len(x)
    m = n * p - 0.5 if qtype == 3 else n * p
    j = int(math.floor(m + _FUZZ))
    on_jump = abs(m - j) < _FUZZ

    if not on_jump:
        weight = 1.0
    elif qtype == 1:
        weight = 0.0
    elif qtype == 2:
        weight = 0.5
    else:
        weight = 0.0 if j % 2 == 0 else 1.0

    lower = x[min(max(j - 1, 0), n - 1)]
    upper = x[min(max(j, 0), n - 1)]
    return float((1.0 - weight) * lower + weight * upper)
