"""
Zero-spread detection in floating point.

A sample that is constant in exact arithmetic can still carry a rounding
residue: the deviations of [0.1, 0.1, 0.1] from their computed mean are
of order 1e-17, not 0. A spread (standard deviation, standard error,
root mean square) is treated as zero when it falls below
DEFAULT_CONFIG.degenerate_rtol times the largest absolute value in the
data.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from algostat.core.config import DEFAULT_CONFIG


def data_scale(*samples: NDArray[np.floating[Any]]) -> float:
    """Largest absolute value across the samples."""
    return float(max(np.max(np.abs(s)) for s in samples))


def is_negligible(value: float, scale: float, rtol: float | None = None) -> bool:
    """True when |value| cannot be told apart from zero at magnitude `scale`."""
    if rtol is None:
        rtol = DEFAULT_CONFIG.degenerate_rtol
    return bool(abs(value) <= rtol * scale)
