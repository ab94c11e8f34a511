"""
Tie-averaged rank transform.

Shared by the Wilcoxon signed-rank test, the Kruskal-Wallis test and the
pairwise rank-sum comparisons so that tie handling is identical across
all rank-based procedures.

Algorithm:
    1. Stable-sort indices by value.
    2. For each maximal run of equal values occupying sorted positions
       [i, j), assign every member the rank (i + j + 1) / 2, i.e. the
       mean of the 1-based positions i+1 .. j.

Equality is exact (zero tolerance). The sum of ranks is always
n(n+1)/2, with or without ties.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def average_ranks(values: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Rank a 1D array, averaging ranks among ties.

    Parameters
    ----------
    values : NDArray
        1D float array. Not modified.

    Returns
    -------
    NDArray
        1-based ranks in the input order, float64.

    Examples
    --------
    >>> average_ranks(np.array([5.0, 5.0, 1.0]))
    array([2.5, 2.5, 1. ])
    """
    n = len(values)
    ranks = np.empty(n, dtype=np.float64)
    if n == 0:
        return ranks

    order = np.argsort(values, kind='stable')
    sorted_vals = values[order]

    i = 0
    while i < n:
        j = i + 1
        while j < n and sorted_vals[j] == sorted_vals[i]:
            j += 1
        ranks[order[i:j]] = (i + j + 1) / 2.0
        i = j

    return ranks
