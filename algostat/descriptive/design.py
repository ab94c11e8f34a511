"""
DescriptiveDesign: data wrapper for single-sample descriptive statistics.

Wraps one validated Sample (1D, finite, float64). Immutable after
construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from algostat.core.validation import as_sample


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Construction:
        DescriptiveDesign.from_array(x)
        DescriptiveDesign.from_array(x, name="response_time")
    """
    _data: NDArray[np.floating[Any]]
    _name: str

    @classmethod
    def from_array(cls, x: ArrayLike, *, name: str = "x") -> DescriptiveDesign:
        """
        Build DescriptiveDesign from a 1D array-like.

        Parameters
        ----------
        x : array-like
            Sample values. Must be finite and non-empty.
        name : str
            Name used in error messages and summaries.
        """
        return cls(_data=as_sample(x, name, min_samples=1), _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        return self._data

    @property
    def n(self) -> int:
        return len(self._data)

    @property
    def name(self) -> str:
        return self._name
