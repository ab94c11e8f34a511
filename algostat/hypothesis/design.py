"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. All validation happens here, before any
computation: samples that are too small, mismatched paired lengths, too
few groups, non-finite values. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray, ArrayLike

from algostat.core.config import DEFAULT_CONFIG
from algostat.core.exceptions import ValidationError
from algostat.core.validation import (
    as_sample,
    check_consistent_length,
    check_group_labels,
    check_probability,
)


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    # Two-sample tests
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None

    # k-sample tests
    _groups: tuple[NDArray[np.floating[Any]], ...] | None = None
    _labels: tuple[str, ...] | None = None

    # Test configuration
    _alpha: float = DEFAULT_CONFIG.significance_level
    _paired: bool = False

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def groups(self) -> tuple[NDArray[np.floating[Any]], ...] | None:
        return self._groups

    @property
    def labels(self) -> tuple[str, ...] | None:
        return self._labels

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def conf_level(self) -> float:
        return 1.0 - self._alpha

    @property
    def paired(self) -> bool:
        return self._paired

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory classmethods ---

    @classmethod
    def for_t_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        paired: bool = False,
        alpha: float = DEFAULT_CONFIG.significance_level,
    ) -> HypothesisDesign:
        """Build design for t_test()."""
        alpha = check_probability(alpha, "alpha")
        min_n = DEFAULT_CONFIG.min_sample_size
        x_arr = as_sample(x, "x", min_samples=min_n)
        y_arr = as_sample(y, "y", min_samples=min_n)

        if paired:
            check_consistent_length(x_arr, y_arr, names=("x", "y"))

        return cls(
            test_type="t_paired" if paired else "t_two_sample",
            _x=x_arr,
            _y=y_arr,
            _paired=paired,
            _alpha=alpha,
            _data_name="x and y",
        )

    @classmethod
    def for_wilcoxon(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alpha: float = DEFAULT_CONFIG.significance_level,
    ) -> HypothesisDesign:
        """Build design for wilcoxon_test(). Samples are always paired."""
        alpha = check_probability(alpha, "alpha")
        min_n = DEFAULT_CONFIG.min_sample_size
        x_arr = as_sample(x, "x", min_samples=min_n)
        y_arr = as_sample(y, "y", min_samples=min_n)
        check_consistent_length(x_arr, y_arr, names=("x", "y"))

        return cls(
            test_type="wilcoxon_signed_rank",
            _x=x_arr,
            _y=y_arr,
            _paired=True,
            _alpha=alpha,
            _data_name="x and y",
        )

    @classmethod
    def for_mann_whitney(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alpha: float = DEFAULT_CONFIG.significance_level,
    ) -> HypothesisDesign:
        """Build design for mann_whitney_test()."""
        alpha = check_probability(alpha, "alpha")
        min_n = DEFAULT_CONFIG.min_sample_size
        return cls(
            test_type="mann_whitney",
            _x=as_sample(x, "x", min_samples=min_n),
            _y=as_sample(y, "y", min_samples=min_n),
            _alpha=alpha,
            _data_name="x and y",
        )

    @classmethod
    def for_kruskal_wallis(
        cls,
        samples: Sequence[ArrayLike],
        labels: Sequence[str] | None = None,
        *,
        alpha: float = DEFAULT_CONFIG.significance_level,
    ) -> HypothesisDesign:
        """Build design for kruskal_wallis_test()."""
        alpha = check_probability(alpha, "alpha")
        samples = list(samples)
        k = len(samples)
        min_groups = DEFAULT_CONFIG.min_kruskal_groups
        if k < min_groups:
            raise ValidationError(
                f"Kruskal-Wallis test requires at least {min_groups} groups, got {k}"
            )
        labels = check_group_labels(labels, k)
        groups = tuple(
            as_sample(s, f"samples[{label!r}]", min_samples=1)
            for s, label in zip(samples, labels)
        )

        return cls(
            test_type="kruskal_wallis",
            _groups=groups,
            _labels=labels,
            _alpha=alpha,
            _data_name=", ".join(labels),
        )
