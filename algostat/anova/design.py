"""
ANOVA design object.

Wraps validated groups and labels for one-way ANOVA.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from algostat.core.config import DEFAULT_CONFIG
from algostat.core.exceptions import ValidationError
from algostat.core.validation import as_sample, check_group_labels, check_probability


@dataclass(frozen=True)
class AnovaDesign:
    """
    Validated data container for one-way ANOVA.

    Created via for_oneway(), not directly.
    """
    groups: tuple[NDArray[np.floating[Any]], ...]
    labels: tuple[str, ...]
    alpha: float
    n: int

    @property
    def k(self) -> int:
        return len(self.groups)

    @staticmethod
    def for_oneway(
        groups: Sequence[ArrayLike],
        labels: Sequence[str] | None = None,
        *,
        alpha: float = DEFAULT_CONFIG.significance_level,
    ) -> 'AnovaDesign':
        """
        Create design for one-way ANOVA.

        Args:
            groups: One sample per algorithm (each 1D numeric)
            labels: Unique group names, default "group1", "group2", ...
            alpha: Significance level

        Returns:
            AnovaDesign for one-way ANOVA
        """
        alpha = check_probability(alpha, "alpha")
        groups = list(groups)
        k = len(groups)
        min_groups = DEFAULT_CONFIG.min_anova_groups
        if k < min_groups:
            raise ValidationError(
                f"groups: need at least {min_groups} groups, got {k}"
            )

        labels = check_group_labels(labels, k)
        min_size = DEFAULT_CONFIG.min_anova_group_size
        arrays = tuple(
            as_sample(g, f"groups[{label!r}]", min_samples=min_size)
            for g, label in zip(groups, labels)
        )

        return AnovaDesign(
            groups=arrays,
            labels=labels,
            alpha=alpha,
            n=sum(len(g) for g in arrays),
        )
