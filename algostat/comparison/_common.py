"""
Common data types for baseline comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from algostat.effect_size.solution import EffectSizeSolution
    from algostat.hypothesis.solution import CorrectionSolution, HTestSolution


@dataclass(frozen=True)
class ComparisonEntry:
    """
    One algorithm-vs-baseline comparison on one metric.

    adjusted_p_value is None when the test result was invalid and so
    left out of the multiple-comparison correction.
    """
    label: str
    algorithm: str
    baseline: str
    metric: str
    test: 'HTestSolution'
    effect: 'EffectSizeSolution'
    adjusted_p_value: float | None
    significant: bool


@dataclass(frozen=True)
class ComparisonParams:
    """Parameter payload for compare_to_baseline()."""
    baseline: str
    test_type: str
    correction: 'CorrectionSolution'
    entries: tuple[ComparisonEntry, ...]
