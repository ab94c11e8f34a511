"""
Effect size solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from algostat.core.result import Result
from algostat.effect_size._common import EffectSizeParams


@dataclass
class EffectSizeSolution:
    """
    User-facing effect size results.

    Wraps Result[EffectSizeParams]. The interpretation is derived from
    |Cohen's d|, the primary measure.
    """
    _result: Result[EffectSizeParams]

    @property
    def cohens_d(self) -> float:
        return self._result.params.cohens_d

    @property
    def hedges_g(self) -> float:
        return self._result.params.hedges_g

    @property
    def glass_delta(self) -> float:
        return self._result.params.glass_delta

    @property
    def probability_of_superiority(self) -> float:
        return self._result.params.probability_of_superiority

    @property
    def interpretation(self) -> str:
        return self._result.params.interpretation

    @property
    def valid(self) -> bool:
        return self._result.params.valid

    @property
    def pooled_sd(self) -> float:
        return self._result.params.pooled_sd

    @property
    def params(self) -> EffectSizeParams:
        return self._result.params

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
        p = self._result.params
        lines = [
            "Effect sizes (x vs y)",
            f"  n1 = {p.n1}, n2 = {p.n2}",
            f"  mean1 = {p.mean1:.6g}, mean2 = {p.mean2:.6g}",
            f"  Cohen's d                  = {p.cohens_d:.4f} ({p.interpretation})",
            f"  Hedges' g                  = {p.hedges_g:.4f}",
            f"  Glass's delta              = {p.glass_delta:.4f}",
            f"  Probability of superiority = {p.probability_of_superiority:.4f}",
        ]
        if not p.valid:
            lines.append("  (invalid: " + "; ".join(self.warnings) + ")")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"EffectSizeSolution(cohens_d={p.cohens_d:.4g}, "
            f"interpretation={p.interpretation!r})"
        )
