"""
Power analysis solution type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from algostat.core.result import Result
from algostat.power._common import PowerParams


@dataclass
class PowerSolution:
    """
    User-facing power analysis results.

    Wraps Result[PowerParams].
    """
    _result: Result[PowerParams]

    @property
    def sample_size(self) -> int:
        return self._result.params.sample_size

    @property
    def effect_size(self) -> float:
        return self._result.params.effect_size

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def test_type(self) -> str:
        return self._result.params.test_type

    @property
    def power(self) -> float:
        return self._result.params.power

    @property
    def required_n_80(self) -> int:
        """Smallest n reaching 80% power."""
        return self._result.params.required_n_80

    @property
    def required_n_90(self) -> int:
        """Smallest n reaching 90% power."""
        return self._result.params.required_n_90

    @property
    def valid(self) -> bool:
        return self._result.params.valid

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
            f"Power analysis ({p.test_type})",
            f"  n = {p.sample_size}, effect size = {p.effect_size:g}, alpha = {p.alpha:g}",
            f"  power = {p.power:.4f}",
            f"  n for 80% power = {p.required_n_80}",
            f"  n for 90% power = {p.required_n_90}",
        ]
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"PowerSolution(test_type={p.test_type!r}, n={p.sample_size}, "
            f"power={p.power:.4g})"
        )
