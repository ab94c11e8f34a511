"""
Baseline comparison solution type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from algostat.core.result import Result
from algostat.comparison._common import ComparisonEntry, ComparisonParams
from algostat.hypothesis.solution import CorrectionSolution


@dataclass
class ComparisonSolution:
    """
    User-facing batch comparison results.

    Wraps Result[ComparisonParams]. Entries keep the order in which the
    algorithms and metrics were supplied.
    """
    _result: Result[ComparisonParams]

    @property
    def baseline(self) -> str:
        return self._result.params.baseline

    @property
    def test_type(self) -> str:
        return self._result.params.test_type

    @property
    def entries(self) -> tuple[ComparisonEntry, ...]:
        return self._result.params.entries

    @property
    def correction(self) -> CorrectionSolution:
        return self._result.params.correction

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(e.label for e in self._result.params.entries)

    def __getitem__(self, label: str) -> ComparisonEntry:
        for entry in self._result.params.entries:
            if entry.label == label:
                return entry
        raise KeyError(label)

    def __len__(self) -> int:
        return len(self._result.params.entries)

    def significant_entries(self) -> tuple[ComparisonEntry, ...]:
        """Entries still significant after correction."""
        return tuple(e for e in self._result.params.entries if e.significant)

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
            f"Comparison against baseline {p.baseline!r} "
            f"({p.test_type}, {p.correction.method} correction)",
        ]
        if not p.entries:
            lines.append("  no shared metrics")
            return "\n".join(lines)

        width = max(len(e.label) for e in p.entries)
        lines.append(
            f"  {'comparison':<{width}s}  {'p-value':>10s}  {'adjusted':>10s}  "
            f"{'d':>8s}  effect"
        )
        for e in p.entries:
            adj = "excluded" if e.adjusted_p_value is None else f"{e.adjusted_p_value:.4g}"
            star = " *" if e.significant else ""
            lines.append(
                f"  {e.label:<{width}s}  {e.test.p_value:>10.4g}  {adj:>10s}  "
                f"{e.effect.cohens_d:>8.3f}  {e.effect.interpretation}{star}"
            )
        lines.append(f"  * adjusted p < {p.correction.alpha:g}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"ComparisonSolution(baseline={p.baseline!r}, "
            f"n_comparisons={len(p.entries)}, "
            f"n_significant={len(self.significant_entries())})"
        )
