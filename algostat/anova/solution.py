"""
User-facing ANOVA solution type.

Wraps a Result[AnovaParams] and provides accessors, the ANOVA table,
and a formatted summary.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from algostat.core.result import Result
from algostat.anova._common import AnovaParams, AnovaTableRow


@dataclass
class AnovaSolution:
    """
    User-facing result for one-way ANOVA.

    Produced by anova_oneway().
    """
    _result: Result[AnovaParams]

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table (rows: term, df, SS, MS, F, p)."""
        return self._result.params.table

    @property
    def f_value(self) -> float:
        return self._result.params.f_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def df_between(self) -> int:
        return self._result.params.table[0].df

    @property
    def df_within(self) -> int:
        return self._result.params.table[1].df

    @property
    def significant(self) -> bool:
        return self._result.params.significant

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def valid(self) -> bool:
        return self._result.params.valid

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def group_means(self) -> dict[str, float]:
        return self._result.params.group_means

    @property
    def group_sizes(self) -> dict[str, int]:
        return self._result.params.group_sizes

    @property
    def eta_squared(self) -> float:
        return self._result.params.eta_squared

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
        """Generate an ANOVA summary table."""
        lines = [
            "One-way Analysis of Variance",
            "=" * 72,
            f"Observations: {self.n_obs}, groups: {len(self.group_means)}",
            "",
            f"{'Source':<20} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} {'F value':>10} {'Pr(>F)':>12}",
            "-" * 72,
        ]

        for row in self.table:
            if row.f_value is not None:
                sig = _significance_stars(row.p_value)
                lines.append(
                    f"{row.term:<20} {row.df:>6} {row.sum_sq:>14.4f} "
                    f"{row.mean_sq:>14.4f} {row.f_value:>10.4f} "
                    f"{row.p_value:>12.4e} {sig}"
                )
            else:
                lines.append(
                    f"{row.term:<20} {row.df:>6} {row.sum_sq:>14.4f} "
                    f"{row.mean_sq:>14.4f}"
                )

        lines.append("-" * 72)
        lines.append("Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 '.' 0.1 ' ' 1")

        lines.append("")
        lines.append("Group means:")
        for label, mean in self.group_means.items():
            lines.append(f"  {label}: {mean:.6g} (n = {self.group_sizes[label]})")
        lines.append(f"eta^2 (from F) = {self.eta_squared:.4f}")

        if not self.valid:
            lines.append("result is not valid: " + "; ".join(self.warnings))

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AnovaSolution(F={self.f_value:.4g}, p_value={self.p_value:.4g}, "
            f"groups={list(self.group_means)})"
        )


def _significance_stars(p: float | None) -> str:
    """Return significance stars for a p-value."""
    if p is None or np.isnan(p):
        return ""
    if p < 0.001:
        return "***"
    if p < 0.01:
        return "**"
    if p < 0.05:
        return "*"
    if p < 0.1:
        return "."
    return ""
