"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams] and formats a classic
test report via summary(). CorrectionSolution wraps
Result[CorrectionParams] for multiple-comparison adjustment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from algostat.core.result import Result
from algostat.hypothesis._common import CorrectionParams, HTestParams

if TYPE_CHECKING:
    from algostat.hypothesis.design import HypothesisDesign


@dataclass
class HTestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[HTestParams]. All standard fields are available as
    properties; test-specific outputs are exposed through `extras` and
    the named accessors below, which return None when the test does not
    produce them.
    """
    _result: Result[HTestParams]
    _design: 'HypothesisDesign | None'

    # --- Standard fields ---

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        """Name of the test statistic (e.g. 't', 'W', 'H')."""
        return self._result.params.statistic_name

    @property
    def parameter(self) -> dict[str, float] | None:
        """Distribution parameters (e.g. {'df': 9})."""
        return self._result.params.parameter

    @property
    def df(self) -> float | None:
        parameter = self._result.params.parameter
        return parameter.get('df') if parameter else None

    @property
    def p_value(self) -> float:
        """Two-sided p-value."""
        return self._result.params.p_value

    @property
    def significant(self) -> bool:
        return self._result.params.significant

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def valid(self) -> bool:
        """False if the statistic could not be computed."""
        return self._result.params.valid

    @property
    def conf_int(self) -> NDArray[np.floating[Any]] | None:
        """Confidence interval, shape (2,)."""
        return self._result.params.conf_int

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def estimate(self) -> dict[str, float] | None:
        """Location estimates per group."""
        return self._result.params.estimate

    @property
    def sample_sizes(self) -> dict[str, int]:
        return self._result.params.sample_sizes

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    # --- Test-specific extras ---

    @property
    def extras(self) -> dict[str, Any] | None:
        """Test-specific additional outputs."""
        return self._result.params.extras

    @property
    def effect_size(self) -> float | None:
        """Cohen's d for the t-test, r = |z|/sqrt(n) for Wilcoxon."""
        return self._extra('effect_size')

    @property
    def z(self) -> float | None:
        """Normal-approximation z for rank tests."""
        return self._extra('z')

    @property
    def mean_difference(self) -> float | None:
        """For t_test: mean(x) - mean(y)."""
        return self._extra('mean_difference')

    @property
    def sd(self) -> dict[str, float] | None:
        """For t_test: sample standard deviations."""
        return self._extra('sd')

    @property
    def normality_met(self) -> bool | None:
        return self._extra('normality_met')

    @property
    def equal_variance_met(self) -> bool | None:
        return self._extra('equal_variance_met')

    @property
    def group_sizes(self) -> dict[str, int] | None:
        return self._extra('group_sizes')

    @property
    def group_medians(self) -> dict[str, float] | None:
        return self._extra('group_medians')

    @property
    def post_hoc(self) -> dict[str, float] | None:
        """
        For kruskal_wallis_test: pairwise rank-sum p-values keyed
        "A vs B", or None when the omnibus test is not significant.
        """
        return self._extra('post_hoc')

    def _extra(self, key: str) -> Any:
        e = self._result.params.extras
        return e.get(key) if e else None

    # --- Metadata ---

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

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as a test report.

        Produces output like (paired, x = 1..10, y = x + 1):
            Paired t-test

        data:  x and y
        t = -Inf, df = 9, p-value < 2.2e-16
        significant at alpha = 0.05
        95 percent confidence interval:
         -3.844662  1.844662
        sample estimates:
             mean of x      mean of y
                   5.5            6.5
        """
        p = self._result.params
        lines = []

        lines.append(f"\t{p.method}")
        lines.append("")
        lines.append(f"data:  {p.data_name}")

        parts = [f"{p.statistic_name} = {_format_number(p.statistic)}"]
        if p.parameter is not None:
            for name, val in p.parameter.items():
                parts.append(f"{name} = {val:.5g}")
        pv = _format_pvalue(p.p_value)
        sep = " " if pv.startswith("<") else " = "
        lines.append(", ".join(parts) + f", p-value{sep}{pv}")

        if not p.valid:
            lines.append("result is not valid: " + "; ".join(self.warnings))
        elif p.significant:
            lines.append(f"significant at alpha = {p.alpha:g}")
        else:
            lines.append(f"not significant at alpha = {p.alpha:g}")

        if p.conf_int is not None:
            pct = round(p.conf_level * 100, 6)
            lines.append(f"{pct:g} percent confidence interval:")
            lo, hi = p.conf_int
            lines.append(f" {_format_number(lo)}  {_format_number(hi)}")

        if p.estimate is not None:
            lines.append("sample estimates:")
            names = list(p.estimate.keys())
            vals = list(p.estimate.values())
            lines.append(" ".join(f"{n:>14s}" for n in names))
            lines.append(" ".join(f"{v:14.7g}" for v in vals))

        post_hoc = self.post_hoc
        if post_hoc:
            lines.append("pairwise comparisons (rank-sum p-values):")
            width = max(len(k) for k in post_hoc)
            for pair, pv in post_hoc.items():
                lines.append(f"  {pair:<{width}s}  {_format_pvalue(pv)}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g}, significant={p.significant})"
        )


@dataclass
class CorrectionSolution:
    """
    User-facing multiple-comparison correction results.

    All arrays are in the caller's original order.
    """
    _result: Result[CorrectionParams]

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def labels(self) -> tuple[str, ...]:
        return self._result.params.labels

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Unadjusted p-values."""
        return self._result.params.p_values

    @property
    def adjusted(self) -> NDArray[np.floating[Any]]:
        return self._result.params.adjusted

    @property
    def significant(self) -> NDArray[np.bool_]:
        return self._result.params.significant

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def n_significant(self) -> int:
        return int(np.sum(self._result.params.significant))

    def as_dict(self) -> dict[str, float]:
        """Adjusted p-value per label."""
        p = self._result.params
        return {label: float(v) for label, v in zip(p.labels, p.adjusted)}

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

    def __len__(self) -> int:
        return len(self._result.params.labels)

    def summary(self) -> str:
        p = self._result.params
        lines = [f"Multiple comparison correction: {p.method} ({len(p.labels)} comparisons)"]
        if not p.labels:
            return lines[0] + "\n"
        width = max(len(label) for label in p.labels)
        lines.append(f"  {'comparison':<{width}s}  {'p-value':>10s}  {'adjusted':>10s}")
        for label, raw, adj, sig in zip(p.labels, p.p_values, p.adjusted, p.significant):
            star = " *" if sig else ""
            lines.append(
                f"  {label:<{width}s}  {_format_pvalue(raw):>10s}  "
                f"{_format_pvalue(adj):>10s}{star}"
            )
        lines.append(f"  * adjusted p < {p.alpha:g}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"CorrectionSolution(method={p.method!r}, m={len(p.labels)}, "
            f"n_significant={self.n_significant})"
        )


def _format_pvalue(p: float) -> str:
    if np.isnan(p):
        return "NA"
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"


def _format_number(x: float) -> str:
    """Format a number, handling infinity and NaN."""
    if np.isnan(x):
        return "NaN"
    if np.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.7g}"
