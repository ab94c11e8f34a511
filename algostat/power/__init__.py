"""
Power analysis.

Public API:
    power_analysis(n, effect_size, alpha, test_type) -> PowerSolution
    power_t_test(n, d, alpha)                        -> float
    power_anova(n, f, alpha)                         -> float
    power_correlation(n, r, alpha)                   -> float
    required_sample_size(effect_size, ...)           -> int

All power values are normal approximations to the non-central
distributions.
"""

from algostat.power.solvers import (
    power_analysis,
    power_t_test,
    power_anova,
    power_correlation,
    required_sample_size,
)
from algostat.power._common import PowerParams
from algostat.power.solution import PowerSolution

__all__ = [
    "power_analysis",
    "power_t_test",
    "power_anova",
    "power_correlation",
    "required_sample_size",
    "PowerParams",
    "PowerSolution",
]
