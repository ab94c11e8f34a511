"""
Effect sizes.

Public API:
    effect_sizes(x, y)                 - All two-sample measures at once
    cohens_d(x, y)                     - Pooled-sd standardized difference
    hedges_g(x, y)                     - Small-sample corrected Cohen's d
    glass_delta(x, y)                  - Difference scaled by sd(y)
    probability_of_superiority(x, y)   - P(X > Y) over all cross pairs
    eta_squared_from_f(F, dfB, dfW)    - ANOVA effect size from F
    interpret_effect_size(d)           - negligible / small / medium / large
"""

from algostat.effect_size.solvers import (
    effect_sizes,
    cohens_d,
    hedges_g,
    glass_delta,
    probability_of_superiority,
    eta_squared_from_f,
    interpret_effect_size,
)
from algostat.effect_size._common import EffectSizeParams
from algostat.effect_size.solution import EffectSizeSolution

__all__ = [
    "effect_sizes",
    "cohens_d",
    "hedges_g",
    "glass_delta",
    "probability_of_superiority",
    "eta_squared_from_f",
    "interpret_effect_size",
    "EffectSizeParams",
    "EffectSizeSolution",
]
