"""
Common data types for power analysis.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PowerParams:
    """
    Parameter payload for power analysis.

    power is NaN and valid is False when the approximation is
    degenerate for the inputs (ANOVA with a zero effect size).
    required_n_80 / required_n_90 are the smallest sample sizes in the
    search range reaching 80% / 90% power; they equal the upper search
    bound when that target is never reached (see Result.warnings).
    """
    sample_size: int
    effect_size: float
    alpha: float
    test_type: str
    power: float
    required_n_80: int
    required_n_90: int
    valid: bool
