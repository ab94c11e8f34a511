"""
Common types for effect sizes.

Interpretation bands apply to Cohen's-d-scale measures only.
"""

from __future__ import annotations

from dataclasses import dataclass


# |d| < 0.2 negligible, < 0.5 small, < 0.8 medium, otherwise large
INTERPRETATION_THRESHOLDS = (0.2, 0.5, 0.8)
INTERPRETATION_LABELS = ("negligible", "small", "medium", "large")


@dataclass(frozen=True)
class EffectSizeParams:
    """
    Parameter payload for two-sample effect sizes.

    Attributes
    ----------
    cohens_d : float
        (mean1 - mean2) / pooled sd. NaN if the pooled sd is zero.
    hedges_g : float
        Cohen's d with the small-sample correction 1 - 3/(4(n1+n2) - 9).
    glass_delta : float
        (mean1 - mean2) / sd2. NaN if sd2 is zero.
    probability_of_superiority : float
        Fraction of cross pairs (v1, v2) with v1 > v2.
    interpretation : str
        Band of |cohens_d|; "undefined" when d is NaN.
    valid : bool
        False when Cohen's d could not be computed.
    """
    cohens_d: float
    hedges_g: float
    glass_delta: float
    probability_of_superiority: float
    interpretation: str
    valid: bool
    n1: int
    n2: int
    mean1: float
    mean2: float
    sd1: float
    sd2: float
    pooled_sd: float
