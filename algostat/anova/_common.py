"""
Common data types for one-way ANOVA.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnovaTableRow:
    """One row of an ANOVA table (the between-groups term or residuals)."""
    term: str
    df: int
    sum_sq: float
    mean_sq: float
    f_value: float | None    # None for Residuals row
    p_value: float | None    # None for Residuals row


@dataclass(frozen=True)
class AnovaParams:
    """
    Parameter payload for one-way ANOVA across algorithms.

    eta_squared is F * dfB / (F * dfB + dfW), derived from the F
    statistic rather than from the sums of squares directly. It is NaN
    when the result is invalid.
    """
    table: tuple[AnovaTableRow, AnovaTableRow]
    f_value: float
    p_value: float
    significant: bool
    alpha: float
    valid: bool
    n_obs: int
    grand_mean: float
    group_means: dict[str, float]
    group_sizes: dict[str, int]
    eta_squared: float
