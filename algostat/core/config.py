"""
Analysis defaults.

Fixed thresholds and bounds used across the test suite. Several of these
are heuristics inherited from the research code this library serves (the
3.0 variance ratio, the 5.99 normality cut-off) and are kept as
documented approximations rather than textbook procedures.

Solvers read DEFAULT_CONFIG; callers override individual values through
keyword arguments (e.g. alpha=0.01) rather than by mutating the config.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisConfig:
    """Thresholds and bounds for hypothesis tests and power analysis."""
    significance_level: float
    min_sample_size: int
    min_kruskal_groups: int
    min_anova_groups: int
    min_anova_group_size: int
    equal_variance_ratio: float
    normality_threshold: float
    correction_alpha: float
    power_search_min: int
    power_search_max: int
    power_targets: tuple[float, ...]
    degenerate_rtol: float


DEFAULT_CONFIG = AnalysisConfig(
    significance_level=0.05,
    min_sample_size=5,
    min_kruskal_groups=3,
    min_anova_groups=2,
    min_anova_group_size=2,
    # Larger / smaller sample variance; rule of thumb, not an F-test
    equal_variance_ratio=3.0,
    # chi-square(2) critical value at 5%
    normality_threshold=5.99,
    correction_alpha=0.05,
    power_search_min=5,
    power_search_max=10000,
    power_targets=(0.80, 0.90),
    # Spread below this fraction of the data magnitude counts as zero
    degenerate_rtol=1e-10,
)
