"""
AlgoStat: statistical comparison of optimization algorithms.

Hypothesis tests, effect sizes, multiple-comparison correction and power
analysis for experimental results produced by competing heuristics
(e.g. VM-placement algorithms).

Submodules:
    descriptive: Rank transform, descriptive statistics, mean CIs
    hypothesis: t-test, Wilcoxon, Kruskal-Wallis, p-value adjustment
    anova: One-way analysis of variance
    effect_size: Cohen's d, Hedges' g, Glass's delta, superiority
    power: Power and minimum sample size
    comparison: Batch comparison of algorithms against a baseline
"""

__version__ = "0.1.0"

from algostat import descriptive
from algostat import hypothesis
from algostat import anova
from algostat import effect_size
from algostat import power
from algostat import comparison
from algostat.core.config import AnalysisConfig, DEFAULT_CONFIG

__all__ = [
    "__version__",
    "descriptive",
    "hypothesis",
    "anova",
    "effect_size",
    "power",
    "comparison",
    "AnalysisConfig",
    "DEFAULT_CONFIG",
]
