"""
Core infrastructure for AlgoStat.

Shared abstractions and utilities used by all domain-specific submodules
(descriptive, hypothesis, anova, effect_size, power, comparison).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    config: Analysis defaults (significance level, thresholds, bounds)
    compute: Timing utilities
"""

from algostat.core.result import Result
from algostat.core.config import AnalysisConfig, DEFAULT_CONFIG
from algostat.core.exceptions import (
    AlgoStatError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Result
    "Result",
    # Configuration
    "AnalysisConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "AlgoStatError",
    "ValidationError",
    "DimensionError",
]
