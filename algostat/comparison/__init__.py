"""
Batch comparison of algorithms against a baseline.

Public API:
    compare_to_baseline(data, baseline, ...) -> ComparisonSolution
"""

from algostat.comparison.solvers import compare_to_baseline
from algostat.comparison._common import ComparisonEntry, ComparisonParams
from algostat.comparison.solution import ComparisonSolution

__all__ = [
    "compare_to_baseline",
    "ComparisonEntry",
    "ComparisonParams",
    "ComparisonSolution",
]
