"""
Shared compute infrastructure for AlgoStat.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared infrastructure only.

Submodules:
    timing: Execution timing utilities
    tolerances: Zero-spread detection relative to the data magnitude
"""

from algostat.core.compute.timing import Timer, timed
from algostat.core.compute.tolerances import data_scale, is_negligible

__all__ = [
    "Timer",
    "timed",
    "data_scale",
    "is_negligible",
]
