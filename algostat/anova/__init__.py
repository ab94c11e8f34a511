"""
Analysis of Variance (ANOVA).

Public API:
    anova_oneway(groups, labels, ...) -> AnovaSolution
"""

from algostat.anova.solvers import anova_oneway
from algostat.anova.design import AnovaDesign
from algostat.anova.solution import AnovaSolution
from algostat.anova._common import AnovaParams, AnovaTableRow

__all__ = [
    "anova_oneway",
    "AnovaDesign",
    "AnovaSolution",
    "AnovaParams",
    "AnovaTableRow",
]
