"""
Closed-form power approximations.

Each function maps (n, effect size, alpha) to the probability of
rejecting H0. All three use normal approximations in place of the
non-central distributions:

t-test (Cohen's d, two groups of n):
    ncp   = d * sqrt(n / 2)
    crit  = t_{1 - alpha/2, 2n - 2}
    power = 1 - Phi(crit - ncp) + Phi(-crit - ncp)

ANOVA (Cohen's f, fixed at three groups so df = 2):
    ncp   = n * f^2
    crit  = chi2_{1 - alpha, 2}
    power = 1 - Phi((crit - ncp) / sqrt(2 * ncp))

correlation (Pearson r, Fisher z):
    z     = atanh(r),  se = 1 / sqrt(n - 3)
    zc    = Phi^-1(1 - alpha/2)
    power = 1 - Phi((zc - z) / se) + Phi((-zc - z) / se)

The correlation form divides (zc - z) by se rather than z alone, so it is
not monotone in n: it falls with n while |atanh(r)| < zc.
"""

from __future__ import annotations

import math

import numpy as np
from scipy import stats as sp_stats

ANOVA_DF = 2


def t_test_power(n: int, effect_size: float, alpha: float) -> float:
    ncp = effect_size * math.sqrt(n / 2.0)
    crit = sp_stats.t.ppf(1.0 - alpha / 2.0, 2 * n - 2)
    return float(1.0 - sp_stats.norm.cdf(crit - ncp) + sp_stats.norm.cdf(-crit - ncp))


def anova_power(n: int, effect_size: float, alpha: float) -> float:
    ncp = n * effect_size ** 2
    if ncp == 0.0:
        return np.nan
    crit = sp_stats.chi2.ppf(1.0 - alpha, ANOVA_DF)
    return float(1.0 - sp_stats.norm.cdf((crit - ncp) / math.sqrt(2.0 * ncp)))


def correlation_power(n: int, effect_size: float, alpha: float) -> float:
    z = math.atanh(effect_size)
    se = 1.0 / math.sqrt(n - 3)
    zc = sp_stats.norm.ppf(1.0 - alpha / 2.0)
    return float(
        1.0 - sp_stats.norm.cdf((zc - z) / se) + sp_stats.norm.cdf((-zc - z) / se)
    )


POWER_FUNCTIONS = {
    "t-test": t_test_power,
    "anova": anova_power,
    "correlation": correlation_power,
}
