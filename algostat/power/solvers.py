"""
Power analysis and sample-size planning.

Public API:
    power_analysis(n, effect_size, ...)        -> PowerSolution
    power_t_test(n, d, alpha)                  -> float
    power_anova(n, f, alpha)                   -> float
    power_correlation(n, r, alpha)             -> float
    required_sample_size(effect_size, ...)     -> int
"""

from __future__ import annotations

import numpy as np

from algostat.core.config import DEFAULT_CONFIG
from algostat.core.exceptions import ValidationError
from algostat.core.result import Result
from algostat.core.compute.timing import Timer
from algostat.core.validation import check_probability
from algostat.power._common import PowerParams
from algostat.power._formulas import (
    POWER_FUNCTIONS,
    anova_power,
    correlation_power,
    t_test_power,
)
from algostat.power.solution import PowerSolution

VALID_TEST_TYPES = ("t-test", "anova", "correlation")

_ALIASES = {
    "t-test": "t-test",
    "t_test": "t-test",
    "ttest": "t-test",
    "anova": "anova",
    "correlation": "correlation",
}

# Smallest n each approximation is defined for
_MIN_N = {"t-test": 2, "anova": 2, "correlation": 4}


def power_analysis(
    n: int,
    effect_size: float,
    alpha: float = DEFAULT_CONFIG.significance_level,
    test_type: str = "t-test",
) -> PowerSolution:
    """
    Statistical power for a planned comparison.

    Parameters
    ----------
    n : int
        Sample size per group (t-test, ANOVA) or number of pairs
        (correlation).
    effect_size : float
        Cohen's d (t-test), Cohen's f (ANOVA) or Pearson r (correlation).
    alpha : float
        Significance level, in (0, 1).
    test_type : str
        "t-test" (aliases "t_test", "ttest"), "anova" or "correlation".
        Case-insensitive.

    Returns
    -------
    PowerSolution
        Power at n plus the sample sizes needed for 80% and 90% power.
    """
    test_type = _resolve_test_type(test_type)
    alpha = check_probability(alpha, "alpha")
    effect_size = _check_effect_size(effect_size, test_type)
    n = _check_n(n, test_type)

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('power'):
        power = POWER_FUNCTIONS[test_type](n, effect_size, alpha)

    valid = not np.isnan(power)
    if not valid:
        warnings_list.append(
            "zero noncentrality: power approximation undefined for effect size 0"
        )

    target_80, target_90 = DEFAULT_CONFIG.power_targets
    with timer.section('sample_size_search'):
        n_80, reached_80 = _search(effect_size, alpha, target_80, test_type)
        n_90, reached_90 = _search(effect_size, alpha, target_90, test_type)

    for target, reached in ((target_80, reached_80), (target_90, reached_90)):
        if not reached:
            warnings_list.append(
                f"target power {target:g} not reached within n <= "
                f"{DEFAULT_CONFIG.power_search_max}"
            )

    timer.stop()

    params = PowerParams(
        sample_size=n,
        effect_size=effect_size,
        alpha=alpha,
        test_type=test_type,
        power=power,
        required_n_80=n_80,
        required_n_90=n_90,
        valid=valid,
    )
    result = Result(
        params=params,
        info={
            'test_type': test_type,
            'search_range': (DEFAULT_CONFIG.power_search_min, DEFAULT_CONFIG.power_search_max),
        },
        timing=timer.result(),
        backend_name='cpu_power',
        warnings=tuple(warnings_list),
    )
    return PowerSolution(_result=result)


def power_t_test(
    n: int,
    effect_size: float,
    alpha: float = DEFAULT_CONFIG.significance_level,
) -> float:
    """Power of the two-sample t-test with n per group at Cohen's d."""
    alpha = check_probability(alpha, "alpha")
    effect_size = _check_effect_size(effect_size, "t-test")
    return t_test_power(_check_n(n, "t-test"), effect_size, alpha)


def power_anova(
    n: int,
    effect_size: float,
    alpha: float = DEFAULT_CONFIG.significance_level,
) -> float:
    """Power of one-way ANOVA at Cohen's f. NaN when f is zero."""
    alpha = check_probability(alpha, "alpha")
    effect_size = _check_effect_size(effect_size, "anova")
    return anova_power(_check_n(n, "anova"), effect_size, alpha)


def power_correlation(
    n: int,
    effect_size: float,
    alpha: float = DEFAULT_CONFIG.significance_level,
) -> float:
    """Power of the test of zero correlation at Pearson r."""
    alpha = check_probability(alpha, "alpha")
    effect_size = _check_effect_size(effect_size, "correlation")
    return correlation_power(_check_n(n, "correlation"), effect_size, alpha)


def required_sample_size(
    effect_size: float,
    alpha: float = DEFAULT_CONFIG.significance_level,
    target_power: float = 0.80,
    test_type: str = "t-test",
) -> int:
    """
    Smallest n in [5, 10000] whose power reaches target_power.

    Binary search relying on power being non-decreasing in n. Returns
    the upper bound when even n = 10000 falls short; power_analysis()
    reports that case as a warning.
    """
    test_type = _resolve_test_type(test_type)
    alpha = check_probability(alpha, "alpha")
    target_power = check_probability(target_power, "target_power")
    effect_size = _check_effect_size(effect_size, test_type)
    n, _ = _search(effect_size, alpha, target_power, test_type)
    return n


def _search(
    effect_size: float,
    alpha: float,
    target_power: float,
    test_type: str,
) -> tuple[int, bool]:
    """Return (n, reached) from a bisection over the configured range."""
    power_fn = POWER_FUNCTIONS[test_type]
    lo = DEFAULT_CONFIG.power_search_min
    hi = DEFAULT_CONFIG.power_search_max

    while lo < hi:
        mid = (lo + hi) // 2
        # NaN power never satisfies the target
        if not power_fn(mid, effect_size, alpha) >= target_power:
            lo = mid + 1
        else:
            hi = mid

    reached = power_fn(lo, effect_size, alpha) >= target_power
    return lo, bool(reached)


def _resolve_test_type(test_type: str) -> str:
    if not isinstance(test_type, str) or test_type.lower() not in _ALIASES:
        raise ValidationError(
            f"test_type must be one of {VALID_TEST_TYPES}, got {test_type!r}"
        )
    return _ALIASES[test_type.lower()]


def _check_effect_size(effect_size: float, test_type: str) -> float:
    try:
        value = float(effect_size)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"effect_size: expected a number, got {effect_size!r}") from e
    if not np.isfinite(value):
        raise ValidationError(f"effect_size: must be finite, got {value}")
    if test_type == "correlation" and abs(value) >= 1.0:
        raise ValidationError(
            f"effect_size: correlation must satisfy |r| < 1, got {value}"
        )
    return value


def _check_n(n: int, test_type: str) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValidationError(f"n: expected an integer, got {n!r}")
    min_n = _MIN_N[test_type]
    if n < min_n:
        raise ValidationError(
            f"n: {test_type} power requires n >= {min_n}, got {n}"
        )
    return int(n)
