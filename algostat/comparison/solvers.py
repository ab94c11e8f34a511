"""
Batch comparison of algorithms against a baseline.

For every non-baseline algorithm and every metric it shares with the
baseline, runs one two-sample test and the effect sizes, then adjusts
the p-values of all valid tests together.
"""

from __future__ import annotations

from typing import Any, Mapping

from algostat.core.config import DEFAULT_CONFIG
from algostat.core.exceptions import ValidationError
from algostat.core.result import Result
from algostat.core.compute.timing import Timer
from algostat.comparison._common import ComparisonEntry, ComparisonParams
from algostat.comparison.solution import ComparisonSolution
from algostat.effect_size import effect_sizes
from algostat.hypothesis import adjust_p_values, t_test, wilcoxon_test

VALID_TESTS = ("t-test", "wilcoxon")

_TEST_ALIASES = {
    "t-test": "t-test",
    "t_test": "t-test",
    "ttest": "t-test",
    "wilcoxon": "wilcoxon",
}


def compare_to_baseline(
    data: Mapping[str, Mapping[str, Any]],
    baseline: str,
    test: str = "t-test",
    paired: bool = False,
    correction: str = "holm",
    alpha: float = DEFAULT_CONFIG.significance_level,
) -> ComparisonSolution:
    """
    Compare every algorithm against a baseline on every shared metric.

    Parameters
    ----------
    data : mapping
        algorithm -> {metric -> sample}.
    baseline : str
        Key of the reference algorithm in data.
    test : str
        "t-test" (default) or "wilcoxon". The Wilcoxon test is always
        paired.
    paired : bool
        Passed to the t-test.
    correction : str
        Multiple-comparison method, see p_adjust().
    alpha : float
        Significance level of the individual tests.

    Returns
    -------
    ComparisonSolution
        One entry per (algorithm, metric), labelled
        "<algorithm> vs <baseline>: <metric>", and the correction over the
        valid entries. Validation errors from the individual tests
        propagate.
    """
    if baseline not in data:
        raise ValidationError(
            f"baseline: {baseline!r} not found among algorithms {list(data)}"
        )
    if not isinstance(test, str) or test.lower() not in _TEST_ALIASES:
        raise ValidationError(f"test must be one of {VALID_TESTS}, got {test!r}")
    test_type = _TEST_ALIASES[test.lower()]

    baseline_metrics = data[baseline]
    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    runs = []
    with timer.section('tests'):
        for algorithm, metrics in data.items():
            if algorithm == baseline:
                continue
            for metric, sample in metrics.items():
                if metric not in baseline_metrics:
                    continue
                reference = baseline_metrics[metric]
                label = f"{algorithm} vs {baseline}: {metric}"
                if test_type == "t-test":
                    result = t_test(sample, reference, paired=paired, alpha=alpha)
                else:
                    result = wilcoxon_test(sample, reference, alpha=alpha)
                effect = effect_sizes(sample, reference)
                runs.append((label, algorithm, metric, result, effect))

    valid_runs = [r for r in runs if r[3].valid]
    for label, _, _, result, _ in runs:
        if not result.valid:
            warnings_list.append(f"{label}: invalid test result excluded from correction")

    with timer.section('correction'):
        corrected = adjust_p_values(
            [r[3].p_value for r in valid_runs],
            labels=[r[0] for r in valid_runs],
            method=correction,
        )

    adjusted = corrected.as_dict()
    flags = dict(zip(corrected.labels, corrected.significant))
    entries = tuple(
        ComparisonEntry(
            label=label,
            algorithm=algorithm,
            baseline=baseline,
            metric=metric,
            test=result,
            effect=effect,
            adjusted_p_value=adjusted.get(label),
            significant=bool(flags.get(label, False)),
        )
        for label, algorithm, metric, result, effect in runs
    )

    timer.stop()

    params = ComparisonParams(
        baseline=baseline,
        test_type=test_type,
        correction=corrected,
        entries=entries,
    )
    result = Result(
        params=params,
        info={
            'test_type': test_type,
            'paired': paired or test_type == "wilcoxon",
            'correction': corrected.method,
            'n_comparisons': len(entries),
        },
        timing=timer.result(),
        backend_name='cpu_comparison',
        warnings=tuple(warnings_list),
    )
    return ComparisonSolution(_result=result)
