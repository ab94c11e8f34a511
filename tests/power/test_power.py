"""
Tests for power analysis and sample-size search.
"""

import math

import numpy as np
import pytest
from scipy import stats

from algostat.core.exceptions import ValidationError
from algostat.power import (
    PowerSolution,
    power_analysis,
    power_anova,
    power_correlation,
    power_t_test,
    required_sample_size,
)


class TestPowerFormulas:

    def test_t_test_closed_form(self):
        n, d, alpha = 30, 0.5, 0.05
        ncp = d * math.sqrt(n / 2)
        crit = stats.t.ppf(1 - alpha / 2, 2 * n - 2)
        expected = 1 - stats.norm.cdf(crit - ncp) + stats.norm.cdf(-crit - ncp)
        assert power_t_test(n, d, alpha) == pytest.approx(expected)

    def test_t_test_zero_effect_is_alpha_like(self):
        assert power_t_test(50, 0.0) == pytest.approx(
            2 * stats.norm.sf(stats.t.ppf(0.975, 98))
        )

    def test_anova_closed_form(self):
        n, f, alpha = 40, 0.25, 0.05
        ncp = n * f ** 2
        crit = stats.chi2.ppf(1 - alpha, 2)
        expected = 1 - stats.norm.cdf((crit - ncp) / math.sqrt(2 * ncp))
        assert power_anova(n, f, alpha) == pytest.approx(expected)

    def test_anova_zero_effect_nan(self):
        assert np.isnan(power_anova(20, 0.0))

    def test_correlation_closed_form(self):
        n, r, alpha = 50, 0.3, 0.05
        z = math.atanh(r)
        se = 1 / math.sqrt(n - 3)
        zc = stats.norm.ppf(1 - alpha / 2)
        expected = 1 - stats.norm.cdf((zc - z) / se) + stats.norm.cdf((-zc - z) / se)
        assert power_correlation(n, r, alpha) == pytest.approx(expected)

    @pytest.mark.parametrize("fn, effect", [
        (power_t_test, 0.5),
        (power_anova, 0.25),
    ])
    def test_monotone_in_n(self, fn, effect):
        powers = [fn(n, effect) for n in range(5, 200, 5)]
        assert all(b >= a for a, b in zip(powers, powers[1:]))

    def test_larger_n_more_power(self):
        assert power_t_test(100, 0.5) >= power_t_test(30, 0.5)


class TestRequiredSampleSize:

    def test_minimal_n_reaches_target(self):
        n = required_sample_size(0.5, 0.05, 0.80, "t-test")
        assert power_t_test(n, 0.5) >= 0.80
        assert power_t_test(n - 1, 0.5) < 0.80

    def test_ninety_needs_more(self):
        assert required_sample_size(0.5, target_power=0.9) > required_sample_size(0.5)

    def test_large_effect_hits_lower_bound(self):
        assert required_sample_size(3.0) == 5

    def test_unreachable_returns_upper_bound(self):
        assert required_sample_size(0.0, test_type="t-test") == 10000
        assert required_sample_size(0.0, test_type="anova") == 10000

    def test_correlation_strong_effect(self):
        n = required_sample_size(0.99, test_type="correlation")
        assert n == 5
        assert power_correlation(n, 0.99) >= 0.8

    def test_correlation_moderate_effect_unreached(self):
        # power falls with n while atanh(r) < z_crit
        assert power_correlation(100, 0.3) < power_correlation(10, 0.3)
        assert required_sample_size(0.3, test_type="correlation") == 10000

    def test_bad_target(self):
        with pytest.raises(ValidationError, match="target_power"):
            required_sample_size(0.5, target_power=1.0)


class TestPowerAnalysis:

    def test_solution(self):
        result = power_analysis(30, 0.5)
        assert isinstance(result, PowerSolution)
        assert result.test_type == "t-test"
        assert result.power == pytest.approx(power_t_test(30, 0.5))
        assert result.required_n_80 == required_sample_size(0.5, 0.05, 0.80)
        assert result.required_n_90 == required_sample_size(0.5, 0.05, 0.90)
        assert result.valid
        assert result.warnings == ()
        assert "sample_size_search" in result.timing

    @pytest.mark.parametrize("name", ["T-TEST", "t_test", "ttest"])
    def test_t_test_aliases(self, name):
        assert power_analysis(30, 0.5, test_type=name).test_type == "t-test"

    def test_anova_zero_effect_invalid(self):
        result = power_analysis(30, 0.0, test_type="anova")
        assert not result.valid
        assert np.isnan(result.power)
        assert result.required_n_80 == 10000
        assert any("noncentrality" in w for w in result.warnings)

    def test_unreached_target_warns(self):
        result = power_analysis(30, 0.01)
        assert result.required_n_80 == 10000
        assert any("not reached" in w for w in result.warnings)

    def test_summary(self):
        s = power_analysis(50, 0.3, test_type="correlation").summary()
        assert "Power analysis (correlation)" in s
        assert "n for 80% power" in s


class TestPowerValidation:

    def test_unknown_test_type(self):
        with pytest.raises(ValidationError, match="test_type"):
            power_analysis(30, 0.5, test_type="chi-square")

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.1])
    def test_alpha(self, alpha):
        with pytest.raises(ValidationError, match="alpha"):
            power_analysis(30, 0.5, alpha=alpha)

    def test_n_too_small_t(self):
        with pytest.raises(ValidationError, match="n >= 2"):
            power_t_test(1, 0.5)

    def test_n_too_small_correlation(self):
        with pytest.raises(ValidationError, match="n >= 4"):
            power_correlation(3, 0.3)

    def test_correlation_bound(self):
        with pytest.raises(ValidationError, match=r"\|r\| < 1"):
            power_analysis(30, 1.0, test_type="correlation")

    def test_non_finite_effect(self):
        with pytest.raises(ValidationError, match="finite"):
            power_analysis(30, float("inf"))

    def test_non_integer_n(self):
        with pytest.raises(ValidationError, match="integer"):
            power_analysis(30.5, 0.5)
