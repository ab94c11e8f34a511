"""
Tests for the effect size calculator.
"""

import numpy as np
import pytest

from algostat.core.exceptions import ValidationError
from algostat.effect_size import (
    cohens_d,
    effect_sizes,
    eta_squared_from_f,
    glass_delta,
    hedges_g,
    interpret_effect_size,
    probability_of_superiority,
)


class TestCohensD:

    def test_equal_means_is_zero(self):
        x = [8.0, 10.0, 12.0]
        y = [9.0, 10.0, 11.0, 10.0]
        assert np.mean(x) == np.mean(y) == 10.0
        assert cohens_d(x, y) == pytest.approx(0.0, abs=1e-15)

    def test_equal_variance_zero_difference(self):
        x = [9.0, 10.0, 11.0]
        assert cohens_d(x, list(reversed(x))) == pytest.approx(0.0)

    def test_closed_form(self, rng):
        x = rng.normal(1.0, 2.0, size=12)
        y = rng.normal(0.0, 1.0, size=9)
        sp = np.sqrt((11 * x.var(ddof=1) + 8 * y.var(ddof=1)) / 19)
        assert cohens_d(x, y) == pytest.approx((x.mean() - y.mean()) / sp)

    def test_sign_follows_order(self):
        x, y = [1.0, 2.0, 3.0], [4.0, 5.0, 6.0]
        assert cohens_d(x, y) == pytest.approx(-cohens_d(y, x))
        assert cohens_d(x, y) == pytest.approx(-3.0)

    def test_zero_pooled_sd(self):
        assert np.isnan(cohens_d([1.0, 1.0], [2.0, 2.0]))

    def test_float_constant_samples(self):
        assert np.isnan(cohens_d([0.1] * 3, [0.2] * 3))


class TestOtherMeasures:

    def test_hedges_g_shrinks_d(self, rng):
        x = rng.normal(size=6)
        y = rng.normal(1.0, size=6)
        factor = 1 - 3 / (4 * 12 - 9)
        assert hedges_g(x, y) == pytest.approx(cohens_d(x, y) * factor)
        assert abs(hedges_g(x, y)) < abs(cohens_d(x, y))

    def test_glass_delta_uses_second_sd(self):
        x = [10.0, 20.0, 30.0]
        y = [1.0, 2.0, 3.0]
        assert glass_delta(x, y) == pytest.approx((20.0 - 2.0) / 1.0)

    def test_glass_delta_zero_spread(self):
        assert np.isnan(glass_delta([1.0, 2.0], [3.0, 3.0]))
        assert np.isnan(glass_delta([1.0, 2.0], [0.1] * 3))

    def test_superiority(self):
        assert probability_of_superiority([3.0, 4.0], [1.0, 2.0]) == 1.0
        assert probability_of_superiority([1.0, 2.0], [3.0, 4.0]) == 0.0
        # ties count as losses: (2 > 1), (2 > 2 no), (3 > 1), (3 > 2)
        assert probability_of_superiority([2.0, 3.0], [1.0, 2.0]) == pytest.approx(0.75)

    def test_superiority_single_values(self):
        assert probability_of_superiority([2.0], [1.0]) == 1.0

    def test_eta_squared_from_f(self):
        assert eta_squared_from_f(4.0, 2, 27) == pytest.approx(8.0 / 35.0)
        assert eta_squared_from_f(0.0, 2, 27) == 0.0
        assert np.isnan(eta_squared_from_f(np.nan, 2, 27))


class TestInterpretation:

    @pytest.mark.parametrize("value, label", [
        (0.0, "negligible"),
        (0.19, "negligible"),
        (0.2, "small"),
        (-0.45, "small"),
        (0.5, "medium"),
        (0.79, "medium"),
        (0.8, "large"),
        (-2.5, "large"),
    ])
    def test_bands(self, value, label):
        assert interpret_effect_size(value) == label

    def test_nan(self):
        assert interpret_effect_size(float("nan")) == "undefined"


class TestEffectSizes:

    def test_all_measures(self, rng):
        x = rng.normal(1.0, 1.0, size=20)
        y = rng.normal(0.0, 1.0, size=20)
        result = effect_sizes(x, y)
        assert result.cohens_d == pytest.approx(cohens_d(x, y))
        assert result.hedges_g == pytest.approx(hedges_g(x, y))
        assert result.glass_delta == pytest.approx(glass_delta(x, y))
        assert result.probability_of_superiority == pytest.approx(
            probability_of_superiority(x, y)
        )
        assert result.interpretation == interpret_effect_size(result.cohens_d)
        assert result.valid
        assert result.params.n1 == 20
        assert result.backend_name == "cpu_effect_size"

    def test_zero_pooled_sd_invalid(self):
        result = effect_sizes([5.0, 5.0, 5.0], [5.0, 5.0])
        assert not result.valid
        assert np.isnan(result.cohens_d)
        assert np.isnan(result.hedges_g)
        assert result.interpretation == "undefined"
        assert any("pooled standard deviation" in w for w in result.warnings)
        assert any("Glass" in w for w in result.warnings)

    def test_zero_second_sd_only(self):
        result = effect_sizes([1.0, 2.0, 3.0], [2.0, 2.0, 2.0])
        assert result.valid
        assert np.isnan(result.glass_delta)
        assert len(result.warnings) == 1

    def test_summary_and_repr(self):
        result = effect_sizes([1.0, 2.0, 3.0], [2.0, 3.0, 4.0])
        assert "Cohen's d" in result.summary()
        assert repr(result).startswith("EffectSizeSolution(")

    def test_minimum_two(self):
        with pytest.raises(ValidationError):
            effect_sizes([1.0], [1.0, 2.0])
