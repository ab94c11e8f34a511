"""
Tests for kruskal_wallis_test().

Without ties the uncorrected H equals scipy.stats.kruskal's statistic.
"""

import numpy as np
import pytest
from scipy import stats

from algostat.core.exceptions import ValidationError
from algostat.hypothesis import kruskal_wallis_test, mann_whitney_test


class TestKruskalWallis:

    def test_matches_scipy_without_ties(self, rng):
        groups = [rng.normal(loc, 1.0, size=12) for loc in (0.0, 0.3, 0.6)]
        ref = stats.kruskal(*groups)
        result = kruskal_wallis_test(groups)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-10)
        assert result.parameter == {"df": 2.0}
        assert result.statistic_name == "H"

    def test_default_labels_and_group_info(self):
        groups = [[1.0, 2.0, 3.0], [4.0, 5.0], [6.0, 7.0, 8.0, 9.0]]
        result = kruskal_wallis_test(groups)
        assert result.group_sizes == {"group1": 3, "group2": 2, "group3": 4}
        assert result.group_medians == {"group1": 2.0, "group2": 4.5, "group3": 7.5}

    def test_all_equal_values(self):
        result = kruskal_wallis_test([[3.0] * 4, [3.0] * 5, [3.0] * 3])
        assert result.statistic == pytest.approx(0.0, abs=1e-9)
        assert result.p_value == pytest.approx(1.0)
        assert result.post_hoc is None

    def test_null_rarely_significant(self, rng):
        trials = 100
        not_significant = sum(
            kruskal_wallis_test([rng.normal(size=30) for _ in range(3)]).p_value > 0.05
            for _ in range(trials)
        )
        assert not_significant >= 85

    def test_post_hoc_when_significant(self, algorithm_runs):
        labels = list(algorithm_runs)
        result = kruskal_wallis_test(list(algorithm_runs.values()), labels)
        assert result.significant
        assert list(result.post_hoc) == ["GA vs PSO", "GA vs HO", "PSO vs HO"]
        ref = mann_whitney_test(algorithm_runs["GA"], algorithm_runs["HO"])
        assert result.post_hoc["GA vs HO"] == pytest.approx(ref.p_value)
        assert result.post_hoc["GA vs HO"] < 0.05
        assert "pairwise comparisons" in result.summary()

    def test_no_post_hoc_when_not_significant(self):
        groups = [[1.0, 4.0, 7.0], [2.0, 5.0, 8.0], [3.0, 6.0, 9.0]]
        result = kruskal_wallis_test(groups)
        assert not result.significant
        assert result.post_hoc is None


class TestKruskalValidation:

    def test_two_groups_rejected(self):
        with pytest.raises(ValidationError, match="at least 3 groups"):
            kruskal_wallis_test([[1.0, 2.0], [3.0, 4.0]])

    def test_empty_group_rejected(self):
        with pytest.raises(ValidationError):
            kruskal_wallis_test([[1.0, 2.0], [], [3.0]])

    def test_label_count(self):
        with pytest.raises(ValidationError, match="one label per group"):
            kruskal_wallis_test([[1.0], [2.0], [3.0]], labels=["a", "b"])

    def test_duplicate_labels(self):
        with pytest.raises(ValidationError, match="unique"):
            kruskal_wallis_test([[1.0], [2.0], [3.0]], labels=["a", "a", "b"])

    def test_non_finite(self):
        with pytest.raises(ValidationError):
            kruskal_wallis_test([[1.0, np.nan], [2.0], [3.0]])
