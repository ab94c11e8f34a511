"""
Tests for input validation utilities.

Validates every function in core/validation.py.
"""

import numpy as np
import pytest

from algostat.core.exceptions import DimensionError, ValidationError
from algostat.core.validation import (
    as_sample,
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_group_labels,
    check_min_samples,
    check_probability,
)


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_returns_copy(self):
        arr = np.array([3.0, 1.0, 2.0])
        result = check_array(arr, "x")
        result[0] = 99.0
        assert arr[0] == 3.0

    def test_object_dtype_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, "a", None], "x")

    def test_string_dtype_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([True, False], "x")


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([1.0, -np.inf]), "x")


class TestShapeChecks:

    def test_check_1d_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_consistent_length(self):
        check_consistent_length([1, 2], [3, 4], names=("x", "y"))

    def test_inconsistent_length(self):
        with pytest.raises(DimensionError, match="x=2, y=3"):
            check_consistent_length([1, 2], [3, 4, 5], names=("x", "y"))

    def test_names_mismatch_is_programming_error(self):
        with pytest.raises(ValueError):
            check_consistent_length([1], [2], names=("x",))

    def test_min_samples(self):
        with pytest.raises(ValidationError, match="at least 5 samples, got 3"):
            check_min_samples(np.ones(3), 5, "x")


class TestCheckProbability:

    @pytest.mark.parametrize("value", [0.0, 1.0, -0.1, 1.5])
    def test_outside_open_interval(self, value):
        with pytest.raises(ValidationError, match="alpha"):
            check_probability(value, "alpha")

    def test_valid(self):
        assert check_probability(0.05, "alpha") == 0.05


class TestAsSample:

    def test_scalar_becomes_length_one(self):
        result = as_sample(3.0, "x")
        assert result.shape == (1,)

    def test_empty_allowed_with_zero_minimum(self):
        assert as_sample([], "x", min_samples=0).shape == (0,)

    def test_too_small(self):
        with pytest.raises(ValidationError):
            as_sample([1.0, 2.0], "x", min_samples=5)

    def test_two_dimensional(self):
        with pytest.raises(DimensionError):
            as_sample([[1.0, 2.0], [3.0, 4.0]], "x")


class TestCheckGroupLabels:

    def test_default_labels(self):
        assert check_group_labels(None, 3) == ("group1", "group2", "group3")

    def test_labels_stringified(self):
        assert check_group_labels([1, 2], 2) == ("1", "2")

    def test_count_mismatch(self):
        with pytest.raises(ValidationError, match="one label per group"):
            check_group_labels(["a", "b"], 3)

    def test_duplicates(self):
        with pytest.raises(ValidationError, match="unique"):
            check_group_labels(["a", "a", "b"], 3)
