"""
Tests for AlgoStat exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via AlgoStatError)
    - Validation failures raised by the public API use the hierarchy
"""

import pytest

from algostat.core.exceptions import (
    AlgoStatError,
    DimensionError,
    ValidationError,
)
from algostat.hypothesis import t_test


class TestInheritance:
    """Every exception is catchable via AlgoStatError."""

    def test_validation_error_is_algostat_error(self):
        with pytest.raises(AlgoStatError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_validation_is_the_only_branch(self):
        # computation failures mark results invalid instead of raising
        assert AlgoStatError.__subclasses__() == [ValidationError]


class TestRaisedFromApi:

    def test_small_sample_is_validation_error(self):
        with pytest.raises(ValidationError, match="at least 5"):
            t_test([1, 2, 3], [4, 5, 6, 7, 8])

    def test_paired_length_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            t_test([1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6], paired=True)

    def test_catchable_as_base(self):
        with pytest.raises(AlgoStatError):
            t_test([1, 2, 3, 4, float("nan")], [1, 2, 3, 4, 5])

    def test_degenerate_computation_does_not_raise(self):
        from algostat.anova import anova_oneway
        result = anova_oneway([[1.0, 1.0], [2.0, 2.0]])
        assert not result.valid
