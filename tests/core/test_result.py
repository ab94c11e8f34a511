"""
Tests for the Result[P] envelope and the Timer used to fill its timing.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - has_warning() method
    - Timer section accumulation
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from algostat.core.compute.timing import Timer, timed
from algostat.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    defaults = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu",
    )
    defaults.update(kwargs)
    return Result(**defaults)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"test_type": "t_paired"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_hypothesis",
        )
        assert result.params.value == 42.0
        assert result.info["test_type"] == "t_paired"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_hypothesis"

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)


class TestHasWarning:

    def test_substring_match(self):
        result = _result(warnings=("data are essentially constant",))
        assert result.has_warning("constant")
        assert not result.has_warning("zero differences")

    def test_no_warnings(self):
        assert not _result().has_warning("anything")


class TestImmutability:
    """Result is frozen: no attribute mutation allowed."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_recorded(self):
        timer = Timer()
        timer.start()
        with timer.section("rank"):
            pass
        with timer.section("statistic"):
            pass
        timer.stop()
        timing = timer.result()
        assert set(timing) == {"total_seconds", "rank", "statistic"}
        assert all(v >= 0.0 for v in timing.values())

    def test_repeated_section_accumulates(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section("test"):
                pass
        timer.stop()
        assert "test" in timer.result()

    def test_result_before_stop_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start_raises(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_timed_context_manager(self):
        with timed() as timer:
            sum(range(100))
        assert timer.result()["total_seconds"] >= 0.0
