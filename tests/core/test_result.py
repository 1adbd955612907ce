"""
Tests for the Result[P] envelope, Timer, to_record and as_generator.
"""

import json
from dataclasses import FrozenInstanceError, dataclass

import numpy as np
import pytest

from snakemath.core.random import as_generator
from snakemath.core.records import to_record
from snakemath.core.result import Result
from snakemath.core.timing import Timer


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


# ═══════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"test_type": "one-sample-t"},
            timing={"total_seconds": 0.01},
            backend_name="cpu",
        )
        assert result.params.value == 42.0
        assert result.info["test_type"] == "one-sample-t"
        assert result.backend_name == "cpu"
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0), info={}, timing=None, backend_name="cpu",
            warnings=("Sample size 10 < 30", "other"),
        )
        assert result.has_warning("Sample size")
        assert not result.has_warning("singular")


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("a"):
            pass
        with timer.section("a"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "a"}
        assert result["a"] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()


# ═══════════════════════════════════════════════════════════════════════
# Records and randomness
# ═══════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ArrayPayload:
    values: np.ndarray
    mean: np.float64
    _hidden: int


class TestToRecord:

    def test_dataclass_with_numpy(self):
        record = to_record(ArrayPayload(np.array([1.0, 2.0]), np.float64(1.5), 3))
        assert record == {"values": [1.0, 2.0], "mean": 1.5, "hidden": 3}
        assert type(record["mean"]) is float
        json.dumps(record)

    def test_nested_containers(self):
        record = to_record({"a": (np.int64(1), [np.float32(0.5)])})
        assert record == {"a": [1, [0.5]]}


class TestAsGenerator:

    def test_int_seed_reproducible(self):
        a = as_generator(7).random(3)
        b = as_generator(7).random(3)
        np.testing.assert_array_equal(a, b)

    def test_generator_passthrough(self, rng):
        assert as_generator(rng) is rng

    def test_none_gives_generator(self):
        assert isinstance(as_generator(None), np.random.Generator)

    def test_float_rejected(self):
        with pytest.raises(TypeError):
            as_generator(1.5)
