"""
Tests for input validation utilities.

Validates every function in core/validation.py.
"""

import math

import numpy as np
import pytest

from snakemath.core.exceptions import (
    DimensionError,
    InsufficientDataError,
    ValidationError,
)
from snakemath.core.validation import (
    check_1d,
    check_array,
    check_conf_level,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_nonnegative_integer,
    check_open_probability,
    check_paired,
    check_positive,
    check_positive_integer,
    check_probability,
    check_scalar,
    check_vector,
)


# ═══════════════════════════════════════════════════════════════════════
# Array checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "x")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "x")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([True, False], "x")


class TestCheckFinite:

    def test_accepts_finite(self):
        check_finite(np.array([1.0, 2.0]), "x")

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_rejects_inf(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 1.0]), "x")


class TestShapeChecks:

    def test_check_1d_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_consistent_length(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("x", "y"))

    def test_inconsistent_length(self):
        with pytest.raises(DimensionError, match="x=3, y=2"):
            check_consistent_length(np.zeros(3), np.ones(2), names=("x", "y"))

    def test_names_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), names=("x", "y"))

    def test_min_samples(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            check_min_samples(np.zeros(2), 3, "x")
        assert exc_info.value.required == 3
        assert exc_info.value.actual == 2


class TestCheckVector:

    def test_valid(self):
        arr = check_vector([1, 2, 3], "x", min_samples=3)
        assert arr.shape == (3,)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            check_vector([1.0, float("nan")], "x")

    def test_too_short(self):
        with pytest.raises(InsufficientDataError):
            check_vector([1.0], "x", min_samples=2)


class TestCheckPaired:

    def test_valid(self):
        x, y = check_paired([1, 2, 3], [4, 5, 6], min_samples=2)
        assert x.shape == y.shape == (3,)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            check_paired([1, 2, 3], [4, 5])

    def test_too_few_pairs(self):
        with pytest.raises(InsufficientDataError):
            check_paired([1], [2], min_samples=2)


# ═══════════════════════════════════════════════════════════════════════
# Scalar checks
# ═══════════════════════════════════════════════════════════════════════


class TestScalarChecks:

    def test_scalar_accepts_numpy(self):
        assert check_scalar(np.float64(1.5), "v") == 1.5
        assert check_scalar(np.int64(3), "v") == 3.0

    @pytest.mark.parametrize("value", [float("nan"), math.inf, -math.inf])
    def test_scalar_rejects_non_finite(self, value):
        with pytest.raises(ValidationError, match="must be finite"):
            check_scalar(value, "v")

    @pytest.mark.parametrize("value", ["1.0", None, True, [1.0]])
    def test_scalar_rejects_non_numbers(self, value):
        with pytest.raises(ValidationError, match="expected a real number"):
            check_scalar(value, "v")

    def test_positive(self):
        assert check_positive(2, "sigma") == 2.0
        with pytest.raises(ValidationError, match="sigma"):
            check_positive(0, "sigma")

    def test_probability_closed(self):
        assert check_probability(0.0, "p") == 0.0
        assert check_probability(1.0, "p") == 1.0
        with pytest.raises(ValidationError):
            check_probability(1.01, "p")

    def test_open_probability(self):
        with pytest.raises(ValidationError, match=r"\(0, 1\)"):
            check_open_probability(0.0, "p")
        with pytest.raises(ValidationError):
            check_open_probability(1.0, "p")

    def test_conf_level(self):
        assert check_conf_level(0.95) == 0.95
        with pytest.raises(ValidationError, match="conf_level"):
            check_conf_level(95)

    def test_nonnegative_integer_accepts_integral_float(self):
        assert check_nonnegative_integer(3.0, "n") == 3

    def test_nonnegative_integer_rejects_fraction(self):
        with pytest.raises(ValidationError):
            check_nonnegative_integer(3.5, "n")

    def test_positive_integer_rejects_zero(self):
        assert check_nonnegative_integer(0, "n") == 0
        with pytest.raises(ValidationError):
            check_positive_integer(0, "n")
