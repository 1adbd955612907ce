"""
Input validation utilities for SnakeMath.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than clamping a bad value
to a nearby valid one.

Design principles:
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - NaN and Inf are rejected explicitly (callers may pass values parsed
      from URL query strings)
"""

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from snakemath.core.exceptions import (
    DimensionError,
    InsufficientDataError,
    ValidationError,
)


def check_array(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == bool or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...],
) -> None:
    """
    Verify all arrays have the same length.

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of observations.

    Raises:
        InsufficientDataError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InsufficientDataError(
            f"{name}: requires at least {min_samples} observations, got {n}",
            required=min_samples,
            actual=n,
        )


def check_vector(
    values: ArrayLike,
    name: str,
    min_samples: int = 0,
) -> NDArray[np.floating[Any]]:
    """
    Convert to a finite 1D float64 array with at least min_samples entries.

    Combines check_array, check_1d, check_finite and check_min_samples,
    the sequence every series-valued entry point runs.
    """
    arr = check_array(values, name)
    check_1d(arr, name)
    check_finite(arr, name)
    if min_samples:
        check_min_samples(arr, min_samples, name)
    return arr


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a finite real number and return it as float.

    Raises:
        ValidationError: If value is not a real number, or is NaN/Inf
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise ValidationError(f"{name}: expected a real number, got {type(value).__name__}")
    result = float(value)
    if not math.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_positive(value: Any, name: str) -> float:
    """Verify value is a finite number > 0."""
    result = check_scalar(value, name)
    if result <= 0:
        raise ValidationError(f"{name}: must be > 0, got {result}")
    return result


def check_probability(value: Any, name: str) -> float:
    """Verify value lies in the closed interval [0, 1]."""
    result = check_scalar(value, name)
    if not 0.0 <= result <= 1.0:
        raise ValidationError(f"{name}: must be in [0, 1], got {result}")
    return result


def check_open_probability(value: Any, name: str) -> float:
    """Verify value lies in the open interval (0, 1)."""
    result = check_scalar(value, name)
    if not 0.0 < result < 1.0:
        raise ValidationError(f"{name}: must be in (0, 1), got {result}")
    return result


def check_conf_level(conf_level: Any) -> float:
    """Validate confidence level is in (0, 1)."""
    return check_open_probability(conf_level, "conf_level")


def check_nonnegative_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 0.

    Integral floats (3.0) are accepted since query-string parsers
    produce them; 3.5 is rejected.
    """
    result = check_scalar(value, name)
    if result < 0 or not result.is_integer():
        raise ValidationError(f"{name}: must be a non-negative integer, got {value}")
    return int(result)


def check_positive_integer(value: Any, name: str) -> int:
    """Verify value is an integer >= 1."""
    result = check_nonnegative_integer(value, name)
    if result < 1:
        raise ValidationError(f"{name}: must be a positive integer, got {value}")
    return result


def check_paired(
    x: ArrayLike,
    y: ArrayLike,
    min_samples: int = 0,
    names: tuple[str, str] = ("x", "y"),
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Validate two paired series: each a finite 1D vector, equal lengths,
    and at least min_samples pairs.

    Raises:
        DimensionError: If the lengths differ
        InsufficientDataError: If there are fewer than min_samples pairs
    """
    x_arr = check_vector(x, names[0])
    y_arr = check_vector(y, names[1])
    check_consistent_length(x_arr, y_arr, names=names)
    if min_samples:
        check_min_samples(x_arr, min_samples, names[0])
    return x_arr, y_arr
