"""
Leverage and Cook's distance for simple linear regression.

    h_i = 1/n + (x_i - mean(x))^2 / Sxx
    D_i = e_i^2 / (p * MSE) * h_i / (1 - h_i)^2,   p = 2
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from snakemath.core.defaults import COOKS_DISTANCE_FACTOR
from snakemath.core.exceptions import DegenerateInputError, ValidationError
from snakemath.core.validation import check_paired, check_positive, check_scalar, check_vector
from snakemath.correlation.solvers import linear_regression

# Parameters in a simple regression (intercept and slope)
_N_PARAMS = 2


def leverage_values(x: ArrayLike) -> NDArray[np.floating[Any]]:
    """Leverage of every observation; they sum to 2."""
    x_arr = check_vector(x, "x", min_samples=2)
    dx = x_arr - x_arr.mean()
    sxx = float(np.dot(dx, dx))
    if sxx == 0.0:
        raise DegenerateInputError("x has zero variance; leverage is undefined", quantity="var(x)")
    return 1.0 / x_arr.shape[0] + dx * dx / sxx


def leverage(x: ArrayLike, index: int) -> float:
    """Leverage h_i of observation `index`."""
    h = leverage_values(x)
    i = check_scalar(index, "index")
    if not i.is_integer() or not 0 <= i < h.shape[0]:
        raise ValidationError(f"index: must be an integer in [0, {h.shape[0]}), got {index}")
    return float(h[int(i)])


def cooks_distance(x: ArrayLike, y: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Cook's distance of every observation in the fit of y on x.

    A perfect fit gives all zeros. An observation with leverage 1 gets
    +inf: the fit passes through it whatever its y.
    """
    fit = linear_regression(x, y)
    x_arr, y_arr = check_paired(x, y)
    e = y_arr - fit.predict(x_arr)
    mse = fit.standard_error ** 2
    if mse == 0.0:
        return np.zeros_like(e)

    h = leverage_values(x_arr)
    out = np.full_like(e, np.inf)
    ok = h < 1.0
    out[ok] = e[ok] ** 2 / (_N_PARAMS * mse) * h[ok] / (1.0 - h[ok]) ** 2
    return out


def identify_outliers(
    x: ArrayLike,
    y: ArrayLike,
    threshold: float = COOKS_DISTANCE_FACTOR,
) -> list[int]:
    """
    Indices whose Cook's distance exceeds threshold * 4 / n.

    threshold is a factor on the conventional 4/n cut-off; the default
    1.0 applies the rule of thumb as is.
    """
    threshold = check_positive(threshold, "threshold")
    d = cooks_distance(x, y)
    cutoff = threshold * 4.0 / d.shape[0]
    return [int(i) for i in np.flatnonzero(d > cutoff)]
