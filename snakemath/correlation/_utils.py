"""Point conversion, line sampling and display formatting."""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from snakemath.core.exceptions import ValidationError
from snakemath.core.validation import check_paired, check_scalar
from snakemath.correlation._common import Point


def points_to_arrays(
    points: Iterable[Point],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Split a Point sequence into x and y arrays, preserving order."""
    pts = list(points)
    x = np.array([p.x for p in pts], dtype=np.float64)
    y = np.array([p.y for p in pts], dtype=np.float64)
    return check_paired(x, y)


def arrays_to_points(x: ArrayLike, y: ArrayLike) -> list[Point]:
    x_arr, y_arr = check_paired(x, y)
    return [Point(float(xi), float(yi)) for xi, yi in zip(x_arr, y_arr)]


def generate_regression_line_points(
    slope: float,
    intercept: float,
    x_min: float,
    x_max: float,
    num_points: int = 2,
) -> list[Point]:
    """num_points evenly spaced points of y = intercept + slope * x on [x_min, x_max]."""
    slope = check_scalar(slope, "slope")
    intercept = check_scalar(intercept, "intercept")
    x_min = check_scalar(x_min, "x_min")
    x_max = check_scalar(x_max, "x_max")
    if x_min > x_max:
        raise ValidationError(f"x_min ({x_min}) must not exceed x_max ({x_max})")
    if isinstance(num_points, bool) or not isinstance(num_points, (int, np.integer)) or num_points < 2:
        raise ValidationError(f"num_points: must be an integer >= 2, got {num_points!r}")
    xs = np.linspace(x_min, x_max, int(num_points))
    return [Point(float(x), intercept + slope * float(x)) for x in xs]


def format_correlation(r: float) -> str:
    """r to three decimals: '0.816'."""
    return f"{check_scalar(r, 'r'):.3f}"


def format_r_squared(r_squared: float) -> str:
    """R squared as a percentage: '66.7%'."""
    return f"{check_scalar(r_squared, 'r_squared') * 100:.1f}%"


def format_regression_equation(slope: float, intercept: float) -> str:
    """'ŷ = 2.000x + 0.000' style equation text."""
    slope = check_scalar(slope, "slope")
    intercept = check_scalar(intercept, "intercept")
    sign = "+" if intercept >= 0 else "-"
    return f"ŷ = {slope:.3f}x {sign} {abs(intercept):.3f}"
