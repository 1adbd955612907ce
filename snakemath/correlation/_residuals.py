"""
Residual diagnostics for simple linear regression.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from snakemath.core.exceptions import InsufficientDataError
from snakemath.core.validation import check_min_samples, check_paired, check_scalar, check_vector
from snakemath.correlation._common import ResidualAnalysis
from snakemath.correlation._influence import leverage_values
from snakemath.correlation.solvers import linear_regression

# |standardized residual| above this is reported as unusual
_LARGE_RESIDUAL = 2.0

# |corr(|e|, x)| above this is reported as a spread trend
_SPREAD_TREND = 0.5


def calculate_residuals(
    x: ArrayLike,
    y: ArrayLike,
    slope: float,
    intercept: float,
) -> NDArray[np.floating[Any]]:
    """e_i = y_i - (slope * x_i + intercept)."""
    x_arr, y_arr = check_paired(x, y)
    slope = check_scalar(slope, "slope")
    intercept = check_scalar(intercept, "intercept")
    return y_arr - (slope * x_arr + intercept)


def total_sum_of_squares(y: ArrayLike) -> float:
    """TSS = sum((y_i - mean(y))^2)."""
    y_arr = check_vector(y, "y", min_samples=1)
    dy = y_arr - y_arr.mean()
    return float(np.dot(dy, dy))


def r_squared_from_residuals(residuals: ArrayLike, y: ArrayLike) -> float:
    """1 - SSR / TSS. A constant y gives 1 for a perfect fit, else 0."""
    e, y_arr = check_paired(residuals, y, min_samples=1, names=("residuals", "y"))
    ssr = float(np.dot(e, e))
    tss = total_sum_of_squares(y_arr)
    if tss == 0.0:
        return 1.0 if ssr == 0.0 else 0.0
    return 1.0 - ssr / tss


def standard_error_of_estimate(residuals: ArrayLike) -> float:
    """sqrt(SSR / (n - 2)) for a two-parameter fit."""
    e = check_vector(residuals, "residuals")
    check_min_samples(e, 3, "residuals")
    return math.sqrt(float(np.dot(e, e)) / (e.shape[0] - 2))


def standardized_residuals(x: ArrayLike, y: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Internally studentized residuals e_i / (s * sqrt(1 - h_i)).

    Points with leverage 1 have residual 0 and are reported as 0. A
    perfect fit (s = 0) gives all zeros.
    """
    fit = linear_regression(x, y)
    x_arr, y_arr = check_paired(x, y)
    e = y_arr - fit.predict(x_arr)
    if fit.standard_error == 0.0:
        return np.zeros_like(e)
    h = leverage_values(x_arr)
    scale = fit.standard_error * np.sqrt(np.clip(1.0 - h, 0.0, None))
    out = np.zeros_like(e)
    np.divide(e, scale, out=out, where=scale > 0)
    return out


def analyze_residuals(
    x: ArrayLike,
    y: ArrayLike,
    slope: float,
    intercept: float,
) -> ResidualAnalysis:
    """
    Summarize the residuals of the line (slope, intercept) on (x, y).

    Flags, as warnings:
        - a mean residual away from zero (the line is not the OLS fit)
        - observations with |standardized residual| > 2
        - residual magnitude trending with x (possible heteroscedasticity)
    """
    e = calculate_residuals(x, y, slope, intercept)
    x_arr, y_arr = check_paired(x, y)
    n = e.shape[0]
    if n < 3:
        raise InsufficientDataError(
            f"residual analysis requires at least 3 observations, got {n}",
            required=3,
            actual=n,
        )

    ssr = float(np.dot(e, e))
    se = math.sqrt(ssr / (n - 2))
    mean_residual = float(e.mean())

    warnings: list[str] = []
    scale = max(float(np.abs(y_arr).max()), 1.0)
    if abs(mean_residual) > 1e-8 * scale:
        warnings.append(
            f"Mean residual is {mean_residual:.4g}, not 0; the line is not the least-squares fit"
        )

    max_std = 0.0
    if se > 0:
        std = e / se
        max_std = float(np.abs(std).max())
        n_large = int(np.sum(np.abs(std) > _LARGE_RESIDUAL))
        if n_large:
            warnings.append(
                f"{n_large} observation(s) with |standardized residual| > {_LARGE_RESIDUAL:g}"
            )

        abs_e = np.abs(e)
        if np.ptp(abs_e) > 0 and np.ptp(x_arr) > 0:
            trend = float(np.corrcoef(x_arr, abs_e)[0, 1])
            if abs(trend) > _SPREAD_TREND:
                warnings.append(
                    "Residual spread changes with x (possible heteroscedasticity)"
                )

    return ResidualAnalysis(
        residuals=e,
        mean_residual=mean_residual,
        sum_of_squared_residuals=ssr,
        standard_error=se,
        mean_absolute_error=float(np.abs(e).mean()),
        max_abs_standardized=max_std,
        warnings=tuple(warnings),
    )
