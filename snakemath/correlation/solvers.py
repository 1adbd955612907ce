"""
Pearson correlation and least-squares regression.

All entry points take paired numeric series (lists or numpy arrays of
equal length) and validate them at the boundary:

    DimensionError         lengths differ
    InsufficientDataError  too few pairs
    DegenerateInputError   a series with zero variance where the result
                           would be undefined
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from snakemath.core.defaults import CORRELATION_STRENGTH, DEFAULT_CONF_LEVEL, StrengthScale
from snakemath.core.exceptions import (
    DegenerateInputError,
    SingularMatrixError,
    ValidationError,
)
from snakemath.core.special import t_critical_value
from snakemath.core.validation import (
    check_conf_level,
    check_consistent_length,
    check_min_samples,
    check_paired,
    check_scalar,
    check_vector,
)
from snakemath.correlation._common import (
    CoefficientInterval,
    CorrelationInterpretation,
    LinearRegressionResult,
    MultipleRegressionResult,
    RegressionConfidenceIntervals,
)

# Condition numbers of the predictor correlation matrix above this are
# treated as singular
_MAX_CONDITION = 1e12


def _is_constant(values: NDArray[np.floating[Any]]) -> bool:
    return bool(np.ptp(values) == 0.0)


# --- Correlation ---

def pearson_correlation(x: ArrayLike, y: ArrayLike) -> float:
    """
    Pearson product-moment correlation cov(x, y) / (sd(x) sd(y)).

    Requires at least 2 pairs and non-constant x and y. The result is
    clipped to [-1, 1] against rounding.
    """
    x_arr, y_arr = check_paired(x, y, min_samples=2)
    if _is_constant(x_arr):
        raise DegenerateInputError("x has zero variance; correlation is undefined", quantity="var(x)")
    if _is_constant(y_arr):
        raise DegenerateInputError("y has zero variance; correlation is undefined", quantity="var(y)")

    dx = x_arr - x_arr.mean()
    dy = y_arr - y_arr.mean()
    r = float(np.dot(dx, dy) / math.sqrt(np.dot(dx, dx) * np.dot(dy, dy)))
    return min(1.0, max(-1.0, r))


def interpret_correlation(
    r: float,
    scale: StrengthScale = CORRELATION_STRENGTH,
) -> CorrelationInterpretation:
    """
    Label |r| by the strength scale and report the sign of r.

    The default scale: [0, 0.1) negligible, [0.1, 0.3) weak,
    [0.3, 0.5) moderate, [0.5, 0.7) strong, [0.7, 1] very-strong.
    These cut-points are conventions, not properties of the data.
    """
    r = check_scalar(r, "r")
    if not -1.0 <= r <= 1.0:
        raise ValidationError(f"r: must be in [-1, 1], got {r}")
    if r > 0:
        direction = "positive"
    elif r < 0:
        direction = "negative"
    else:
        direction = "none"
    return CorrelationInterpretation(strength=scale.classify(abs(r)), direction=direction)


def coefficient_of_determination(r: float) -> float:
    """r squared: the share of variance in y explained by the linear fit."""
    r = check_scalar(r, "r")
    if not -1.0 <= r <= 1.0:
        raise ValidationError(f"r: must be in [-1, 1], got {r}")
    return r * r


# --- Simple linear regression ---

def linear_regression(x: ArrayLike, y: ArrayLike) -> LinearRegressionResult:
    """
    Closed-form OLS fit of y on x.

    slope = Sxy / Sxx, intercept = mean(y) - slope * mean(x), and
    standard_error = sqrt(SSR / (n - 2)).

    Requires at least 3 pairs. A constant x (vertical line) raises
    DegenerateInputError. A constant y is a valid flat fit: r is
    reported as 0 and a warning is attached.
    """
    x_arr, y_arr = check_paired(x, y, min_samples=3)
    if _is_constant(x_arr):
        raise DegenerateInputError(
            "x has zero variance; the regression slope is undefined",
            quantity="var(x)",
        )

    n = x_arr.shape[0]
    x_mean = float(x_arr.mean())
    y_mean = float(y_arr.mean())
    dx = x_arr - x_mean
    dy = y_arr - y_mean
    sxx = float(np.dot(dx, dx))
    syy = float(np.dot(dy, dy))
    sxy = float(np.dot(dx, dy))

    slope = sxy / sxx
    intercept = y_mean - slope * x_mean

    warnings: list[str] = []
    if _is_constant(y_arr):
        r = 0.0
        warnings.append("y is constant; correlation is undefined and reported as 0")
    else:
        r = min(1.0, max(-1.0, sxy / math.sqrt(sxx * syy)))

    residuals = y_arr - (intercept + slope * x_arr)
    ssr = float(np.dot(residuals, residuals))
    se = math.sqrt(ssr / (n - 2))

    return LinearRegressionResult(
        slope=slope,
        intercept=intercept,
        r=r,
        r_squared=r * r,
        standard_error=se,
        slope_standard_error=se / math.sqrt(sxx),
        intercept_standard_error=se * math.sqrt(float(np.dot(x_arr, x_arr)) / (n * sxx)),
        n=n,
        warnings=tuple(warnings),
    )


def predict_y(x: ArrayLike, slope: float, intercept: float) -> float | NDArray[np.floating[Any]]:
    """intercept + slope * x, for a scalar or an array of x."""
    slope = check_scalar(slope, "slope")
    intercept = check_scalar(intercept, "intercept")
    if np.ndim(x) == 0:
        return intercept + slope * check_scalar(x, "x")
    return intercept + slope * check_vector(x, "x")


def regression_confidence_intervals(
    result: LinearRegressionResult,
    conf_level: float = DEFAULT_CONF_LEVEL,
) -> RegressionConfidenceIntervals:
    """
    Slope and intercept intervals: estimate +/- t(1 - alpha/2, n - 2) * SE.

    The t critical value is exact for every n; there is no switch to a
    normal approximation at large n.
    """
    conf_level = check_conf_level(conf_level)
    df = result.df_residual
    t_crit = t_critical_value(df, 1.0 - conf_level)

    def interval(estimate: float, se: float) -> CoefficientInterval:
        return CoefficientInterval(
            estimate=estimate,
            lower=estimate - t_crit * se,
            upper=estimate + t_crit * se,
            standard_error=se,
        )

    return RegressionConfidenceIntervals(
        slope=interval(result.slope, result.slope_standard_error),
        intercept=interval(result.intercept, result.intercept_standard_error),
        confidence_level=conf_level,
        df=df,
        t_critical=t_crit,
    )


# --- Multiple regression ---

def multiple_regression(x1: ArrayLike, x2: ArrayLike, y: ArrayLike) -> MultipleRegressionResult:
    """
    OLS fit of y on two predictors.

    The normal equations are solved on centered data: the 2x2 system for
    b1, b2 is built from the predictor correlation matrix, then
    b0 = mean(y) - b1 * mean(x1) - b2 * mean(x2). Predictors far from
    zero or on very different scales therefore fit as well as centered
    ones. Needs at least 4 observations so the residual degrees of
    freedom n - 3 are positive.

    Raises:
        SingularMatrixError: If a predictor is constant, or x1 and x2
            are (nearly) linearly dependent.
    """
    x1_arr = check_vector(x1, "x1")
    x2_arr = check_vector(x2, "x2")
    y_arr = check_vector(y, "y")
    check_consistent_length(x1_arr, x2_arr, y_arr, names=("x1", "x2", "y"))
    check_min_samples(y_arr, 4, "y")

    for name, values in (("x1", x1_arr), ("x2", x2_arr)):
        if _is_constant(values):
            raise SingularMatrixError(
                f"{name} is constant: the predictors cannot be separated from the intercept",
                matrix_name="centered X'X",
                condition_number=math.inf,
            )

    n = y_arr.shape[0]
    means = np.array([x1_arr.mean(), x2_arr.mean()])
    Xc = np.column_stack([x1_arr, x2_arr]) - means
    scale = np.sqrt((Xc * Xc).sum(axis=0))
    Z = Xc / scale
    corr = Z.T @ Z

    cond = float(np.linalg.cond(corr))
    if not math.isfinite(cond) or cond > _MAX_CONDITION:
        raise SingularMatrixError(
            "centered X'X is singular: x1 and x2 are collinear",
            matrix_name="centered X'X",
            condition_number=cond,
        )
    try:
        slopes = np.linalg.solve(corr, Z.T @ (y_arr - y_arr.mean())) / scale
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"centered X'X could not be solved: {e}",
            matrix_name="centered X'X",
            condition_number=cond,
        ) from e

    intercept = float(y_arr.mean() - slopes @ means)
    coefficients = np.array([intercept, slopes[0], slopes[1]])

    residuals = y_arr - (intercept + x1_arr * slopes[0] + x2_arr * slopes[1])
    ssr = float(np.dot(residuals, residuals))
    dy = y_arr - y_arr.mean()
    tss = float(np.dot(dy, dy))
    if tss == 0.0:
        r_squared = 1.0 if ssr == 0.0 else 0.0
    else:
        r_squared = 1.0 - ssr / tss
    df_residual = n - 3
    adjusted = 1.0 - (1.0 - r_squared) * (n - 1) / df_residual

    return MultipleRegressionResult(
        coefficients=coefficients,
        r_squared=r_squared,
        adjusted_r_squared=adjusted,
        standard_error=math.sqrt(ssr / df_residual),
        residuals=residuals,
        n=n,
        condition_number=cond,
    )
