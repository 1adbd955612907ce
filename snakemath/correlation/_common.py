"""
Result types for correlation and regression.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Point:
    """An (x, y) observation."""
    x: float
    y: float


@dataclass(frozen=True)
class CorrelationInterpretation:
    """
    Strength label and direction of a correlation coefficient.

    direction is 'positive', 'negative' or 'none' (r == 0).
    """
    strength: str
    direction: str

    def __str__(self) -> str:
        if self.direction == "none":
            return self.strength
        return f"{self.strength} {self.direction}"


@dataclass(frozen=True)
class LinearRegressionResult:
    """
    Ordinary least-squares fit y = intercept + slope * x.

    standard_error is the residual standard error sqrt(SSR / (n - 2)).
    slope_standard_error and intercept_standard_error are the coefficient
    standard errors used by regression_confidence_intervals.
    """
    slope: float
    intercept: float
    r: float
    r_squared: float
    standard_error: float
    slope_standard_error: float
    intercept_standard_error: float
    n: int
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def df_residual(self) -> int:
        return self.n - 2

    def predict(self, x: Any) -> float | NDArray[np.floating[Any]]:
        """Fitted value(s) at x."""
        if np.ndim(x) == 0:
            return self.intercept + self.slope * float(x)
        return self.intercept + self.slope * np.asarray(x, dtype=np.float64)


@dataclass(frozen=True)
class CoefficientInterval:
    """Confidence interval for one regression coefficient."""
    estimate: float
    lower: float
    upper: float
    standard_error: float


@dataclass(frozen=True)
class RegressionConfidenceIntervals:
    slope: CoefficientInterval
    intercept: CoefficientInterval
    confidence_level: float
    df: int
    t_critical: float


@dataclass(frozen=True)
class ResidualAnalysis:
    """
    Summary of the residuals of a fit.

    mean_residual is 0 up to rounding for an OLS fit with intercept.
    warnings flags visible patterns (large standardized residuals, a
    trend in residual magnitude); it is advisory only.
    """
    residuals: NDArray[np.floating[Any]]
    mean_residual: float
    sum_of_squared_residuals: float
    standard_error: float
    mean_absolute_error: float
    max_abs_standardized: float
    warnings: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MultipleRegressionResult:
    """
    OLS fit y = b0 + b1 * x1 + b2 * x2.

    coefficients is [b0, b1, b2]. condition_number is that of the
    correlation matrix of x1 and x2 (1 for uncorrelated predictors).
    """
    coefficients: NDArray[np.floating[Any]]
    r_squared: float
    adjusted_r_squared: float
    standard_error: float
    residuals: NDArray[np.floating[Any]]
    n: int
    condition_number: float

    @property
    def intercept(self) -> float:
        return float(self.coefficients[0])

    @property
    def beta1(self) -> float:
        return float(self.coefficients[1])

    @property
    def beta2(self) -> float:
        return float(self.coefficients[2])

    def predict(self, x1: Any, x2: Any) -> float | NDArray[np.floating[Any]]:
        b0, b1, b2 = self.coefficients
        if np.ndim(x1) == 0 and np.ndim(x2) == 0:
            return float(b0 + b1 * float(x1) + b2 * float(x2))
        return b0 + b1 * np.asarray(x1, dtype=np.float64) + b2 * np.asarray(x2, dtype=np.float64)
