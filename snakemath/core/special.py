"""
Special functions and numeric primitives.

Leaf-level helpers used by every other SnakeMath module: factorials and
binomial coefficients, the error function, the standard normal
PDF/CDF/quantile and Student-t critical values.

Scalar inputs return Python floats. The normal PDF/CDF also accept
arrays and return arrays of the same shape.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import special as sp_special
from scipy import stats as sp_stats

from snakemath.core.exceptions import ValidationError
from snakemath.core.validation import (
    check_nonnegative_integer,
    check_open_probability,
    check_positive,
    check_scalar,
)

SQRT_2 = math.sqrt(2.0)
SQRT_2_PI = math.sqrt(2.0 * math.pi)

# Largest n with n! representable as a float64
MAX_FACTORIAL = 170


def _as_output(values: NDArray[np.floating[Any]], scalar: bool) -> float | NDArray[np.floating[Any]]:
    if scalar:
        return float(values)
    return values


# --- Combinatorics ---

def factorial(n: int) -> float:
    """
    n! for integer n >= 0.

    Returns float('inf') for n > 170, where the result overflows float64.
    Negative or non-integer n raises ValidationError.
    """
    n = check_nonnegative_integer(n, "n")
    if n > MAX_FACTORIAL:
        return math.inf
    return float(math.factorial(n))


def log_factorial(n: int) -> float:
    """ln(n!) via the log-gamma function; finite for any n >= 0."""
    n = check_nonnegative_integer(n, "n")
    return float(sp_special.gammaln(n + 1.0))


def binomial_coefficient(n: int, k: int) -> float:
    """
    C(n, k) by the multiplicative formula.

    Iterates result = result * (n - i) / (i + 1) for i < min(k, n - k),
    so n! is never formed and n in the hundreds stays finite. Returns 0
    for k < 0 or k > n.
    """
    n = check_nonnegative_integer(n, "n")
    k_val = check_scalar(k, "k")
    if not k_val.is_integer():
        raise ValidationError(f"k: must be an integer, got {k}")
    k = int(k_val)
    if k < 0 or k > n:
        return 0.0

    k = min(k, n - k)
    result = 1.0
    for i in range(k):
        result = result * (n - i) / (i + 1)

    # Exact integers are representable up to 2**53; snap rounding noise there
    if result < 2.0 ** 53:
        return float(round(result))
    return result


def log_binomial_coefficient(n: int, k: int) -> float:
    """ln C(n, k); -inf when k is outside [0, n]."""
    n = check_nonnegative_integer(n, "n")
    k_val = check_scalar(k, "k")
    if not k_val.is_integer() or k_val < 0 or k_val > n:
        return -math.inf
    k = int(k_val)
    return float(
        sp_special.gammaln(n + 1.0)
        - sp_special.gammaln(k + 1.0)
        - sp_special.gammaln(n - k + 1.0)
    )


# --- Error function and standard normal ---

def erf(x: float | ArrayLike) -> float | NDArray[np.floating[Any]]:
    """Error function, accurate to double precision."""
    scalar = np.ndim(x) == 0
    return _as_output(sp_special.erf(np.asarray(x, dtype=np.float64)), scalar)


def standard_normal_pdf(z: float | ArrayLike) -> float | NDArray[np.floating[Any]]:
    """phi(z) = exp(-z^2 / 2) / sqrt(2 pi)."""
    scalar = np.ndim(z) == 0
    z_arr = np.asarray(z, dtype=np.float64)
    return _as_output(np.exp(-0.5 * z_arr * z_arr) / SQRT_2_PI, scalar)


def standard_normal_cdf(z: float | ArrayLike) -> float | NDArray[np.floating[Any]]:
    """Phi(z) = 0.5 * (1 + erf(z / sqrt(2)))."""
    scalar = np.ndim(z) == 0
    z_arr = np.asarray(z, dtype=np.float64)
    return _as_output(0.5 * (1.0 + sp_special.erf(z_arr / SQRT_2)), scalar)


def standard_normal_quantile(p: float) -> float:
    """
    Inverse of the standard normal CDF (probit).

    Defined on the open interval (0, 1); p <= 0 or p >= 1 raises.
    standard_normal_quantile(0.5) is exactly 0.
    """
    p = check_open_probability(p, "p")
    return float(sp_special.ndtri(p))


def z_critical_value(alpha: float, two_tailed: bool = True) -> float:
    """
    Positive z with P(|Z| > z) = alpha (two-tailed) or P(Z > z) = alpha.

    z_critical_value(0.05) is about 1.959964.
    """
    alpha = check_open_probability(alpha, "alpha")
    tail = alpha / 2.0 if two_tailed else alpha
    return -standard_normal_quantile(tail)


# --- Student t ---

def t_cdf(t: float, df: float) -> float:
    """P(T <= t) for Student's t with df degrees of freedom."""
    t = check_scalar(t, "t")
    df = check_positive(df, "df")
    return float(sp_stats.t.cdf(t, df))


def t_quantile(p: float, df: float) -> float:
    """Inverse of the Student-t CDF on (0, 1)."""
    p = check_open_probability(p, "p")
    df = check_positive(df, "df")
    return float(sp_stats.t.ppf(p, df))


def t_critical_value(df: float, alpha: float, two_tailed: bool = True) -> float:
    """
    Positive t critical value for the given significance level.

    Exact for every df (no normal approximation), so small-sample
    intervals keep their nominal coverage.
    """
    alpha = check_open_probability(alpha, "alpha")
    tail = alpha / 2.0 if two_tailed else alpha
    return t_quantile(1.0 - tail, df)
