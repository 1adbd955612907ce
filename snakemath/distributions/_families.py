"""
Per-family density, cumulative and quantile functions.

All density and CDF functions accept a scalar or an array of points and
return the same shape (a Python float for scalar input). Discrete PMFs
are zero at non-integer points. Quantile functions are scalar only.

PMFs are computed in log space (log-gamma) so n in the hundreds and
lambda in the hundreds stay finite.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import special as sp_special

from snakemath.core.exceptions import ValidationError
from snakemath.core.special import (
    standard_normal_cdf,
    standard_normal_pdf,
)
from snakemath.core.validation import (
    check_array,
    check_nonnegative_integer,
    check_positive,
    check_probability,
    check_scalar,
)

FloatOrArray = float | NDArray[np.floating[Any]]


def _points(x: ArrayLike) -> tuple[NDArray[np.floating[Any]], bool]:
    arr = check_array(x, "x")
    if np.any(np.isnan(arr)):
        raise ValidationError("x: contains NaN")
    return arr, arr.ndim == 0


def _out(values: NDArray[np.floating[Any]], scalar: bool) -> FloatOrArray:
    if scalar:
        return float(values)
    return values


def _is_integer_point(k: NDArray[np.floating[Any]]) -> NDArray[np.bool_]:
    return np.isfinite(k) & (k == np.floor(k))


def _check_uniform_bounds(a: float, b: float) -> tuple[float, float]:
    a = check_scalar(a, "a")
    b = check_scalar(b, "b")
    if a >= b:
        raise ValidationError(f"a must be less than b, got a={a}, b={b}")
    return a, b


def _integer_search(cdf, prob: float, lo: int, hi: int) -> int:
    """Smallest k in [lo, hi] with cdf(k) >= prob; cdf must reach prob at hi."""
    while lo < hi:
        mid = (lo + hi) // 2
        if cdf(mid) >= prob:
            hi = mid
        else:
            lo = mid + 1
    return lo


# ═══════════════════════════════════════════════════════════════════════
# Normal
# ═══════════════════════════════════════════════════════════════════════

def normal_pdf(x: ArrayLike, mu: float = 0.0, sigma: float = 1.0) -> FloatOrArray:
    mu = check_scalar(mu, "mu")
    sigma = check_positive(sigma, "sigma")
    arr, scalar = _points(x)
    return _out(standard_normal_pdf((arr - mu) / sigma) / sigma, scalar)


def normal_cdf(x: ArrayLike, mu: float = 0.0, sigma: float = 1.0) -> FloatOrArray:
    mu = check_scalar(mu, "mu")
    sigma = check_positive(sigma, "sigma")
    arr, scalar = _points(x)
    return _out(standard_normal_cdf((arr - mu) / sigma), scalar)


def normal_quantile(p: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """mu + sigma * probit(p); -inf at p = 0 and +inf at p = 1."""
    p = check_probability(p, "p")
    mu = check_scalar(mu, "mu")
    sigma = check_positive(sigma, "sigma")
    if p == 0.0:
        return -math.inf
    if p == 1.0:
        return math.inf
    return mu + sigma * float(sp_special.ndtri(p))


# ═══════════════════════════════════════════════════════════════════════
# Binomial
# ═══════════════════════════════════════════════════════════════════════

def _check_binomial(n: int, p: float) -> tuple[int, float]:
    return check_nonnegative_integer(n, "n"), check_probability(p, "p")


def binomial_pmf(k: ArrayLike, n: int, p: float) -> FloatOrArray:
    """P(X = k) = C(n, k) p^k (1-p)^(n-k); zero off {0..n}."""
    n, p = _check_binomial(n, p)
    arr, scalar = _points(k)
    valid = _is_integer_point(arr) & (arr >= 0) & (arr <= n)
    kk = np.where(valid, arr, 0.0)

    if p == 0.0:
        out = np.where(valid & (kk == 0), 1.0, 0.0)
    elif p == 1.0:
        out = np.where(valid & (kk == n), 1.0, 0.0)
    else:
        log_pmf = (
            sp_special.gammaln(n + 1.0)
            - sp_special.gammaln(kk + 1.0)
            - sp_special.gammaln(n - kk + 1.0)
            + kk * math.log(p)
            + (n - kk) * math.log1p(-p)
        )
        out = np.where(valid, np.exp(log_pmf), 0.0)
    return _out(out, scalar)


def binomial_cdf(k: ArrayLike, n: int, p: float) -> FloatOrArray:
    """P(X <= k), a step function of floor(k)."""
    n, p = _check_binomial(n, p)
    arr, scalar = _points(k)
    kf = np.floor(arr)
    inner = sp_special.bdtr(np.clip(kf, 0, n), n, p)
    out = np.where(kf < 0, 0.0, np.where(kf >= n, 1.0, inner))
    return _out(out, scalar)


def binomial_quantile(prob: float, n: int, p: float) -> float:
    """Smallest integer k with P(X <= k) >= prob, by binary search on [0, n]."""
    prob = check_probability(prob, "p")
    n, p = _check_binomial(n, p)
    if prob == 0.0:
        return 0.0
    if prob == 1.0:
        return float(n)
    return float(_integer_search(lambda k: binomial_cdf(k, n, p), prob, 0, n))


# ═══════════════════════════════════════════════════════════════════════
# Poisson
# ═══════════════════════════════════════════════════════════════════════

def poisson_pmf(k: ArrayLike, lam: float) -> FloatOrArray:
    """P(X = k) = lambda^k e^-lambda / k!; zero off the non-negative integers."""
    lam = check_positive(lam, "lambda")
    arr, scalar = _points(k)
    valid = _is_integer_point(arr) & (arr >= 0)
    kk = np.where(valid, arr, 0.0)
    log_pmf = kk * math.log(lam) - lam - sp_special.gammaln(kk + 1.0)
    return _out(np.where(valid, np.exp(log_pmf), 0.0), scalar)


def poisson_cdf(k: ArrayLike, lam: float) -> FloatOrArray:
    lam = check_positive(lam, "lambda")
    arr, scalar = _points(k)
    kf = np.floor(arr)
    inner = sp_special.pdtr(np.where(np.isfinite(kf), np.maximum(kf, 0.0), 0.0), lam)
    out = np.where(kf < 0, 0.0, np.where(np.isposinf(kf), 1.0, inner))
    return _out(out, scalar)


def poisson_quantile(prob: float, lam: float) -> float:
    """
    Smallest integer k with P(X <= k) >= prob.

    The upper bracket doubles from ceil(lambda) until the CDF reaches
    prob, then a binary search narrows it. prob = 1 gives +inf.
    """
    prob = check_probability(prob, "p")
    lam = check_positive(lam, "lambda")
    if prob == 0.0:
        return 0.0
    if prob == 1.0:
        return math.inf

    def cdf(k: int) -> float:
        return poisson_cdf(k, lam)

    hi = max(1, math.ceil(lam))
    while cdf(hi) < prob:
        hi *= 2
    return float(_integer_search(cdf, prob, 0, hi))


# ═══════════════════════════════════════════════════════════════════════
# Exponential
# ═══════════════════════════════════════════════════════════════════════

def exponential_pdf(x: ArrayLike, lam: float) -> FloatOrArray:
    lam = check_positive(lam, "lambda")
    arr, scalar = _points(x)
    safe = np.maximum(arr, 0.0)
    return _out(np.where(arr < 0, 0.0, lam * np.exp(-lam * safe)), scalar)


def exponential_cdf(x: ArrayLike, lam: float) -> FloatOrArray:
    lam = check_positive(lam, "lambda")
    arr, scalar = _points(x)
    safe = np.maximum(arr, 0.0)
    return _out(np.where(arr < 0, 0.0, -np.expm1(-lam * safe)), scalar)


def exponential_quantile(p: float, lam: float) -> float:
    """-ln(1 - p) / lambda; 0 at p = 0 and +inf at p = 1."""
    p = check_probability(p, "p")
    lam = check_positive(lam, "lambda")
    if p == 1.0:
        return math.inf
    return -math.log1p(-p) / lam


# ═══════════════════════════════════════════════════════════════════════
# Uniform
# ═══════════════════════════════════════════════════════════════════════

def uniform_pdf(x: ArrayLike, a: float = 0.0, b: float = 1.0) -> FloatOrArray:
    a, b = _check_uniform_bounds(a, b)
    arr, scalar = _points(x)
    return _out(np.where((arr >= a) & (arr <= b), 1.0 / (b - a), 0.0), scalar)


def uniform_cdf(x: ArrayLike, a: float = 0.0, b: float = 1.0) -> FloatOrArray:
    a, b = _check_uniform_bounds(a, b)
    arr, scalar = _points(x)
    return _out(np.clip((arr - a) / (b - a), 0.0, 1.0), scalar)


def uniform_quantile(p: float, a: float = 0.0, b: float = 1.0) -> float:
    p = check_probability(p, "p")
    a, b = _check_uniform_bounds(a, b)
    return a + p * (b - a)
