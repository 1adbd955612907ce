"""
Unified distribution API.

Every function takes a DistributionSpec, rejects invalid parameters with
ValidationError, and dispatches on `spec.family` to the per-family
implementation in _families.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from snakemath.core.exceptions import ValidationError
from snakemath.core.random import RandomSource, as_generator
from snakemath.core.validation import (
    check_nonnegative_integer,
    check_probability,
    check_scalar,
)
from snakemath.distributions import _families as fam
from snakemath.distributions._common import DistributionStats, PlotRange
from snakemath.distributions.design import DistributionSpec, Family, require_valid

FloatOrArray = float | NDArray[np.floating[Any]]


# --- Density, cumulative and quantile ---

def get_pdf(spec: DistributionSpec, x: ArrayLike) -> FloatOrArray:
    """
    Density (continuous) or probability mass (discrete) at x.

    Discrete families return 0 at non-integer x. Accepts a scalar or an
    array of points.
    """
    require_valid(spec)
    family = spec.family
    if family == Family.NORMAL:
        return fam.normal_pdf(x, spec.mu, spec.sigma)
    elif family == Family.BINOMIAL:
        return fam.binomial_pmf(x, spec.n, spec.p)
    elif family == Family.POISSON:
        return fam.poisson_pmf(x, spec.lam)
    elif family == Family.EXPONENTIAL:
        return fam.exponential_pdf(x, spec.lam)
    elif family == Family.UNIFORM:
        return fam.uniform_pdf(x, spec.a, spec.b)
    else:
        raise ValueError(f"Unknown family: {family!r}")


def get_cdf(spec: DistributionSpec, x: ArrayLike) -> FloatOrArray:
    """P(X <= x); non-decreasing, 0 below the support, 1 above it."""
    require_valid(spec)
    family = spec.family
    if family == Family.NORMAL:
        return fam.normal_cdf(x, spec.mu, spec.sigma)
    elif family == Family.BINOMIAL:
        return fam.binomial_cdf(x, spec.n, spec.p)
    elif family == Family.POISSON:
        return fam.poisson_cdf(x, spec.lam)
    elif family == Family.EXPONENTIAL:
        return fam.exponential_cdf(x, spec.lam)
    elif family == Family.UNIFORM:
        return fam.uniform_cdf(x, spec.a, spec.b)
    else:
        raise ValueError(f"Unknown family: {family!r}")


def get_quantile(spec: DistributionSpec, p: float) -> float:
    """
    Inverse CDF at probability p in [0, 1].

    Discrete families return the smallest support point whose CDF is at
    least p. At p = 0 and p = 1 the result is the support endpoint: an
    infinite value for unbounded sides, the finite bound otherwise.
    """
    require_valid(spec)
    p = check_probability(p, "p")
    family = spec.family
    if family == Family.NORMAL:
        return fam.normal_quantile(p, spec.mu, spec.sigma)
    elif family == Family.BINOMIAL:
        return fam.binomial_quantile(p, spec.n, spec.p)
    elif family == Family.POISSON:
        return fam.poisson_quantile(p, spec.lam)
    elif family == Family.EXPONENTIAL:
        return fam.exponential_quantile(p, spec.lam)
    elif family == Family.UNIFORM:
        return fam.uniform_quantile(p, spec.a, spec.b)
    else:
        raise ValueError(f"Unknown family: {family!r}")


# --- Sampling ---

def generate_samples(
    spec: DistributionSpec,
    count: int,
    *,
    seed: RandomSource = None,
) -> NDArray[np.floating[Any]]:
    """
    Draw `count` independent variates as a float64 array.

    Discrete families produce integer-valued floats. The same seed
    reproduces the same sequence.
    """
    require_valid(spec)
    count = check_nonnegative_integer(count, "count")
    rng = as_generator(seed)
    family = spec.family
    if family == Family.NORMAL:
        values = rng.normal(spec.mu, spec.sigma, size=count)
    elif family == Family.BINOMIAL:
        values = rng.binomial(int(spec.n), spec.p, size=count)
    elif family == Family.POISSON:
        values = rng.poisson(spec.lam, size=count)
    elif family == Family.EXPONENTIAL:
        values = rng.exponential(1.0 / spec.lam, size=count)
    elif family == Family.UNIFORM:
        values = rng.uniform(spec.a, spec.b, size=count)
    else:
        raise ValueError(f"Unknown family: {family!r}")
    return np.asarray(values, dtype=np.float64)


def sample(spec: DistributionSpec, *, seed: RandomSource = None) -> float:
    """Draw a single variate."""
    return float(generate_samples(spec, 1, seed=seed)[0])


# --- Summary statistics ---

def get_distribution_stats(spec: DistributionSpec) -> DistributionStats:
    """Closed-form mean, variance, standard deviation, mode and skewness."""
    require_valid(spec)
    family = spec.family
    if family == Family.NORMAL:
        mu, sigma = spec.mu, spec.sigma
        return DistributionStats(float(mu), sigma * sigma, float(sigma), float(mu), 0.0)

    elif family == Family.BINOMIAL:
        n, p = int(spec.n), spec.p
        mean = n * p
        variance = n * p * (1.0 - p)
        std_dev = math.sqrt(variance)
        m = (n + 1) * p
        if 0.0 < p < 1.0 and m == math.floor(m) and m >= 1:
            # Two adjacent modes when (n + 1)p is an integer
            mode = (m - 1.0, m)
        else:
            mode = float(min(math.floor(m), n))
        skewness = (1.0 - 2.0 * p) / std_dev if variance > 0 else 0.0
        return DistributionStats(mean, variance, std_dev, mode, skewness)

    elif family == Family.POISSON:
        lam = spec.lam
        if lam == math.floor(lam):
            mode = (lam - 1.0, lam)
        else:
            mode = float(math.floor(lam))
        return DistributionStats(lam, lam, math.sqrt(lam), mode, 1.0 / math.sqrt(lam))

    elif family == Family.EXPONENTIAL:
        lam = spec.lam
        return DistributionStats(1.0 / lam, 1.0 / (lam * lam), 1.0 / lam, 0.0, 2.0)

    elif family == Family.UNIFORM:
        a, b = spec.a, spec.b
        width = b - a
        return DistributionStats(
            (a + b) / 2.0, width * width / 12.0, width / math.sqrt(12.0), None, 0.0
        )

    else:
        raise ValueError(f"Unknown family: {family!r}")


def get_suggested_range(spec: DistributionSpec) -> PlotRange:
    """
    x-axis window for plotting.

    Normal: mu +/- 4 sigma. Binomial: [0, n]. Poisson: [0, ceil(lambda +
    4 sqrt(lambda))]. Exponential: [0, mean + 4 sd]. Uniform: [a, b]
    padded by 10% of the width on each side.
    """
    require_valid(spec)
    family = spec.family
    if family == Family.NORMAL:
        return PlotRange(spec.mu - 4.0 * spec.sigma, spec.mu + 4.0 * spec.sigma)
    elif family == Family.BINOMIAL:
        return PlotRange(0.0, float(spec.n))
    elif family == Family.POISSON:
        lam = spec.lam
        return PlotRange(0.0, float(math.ceil(lam + 4.0 * math.sqrt(lam))))
    elif family == Family.EXPONENTIAL:
        return PlotRange(0.0, 5.0 / spec.lam)
    elif family == Family.UNIFORM:
        pad = 0.1 * (spec.b - spec.a)
        return PlotRange(spec.a - pad, spec.b + pad)
    else:
        raise ValueError(f"Unknown family: {family!r}")


# --- Discrete support helpers ---

def is_discrete(spec: DistributionSpec) -> bool:
    return spec.is_discrete


def get_discrete_x_values(spec: DistributionSpec) -> NDArray[np.floating[Any]]:
    """
    Integer support points spanning the suggested range.

    Raises ValidationError for continuous families.
    """
    if not spec.is_discrete:
        raise ValidationError(f"{spec.family.value} distribution is continuous")
    window = get_suggested_range(spec)
    return np.arange(math.floor(window.min), math.floor(window.max) + 1, dtype=np.float64)


# --- Interval probabilities ---

def _below(spec: DistributionSpec, x: float, strict: bool) -> float:
    """P(X < x) when strict, else P(X <= x)."""
    if strict and spec.is_discrete:
        # P(X < x) = P(X <= ceil(x) - 1) on the integers
        return float(get_cdf(spec, math.ceil(x) - 1.0))
    return float(get_cdf(spec, x))


def probability_less_than(spec: DistributionSpec, x: float) -> float:
    """P(X < x). Equal to probability_less_equal for continuous families."""
    return _below(spec, check_scalar(x, "x"), strict=True)


def probability_less_equal(spec: DistributionSpec, x: float) -> float:
    """P(X <= x)."""
    return _below(spec, check_scalar(x, "x"), strict=False)


def probability_greater_than(spec: DistributionSpec, x: float) -> float:
    """P(X > x)."""
    return 1.0 - _below(spec, check_scalar(x, "x"), strict=False)


def probability_greater_equal(spec: DistributionSpec, x: float) -> float:
    """P(X >= x)."""
    return 1.0 - _below(spec, check_scalar(x, "x"), strict=True)


def probability_between(
    spec: DistributionSpec,
    lower: float,
    upper: float,
    inclusive: bool = True,
) -> float:
    """
    P(lower <= X <= upper), or P(lower < X < upper) when not inclusive.

    For discrete families the distinction matters at integer endpoints.
    """
    lower = check_scalar(lower, "lower")
    upper = check_scalar(upper, "upper")
    if lower > upper:
        raise ValidationError(f"lower ({lower}) must not exceed upper ({upper})")
    upper_mass = _below(spec, upper, strict=not inclusive)
    lower_mass = _below(spec, lower, strict=inclusive)
    return max(0.0, upper_mass - lower_mass)
