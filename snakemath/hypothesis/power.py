"""
Statistical power and sample-size planning.

Power is P(reject H0 | true effect). The t-test power is approximated
by a shifted normal: with noncentrality delta = d sqrt(n) (one sample)
or d sqrt(n / 2) (two samples, n per group),

    power = Phi(|delta| - z) + Phi(-|delta| - z)      (two-tailed)
    power = Phi(|delta| - z)                           (one-tailed)

where z is the normal critical value for alpha. At d = 0 this is alpha.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from snakemath.core.defaults import DEFAULT_ALPHA, DEFAULT_POWER
from snakemath.core.exceptions import InsufficientDataError, ValidationError
from snakemath.core.special import (
    standard_normal_cdf,
    standard_normal_quantile,
    z_critical_value,
)
from snakemath.core.validation import (
    check_open_probability,
    check_positive_integer,
    check_scalar,
)

PowerTestType = Literal["one-sample", "two-sample"]

_POWER_TEST_TYPES = ("one-sample", "two-sample")


@dataclass(frozen=True)
class PowerPoint:
    """One point of a power curve."""
    n: int
    power: float


def _check_test_type(test_type: str) -> str:
    if test_type not in _POWER_TEST_TYPES:
        raise ValidationError(
            f"test_type must be one of {_POWER_TEST_TYPES}, got {test_type!r}"
        )
    return test_type


def _noncentrality(effect_size: float, n: int, test_type: str) -> float:
    if test_type == "one-sample":
        return effect_size * math.sqrt(n)
    return effect_size * math.sqrt(n / 2.0)


def calculate_power(
    effect_size: float,
    n: int,
    alpha: float = DEFAULT_ALPHA,
    test_type: PowerTestType = "two-sample",
    two_tailed: bool = True,
) -> float:
    """
    Approximate power of a t-test for Cohen's d = effect_size.

    Args:
        effect_size: Cohen's d; the sign is ignored
        n: Sample size (per group for two-sample), n >= 2
        alpha: Significance level
        test_type: "one-sample" or "two-sample"
        two_tailed: Two-tailed (default) or one-tailed critical value

    Returns:
        Power in [0, 1]
    """
    d = abs(check_scalar(effect_size, "effect_size"))
    n = check_positive_integer(n, "n")
    if n < 2:
        raise InsufficientDataError(
            f"n: power needs at least 2 observations, got {n}", required=2, actual=n,
        )
    test_type = _check_test_type(test_type)
    z = z_critical_value(alpha, two_tailed=two_tailed)

    delta = _noncentrality(d, n, test_type)
    power = standard_normal_cdf(delta - z)
    if two_tailed:
        power += standard_normal_cdf(-delta - z)
    return float(min(1.0, max(0.0, power)))


def sample_size_for_power(
    effect_size: float,
    power: float = DEFAULT_POWER,
    alpha: float = DEFAULT_ALPHA,
    test_type: PowerTestType = "two-sample",
) -> int:
    """
    Smallest n (per group for two-sample) with calculate_power >= power.

    Starts from the closed form n = k ((z_{alpha/2} + z_beta) / d)^2,
    k = 1 for one sample and 2 for two samples, then steps up until the
    requested power is reached. Never returns less than 2.
    """
    d = abs(check_scalar(effect_size, "effect_size"))
    if d == 0.0:
        raise ValidationError("effect_size: must be non-zero")
    power = check_open_probability(power, "power")
    test_type = _check_test_type(test_type)

    z_alpha = z_critical_value(alpha)
    z_beta = standard_normal_quantile(power)
    k = 1.0 if test_type == "one-sample" else 2.0

    n = max(2, math.ceil(k * ((z_alpha + z_beta) / d) ** 2))
    while calculate_power(d, n, alpha, test_type) < power:
        n += 1
    return n


def sample_size_for_proportions(
    p1: float,
    p2: float,
    power: float = DEFAULT_POWER,
    alpha: float = DEFAULT_ALPHA,
) -> int:
    """
    Per-group sample size for a two-proportion z-test to detect p1 vs p2.

        n = (z_{alpha/2} sqrt(2 pbar (1 - pbar))
             + z_beta sqrt(p1 (1 - p1) + p2 (1 - p2)))^2 / (p1 - p2)^2
    """
    p1 = check_open_probability(p1, "p1")
    p2 = check_open_probability(p2, "p2")
    if p1 == p2:
        raise ValidationError("p1 and p2 must differ")
    power = check_open_probability(power, "power")

    z_alpha = z_critical_value(alpha)
    z_beta = standard_normal_quantile(power)
    p_bar = (p1 + p2) / 2.0

    numerator = (
        z_alpha * math.sqrt(2.0 * p_bar * (1.0 - p_bar))
        + z_beta * math.sqrt(p1 * (1.0 - p1) + p2 * (1.0 - p2))
    ) ** 2
    return math.ceil(numerator / (p1 - p2) ** 2)


def generate_power_curve(
    effect_size: float,
    alpha: float = DEFAULT_ALPHA,
    test_type: PowerTestType = "two-sample",
    max_n: int = 200,
) -> list[PowerPoint]:
    """
    Power at n = 2 .. max_n, stepping by max(1, n // 20).

    The step grows with n, so the curve is dense where power changes
    fastest.
    """
    max_n = check_positive_integer(max_n, "max_n")
    points = []
    n = 2
    while n <= max_n:
        points.append(PowerPoint(n, calculate_power(effect_size, n, alpha, test_type)))
        n += max(1, n // 20)
    return points
