"""
Standardized effect sizes and their conventional labels.

Cohen's d measures a difference in means in standard-deviation units;
Cohen's h measures a difference in proportions on the arcsine scale.
Both are labelled by COHEN_EFFECT_SIZE: below 0.2 negligible, below 0.5
small, below 0.8 medium, otherwise large.
"""

from __future__ import annotations

import math

from snakemath.core.defaults import COHEN_EFFECT_SIZE, StrengthScale
from snakemath.core.exceptions import DegenerateInputError
from snakemath.core.validation import (
    check_nonnegative_integer,
    check_probability,
    check_scalar,
)


def _check_sd(value: float, name: str) -> float:
    value = check_scalar(value, name)
    if value <= 0:
        raise DegenerateInputError(
            f"{name}: Cohen's d is undefined for a standard deviation of {value}",
            quantity=name,
        )
    return value


def cohens_d(mean: float, comparison_value: float, std_dev: float) -> float:
    """d = (mean - comparison_value) / std_dev."""
    mean = check_scalar(mean, "mean")
    comparison_value = check_scalar(comparison_value, "comparison_value")
    return (mean - comparison_value) / _check_sd(std_dev, "std_dev")


def pooled_std_dev(std_dev1: float, n1: int, std_dev2: float, n2: int) -> float:
    """sqrt(((n1 - 1) s1^2 + (n2 - 1) s2^2) / (n1 + n2 - 2))."""
    s1 = check_scalar(std_dev1, "std_dev1")
    s2 = check_scalar(std_dev2, "std_dev2")
    n1 = check_nonnegative_integer(n1, "n1")
    n2 = check_nonnegative_integer(n2, "n2")
    if n1 + n2 <= 2:
        raise DegenerateInputError("pooled SD needs n1 + n2 > 2", quantity="n1 + n2")
    return math.sqrt(((n1 - 1) * s1 * s1 + (n2 - 1) * s2 * s2) / (n1 + n2 - 2))


def cohens_d_two_groups(
    mean1: float,
    std_dev1: float,
    n1: int,
    mean2: float,
    std_dev2: float,
    n2: int,
) -> float:
    """d = (mean1 - mean2) / pooled SD."""
    mean1 = check_scalar(mean1, "mean1")
    mean2 = check_scalar(mean2, "mean2")
    sp = pooled_std_dev(std_dev1, n1, std_dev2, n2)
    return (mean1 - mean2) / _check_sd(sp, "pooled std_dev")


def cohens_h(p1: float, p2: float) -> float:
    """h = 2 asin(sqrt(p1)) - 2 asin(sqrt(p2))."""
    p1 = check_probability(p1, "p1")
    p2 = check_probability(p2, "p2")
    return 2.0 * math.asin(math.sqrt(p1)) - 2.0 * math.asin(math.sqrt(p2))


def interpret_cohens_d(d: float, scale: StrengthScale = COHEN_EFFECT_SIZE) -> str:
    return scale.classify(abs(check_scalar(d, "d")))


def interpret_cohens_h(h: float, scale: StrengthScale = COHEN_EFFECT_SIZE) -> str:
    return scale.classify(abs(check_scalar(h, "h")))
